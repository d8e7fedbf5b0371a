from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    dependencies = [
        ("vehicles", "0001_initial"),
        ("travelers", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="VehicleAllotment",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("date", models.DateField(db_index=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("traveler", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="vehicle_allotments", to="travelers.traveler")),
                ("vehicle", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="allotments", to="vehicles.vehicle")),
            ],
            options={
                "ordering": ("date", "id"),
                "constraints": [models.UniqueConstraint(fields=("traveler", "date"), name="unique_vehicle_allotment_per_day")],
            },
        ),
    ]
