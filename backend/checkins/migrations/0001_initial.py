from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("travelers", "0001_initial"),
        ("vehicles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="CheckIn",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("traveler_email", models.EmailField(db_index=True, max_length=254)),
                ("active", models.BooleanField(db_index=True, default=True)),
                ("checked_in_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("checked_out_at", models.DateTimeField(blank=True, null=True)),
                ("traveler", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="check_ins", to="travelers.traveler")),
                ("vehicle", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="check_ins", to="vehicles.vehicle")),
            ],
            options={
                "ordering": ("-checked_in_at", "-id"),
            },
        ),
    ]
