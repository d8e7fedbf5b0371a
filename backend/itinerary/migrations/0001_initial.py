from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ItineraryDay",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("day", models.PositiveIntegerField(db_index=True)),
                ("date", models.DateField(db_index=True)),
                ("place", models.CharField(max_length=200)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("state", models.CharField(blank=True, max_length=100)),
                ("country", models.CharField(default="India", max_length=100)),
                ("lat", models.FloatField()),
                ("lng", models.FloatField()),
                ("description", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("day", "id"),
            },
        ),
        migrations.CreateModel(
            name="ItineraryActivity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("time", models.CharField(blank=True, max_length=20)),
                ("activity", models.TextField()),
                ("display_order", models.PositiveIntegerField(default=0)),
                ("itinerary_day", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="activities", to="itinerary.itineraryday")),
            ],
            options={
                "ordering": ("display_order", "id"),
                "verbose_name_plural": "Itinerary activities",
            },
        ),
        migrations.CreateModel(
            name="ItineraryImage",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("url", models.TextField()),
                ("display_order", models.PositiveIntegerField(default=0)),
                ("itinerary_day", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="images", to="itinerary.itineraryday")),
            ],
            options={
                "ordering": ("display_order", "id"),
            },
        ),
    ]
