from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Vehicle",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("type", models.CharField(max_length=100)),
                ("capacity", models.PositiveIntegerField()),
                ("reg_no", models.CharField(blank=True, max_length=50, null=True, unique=True)),
                ("group_leader_email", models.EmailField(blank=True, db_index=True, max_length=254)),
                ("group_leader_name", models.CharField(blank=True, max_length=200)),
                ("driver_name", models.CharField(blank=True, max_length=200)),
                ("driver_phone", models.CharField(blank=True, max_length=20)),
                ("color", models.CharField(default="#FF9933", max_length=20)),
                ("status", models.CharField(choices=[("Active", "Active"), ("Inactive", "Inactive"), ("Maintenance", "Maintenance")], default="Active", max_length=20)),
                ("current_lat", models.FloatField(blank=True, null=True)),
                ("current_lng", models.FloatField(blank=True, null=True)),
                ("last_update", models.DateTimeField(blank=True, null=True)),
                ("notes", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("id",),
            },
        ),
    ]
