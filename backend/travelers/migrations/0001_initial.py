from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("vehicles", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Traveler",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("tirth_id", models.CharField(blank=True, max_length=20, null=True, unique=True)),
                ("first_name", models.CharField(max_length=100)),
                ("middle_name", models.CharField(blank=True, max_length=100)),
                ("last_name", models.CharField(max_length=100)),
                ("phone", models.CharField(blank=True, max_length=20)),
                ("city", models.CharField(blank=True, max_length=100)),
                ("country", models.CharField(default="India", max_length=100)),
                ("center", models.CharField(blank=True, max_length=100)),
                ("birth_date", models.DateField(blank=True, null=True)),
                ("age", models.PositiveIntegerField(blank=True, null=True)),
                ("passport_no", models.CharField(blank=True, max_length=50)),
                ("passport_issue_date", models.DateField(blank=True, null=True)),
                ("passport_expiry_date", models.DateField(blank=True, null=True)),
                ("nationality", models.CharField(default="Indian", max_length=100)),
                ("gender", models.CharField(choices=[("Male", "Male"), ("Female", "Female"), ("Other", "Other")], default="Male", max_length=10)),
                ("hoodi_size", models.CharField(blank=True, choices=[("S", "S"), ("M", "M"), ("L", "L"), ("XL", "XL"), ("XXL", "XXL")], max_length=5)),
                ("profile_line", models.CharField(blank=True, max_length=200)),
                ("about_me", models.TextField(blank=True)),
                ("image_url", models.TextField(blank=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="traveler", to=settings.AUTH_USER_MODEL)),
                ("vehicle", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="travelers", to="vehicles.vehicle")),
            ],
            options={
                "ordering": ("id",),
            },
        ),
    ]
