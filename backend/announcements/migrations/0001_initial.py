from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Announcement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("recipient_type", models.CharField(choices=[("all-travelers", "All travelers"), ("all-group-leaders", "All group leaders"), ("specific-vehicle", "Specific vehicle"), ("specific-traveler", "Specific traveler")], max_length=32)),
                ("recipient_value", models.CharField(blank=True, max_length=255, null=True)),
                ("recipients", models.JSONField(blank=True, null=True)),
                ("message", models.TextField()),
                ("display_type", models.CharField(choices=[("notification", "Notification"), ("banner", "Banner"), ("modal", "Modal")], default="notification", max_length=16)),
                ("timing_type", models.CharField(choices=[("instant", "Instant"), ("scheduled", "Scheduled")], default="instant", max_length=16)),
                ("scheduled_time", models.DateTimeField(blank=True, null=True)),
                ("sent", models.BooleanField(db_index=True, default=False)),
                ("sent_at", models.DateTimeField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("created_by", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="announcements", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ("-created_at", "-id"),
            },
        ),
    ]
