from django.db import migrations

DEFAULT_SETTINGS = [
    ("yatra_title", "SPIRITUAL NEPAL YATRA 2025", "string"),
    ("start_location", "Mumbai, India", "string"),
    ("destination", "Muktinath, Nepal", "string"),
    ("start_date", "2025-12-14", "string"),
    ("end_date", "2025-12-24", "string"),
    ("top_contributors_count", "10", "number"),
    ("emergency_doctor_name", "Dr. Rajesh Kumar", "string"),
    ("emergency_doctor_phone", "+91-9876543210", "string"),
    ("wake_up_time", "06:00", "string"),
    (
        "alarm_message",
        "Good morning travelers! \U0001F305 Time to wake up and prepare for today's sacred journey. "
        "Jay Swaminarayan!",
        "string",
    ),
    ("alarm_enabled", "true", "boolean"),
]


def seed(apps, schema_editor):
    Setting = apps.get_model("appsettings", "Setting")
    for key, value, setting_type in DEFAULT_SETTINGS:
        Setting.objects.get_or_create(key=key, defaults={"value": value, "type": setting_type})


def unseed(apps, schema_editor):
    Setting = apps.get_model("appsettings", "Setting")
    Setting.objects.filter(key__in=[key for key, _, _ in DEFAULT_SETTINGS]).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("appsettings", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed, unseed),
    ]
