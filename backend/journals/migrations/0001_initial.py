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
            name="JournalEntry",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("entry_date", models.DateField(db_index=True)),
                ("mood", models.CharField(blank=True, max_length=100)),
                ("content", models.TextField()),
                ("location", models.CharField(blank=True, max_length=255)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("owner", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="journal_entries", to=settings.AUTH_USER_MODEL)),
            ],
            options={
                "ordering": ("-entry_date", "-created_at"),
                "verbose_name_plural": "Journal entries",
                "constraints": [models.UniqueConstraint(fields=("owner", "entry_date"), name="unique_journal_entry_per_day")],
            },
        ),
    ]
