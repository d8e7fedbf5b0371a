from django.db import migrations

DEFAULT_SECTIONS = [
    ("Temples & Sacred Sites", "Posts about temples and holy places"),
    ("Spiritual Experiences", "Share spiritual moments and insights"),
    ("Food & Prasad", "Traditional food and temple offerings"),
    ("Travel Updates", "Journey progress and updates"),
]

DEFAULT_TAGS = [
    "Temple",
    "Food",
    "Nature",
    "Culture",
    "Festival",
    "Sunrise",
    "Sunset",
    "Prayer",
    "Meditation",
    "Architecture",
    "People",
    "Journey",
]


def seed(apps, schema_editor):
    PostSection = apps.get_model("posts", "PostSection")
    Tag = apps.get_model("posts", "Tag")
    for order, (name, description) in enumerate(DEFAULT_SECTIONS, start=1):
        PostSection.objects.get_or_create(
            name=name,
            defaults={"description": description, "display_order": order},
        )
    for name in DEFAULT_TAGS:
        Tag.objects.get_or_create(name=name)


def unseed(apps, schema_editor):
    apps.get_model("posts", "PostSection").objects.filter(name__in=[name for name, _ in DEFAULT_SECTIONS]).delete()
    apps.get_model("posts", "Tag").objects.filter(name__in=DEFAULT_TAGS).delete()


class Migration(migrations.Migration):
    dependencies = [
        ("posts", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed, unseed),
    ]
