from django.db import transaction
from rest_framework import serializers

from core.utils import date_or_today, parse_loose_date

from .models import ItineraryActivity, ItineraryDay, ItineraryImage

ACTIVITY_TEXT_KEYS = ("activity", "place", "Place", "description")
ACTIVITY_TIME_KEYS = ("time", "Time")


def _first_present(entry: dict, keys) -> str:
    for key in keys:
        value = entry.get(key)
        if value:
            return str(value).strip()
    return ""


class ItineraryDaySerializer(serializers.ModelSerializer):
    """Read shape consumed by the itinerary timeline."""

    date = serializers.SerializerMethodField()
    dateObj = serializers.DateField(source="date", read_only=True)
    activities = serializers.SerializerMethodField()
    images = serializers.SerializerMethodField()

    class Meta:
        model = ItineraryDay
        fields = [
            "id",
            "day",
            "date",
            "dateObj",
            "place",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "description",
            "activities",
            "images",
        ]
        read_only_fields = fields

    def get_date(self, obj) -> str:
        return obj.date.strftime("%d %b %Y")

    def get_activities(self, obj) -> list[dict]:
        return [{"time": item.time, "activity": item.activity} for item in obj.activities.all()]

    def get_images(self, obj) -> list[str]:
        return [image.url for image in obj.images.all()]


class ItineraryDayWriteSerializer(serializers.ModelSerializer):
    """
    Accepts the loose payloads the admin screens send.

    ``dateObj`` wins over ``date``; either may be ISO or "29 Nov 2024" style,
    and anything unreadable lands on today. Activities may name their text
    ``activity``, ``place``, ``Place`` or ``description``; entries without
    text are dropped, as are blank image strings.
    """

    date = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    dateObj = serializers.CharField(required=False, allow_blank=True, allow_null=True, write_only=True)
    activities = serializers.ListField(child=serializers.DictField(), required=False)
    images = serializers.ListField(child=serializers.JSONField(), required=False)

    class Meta:
        model = ItineraryDay
        fields = [
            "day",
            "date",
            "dateObj",
            "place",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "description",
            "activities",
            "images",
        ]
        extra_kwargs = {
            "city": {"allow_null": True},
            "state": {"allow_null": True},
            "description": {"allow_null": True},
        }

    def validate(self, attrs):
        date_given = "date" in attrs or "dateObj" in attrs
        date_obj = attrs.pop("dateObj", None)
        date_text = attrs.pop("date", None)
        if self.instance is None or date_given:
            attrs["date"] = parse_loose_date(date_obj) or date_or_today(date_text)
        for key in ("city", "state", "description"):
            if key in attrs and attrs[key] is None:
                attrs[key] = ""
        return attrs

    def _replace_children(self, day: ItineraryDay, activities, images):
        if activities is not None:
            day.activities.all().delete()
            rows = []
            for position, entry in enumerate(activities):
                text = _first_present(entry, ACTIVITY_TEXT_KEYS)
                if not text:
                    continue
                rows.append(
                    ItineraryActivity(
                        itinerary_day=day,
                        time=_first_present(entry, ACTIVITY_TIME_KEYS),
                        activity=text,
                        display_order=position,
                    )
                )
            ItineraryActivity.objects.bulk_create(rows)
        if images is not None:
            day.images.all().delete()
            ItineraryImage.objects.bulk_create(
                [
                    ItineraryImage(itinerary_day=day, url=url.strip(), display_order=position)
                    for position, url in enumerate(images)
                    if isinstance(url, str) and url.strip()
                ]
            )

    @transaction.atomic
    def create(self, validated_data):
        activities = validated_data.pop("activities", [])
        images = validated_data.pop("images", [])
        day = ItineraryDay.objects.create(**validated_data)
        self._replace_children(day, activities, images)
        return day

    @transaction.atomic
    def update(self, instance, validated_data):
        # PUT carries the complete activity and image lists; PATCH leaves absent ones alone.
        request = self.context.get("request")
        missing = None if request is not None and request.method == "PATCH" else []
        activities = validated_data.pop("activities", missing)
        images = validated_data.pop("images", missing)
        day = super().update(instance, validated_data)
        self._replace_children(day, activities, images)
        return day
