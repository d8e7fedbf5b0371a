from rest_framework import serializers

from .models import Announcement

RECIPIENT_ALIASES = {
    "by-vehicle": Announcement.SPECIFIC_VEHICLE,
    "specific-group-leader": Announcement.SPECIFIC_TRAVELER,
}
ALL_TYPES = (Announcement.ALL_TRAVELERS, Announcement.ALL_GROUP_LEADERS)
DISPLAY_TYPES = [choice for choice, _ in Announcement.DISPLAY_CHOICES]
TIMING_TYPES = [choice for choice, _ in Announcement.TIMING_CHOICES]
MISSING_FIELDS = "Missing required fields: message, recipientType"


class AnnouncementSerializer(serializers.ModelSerializer):
    recipientType = serializers.CharField(source="recipient_type", read_only=True)
    recipientValue = serializers.CharField(source="recipient_value", read_only=True)
    displayType = serializers.CharField(source="display_type", read_only=True)
    timingType = serializers.CharField(source="timing_type", read_only=True)
    scheduledTime = serializers.DateTimeField(source="scheduled_time", read_only=True)
    sentAt = serializers.DateTimeField(source="sent_at", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Announcement
        fields = [
            "id",
            "recipientType",
            "recipientValue",
            "recipients",
            "message",
            "displayType",
            "timingType",
            "scheduledTime",
            "sent",
            "sentAt",
            "createdAt",
        ]
        read_only_fields = fields


class AnnouncementCreateSerializer(serializers.Serializer):
    """
    Normalizes the admin composer payload.

    Legacy recipient types are mapped onto the stored ones, and unknown
    display or timing types fall back to ``notification`` and ``instant``.
    """

    recipientType = serializers.CharField(error_messages={"required": MISSING_FIELDS, "blank": MISSING_FIELDS})
    recipientValue = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    recipients = serializers.ListField(child=serializers.CharField(), required=False, allow_null=True)
    message = serializers.CharField(
        trim_whitespace=True,
        error_messages={"required": MISSING_FIELDS, "blank": "Message cannot be empty"},
    )
    displayType = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    timingType = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    scheduledTime = serializers.DateTimeField(
        required=False,
        allow_null=True,
        error_messages={"invalid": "Invalid scheduled time format"},
    )

    def validate_recipientType(self, value: str) -> str:
        kind = RECIPIENT_ALIASES.get(value.strip(), value.strip())
        allowed = [choice for choice, _ in Announcement.RECIPIENT_CHOICES]
        if kind not in allowed:
            raise serializers.ValidationError(
                f"Invalid recipient type: {value}. Allowed values: {', '.join(allowed)}"
            )
        return kind

    def validate_displayType(self, value):
        return value if value in DISPLAY_TYPES else Announcement.NOTIFICATION

    def validate_timingType(self, value):
        return value if value in TIMING_TYPES else Announcement.INSTANT

    def validate(self, attrs):
        kind = attrs["recipientType"]
        recipients = attrs.get("recipients") or []
        value = (attrs.get("recipientValue") or "").strip()
        if kind in ALL_TYPES:
            attrs["recipient_value"] = None
            attrs["recipients"] = recipients or None
        else:
            if not value and recipients:
                value = str(recipients[0]).strip()
            if not value:
                raise serializers.ValidationError({"recipientValue": f"A recipient is required for {kind}"})
            attrs["recipient_value"] = value
            attrs["recipients"] = None

        attrs["displayType"] = attrs.get("displayType") or Announcement.NOTIFICATION
        timing = attrs.get("timingType") or Announcement.INSTANT
        attrs["timingType"] = timing
        if timing == Announcement.SCHEDULED and not attrs.get("scheduledTime"):
            raise serializers.ValidationError({"scheduledTime": "Scheduled announcements need a scheduledTime"})
        if timing == Announcement.INSTANT:
            attrs["scheduledTime"] = None
        return attrs

    def create(self, validated_data):
        return Announcement.objects.create(
            recipient_type=validated_data["recipientType"],
            recipient_value=validated_data["recipient_value"],
            recipients=validated_data["recipients"],
            message=validated_data["message"],
            display_type=validated_data["displayType"],
            timing_type=validated_data["timingType"],
            scheduled_time=validated_data.get("scheduledTime"),
            created_by=validated_data.get("created_by"),
        )
