from rest_framework import serializers

from core.utils import parse_positive_int

from .models import CheckIn


class CheckInSerializer(serializers.ModelSerializer):
    vehicleId = serializers.IntegerField(source="vehicle_id", read_only=True)
    vehicleName = serializers.CharField(source="vehicle.name", read_only=True)
    travelerEmail = serializers.EmailField(source="traveler_email", read_only=True)
    travelerId = serializers.IntegerField(source="traveler_id", read_only=True)
    travelerName = serializers.SerializerMethodField()
    checkedInAt = serializers.DateTimeField(source="checked_in_at", read_only=True)
    checkedOutAt = serializers.DateTimeField(source="checked_out_at", read_only=True)

    class Meta:
        model = CheckIn
        fields = [
            "id",
            "vehicleId",
            "vehicleName",
            "travelerEmail",
            "travelerId",
            "travelerName",
            "active",
            "checkedInAt",
            "checkedOutAt",
        ]
        read_only_fields = fields

    def get_travelerName(self, obj) -> str | None:
        return obj.traveler.name if obj.traveler else None


class CheckInCreateSerializer(serializers.Serializer):
    vehicleId = serializers.CharField(
        error_messages={"required": "Vehicle ID and traveler email required"},
    )
    travelerEmail = serializers.EmailField(
        error_messages={"required": "Vehicle ID and traveler email required"},
    )
    travelerId = serializers.IntegerField(required=False, allow_null=True)

    def validate_vehicleId(self, value) -> int:
        vehicle_id = parse_positive_int(value)
        if vehicle_id is None:
            raise serializers.ValidationError("Invalid vehicle ID")
        return vehicle_id

    def validate_travelerEmail(self, value: str) -> str:
        return value.strip().lower()
