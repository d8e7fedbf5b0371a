from django.db import transaction
from django.utils import timezone
from rest_framework import serializers

from travelers.models import Traveler

from .models import Vehicle, VehicleAllotment


class VehicleSerializer(serializers.ModelSerializer):
    regNo = serializers.CharField(source="reg_no", required=False, allow_null=True, allow_blank=True, max_length=50)
    groupLeaderEmail = serializers.EmailField(source="group_leader_email", required=False, allow_blank=True)
    groupLeaderName = serializers.CharField(source="group_leader_name", required=False, allow_blank=True, max_length=200)
    driver = serializers.CharField(source="driver_name", required=False, allow_blank=True, max_length=200)
    driverPhone = serializers.CharField(source="driver_phone", required=False, allow_blank=True, max_length=20)
    capacity = serializers.IntegerField(
        min_value=1,
        error_messages={"min_value": "Capacity must be a positive number."},
    )
    currentLat = serializers.FloatField(source="current_lat", required=False, allow_null=True)
    currentLng = serializers.FloatField(source="current_lng", required=False, allow_null=True)
    lastUpdate = serializers.DateTimeField(source="last_update", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    currentTravelers = serializers.SerializerMethodField()

    class Meta:
        model = Vehicle
        fields = [
            "id",
            "name",
            "type",
            "capacity",
            "regNo",
            "groupLeaderEmail",
            "groupLeaderName",
            "driver",
            "driverPhone",
            "color",
            "status",
            "currentLat",
            "currentLng",
            "lastUpdate",
            "notes",
            "createdAt",
            "currentTravelers",
        ]
        read_only_fields = ["id", "lastUpdate", "createdAt", "currentTravelers"]

    def get_currentTravelers(self, obj) -> int:
        annotated = getattr(obj, "current_travelers", None)
        if annotated is not None:
            return annotated
        return obj.travelers.count()

    def validate_regNo(self, value):
        value = (value or "").strip() or None
        if value:
            clash = Vehicle.objects.filter(reg_no__iexact=value)
            if self.instance is not None:
                clash = clash.exclude(pk=self.instance.pk)
            if clash.exists():
                raise serializers.ValidationError("A vehicle with this registration number already exists.")
        return value

    def validate_groupLeaderEmail(self, value: str) -> str:
        return value.strip().lower()

    def update(self, instance, validated_data):
        if "current_lat" in validated_data or "current_lng" in validated_data:
            validated_data["last_update"] = timezone.now()
        return super().update(instance, validated_data)


class VehicleLocationSerializer(serializers.Serializer):
    lat = serializers.FloatField(min_value=-90, max_value=90)
    lng = serializers.FloatField(min_value=-180, max_value=180)


class VehicleAllotmentSerializer(serializers.ModelSerializer):
    travelerId = serializers.IntegerField(source="traveler_id", read_only=True)
    vehicleId = serializers.IntegerField(source="vehicle_id", read_only=True)
    travelerName = serializers.CharField(source="traveler.name", read_only=True)
    travelerEmail = serializers.CharField(source="traveler.email", read_only=True)
    vehicleName = serializers.CharField(source="vehicle.name", read_only=True)
    vehicleColor = serializers.CharField(source="vehicle.color", read_only=True)

    class Meta:
        model = VehicleAllotment
        fields = [
            "id",
            "date",
            "travelerId",
            "travelerName",
            "travelerEmail",
            "vehicleId",
            "vehicleName",
            "vehicleColor",
        ]
        read_only_fields = fields


class AssignmentSerializer(serializers.Serializer):
    travelerId = serializers.PrimaryKeyRelatedField(queryset=Traveler.objects.all(), source="traveler")
    vehicleId = serializers.PrimaryKeyRelatedField(queryset=Vehicle.objects.all(), source="vehicle")


class BulkAllotmentSerializer(serializers.Serializer):
    date = serializers.DateField()
    assignments = AssignmentSerializer(many=True)
    replaceExisting = serializers.BooleanField(required=False, default=True)

    @transaction.atomic
    def save(self, **kwargs) -> int:
        day = self.validated_data["date"]
        assignments = self.validated_data["assignments"]
        if self.validated_data["replaceExisting"]:
            VehicleAllotment.objects.filter(date=day).delete()
        for assignment in assignments:
            VehicleAllotment.objects.update_or_create(
                traveler=assignment["traveler"],
                date=day,
                defaults={"vehicle": assignment["vehicle"]},
            )
        return len(assignments)
