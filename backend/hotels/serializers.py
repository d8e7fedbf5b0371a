from django.db import transaction
from rest_framework import serializers

from travelers.models import Traveler

from .models import Hotel, RoomAllotment, RoomPair, RoomPairMember


class HotelSerializer(serializers.ModelSerializer):
    totalFloors = serializers.IntegerField(source="total_floors", required=False, allow_null=True, min_value=0)
    totalRooms = serializers.IntegerField(source="total_rooms", required=False, allow_null=True, min_value=0)
    checkInDate = serializers.DateField(source="check_in_date", required=False, allow_null=True)
    checkOutDate = serializers.DateField(source="check_out_date", required=False, allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Hotel
        fields = [
            "id",
            "name",
            "address",
            "city",
            "state",
            "country",
            "lat",
            "lng",
            "phone",
            "email",
            "totalFloors",
            "totalRooms",
            "checkInDate",
            "checkOutDate",
            "notes",
            "createdAt",
        ]
        read_only_fields = ["id", "createdAt"]
        extra_kwargs = {
            "name": {"error_messages": {"required": "Hotel name is required", "blank": "Hotel name is required"}},
        }

    def validate_name(self, value: str) -> str:
        name = value.strip()
        if not name:
            raise serializers.ValidationError("Hotel name is required")
        return name

    def validate(self, attrs):
        check_in = attrs.get("check_in_date", getattr(self.instance, "check_in_date", None))
        check_out = attrs.get("check_out_date", getattr(self.instance, "check_out_date", None))
        if check_in and check_out and check_out < check_in:
            raise serializers.ValidationError({"checkOutDate": "Check-out date cannot be before check-in date"})
        return attrs


class RoomAllotmentSerializer(serializers.ModelSerializer):
    hotelId = serializers.IntegerField(source="hotel_id", read_only=True)
    hotelName = serializers.CharField(source="hotel.name", read_only=True)
    travelerId = serializers.IntegerField(source="traveler_id", read_only=True)
    travelerName = serializers.CharField(source="traveler.name", read_only=True)
    travelerEmail = serializers.CharField(source="traveler.email", read_only=True)
    pairNo = serializers.IntegerField(source="pair_no", read_only=True)

    class Meta:
        model = RoomAllotment
        fields = [
            "id",
            "hotelId",
            "hotelName",
            "travelerId",
            "travelerName",
            "travelerEmail",
            "date",
            "floor",
            "room",
            "pairNo",
        ]
        read_only_fields = fields


class RoomAssignmentSerializer(serializers.Serializer):
    travelerId = serializers.PrimaryKeyRelatedField(queryset=Traveler.objects.all(), source="traveler")
    floor = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=20)
    room = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=50)
    pairNo = serializers.IntegerField(source="pair_no", required=False, allow_null=True, min_value=1)


class RoomAllotmentWriteSerializer(RoomAssignmentSerializer):
    """A single allotment row."""

    hotelId = serializers.PrimaryKeyRelatedField(queryset=Hotel.objects.all(), source="hotel")
    date = serializers.DateField()

    def create(self, validated_data):
        return RoomAllotment.objects.create(
            hotel=validated_data["hotel"],
            traveler=validated_data["traveler"],
            date=validated_data["date"],
            floor=validated_data.get("floor") or "",
            room=validated_data.get("room") or "",
            pair_no=validated_data.get("pair_no"),
        )


class BulkRoomAllotmentSerializer(serializers.Serializer):
    """Replaces every allotment of one hotel on one date."""

    hotelId = serializers.PrimaryKeyRelatedField(queryset=Hotel.objects.all(), source="hotel")
    date = serializers.DateField()
    allotments = RoomAssignmentSerializer(many=True)

    @transaction.atomic
    def save(self, **kwargs) -> int:
        hotel = self.validated_data["hotel"]
        day = self.validated_data["date"]
        RoomAllotment.objects.filter(hotel=hotel, date=day).delete()
        rows = []
        for entry in self.validated_data["allotments"]:
            rows.append(
                RoomAllotment(
                    hotel=hotel,
                    traveler=entry["traveler"],
                    date=day,
                    floor=entry.get("floor") or "",
                    room=entry.get("room") or "",
                    pair_no=entry.get("pair_no"),
                )
            )
        RoomAllotment.objects.bulk_create(rows)
        return len(rows)


class RoomPairSerializer(serializers.ModelSerializer):
    pairNo = serializers.IntegerField(source="pair_no", min_value=1)
    travelerIds = serializers.PrimaryKeyRelatedField(
        queryset=Traveler.objects.all(),
        many=True,
        write_only=True,
        required=False,
    )
    travelers = serializers.SerializerMethodField()

    class Meta:
        model = RoomPair
        fields = ["id", "pairNo", "travelerIds", "travelers"]
        read_only_fields = ["id", "travelers"]

    def get_travelers(self, obj) -> list[dict]:
        return [
            {"id": member.traveler_id, "name": member.traveler.name, "email": member.traveler.email}
            for member in obj.members.all()
        ]

    def validate_pairNo(self, value: int) -> int:
        clash = RoomPair.objects.filter(pair_no=value)
        if self.instance is not None:
            clash = clash.exclude(pk=self.instance.pk)
        if clash.exists():
            raise serializers.ValidationError(f"Pair number {value} already exists")
        return value

    def validate_travelerIds(self, travelers):
        taken = RoomPairMember.objects.filter(traveler__in=travelers).select_related("pair", "traveler__user")
        if self.instance is not None:
            taken = taken.exclude(pair=self.instance)
        member = taken.first()
        if member is not None:
            raise serializers.ValidationError(
                f"{member.traveler.name} is already in pair {member.pair.pair_no}"
            )
        unique = []
        for traveler in travelers:
            if traveler not in unique:
                unique.append(traveler)
        return unique

    def _set_members(self, pair: RoomPair, travelers):
        pair.members.all().delete()
        RoomPairMember.objects.bulk_create([RoomPairMember(pair=pair, traveler=traveler) for traveler in travelers])

    @transaction.atomic
    def create(self, validated_data):
        travelers = validated_data.pop("travelerIds", [])
        pair = RoomPair.objects.create(**validated_data)
        self._set_members(pair, travelers)
        return pair

    @transaction.atomic
    def update(self, instance, validated_data):
        travelers = validated_data.pop("travelerIds", None)
        instance = super().update(instance, validated_data)
        if travelers is not None:
            self._set_members(instance, travelers)
        return instance
