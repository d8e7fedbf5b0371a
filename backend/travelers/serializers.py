from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed

from vehicles.models import Vehicle

from .models import Traveler

User = get_user_model()


class TravelerSerializer(serializers.ModelSerializer):
    """Full traveler profile, readable by admins and by the traveler."""

    tirthId = serializers.CharField(source="tirth_id", required=False, allow_blank=True, allow_null=True, max_length=20)
    firstName = serializers.CharField(source="first_name", max_length=100)
    middleName = serializers.CharField(source="middle_name", required=False, allow_blank=True, max_length=100)
    lastName = serializers.CharField(source="last_name", max_length=100)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(source="user.email")
    password = serializers.CharField(write_only=True, required=False, allow_blank=True, min_length=6)
    birthDate = serializers.DateField(source="birth_date", required=False, allow_null=True)
    passportNo = serializers.CharField(source="passport_no", required=False, allow_blank=True, max_length=50)
    passportIssueDate = serializers.DateField(source="passport_issue_date", required=False, allow_null=True)
    passportExpiryDate = serializers.DateField(source="passport_expiry_date", required=False, allow_null=True)
    hoodiSize = serializers.ChoiceField(
        source="hoodi_size",
        choices=Traveler.HOODI_SIZE_CHOICES,
        required=False,
        allow_blank=True,
    )
    vehicleId = serializers.PrimaryKeyRelatedField(
        source="vehicle",
        queryset=Vehicle.objects.all(),
        required=False,
        allow_null=True,
    )
    vehicleName = serializers.CharField(source="vehicle.name", read_only=True, default=None)
    vehicleColor = serializers.CharField(source="vehicle.color", read_only=True, default=None)
    profileLine = serializers.CharField(source="profile_line", required=False, allow_blank=True, max_length=200)
    aboutMe = serializers.CharField(source="about_me", required=False, allow_blank=True)
    image = serializers.CharField(source="image_url", required=False, allow_blank=True)

    class Meta:
        model = Traveler
        fields = [
            "id",
            "tirthId",
            "firstName",
            "middleName",
            "lastName",
            "name",
            "email",
            "password",
            "phone",
            "city",
            "country",
            "center",
            "birthDate",
            "age",
            "passportNo",
            "passportIssueDate",
            "passportExpiryDate",
            "nationality",
            "gender",
            "hoodiSize",
            "vehicleId",
            "vehicleName",
            "vehicleColor",
            "profileLine",
            "aboutMe",
            "image",
        ]
        read_only_fields = ["id", "name", "vehicleName", "vehicleColor"]

    def validate_email(self, value: str) -> str:
        email = value.strip().lower()
        clash = User.objects.filter(email__iexact=email)
        if self.instance is not None:
            clash = clash.exclude(pk=self.instance.user_id)
        if clash.exists():
            raise serializers.ValidationError("Email already exists.")
        return email

    def validate_tirthId(self, value):
        value = (value or "").strip() or None
        if value:
            clash = Traveler.objects.filter(tirth_id__iexact=value)
            if self.instance is not None:
                clash = clash.exclude(pk=self.instance.pk)
            if clash.exists():
                raise serializers.ValidationError("Tirth ID already exists.")
        return value

    @transaction.atomic
    def create(self, validated_data):
        user_data = validated_data.pop("user")
        password = validated_data.pop("password", None)
        user = User.objects.create_user_for_email(
            user_data["email"],
            password=password,
            first_name=validated_data.get("first_name", ""),
            last_name=validated_data.get("last_name", ""),
        )
        return Traveler.objects.create(user=user, **validated_data)

    @transaction.atomic
    def update(self, instance, validated_data):
        user_data = validated_data.pop("user", None)
        password = validated_data.pop("password", None)
        user = instance.user
        user_fields = []
        if user_data and user_data.get("email"):
            if user.username == user.email:
                user.username = user_data["email"]
                user_fields.append("username")
            user.email = user_data["email"]
            user_fields.append("email")
        if password:
            user.set_password(password)
            user_fields.append("password")
        if user_fields:
            user.save(update_fields=user_fields)
        return super().update(instance, validated_data)


class TravelerPublicSerializer(TravelerSerializer):
    """Directory listing visible to every signed-in traveler."""

    class Meta(TravelerSerializer.Meta):
        fields = [
            "id",
            "firstName",
            "middleName",
            "lastName",
            "name",
            "email",
            "city",
            "country",
            "center",
            "vehicleId",
            "vehicleName",
            "vehicleColor",
            "profileLine",
            "aboutMe",
            "image",
        ]
        read_only_fields = fields


class TravelerSummarySerializer(serializers.ModelSerializer):
    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    middleName = serializers.CharField(source="middle_name", read_only=True)
    name = serializers.CharField(read_only=True)
    email = serializers.EmailField(source="user.email", read_only=True)
    image = serializers.CharField(source="image_url", read_only=True)
    vehicleId = serializers.IntegerField(source="vehicle_id", read_only=True)
    vehicle_id = serializers.IntegerField(read_only=True)
    vehicleName = serializers.CharField(source="vehicle.name", read_only=True, default=None)
    vehicleColor = serializers.CharField(source="vehicle.color", read_only=True, default=None)

    class Meta:
        model = Traveler
        fields = [
            "id",
            "email",
            "firstName",
            "lastName",
            "middleName",
            "name",
            "image",
            "vehicleId",
            "vehicle_id",
            "vehicleName",
            "vehicleColor",
        ]
        read_only_fields = fields


class TravelerLoginSerializer(serializers.Serializer):
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True)

    def validate(self, attrs):
        email = (attrs.get("email") or "").strip()
        password = attrs.get("password") or ""
        if not email or not password:
            raise serializers.ValidationError("Email and password required.")

        traveler = (
            Traveler.objects.select_related("user", "vehicle")
            .filter(user__email__iexact=email)
            .first()
        )
        if traveler is None or not traveler.user.is_active or not traveler.user.check_password(password):
            raise AuthenticationFailed("Invalid email or password.")

        attrs["traveler"] = traveler
        return attrs
