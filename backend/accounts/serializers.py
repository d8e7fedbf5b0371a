from decimal import Decimal

from django.contrib.auth import get_user_model
from django.db.models import Q
from rest_framework import serializers
from rest_framework.exceptions import AuthenticationFailed
from rest_framework_simplejwt.serializers import TokenRefreshSerializer
from rest_framework_simplejwt.tokens import AccessToken

from .tokens import access_lifetime_for

User = get_user_model()


class AdminLoginSerializer(serializers.Serializer):
    """Authenticate a staff account by username or email."""

    username = serializers.CharField(required=False, allow_blank=True)
    email = serializers.CharField(required=False, allow_blank=True)
    password = serializers.CharField(write_only=True, required=False, allow_blank=True)

    def validate(self, attrs):
        identifier = (attrs.get("username") or attrs.get("email") or "").strip()
        password = attrs.get("password") or ""
        if not identifier or not password:
            raise serializers.ValidationError("Username and password are required.")

        user = (
            User.objects.filter(Q(username__iexact=identifier) | Q(email__iexact=identifier))
            .order_by("id")
            .first()
        )
        if user is None or not user.is_active or not user.check_password(password):
            raise AuthenticationFailed("Invalid credentials.")
        if not user.is_staff:
            raise AuthenticationFailed("Invalid credentials.")

        attrs["user"] = user
        return attrs


class AdminProfileSerializer(serializers.ModelSerializer):
    name = serializers.CharField(read_only=True)
    image = serializers.CharField(source="image_url", read_only=True)
    includeInContributors = serializers.BooleanField(source="include_in_contributors", read_only=True)
    imageCompressionQuality = serializers.FloatField(source="image_compression_quality", read_only=True)

    class Meta:
        model = User
        fields = ["id", "username", "name", "email", "image", "includeInContributors", "imageCompressionQuality"]
        read_only_fields = fields


class AdminSummarySerializer(serializers.ModelSerializer):
    """The admin block returned alongside a login token."""

    name = serializers.CharField(read_only=True)
    image = serializers.CharField(source="image_url", read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "email", "image"]
        read_only_fields = fields


class AdminProfileUpdateSerializer(serializers.ModelSerializer):
    name = serializers.CharField(source="display_name", required=False, allow_blank=True, max_length=120)
    email = serializers.EmailField(required=False)
    image = serializers.CharField(source="image_url", required=False, allow_blank=True)
    includeInContributors = serializers.BooleanField(source="include_in_contributors", required=False)
    imageCompressionQuality = serializers.DecimalField(
        source="image_compression_quality",
        max_digits=3,
        decimal_places=2,
        required=False,
    )
    password = serializers.CharField(write_only=True, required=False, min_length=6)

    class Meta:
        model = User
        fields = ["name", "email", "image", "includeInContributors", "imageCompressionQuality", "password"]

    def validate_email(self, value: str) -> str:
        email = value.strip().lower()
        if User.objects.filter(email__iexact=email).exclude(pk=self.instance.pk).exists():
            raise serializers.ValidationError("A user with this email already exists.")
        return email

    def validate_imageCompressionQuality(self, value: Decimal) -> Decimal:
        if value <= 0 or value > 1:
            raise serializers.ValidationError("Image compression quality must be between 0 and 1.")
        return value

    def update(self, instance, validated_data):
        password = validated_data.pop("password", None)
        email = validated_data.get("email")
        if email and instance.username == instance.email:
            instance.username = email
        user = super().update(instance, validated_data)
        if password:
            user.set_password(password)
            user.save(update_fields=["password"])
        return user


class MeSerializer(serializers.ModelSerializer):
    name = serializers.CharField(read_only=True)
    isAdmin = serializers.BooleanField(source="is_staff", read_only=True)
    travelerId = serializers.SerializerMethodField()

    class Meta:
        model = User
        fields = ["id", "email", "name", "isAdmin", "travelerId"]
        read_only_fields = fields

    def get_travelerId(self, obj) -> int | None:
        traveler = getattr(obj, "traveler", None)
        return traveler.pk if traveler else None


class RoleAwareRefreshSerializer(TokenRefreshSerializer):
    """Refresh that keeps the access lifetime tied to the account's role."""

    def validate(self, attrs):
        data = super().validate(attrs)
        access = AccessToken(data["access"])
        access.set_exp(lifetime=access_lifetime_for(access))
        data["access"] = str(access)
        return data
