from rest_framework import serializers

from .models import Setting


class SettingSerializer(serializers.ModelSerializer):
    value = serializers.SerializerMethodField()

    class Meta:
        model = Setting
        fields = ["key", "value", "type"]
        read_only_fields = fields

    def get_value(self, obj):
        return obj.typed_value


class SettingUpdateSerializer(serializers.Serializer):
    value = serializers.JSONField(allow_null=True)
    type = serializers.ChoiceField(choices=Setting.TYPE_CHOICES, required=False)


class BulkSettingsSerializer(serializers.Serializer):
    """A flat ``{key: value}`` object."""

    def to_internal_value(self, data):
        if not isinstance(data, dict) or not data:
            raise serializers.ValidationError({"detail": "Expected a non-empty object of settings."})
        errors = {}
        for key in data:
            if not isinstance(key, str) or not key.strip() or len(key) > 100:
                errors[key] = "Invalid setting key."
        if errors:
            raise serializers.ValidationError(errors)
        return dict(data)

    def save(self, **kwargs) -> list[Setting]:
        return [Setting.put(key.strip(), value) for key, value in self.validated_data.items()]
