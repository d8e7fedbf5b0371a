import json
import logging
import math

from django.db import models

logger = logging.getLogger(__name__)


class Setting(models.Model):
    """A typed key/value pair stored as text."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"
    TYPE_CHOICES = [
        (STRING, "String"),
        (NUMBER, "Number"),
        (BOOLEAN, "Boolean"),
        (JSON, "JSON"),
    ]

    key = models.CharField(max_length=100, unique=True)
    value = models.TextField(blank=True, null=True)
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=STRING)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("key",)

    def __str__(self) -> str:
        return self.key

    @property
    def typed_value(self):
        raw = self.value
        if self.type == self.NUMBER:
            try:
                number = float(raw)
            except (TypeError, ValueError):
                logger.warning("Setting %s holds a non-numeric value %r", self.key, raw)
                return None
            if not math.isfinite(number):
                logger.warning("Setting %s holds a non-finite value %r", self.key, raw)
                return None
            return int(number) if number.is_integer() else number
        if self.type == self.BOOLEAN:
            return raw in ("true", "1")
        if self.type == self.JSON:
            try:
                return json.loads(raw)
            except (TypeError, ValueError):
                return raw
        return raw

    @staticmethod
    def encode(value, declared_type: str | None = None) -> tuple[str, str]:
        """Infer the storage text and type from a decoded JSON value."""
        if value is None or isinstance(value, (dict, list)):
            return json.dumps(value), Setting.JSON
        if isinstance(value, bool):
            return ("true" if value else "false"), Setting.BOOLEAN
        if isinstance(value, (int, float)):
            return str(value), Setting.NUMBER
        if declared_type in dict(Setting.TYPE_CHOICES):
            return str(value), declared_type
        return str(value), Setting.STRING

    @classmethod
    def put(cls, key: str, value, declared_type: str | None = None) -> "Setting":
        text, setting_type = cls.encode(value, declared_type)
        setting, _ = cls.objects.update_or_create(key=key, defaults={"value": text, "type": setting_type})
        return setting

    @classmethod
    def get_value(cls, key: str, default=None):
        setting = cls.objects.filter(key=key).first()
        if setting is None:
            return default
        value = setting.typed_value
        return default if value is None else value

    @classmethod
    def as_dict(cls) -> dict:
        return {setting.key: setting.typed_value for setting in cls.objects.all()}
