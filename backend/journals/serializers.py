from rest_framework import serializers

from .models import JournalEntry


class JournalEntrySerializer(serializers.ModelSerializer):
    id = serializers.SerializerMethodField()
    date = serializers.DateField(source="entry_date")
    mood = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=100)
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=255)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    userEmail = serializers.EmailField(source="owner.email", read_only=True)

    class Meta:
        model = JournalEntry
        fields = ["id", "date", "mood", "content", "location", "createdAt", "userEmail"]
        read_only_fields = ["id", "createdAt", "userEmail"]

    def get_id(self, obj) -> str:
        return str(obj.pk)

    def validate_mood(self, value):
        return value or ""

    def validate_location(self, value):
        return value or ""

    def validate(self, attrs):
        owner = self.context["request"].user
        entry_date = attrs.get("entry_date")
        if entry_date is not None:
            clash = JournalEntry.objects.filter(owner=owner, entry_date=entry_date)
            if self.instance is not None:
                clash = clash.exclude(pk=self.instance.pk)
            if clash.exists():
                raise serializers.ValidationError({"date": "A journal entry already exists for this date."})
        return attrs
