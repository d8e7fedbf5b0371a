import logging

from django.db import transaction
from django.db.models import Max
from rest_framework import serializers

from core.utils import parse_bool, parse_float, parse_positive_int
from travelers.models import Traveler

from .media import is_displayable, normalize_incoming
from .models import Post, PostMedia, PostSection, PostTag, Tag

logger = logging.getLogger(__name__)


def resolve_section(value) -> PostSection | None:
    """Match a section by id or by case-insensitive name; unknown values give None."""
    if value in (None, ""):
        return None
    if isinstance(value, PostSection):
        return value
    section_id = parse_positive_int(value)
    if section_id is not None:
        return PostSection.objects.filter(pk=section_id).first()
    section = PostSection.objects.filter(name__iexact=str(value).strip()).first()
    if section is None:
        logger.warning("Unknown post section %r, storing none", value)
    return section


def default_author_name(user) -> str:
    if user is None:
        return ""
    traveler = Traveler.objects.filter(user=user).first()
    return traveler.name if traveler is not None else user.name


class PostSerializer(serializers.ModelSerializer):
    author = serializers.SerializerMethodField()
    email = serializers.EmailField(source="author_email", read_only=True)
    authorImage = serializers.CharField(source="author_image_url", read_only=True)
    section = serializers.IntegerField(source="section_id", read_only=True)
    timestamp = serializers.DateTimeField(source="created_at", read_only=True)
    isPrivate = serializers.BooleanField(source="is_private", read_only=True)
    media = serializers.SerializerMethodField()
    tags = serializers.SerializerMethodField()

    class Meta:
        model = Post
        fields = [
            "id",
            "author",
            "email",
            "authorImage",
            "place",
            "location",
            "section",
            "description",
            "timestamp",
            "lat",
            "lng",
            "approved",
            "isPrivate",
            "media",
            "tags",
        ]
        read_only_fields = fields

    def get_author(self, obj) -> str:
        return obj.author_name or obj.author_email

    def get_media(self, obj) -> list[dict]:
        return [
            {"type": item.media_type, "url": item.url}
            for item in obj.media.all()
            if is_displayable(item.url, post_id=obj.pk)
        ]

    def get_tags(self, obj) -> list[str]:
        return [tag.name for tag in obj.tags.all()]


class PostWriteSerializer(serializers.Serializer):
    """
    Accepts both the current and the legacy post payloads.

    ``email``/``author`` are older spellings of ``authorEmail``/``authorName``.
    """

    authorEmail = serializers.EmailField(required=False, allow_blank=True)
    email = serializers.EmailField(required=False, allow_blank=True)
    authorName = serializers.CharField(required=False, allow_blank=True, max_length=200)
    author = serializers.CharField(required=False, allow_blank=True, max_length=200)
    authorImage = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    place = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    location = serializers.CharField(required=False, allow_blank=True, allow_null=True, max_length=200)
    section = serializers.JSONField(required=False, allow_null=True)
    description = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    lat = serializers.JSONField(required=False, allow_null=True)
    lng = serializers.JSONField(required=False, allow_null=True)
    media = serializers.ListField(child=serializers.JSONField(), required=False)
    tags = serializers.ListField(child=serializers.CharField(max_length=100), required=False)
    approved = serializers.JSONField(required=False)
    isPrivate = serializers.JSONField(required=False)

    def _replace_media(self, post: Post, entries):
        post.media.all().delete()
        PostMedia.objects.bulk_create(
            [
                PostMedia(post=post, media_type=media_type, url=url, display_order=position)
                for position, (media_type, url) in enumerate(normalize_incoming(entries))
            ]
        )

    def _replace_tags(self, post: Post, names):
        post.tags.all().delete()
        unique = []
        for name in names:
            name = name.strip()
            if name and name not in unique:
                unique.append(name)
        PostTag.objects.bulk_create([PostTag(post=post, name=name) for name in unique])

    @transaction.atomic
    def create(self, validated_data):
        author = validated_data.pop("author_user")
        data = validated_data
        post = Post.objects.create(
            author=author,
            author_email=data["author_email"],
            author_name=data.get("authorName") or data.get("author") or default_author_name(author),
            author_image_url=data.get("authorImage") or "",
            place=data.get("place") or "",
            location=data.get("location") or "",
            section=resolve_section(data.get("section")),
            description=data.get("description") or "",
            lat=parse_float(data.get("lat")),
            lng=parse_float(data.get("lng")),
            approved=data.get("can_approve", False) and parse_bool(data.get("approved")),
            is_private=parse_bool(data.get("isPrivate")),
        )
        self._replace_media(post, data.get("media"))
        self._replace_tags(post, data.get("tags") or [])
        return post

    @transaction.atomic
    def update(self, instance, validated_data):
        data = validated_data
        fields = []
        for key in ("place", "location", "description"):
            if key in data:
                setattr(instance, key, data[key] or "")
                fields.append(key)
        if "section" in data:
            instance.section = resolve_section(data["section"])
            fields.append("section")
        for key in ("lat", "lng"):
            if key in data:
                setattr(instance, key, parse_float(data[key]))
                fields.append(key)
        if "isPrivate" in data:
            instance.is_private = parse_bool(data["isPrivate"])
            fields.append("is_private")
        if "approved" in data and data.get("can_approve"):
            instance.approved = parse_bool(data["approved"])
            fields.append("approved")
        if fields:
            instance.save(update_fields=fields + ["updated_at"])
        if "media" in data:
            self._replace_media(instance, data["media"])
        if "tags" in data:
            self._replace_tags(instance, data["tags"])
        return instance


class PostSectionSerializer(serializers.ModelSerializer):
    count = serializers.SerializerMethodField()

    class Meta:
        model = PostSection
        fields = ["id", "name", "description", "display_order", "count", "created_at"]
        read_only_fields = ["id", "count", "created_at"]
        extra_kwargs = {
            "name": {"validators": []},
            "display_order": {"required": False, "allow_null": True},
        }

    def get_count(self, obj) -> int:
        annotated = getattr(obj, "post_count", None)
        if annotated is not None:
            return annotated
        return obj.posts.count()

    def validate_name(self, value: str) -> str:
        name = value.strip()
        if not name:
            raise serializers.ValidationError("Section name is required")
        clash = PostSection.objects.filter(name__iexact=name)
        if self.instance is not None:
            clash = clash.exclude(pk=self.instance.pk)
        if clash.exists():
            raise serializers.ValidationError("Section with this name already exists")
        return name

    def validate_description(self, value):
        return value.strip() if value else None

    def create(self, validated_data):
        if validated_data.get("display_order") is None:
            current = PostSection.objects.aggregate(highest=Max("display_order"))["highest"]
            validated_data["display_order"] = (current or 0) + 1
        return super().create(validated_data)

    def update(self, instance, validated_data):
        if "display_order" in validated_data and validated_data["display_order"] is None:
            validated_data.pop("display_order")
        return super().update(instance, validated_data)


class TagCreateSerializer(serializers.Serializer):
    tagName = serializers.CharField(max_length=100)

    def create(self, validated_data):
        tag, _ = Tag.objects.get_or_create(name=validated_data["tagName"].strip())
        return tag
