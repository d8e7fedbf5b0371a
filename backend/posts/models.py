from django.conf import settings
from django.db import models


class PostSection(models.Model):
    name = models.CharField(max_length=100, unique=True)
    description = models.TextField(blank=True, null=True)
    display_order = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("display_order", "id")

    def __str__(self) -> str:
        return self.name


class Tag(models.Model):
    """Curated tag vocabulary offered to travelers when posting."""

    name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("name",)

    def __str__(self) -> str:
        return self.name


class PostQuerySet(models.QuerySet):
    def approved(self):
        return self.filter(approved=True)

    def by_author(self, email: str):
        return self.filter(author_email__iexact=(email or "").strip())


class Post(models.Model):
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="posts",
    )
    author_email = models.EmailField(db_index=True)
    author_name = models.CharField(max_length=200, blank=True)
    author_image_url = models.TextField(blank=True)
    place = models.CharField(max_length=200, blank=True)
    location = models.CharField(max_length=200, blank=True)
    section = models.ForeignKey(
        PostSection,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="posts",
    )
    description = models.TextField(blank=True)
    lat = models.FloatField(null=True, blank=True)
    lng = models.FloatField(null=True, blank=True)
    approved = models.BooleanField(default=False, db_index=True)
    is_private = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = PostQuerySet.as_manager()

    class Meta:
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        return f"{self.place or 'Post'} by {self.author_email}"

    def is_authored_by(self, user) -> bool:
        return bool(user and user.email) and self.author_email.lower() == user.email.lower()


class PostMedia(models.Model):
    IMAGE = "image"
    VIDEO = "video"
    TYPE_CHOICES = [(IMAGE, "Image"), (VIDEO, "Video")]

    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="media")
    media_type = models.CharField(max_length=10, choices=TYPE_CHOICES, default=IMAGE)
    url = models.TextField()
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ("display_order", "id")
        verbose_name_plural = "Post media"


class PostTag(models.Model):
    post = models.ForeignKey(Post, on_delete=models.CASCADE, related_name="tags")
    name = models.CharField(max_length=100)

    class Meta:
        ordering = ("id",)

    def __str__(self) -> str:
        return self.name
