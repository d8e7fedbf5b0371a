from django.conf import settings
from django.db import models

from core.utils import join_name


class Traveler(models.Model):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"
    GENDER_CHOICES = [(MALE, "Male"), (FEMALE, "Female"), (OTHER, "Other")]

    HOODI_SIZE_CHOICES = [(size, size) for size in ("S", "M", "L", "XL", "XXL")]

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="traveler",
    )
    tirth_id = models.CharField(max_length=20, unique=True, null=True, blank=True)
    first_name = models.CharField(max_length=100)
    middle_name = models.CharField(max_length=100, blank=True)
    last_name = models.CharField(max_length=100)
    phone = models.CharField(max_length=20, blank=True)
    city = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, default="India")
    center = models.CharField(max_length=100, blank=True)
    birth_date = models.DateField(null=True, blank=True)
    age = models.PositiveIntegerField(null=True, blank=True)
    passport_no = models.CharField(max_length=50, blank=True)
    passport_issue_date = models.DateField(null=True, blank=True)
    passport_expiry_date = models.DateField(null=True, blank=True)
    nationality = models.CharField(max_length=100, default="Indian")
    gender = models.CharField(max_length=10, choices=GENDER_CHOICES, default=MALE)
    hoodi_size = models.CharField(max_length=5, choices=HOODI_SIZE_CHOICES, blank=True)
    vehicle = models.ForeignKey(
        "vehicles.Vehicle",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="travelers",
    )
    profile_line = models.CharField(max_length=200, blank=True)
    about_me = models.TextField(blank=True)
    image_url = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("id",)

    def __str__(self) -> str:
        return self.name

    @property
    def name(self) -> str:
        return join_name(self.first_name, self.middle_name, self.last_name)

    @property
    def email(self) -> str:
        return self.user.email
