from decimal import Decimal

from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models


class UserManager(DjangoUserManager):
    def get_by_email(self, email: str):
        return self.filter(email__iexact=(email or "").strip()).first()

    def create_user_for_email(self, email: str, password: str | None = None, **extra_fields):
        """Create a login whose username mirrors the normalized email."""
        normalized = (email or "").strip().lower()
        # A missing password leaves the account unusable until one is set.
        return self.create_user(
            username=normalized,
            email=normalized,
            password=password or None,
            **extra_fields,
        )


class User(AbstractUser):
    display_name = models.CharField(max_length=120, blank=True)
    image_url = models.TextField(blank=True)
    include_in_contributors = models.BooleanField(default=True)
    image_compression_quality = models.DecimalField(
        max_digits=3,
        decimal_places=2,
        default=Decimal("0.85"),
        validators=[MinValueValidator(Decimal("0.01")), MaxValueValidator(Decimal("1.00"))],
    )

    objects = UserManager()

    @property
    def is_admin(self) -> bool:
        return self.is_staff

    @property
    def name(self) -> str:
        return (
            self.display_name
            or f"{self.first_name} {self.last_name}".strip()
            or self.email
        )

    def save(self, *args, **kwargs):
        if self.email:
            self.email = self.email.strip().lower()
        return super().save(*args, **kwargs)
