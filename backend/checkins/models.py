from django.db import models
from django.utils import timezone


class CheckInQuerySet(models.QuerySet):
    def active(self):
        return self.filter(active=True)

    def for_email(self, email: str):
        return self.filter(traveler_email__iexact=(email or "").strip())


class CheckIn(models.Model):
    """Attendance mark of one traveler on one vehicle until checkout."""

    vehicle = models.ForeignKey("vehicles.Vehicle", on_delete=models.CASCADE, related_name="check_ins")
    traveler_email = models.EmailField(db_index=True)
    traveler = models.ForeignKey(
        "travelers.Traveler",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="check_ins",
    )
    active = models.BooleanField(default=True, db_index=True)
    checked_in_at = models.DateTimeField(default=timezone.now)
    checked_out_at = models.DateTimeField(null=True, blank=True)

    objects = CheckInQuerySet.as_manager()

    class Meta:
        ordering = ("-checked_in_at", "-id")

    def __str__(self) -> str:
        return f"{self.traveler_email} @ {self.vehicle_id}"

    def check_out(self):
        self.active = False
        self.checked_out_at = timezone.now()
        self.save(update_fields=["active", "checked_out_at"])
