from django.db import models
from django.utils import timezone


class Vehicle(models.Model):
    ACTIVE = "Active"
    INACTIVE = "Inactive"
    MAINTENANCE = "Maintenance"
    STATUS_CHOICES = [
        (ACTIVE, "Active"),
        (INACTIVE, "Inactive"),
        (MAINTENANCE, "Maintenance"),
    ]

    DEFAULT_COLOR = "#FF9933"

    name = models.CharField(max_length=200)
    type = models.CharField(max_length=100)
    capacity = models.PositiveIntegerField()
    reg_no = models.CharField(max_length=50, unique=True, null=True, blank=True)
    group_leader_email = models.EmailField(blank=True, db_index=True)
    group_leader_name = models.CharField(max_length=200, blank=True)
    driver_name = models.CharField(max_length=200, blank=True)
    driver_phone = models.CharField(max_length=20, blank=True)
    color = models.CharField(max_length=20, default=DEFAULT_COLOR)
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default=ACTIVE)
    current_lat = models.FloatField(null=True, blank=True)
    current_lng = models.FloatField(null=True, blank=True)
    last_update = models.DateTimeField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("id",)

    def __str__(self) -> str:
        return self.name

    def is_led_by(self, email: str) -> bool:
        return bool(email) and self.group_leader_email.lower() == email.strip().lower()

    def move_to(self, lat, lng):
        self.current_lat = lat
        self.current_lng = lng
        self.last_update = timezone.now()
        self.save(update_fields=["current_lat", "current_lng", "last_update", "updated_at"])


class VehicleAllotment(models.Model):
    """A traveler's vehicle for one day, overriding their base vehicle."""

    traveler = models.ForeignKey(
        "travelers.Traveler",
        on_delete=models.CASCADE,
        related_name="vehicle_allotments",
    )
    vehicle = models.ForeignKey(Vehicle, on_delete=models.CASCADE, related_name="allotments")
    date = models.DateField(db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("date", "id")
        constraints = [
            models.UniqueConstraint(fields=["traveler", "date"], name="unique_vehicle_allotment_per_day"),
        ]

    def __str__(self) -> str:
        return f"{self.traveler} -> {self.vehicle} on {self.date}"


def vehicle_for_traveler_on(traveler, day) -> Vehicle | None:
    """Resolve the day's allotment first, then fall back to the base vehicle."""
    allotment = (
        VehicleAllotment.objects.select_related("vehicle")
        .filter(traveler=traveler, date=day)
        .first()
    )
    if allotment:
        return allotment.vehicle
    return traveler.vehicle
