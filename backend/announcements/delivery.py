"""Decides which pending announcements reach a given traveler."""

import logging

from django.utils import timezone

from travelers.models import Traveler
from vehicles.models import Vehicle, VehicleAllotment

from .models import Announcement

logger = logging.getLogger(__name__)


class Recipient:
    """What we know about one user when matching announcements."""

    def __init__(self, email: str):
        self.email = (email or "").strip().lower()
        self.vehicle_ids = set()
        traveler = Traveler.objects.filter(user__email__iexact=self.email).first()
        if traveler is not None:
            if traveler.vehicle_id:
                self.vehicle_ids.add(str(traveler.vehicle_id))
            today = timezone.localdate()
            for vehicle_id in VehicleAllotment.objects.filter(traveler=traveler, date=today).values_list(
                "vehicle_id", flat=True
            ):
                self.vehicle_ids.add(str(vehicle_id))
        self.leads_vehicle = Vehicle.objects.filter(group_leader_email__iexact=self.email).exists()

    def should_receive(self, announcement: Announcement) -> bool:
        kind = announcement.recipient_type
        value = (announcement.recipient_value or "").strip()
        if kind == Announcement.ALL_TRAVELERS:
            return True
        if kind == Announcement.SPECIFIC_TRAVELER:
            return value.lower() == self.email
        if kind == Announcement.SPECIFIC_VEHICLE:
            return value in self.vehicle_ids
        if kind == Announcement.ALL_GROUP_LEADERS:
            return self.leads_vehicle
        logger.warning("Announcement %s has unknown recipient type %r", announcement.pk, kind)
        return False


def pending_for(email: str) -> list[Announcement]:
    recipient = Recipient(email)
    return [
        announcement
        for announcement in Announcement.objects.pending().order_by("-created_at", "-id")
        if recipient.should_receive(announcement)
    ]
