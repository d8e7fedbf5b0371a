from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone


class AnnouncementQuerySet(models.QuerySet):
    def pending(self):
        """Unsent announcements that are due now."""
        due = Q(timing_type=Announcement.INSTANT) | Q(
            timing_type=Announcement.SCHEDULED,
            scheduled_time__lte=timezone.now(),
        )
        return self.filter(due, sent=False)


class Announcement(models.Model):
    ALL_TRAVELERS = "all-travelers"
    ALL_GROUP_LEADERS = "all-group-leaders"
    SPECIFIC_VEHICLE = "specific-vehicle"
    SPECIFIC_TRAVELER = "specific-traveler"
    RECIPIENT_CHOICES = [
        (ALL_TRAVELERS, "All travelers"),
        (ALL_GROUP_LEADERS, "All group leaders"),
        (SPECIFIC_VEHICLE, "Specific vehicle"),
        (SPECIFIC_TRAVELER, "Specific traveler"),
    ]

    NOTIFICATION = "notification"
    BANNER = "banner"
    MODAL = "modal"
    DISPLAY_CHOICES = [(NOTIFICATION, "Notification"), (BANNER, "Banner"), (MODAL, "Modal")]

    INSTANT = "instant"
    SCHEDULED = "scheduled"
    TIMING_CHOICES = [(INSTANT, "Instant"), (SCHEDULED, "Scheduled")]

    recipient_type = models.CharField(max_length=32, choices=RECIPIENT_CHOICES)
    recipient_value = models.CharField(max_length=255, blank=True, null=True)
    recipients = models.JSONField(blank=True, null=True)
    message = models.TextField()
    display_type = models.CharField(max_length=16, choices=DISPLAY_CHOICES, default=NOTIFICATION)
    timing_type = models.CharField(max_length=16, choices=TIMING_CHOICES, default=INSTANT)
    scheduled_time = models.DateTimeField(null=True, blank=True)
    sent = models.BooleanField(default=False, db_index=True)
    sent_at = models.DateTimeField(null=True, blank=True)
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="announcements",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    objects = AnnouncementQuerySet.as_manager()

    class Meta:
        ordering = ("-created_at", "-id")

    def __str__(self) -> str:
        return f"{self.recipient_type}: {self.message[:40]}"

    def mark_sent(self):
        self.sent = True
        self.sent_at = timezone.now()
        self.save(update_fields=["sent", "sent_at"])
