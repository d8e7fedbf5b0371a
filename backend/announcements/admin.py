from django.contrib import admin

from .models import Announcement


@admin.register(Announcement)
class AnnouncementAdmin(admin.ModelAdmin):
    list_display = ("id", "recipient_type", "recipient_value", "display_type", "timing_type", "sent", "created_at")
    list_filter = ("recipient_type", "display_type", "timing_type", "sent")
    search_fields = ("message", "recipient_value")
    readonly_fields = ("created_at", "sent_at")
