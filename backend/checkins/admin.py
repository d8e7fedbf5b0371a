from django.contrib import admin

from .models import CheckIn


@admin.register(CheckIn)
class CheckInAdmin(admin.ModelAdmin):
    list_display = ("traveler_email", "vehicle", "active", "checked_in_at", "checked_out_at")
    list_filter = ("active", "vehicle")
    search_fields = ("traveler_email",)
