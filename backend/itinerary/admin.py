from django.contrib import admin

from .models import ItineraryActivity, ItineraryDay, ItineraryImage


class ItineraryActivityInline(admin.TabularInline):
    model = ItineraryActivity
    extra = 0


class ItineraryImageInline(admin.TabularInline):
    model = ItineraryImage
    extra = 0


@admin.register(ItineraryDay)
class ItineraryDayAdmin(admin.ModelAdmin):
    list_display = ("day", "date", "place", "city", "country")
    ordering = ("day",)
    inlines = [ItineraryActivityInline, ItineraryImageInline]
