from django.contrib import admin

from .models import Traveler


@admin.register(Traveler)
class TravelerAdmin(admin.ModelAdmin):
    list_display = ("tirth_id", "first_name", "last_name", "user", "vehicle", "center")
    list_filter = ("gender", "hoodi_size", "vehicle")
    search_fields = ("tirth_id", "first_name", "last_name", "user__email", "phone")
    raw_id_fields = ("user",)
