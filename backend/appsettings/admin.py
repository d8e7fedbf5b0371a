from django.contrib import admin

from .models import Setting


@admin.register(Setting)
class SettingAdmin(admin.ModelAdmin):
    list_display = ("key", "value", "type", "updated_at")
    list_filter = ("type",)
    search_fields = ("key",)
