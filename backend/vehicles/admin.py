from django.contrib import admin

from .models import Vehicle, VehicleAllotment


@admin.register(Vehicle)
class VehicleAdmin(admin.ModelAdmin):
    list_display = ("name", "type", "capacity", "reg_no", "group_leader_name", "status")
    list_filter = ("status", "type")
    search_fields = ("name", "reg_no", "driver_name", "group_leader_email")
    readonly_fields = ("last_update", "created_at", "updated_at")


@admin.register(VehicleAllotment)
class VehicleAllotmentAdmin(admin.ModelAdmin):
    list_display = ("date", "traveler", "vehicle")
    list_filter = ("date", "vehicle")
