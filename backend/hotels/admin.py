from django.contrib import admin

from .models import Hotel, RoomAllotment, RoomPair, RoomPairMember


@admin.register(Hotel)
class HotelAdmin(admin.ModelAdmin):
    list_display = ("name", "city", "check_in_date", "check_out_date", "total_rooms")
    search_fields = ("name", "city")


@admin.register(RoomAllotment)
class RoomAllotmentAdmin(admin.ModelAdmin):
    list_display = ("date", "hotel", "traveler", "floor", "room", "pair_no")
    list_filter = ("hotel", "date")


class RoomPairMemberInline(admin.TabularInline):
    model = RoomPairMember
    extra = 0
    raw_id_fields = ("traveler",)


@admin.register(RoomPair)
class RoomPairAdmin(admin.ModelAdmin):
    list_display = ("pair_no", "created_at")
    inlines = [RoomPairMemberInline]
