from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as DjangoUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(DjangoUserAdmin):
    list_display = ("email", "display_name", "is_staff", "include_in_contributors", "is_active")
    search_fields = ("email", "username", "display_name", "first_name", "last_name")
    fieldsets = DjangoUserAdmin.fieldsets + (
        (
            "Profile",
            {"fields": ("display_name", "image_url", "include_in_contributors", "image_compression_quality")},
        ),
    )
