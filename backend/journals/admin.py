from django.contrib import admin

from .models import JournalEntry


@admin.register(JournalEntry)
class JournalEntryAdmin(admin.ModelAdmin):
    list_display = ("owner", "entry_date", "mood", "location")
    list_filter = ("entry_date",)
    search_fields = ("owner__email", "content")
