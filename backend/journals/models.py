from django.conf import settings
from django.db import models


class JournalEntry(models.Model):
    """One private diary page per traveler per day."""

    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="journal_entries",
    )
    entry_date = models.DateField(db_index=True)
    mood = models.CharField(max_length=100, blank=True)
    content = models.TextField()
    location = models.CharField(max_length=255, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("-entry_date", "-created_at")
        verbose_name_plural = "Journal entries"
        constraints = [
            models.UniqueConstraint(fields=["owner", "entry_date"], name="unique_journal_entry_per_day"),
        ]

    def __str__(self) -> str:
        return f"{self.owner} on {self.entry_date}"
