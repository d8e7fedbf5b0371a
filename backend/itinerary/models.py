from django.db import models


class ItineraryDay(models.Model):
    day = models.PositiveIntegerField(db_index=True)
    date = models.DateField(db_index=True)
    place = models.CharField(max_length=200)
    city = models.CharField(max_length=100, blank=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, default="India")
    lat = models.FloatField()
    lng = models.FloatField()
    description = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("day", "id")

    def __str__(self) -> str:
        return f"Day {self.day}: {self.place}"


class ItineraryActivity(models.Model):
    itinerary_day = models.ForeignKey(ItineraryDay, on_delete=models.CASCADE, related_name="activities")
    time = models.CharField(max_length=20, blank=True)
    activity = models.TextField()
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ("display_order", "id")
        verbose_name_plural = "Itinerary activities"

    def __str__(self) -> str:
        return f"{self.time} {self.activity}".strip()


class ItineraryImage(models.Model):
    itinerary_day = models.ForeignKey(ItineraryDay, on_delete=models.CASCADE, related_name="images")
    url = models.TextField()
    display_order = models.PositiveIntegerField(default=0)

    class Meta:
        ordering = ("display_order", "id")
