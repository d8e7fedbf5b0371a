from django.db import models


class Hotel(models.Model):
    name = models.CharField(max_length=200)
    address = models.TextField(blank=True)
    city = models.CharField(max_length=100, blank=True, db_index=True)
    state = models.CharField(max_length=100, blank=True)
    country = models.CharField(max_length=100, blank=True)
    lat = models.FloatField(null=True, blank=True)
    lng = models.FloatField(null=True, blank=True)
    phone = models.CharField(max_length=20, blank=True)
    email = models.EmailField(blank=True)
    total_floors = models.PositiveIntegerField(null=True, blank=True)
    total_rooms = models.PositiveIntegerField(null=True, blank=True)
    check_in_date = models.DateField(null=True, blank=True)
    check_out_date = models.DateField(null=True, blank=True)
    notes = models.TextField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("id",)

    def __str__(self) -> str:
        return self.name


class RoomAllotment(models.Model):
    hotel = models.ForeignKey(Hotel, on_delete=models.CASCADE, related_name="allotments")
    traveler = models.ForeignKey("travelers.Traveler", on_delete=models.CASCADE, related_name="room_allotments")
    date = models.DateField(db_index=True)
    floor = models.CharField(max_length=20, blank=True)
    room = models.CharField(max_length=50, blank=True)
    pair_no = models.PositiveIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("date", "room", "id")
        indexes = [models.Index(fields=["hotel", "date"], name="room_allotment_hotel_date")]

    def __str__(self) -> str:
        return f"{self.traveler} in {self.hotel} room {self.room} on {self.date}"


class RoomPair(models.Model):
    """Travelers who share a room wherever the group stays."""

    pair_no = models.PositiveIntegerField(unique=True)
    travelers = models.ManyToManyField("travelers.Traveler", through="RoomPairMember", related_name="room_pairs")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("pair_no",)

    def __str__(self) -> str:
        return f"Pair {self.pair_no}"


class RoomPairMember(models.Model):
    pair = models.ForeignKey(RoomPair, on_delete=models.CASCADE, related_name="members")
    traveler = models.OneToOneField(
        "travelers.Traveler",
        on_delete=models.CASCADE,
        related_name="room_pair_membership",
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("id",)
