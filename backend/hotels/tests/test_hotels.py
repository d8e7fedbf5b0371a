from datetime import date

import pytest
from django.utils import timezone

from hotels.models import Hotel, RoomAllotment, RoomPair


@pytest.fixture
def hotel(db):
    return Hotel.objects.create(
        name="Hotel Yak & Yeti",
        city="Kathmandu",
        check_in_date=date(2025, 12, 15),
        check_out_date=date(2025, 12, 17),
    )


def test_admin_creates_hotel(admin_client):
    response = admin_client.post(
        "/api/hotels/",
        {"name": "Hotel Barahi", "city": "Pokhara", "totalRooms": 40, "checkInDate": "2025-12-18"},
        format="json",
    )

    assert response.status_code == 201
    assert response.json()["message"] == "Hotel created successfully"
    assert Hotel.objects.get(pk=response.json()["id"]).total_rooms == 40


def test_hotel_name_is_required(admin_client):
    response = admin_client.post("/api/hotels/", {"name": "  "}, format="json")

    assert response.status_code == 400
    assert "name" in response.json()


def test_check_out_cannot_precede_check_in(admin_client, hotel):
    response = admin_client.put(f"/api/hotels/{hotel.pk}/", {"checkOutDate": "2025-12-10"}, format="json")

    assert response.status_code == 400
    assert "checkOutDate" in response.json()


def test_travelers_read_but_cannot_write_hotels(traveler_client, hotel):
    listing = traveler_client.get("/api/hotels/")

    assert listing.status_code == 200
    assert listing.json()[0]["name"] == "Hotel Yak & Yeti"
    assert traveler_client.delete(f"/api/hotels/{hotel.pk}/").status_code == 403


def test_single_allotment(admin_client, hotel, traveler):
    response = admin_client.post(
        "/api/hotels/allotments/",
        {"hotelId": hotel.pk, "travelerId": traveler.pk, "date": "2025-12-15", "floor": "2", "room": "204"},
        format="json",
    )

    assert response.status_code == 201
    allotment = RoomAllotment.objects.get(pk=response.json()["id"])
    assert allotment.room == "204"
    assert allotment.pair_no is None


def test_bulk_allotment_replaces_hotel_and_date(admin_client, hotel, traveler, make_traveler):
    kiran = make_traveler(email="kiran@example.com", first_name="Kiran")
    RoomAllotment.objects.create(hotel=hotel, traveler=kiran, date=date(2025, 12, 15), room="101")
    kept = RoomAllotment.objects.create(hotel=hotel, traveler=kiran, date=date(2025, 12, 16), room="101")

    response = admin_client.post(
        "/api/hotels/allotments/",
        {
            "hotelId": hotel.pk,
            "date": "2025-12-15",
            "allotments": [
                {"travelerId": traveler.pk, "floor": "3", "room": "301", "pairNo": 1},
                {"travelerId": kiran.pk, "floor": "3", "room": "301", "pairNo": 1},
            ],
        },
        format="json",
    )

    assert response.status_code == 200
    assert response.json()["saved"] == 2
    rooms = RoomAllotment.objects.filter(hotel=hotel, date=date(2025, 12, 15))
    assert {row.room for row in rooms} == {"301"}
    assert rooms.count() == 2
    assert RoomAllotment.objects.filter(pk=kept.pk).exists()


def test_traveler_sees_only_own_room_rows(traveler_client, hotel, traveler, make_traveler):
    kiran = make_traveler(email="kiran@example.com", first_name="Kiran")
    RoomAllotment.objects.create(hotel=hotel, traveler=traveler, date=date(2025, 12, 15), room="204")
    RoomAllotment.objects.create(hotel=hotel, traveler=kiran, date=date(2025, 12, 15), room="205")

    response = traveler_client.get("/api/hotels/allotments/", {"hotelId": hotel.pk})

    assert response.status_code == 200
    assert [row["room"] for row in response.json()] == ["204"]
    assert response.json()[0]["hotelName"] == "Hotel Yak & Yeti"


def test_clearing_allotments_needs_hotel_and_date(admin_client, hotel, traveler):
    RoomAllotment.objects.create(hotel=hotel, traveler=traveler, date=date(2025, 12, 15), room="204")

    missing = admin_client.delete(f"/api/hotels/allotments/?hotelId={hotel.pk}")
    cleared = admin_client.delete(f"/api/hotels/allotments/?hotelId={hotel.pk}&date=2025-12-15")

    assert missing.status_code == 400
    assert cleared.status_code == 200
    assert cleared.json()["deleted"] == 1
    assert not RoomAllotment.objects.exists()


def test_my_room_defaults_to_today(traveler_client, hotel, traveler):
    empty = traveler_client.get("/api/hotels/my-room/")
    assert empty.status_code == 200
    assert empty.content == b"null"
    assert empty.json() is None

    RoomAllotment.objects.create(hotel=hotel, traveler=traveler, date=timezone.localdate(), room="204")
    response = traveler_client.get("/api/hotels/my-room/")

    assert response.status_code == 200
    assert response.json()["room"] == "204"


def test_room_pair_lifecycle(admin_client, traveler, make_traveler):
    kiran = make_traveler(email="kiran@example.com", first_name="Kiran")

    created = admin_client.post(
        "/api/room-pairs/",
        {"pairNo": 1, "travelerIds": [traveler.pk, kiran.pk]},
        format="json",
    )
    assert created.status_code == 201
    pair = RoomPair.objects.get(pk=created.json()["id"])
    assert set(pair.travelers.values_list("pk", flat=True)) == {traveler.pk, kiran.pk}

    updated = admin_client.put(f"/api/room-pairs/{pair.pk}/", {"travelerIds": [kiran.pk]}, format="json")
    assert updated.status_code == 200
    assert [member["id"] for member in updated.json()["room_pair"]["travelers"]] == [kiran.pk]


def test_room_pair_rules(admin_client, traveler_client, traveler):
    RoomPair.objects.create(pair_no=1).members.create(traveler=traveler)

    duplicate_number = admin_client.post("/api/room-pairs/", {"pairNo": 1}, format="json")
    already_paired = admin_client.post(
        "/api/room-pairs/",
        {"pairNo": 2, "travelerIds": [traveler.pk]},
        format="json",
    )

    assert duplicate_number.status_code == 400
    assert "pairNo" in duplicate_number.json()
    assert already_paired.status_code == 400
    assert "travelerIds" in already_paired.json()
    assert traveler_client.get("/api/room-pairs/").status_code == 200
    assert traveler_client.post("/api/room-pairs/", {"pairNo": 3}, format="json").status_code == 403
