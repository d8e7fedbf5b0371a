import pytest
from rest_framework.test import APIClient

from accounts.models import User
from core.views import not_found


@pytest.mark.django_db
def test_end_to_end_yatra_flow():
    User.objects.create_user_for_email("admin@example.com", password="admin-pass", is_staff=True)
    admin = APIClient()
    traveler = APIClient()

    # Admin signs in
    login_response = admin.post(
        "/api/admin/login/",
        {"username": "admin@example.com", "password": "admin-pass"},
        format="json",
    )
    assert login_response.status_code == 200
    admin.credentials(HTTP_AUTHORIZATION=f"Bearer {login_response.json()['token']}")

    # Vehicle and traveler
    vehicle_response = admin.post(
        "/api/vehicles/",
        {"name": "Bus 1", "type": "Bus", "capacity": 40},
        format="json",
    )
    assert vehicle_response.status_code == 201
    vehicle_id = vehicle_response.json()["id"]

    traveler_response = admin.post(
        "/api/travelers/",
        {
            "firstName": "Asha",
            "lastName": "Patel",
            "email": "asha@example.com",
            "password": "asha-pass",
            "vehicleId": vehicle_id,
        },
        format="json",
    )
    assert traveler_response.status_code == 201

    # Traveler signs in and boards
    traveler_login = traveler.post(
        "/api/travelers/login/",
        {"email": "asha@example.com", "password": "asha-pass"},
        format="json",
    )
    assert traveler_login.status_code == 200
    assert traveler_login.json()["traveler"]["vehicleName"] == "Bus 1"
    traveler.credentials(HTTP_AUTHORIZATION=f"Bearer {traveler_login.json()['token']}")

    status_response = traveler.get("/api/check-ins/my-status/")
    assert status_response.json()["vehicleId"] == vehicle_id
    check_in = traveler.post(
        "/api/check-ins/",
        {"vehicleId": vehicle_id, "travelerEmail": "asha@example.com"},
        format="json",
    )
    assert check_in.status_code == 201

    roster = admin.get(f"/api/check-ins/vehicle/{vehicle_id}/")
    assert roster.json()["checkedIn"] == ["asha@example.com"]

    # Post goes through moderation
    post_response = traveler.post(
        "/api/posts/",
        {"place": "Pashupatinath", "description": "Evening aarti", "tags": ["Temple"]},
        format="json",
    )
    assert post_response.status_code == 201
    post_id = post_response.json()["id"]

    pending = admin.get("/api/posts/", {"approved": "false"})
    assert [row["id"] for row in pending.json()] == [post_id]

    approve = admin.patch(f"/api/posts/{post_id}/approve/", {"approved": True}, format="json")
    assert approve.status_code == 200

    feed = traveler.get("/api/posts/")
    assert feed.json()[0]["tags"] == ["Temple"]
    assert feed.json()[0]["approved"] is True

    # Announcement for the bus reaches the traveler
    announcement = admin.post(
        "/api/announcements/",
        {"recipientType": "by-vehicle", "recipientValue": str(vehicle_id), "message": "Departure at 6"},
        format="json",
    )
    assert announcement.status_code == 201
    mine = traveler.get("/api/announcements/mine/")
    assert [row["message"] for row in mine.json()] == ["Departure at 6"]


@pytest.mark.django_db
def test_health_is_public():
    response = APIClient().get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["message"] == "Yatra API Server is running"


def test_unknown_route_returns_json_detail(rf):
    response = not_found(rf.get("/api/nowhere/"))

    assert response.status_code == 404
    assert b"Route GET /api/nowhere/ not found" in response.content
