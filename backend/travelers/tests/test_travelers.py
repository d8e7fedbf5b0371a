import pytest
from rest_framework.test import APIClient

from accounts.models import User
from travelers.models import Traveler

PASSWORD = "yatra-pass"


@pytest.fixture
def payload():
    return {
        "firstName": "Kiran",
        "lastName": "Desai",
        "email": "Kiran@Example.com",
        "password": "secret123",
        "tirthId": "T-100",
        "city": "Surat",
        "hoodiSize": "L",
    }


def test_admin_creates_traveler_with_login(admin_client, payload):
    response = admin_client.post("/api/travelers/", payload, format="json")

    assert response.status_code == 201
    body = response.json()
    assert body["message"] == "Traveler created successfully"
    traveler = Traveler.objects.get(pk=body["id"])
    assert traveler.user.email == "kiran@example.com"
    assert traveler.user.check_password("secret123")
    assert traveler.country == "India"
    assert traveler.nationality == "Indian"


def test_duplicate_email_is_rejected(admin_client, traveler, payload):
    payload["email"] = traveler.email.upper()
    response = admin_client.post("/api/travelers/", payload, format="json")

    assert response.status_code == 400
    assert "email" in response.json()


def test_duplicate_tirth_id_is_rejected(admin_client, make_traveler, payload):
    make_traveler(email="other@example.com", tirth_id="T-100")
    response = admin_client.post("/api/travelers/", payload, format="json")

    assert response.status_code == 400
    assert "tirthId" in response.json()


def test_traveler_cannot_list_everyone(traveler_client):
    response = traveler_client.get("/api/travelers/")
    assert response.status_code == 403


def test_traveler_list_requires_token(db):
    response = APIClient().get("/api/travelers/")
    assert response.status_code == 401


def test_traveler_reads_own_profile_but_not_others(traveler_client, traveler, make_traveler):
    other = make_traveler(email="meera@example.com", first_name="Meera")

    own = traveler_client.get(f"/api/travelers/{traveler.pk}/")
    foreign = traveler_client.get(f"/api/travelers/{other.pk}/")

    assert own.status_code == 200
    assert own.json()["email"] == traveler.email
    assert "password" not in own.json()
    assert foreign.status_code == 403


def test_traveler_updates_own_profile(traveler_client, traveler):
    response = traveler_client.put(
        f"/api/travelers/{traveler.pk}/",
        {"aboutMe": "First yatra", "city": "Pune"},
        format="json",
    )

    assert response.status_code == 200
    assert response.json()["traveler"]["aboutMe"] == "First yatra"
    traveler.refresh_from_db()
    assert traveler.city == "Pune"


def test_traveler_cannot_change_admin_only_fields(traveler_client, traveler, make_vehicle):
    vehicle = make_vehicle()
    response = traveler_client.put(
        f"/api/travelers/{traveler.pk}/",
        {"vehicleId": vehicle.pk},
        format="json",
    )

    assert response.status_code == 403
    traveler.refresh_from_db()
    assert traveler.vehicle is None


def test_update_with_empty_body_is_rejected(admin_client, traveler):
    response = admin_client.put(f"/api/travelers/{traveler.pk}/", {}, format="json")

    assert response.status_code == 400
    assert response.json()["detail"] == "No fields to update"


def test_admin_email_change_moves_username(admin_client, traveler):
    response = admin_client.patch(
        f"/api/travelers/{traveler.pk}/",
        {"email": "renamed@example.com"},
        format="json",
    )

    assert response.status_code == 200
    traveler.user.refresh_from_db()
    assert traveler.user.email == "renamed@example.com"
    assert traveler.user.username == "renamed@example.com"


def test_delete_removes_login(admin_client, traveler):
    user_id = traveler.user_id
    response = admin_client.delete(f"/api/travelers/{traveler.pk}/")

    assert response.status_code == 200
    assert response.json()["message"] == "Traveler deleted successfully"
    assert not User.objects.filter(pk=user_id).exists()
    assert not Traveler.objects.filter(pk=traveler.pk).exists()


def test_public_directory_is_sorted_by_name(traveler_client, make_traveler):
    make_traveler(email="zoya@example.com", first_name="Zoya", last_name="Khan")
    make_traveler(email="bhavin@example.com", first_name="Bhavin", last_name="Rao")

    response = traveler_client.get("/api/travelers/public/")

    assert response.status_code == 200
    names = [entry["firstName"] for entry in response.json()]
    assert names == ["Asha", "Bhavin", "Zoya"]
    assert "passportNo" not in response.json()[0]


def test_lookup_by_email_is_self_or_admin(traveler_client, traveler, make_traveler, make_vehicle):
    vehicle = make_vehicle(color="#123456")
    traveler.vehicle = vehicle
    traveler.save()
    make_traveler(email="meera@example.com", first_name="Meera")

    own = traveler_client.get(f"/api/travelers/email/{traveler.email.upper()}/")
    foreign = traveler_client.get("/api/travelers/email/meera@example.com/")

    assert own.status_code == 200
    assert own.json()["vehicleId"] == vehicle.pk
    assert own.json()["vehicle_id"] == vehicle.pk
    assert own.json()["vehicleColor"] == "#123456"
    assert foreign.status_code == 403


def test_login_returns_seven_day_token(client, traveler):
    response = client.post(
        "/api/travelers/login/",
        {"email": traveler.email, "password": PASSWORD},
        format="json",
    )

    assert response.status_code == 200
    body = response.json()
    assert body["expiresIn"] == "7d"
    assert body["traveler"]["id"] == traveler.pk


def test_login_rejects_bad_password(client, traveler):
    response = client.post(
        "/api/travelers/login/",
        {"email": traveler.email, "password": "wrong"},
        format="json",
    )
    assert response.status_code == 401


def test_login_requires_email_and_password(client, traveler):
    response = client.post("/api/travelers/login/", {"email": traveler.email}, format="json")
    assert response.status_code == 400
