from datetime import timedelta

import pytest
from rest_framework_simplejwt.tokens import AccessToken

from accounts.models import User

PASSWORD = "yatra-pass"


def test_admin_login_returns_token_and_admin_payload(client, admin_user):
    response = client.post(
        "/api/admin/login/",
        {"username": "admin@example.com", "password": PASSWORD},
        format="json",
    )

    assert response.status_code == 200
    data = response.json()
    assert set(data.keys()) == {"token", "refresh", "admin", "expiresIn"}
    assert data["expiresIn"] == "24h"
    assert data["admin"]["email"] == "admin@example.com"
    assert data["admin"]["name"] == "Yatra Admin"

    token = AccessToken(data["token"])
    assert token["is_admin"] is True
    assert token["email"] == "admin@example.com"
    lifetime = timedelta(seconds=token["exp"] - token["iat"])
    assert abs(lifetime - timedelta(hours=24)) <= timedelta(seconds=2)


def test_admin_login_accepts_email_key(client, admin_user):
    response = client.post(
        "/api/admin/login/",
        {"email": "ADMIN@example.com", "password": PASSWORD},
        format="json",
    )
    assert response.status_code == 200


def test_admin_login_requires_both_fields(client, admin_user):
    response = client.post("/api/admin/login/", {"username": "admin@example.com"}, format="json")
    assert response.status_code == 400


def test_admin_login_rejects_wrong_password(client, admin_user):
    response = client.post(
        "/api/admin/login/",
        {"username": "admin@example.com", "password": "nope"},
        format="json",
    )
    assert response.status_code == 401


def test_admin_login_rejects_non_staff(client, traveler):
    response = client.post(
        "/api/admin/login/",
        {"username": traveler.email, "password": PASSWORD},
        format="json",
    )
    assert response.status_code == 401


def test_refresh_issues_new_access_token(client, admin_user):
    login = client.post(
        "/api/admin/login/",
        {"username": "admin@example.com", "password": PASSWORD},
        format="json",
    )
    response = client.post("/api/auth/refresh/", {"refresh": login.json()["refresh"]}, format="json")

    assert response.status_code == 200
    access = AccessToken(response.json()["access"])
    assert access["is_admin"] is True
    lifetime = timedelta(seconds=access["exp"] - access["iat"])
    assert abs(lifetime - timedelta(hours=24)) <= timedelta(seconds=2)


def test_refresh_keeps_traveler_lifetime(client, traveler):
    login = client.post(
        "/api/travelers/login/",
        {"email": traveler.email, "password": PASSWORD},
        format="json",
    )
    response = client.post("/api/auth/refresh/", {"refresh": login.json()["refresh"]}, format="json")

    assert response.status_code == 200
    access = AccessToken(response.json()["access"])
    lifetime = timedelta(seconds=access["exp"] - access["iat"])
    assert abs(lifetime - timedelta(days=7)) <= timedelta(seconds=2)


def test_me_endpoint_with_bearer_token(client, traveler):
    login = client.post(
        "/api/travelers/login/",
        {"email": traveler.email, "password": PASSWORD},
        format="json",
    )
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {login.json()['token']}")
    response = client.get("/api/auth/me/")

    assert response.status_code == 200
    data = response.json()
    assert data["email"] == traveler.email
    assert data["isAdmin"] is False
    assert data["travelerId"] == traveler.pk


def test_me_endpoint_requires_authentication(db, client):
    response = client.get("/api/auth/me/")
    assert response.status_code == 401


def test_admin_profile_requires_admin(traveler_client):
    response = traveler_client.get("/api/admin/profile/")
    assert response.status_code == 403


def test_admin_profile_update_changes_fields(admin_client, admin_user):
    response = admin_client.put(
        "/api/admin/profile/",
        {
            "name": "Trip Lead",
            "email": "lead@example.com",
            "includeInContributors": False,
            "imageCompressionQuality": "0.5",
        },
        format="json",
    )

    assert response.status_code == 200
    admin = response.json()["admin"]
    assert admin["name"] == "Trip Lead"
    assert admin["includeInContributors"] is False
    assert admin["imageCompressionQuality"] == 0.5
    admin_user.refresh_from_db()
    assert admin_user.email == "lead@example.com"
    assert admin_user.username == "lead@example.com"


def test_admin_profile_update_with_empty_body_is_rejected(admin_client):
    response = admin_client.put("/api/admin/profile/", {}, format="json")

    assert response.status_code == 400
    assert response.json()["detail"] == "No fields to update"


@pytest.mark.parametrize("quality", ["0", "1.5"])
def test_admin_profile_rejects_out_of_range_quality(admin_client, quality):
    response = admin_client.put(
        "/api/admin/profile/",
        {"imageCompressionQuality": quality},
        format="json",
    )
    assert response.status_code == 400


def test_admin_profile_rejects_duplicate_email(admin_client, traveler):
    response = admin_client.put("/api/admin/profile/", {"email": traveler.email}, format="json")

    assert response.status_code == 400
    assert "email" in response.json()


def test_admin_profile_password_change(admin_client, admin_user):
    response = admin_client.put("/api/admin/profile/", {"password": "brand-new-pass"}, format="json")

    assert response.status_code == 200
    admin_user.refresh_from_db()
    assert admin_user.check_password("brand-new-pass")


def test_user_email_is_stored_lowercase(db):
    user = User.objects.create_user_for_email("  Mixed@Example.COM ", password=PASSWORD)
    assert user.email == "mixed@example.com"
    assert user.username == "mixed@example.com"
