import pytest
from rest_framework.test import APIClient

from appsettings.models import Setting


@pytest.fixture
def anonymous(db):
    return APIClient()


def test_public_settings_are_seeded_and_typed(anonymous):
    response = anonymous.get("/api/settings/public/")

    assert response.status_code == 200
    data = response.json()
    assert data["top_contributors_count"] == 10
    assert data["alarm_enabled"] is True
    assert data["wake_up_time"] == "06:00"
    assert "\U0001F305" in data["alarm_message"]


def test_public_setting_detail(anonymous):
    response = anonymous.get("/api/settings/public/yatra_title/")

    assert response.status_code == 200
    assert response.json() == {"key": "yatra_title", "value": "SPIRITUAL NEPAL YATRA 2025", "type": "string"}


def test_public_setting_detail_missing(anonymous):
    assert anonymous.get("/api/settings/public/nope/").status_code == 404


def test_public_settings_ignore_stale_tokens(anonymous):
    anonymous.credentials(HTTP_AUTHORIZATION="Bearer not-a-token")
    assert anonymous.get("/api/settings/public/").status_code == 200


def test_admin_settings_require_staff(traveler_client):
    assert traveler_client.get("/api/settings/").status_code == 403


@pytest.mark.parametrize(
    "value, expected_type, expected_value",
    [
        ({"a": 1}, "json", {"a": 1}),
        ([1, 2], "json", [1, 2]),
        (False, "boolean", False),
        (2.5, "number", 2.5),
        (7, "number", 7),
        ("hello", "string", "hello"),
    ],
)
def test_put_infers_type_from_value(admin_client, value, expected_type, expected_value):
    response = admin_client.put("/api/settings/custom_key/", {"value": value}, format="json")

    assert response.status_code == 200
    setting = response.json()["setting"]
    assert setting["type"] == expected_type
    assert setting["value"] == expected_value


def test_put_keeps_declared_type_for_strings(admin_client):
    response = admin_client.put("/api/settings/flag/", {"value": "1", "type": "boolean"}, format="json")

    assert response.status_code == 200
    assert response.json()["setting"] == {"key": "flag", "value": True, "type": "boolean"}


def test_bulk_update_upserts_every_key(admin_client):
    response = admin_client.put(
        "/api/settings/",
        {"top_contributors_count": 5, "destination": "Pokhara", "extra": {"x": True}},
        format="json",
    )

    assert response.status_code == 200
    assert Setting.get_value("top_contributors_count") == 5
    assert Setting.get_value("destination") == "Pokhara"
    assert response.json()["settings"]["extra"] == {"x": True}


def test_bulk_update_rejects_empty_body(admin_client):
    assert admin_client.put("/api/settings/", {}, format="json").status_code == 400


def test_typed_value_edge_cases(db):
    assert Setting(key="n", value="abc", type=Setting.NUMBER).typed_value is None
    assert Setting(key="j", value="{broken", type=Setting.JSON).typed_value == "{broken"
    assert Setting(key="b", value="yes", type=Setting.BOOLEAN).typed_value is False
    assert Setting.get_value("missing", "fallback") == "fallback"
    assert Setting(key="nan", value="nan", type=Setting.NUMBER).typed_value is None
    assert Setting(key="inf", value="inf", type=Setting.NUMBER).typed_value is None
    assert Setting(key="huge", value="1e999", type=Setting.NUMBER).typed_value is None


def test_non_finite_number_reads_back_as_null(admin_client, anonymous):
    response = admin_client.put(
        "/api/settings/wake_factor/",
        {"value": "nan", "type": "number"},
        format="json",
    )

    assert response.status_code == 200
    assert response.json()["setting"]["value"] is None
    public = anonymous.get("/api/settings/public/")
    assert public.status_code == 200
    assert public.json()["wake_factor"] is None
