from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

from announcements.delivery import pending_for
from announcements.models import Announcement
from vehicles.models import VehicleAllotment


def announce(recipient_type, value=None, **fields):
    return Announcement.objects.create(
        recipient_type=recipient_type,
        recipient_value=value,
        message=fields.pop("message", f"For {recipient_type}"),
        **fields,
    )


def test_create_normalizes_payload(admin_client):
    response = admin_client.post(
        "/api/announcements/",
        {
            "recipientType": "by-vehicle",
            "recipientValue": "3",
            "message": "  Bus leaves at six  ",
            "displayType": "popup",
            "timingType": "whenever",
        },
        format="json",
    )

    assert response.status_code == 201
    assert response.json()["message"] == "Announcement created successfully"
    announcement = Announcement.objects.get(pk=response.json()["id"])
    assert announcement.recipient_type == Announcement.SPECIFIC_VEHICLE
    assert announcement.recipient_value == "3"
    assert announcement.message == "Bus leaves at six"
    assert announcement.display_type == Announcement.NOTIFICATION
    assert announcement.timing_type == Announcement.INSTANT
    assert announcement.sent is False


def test_group_leader_alias_takes_first_recipient(admin_client):
    response = admin_client.post(
        "/api/announcements/",
        {"recipientType": "specific-group-leader", "recipients": ["leader@example.com"], "message": "Hi"},
        format="json",
    )

    assert response.status_code == 201
    announcement = Announcement.objects.get(pk=response.json()["id"])
    assert announcement.recipient_type == Announcement.SPECIFIC_TRAVELER
    assert announcement.recipient_value == "leader@example.com"


def test_all_travelers_stores_recipient_list(admin_client):
    response = admin_client.post(
        "/api/announcements/",
        {"recipientType": "all-travelers", "recipients": ["a@example.com", "b@example.com"], "message": "Hi"},
        format="json",
    )

    announcement = Announcement.objects.get(pk=response.json()["id"])
    assert announcement.recipients == ["a@example.com", "b@example.com"]
    assert announcement.recipient_value is None


@pytest.mark.parametrize(
    "payload",
    [
        {"recipientType": "all-travelers"},
        {"recipientType": "all-travelers", "message": "   "},
        {"message": "Hello"},
        {"recipientType": "everyone", "message": "Hello"},
        {"recipientType": "specific-traveler", "message": "Hello"},
        {"recipientType": "all-travelers", "message": "Hello", "timingType": "scheduled"},
        {"recipientType": "all-travelers", "message": "Hello", "timingType": "scheduled", "scheduledTime": "soon"},
    ],
)
def test_create_rejects_invalid_payloads(admin_client, payload):
    response = admin_client.post("/api/announcements/", payload, format="json")
    assert response.status_code == 400


def test_travelers_cannot_create_or_list(traveler_client):
    assert traveler_client.get("/api/announcements/").status_code == 403
    response = traveler_client.post(
        "/api/announcements/",
        {"recipientType": "all-travelers", "message": "Hi"},
        format="json",
    )
    assert response.status_code == 403


def test_pending_requires_authentication(db):
    assert APIClient().get("/api/announcements/pending/").status_code == 401


def test_pending_only_returns_due_unsent(traveler_client):
    due = announce(Announcement.ALL_TRAVELERS)
    announce(Announcement.ALL_TRAVELERS, sent=True)
    announce(
        Announcement.ALL_TRAVELERS,
        timing_type=Announcement.SCHEDULED,
        scheduled_time=timezone.now() + timedelta(hours=1),
    )
    past = announce(
        Announcement.ALL_TRAVELERS,
        timing_type=Announcement.SCHEDULED,
        scheduled_time=timezone.now() - timedelta(minutes=5),
    )

    response = traveler_client.get("/api/announcements/pending/")

    assert response.status_code == 200
    assert sorted(row["id"] for row in response.json()) == sorted([due.pk, past.pk])


def test_delivery_matches_recipients(traveler, make_vehicle):
    bus = make_vehicle()
    van = make_vehicle(name="Van", capacity=10, group_leader_email=traveler.email)
    other_van = make_vehicle(name="Jeep", capacity=5)
    traveler.vehicle = bus
    traveler.save()
    VehicleAllotment.objects.create(traveler=traveler, vehicle=van, date=timezone.localdate())

    everyone = announce(Announcement.ALL_TRAVELERS)
    by_email = announce(Announcement.SPECIFIC_TRAVELER, traveler.email.upper())
    announce(Announcement.SPECIFIC_TRAVELER, "kiran@example.com")
    base_vehicle = announce(Announcement.SPECIFIC_VEHICLE, str(bus.pk))
    allotted_vehicle = announce(Announcement.SPECIFIC_VEHICLE, str(van.pk))
    announce(Announcement.SPECIFIC_VEHICLE, str(other_van.pk))
    leaders = announce(Announcement.ALL_GROUP_LEADERS)

    received = {announcement.pk for announcement in pending_for(traveler.email)}

    assert received == {everyone.pk, by_email.pk, base_vehicle.pk, allotted_vehicle.pk, leaders.pk}


def test_group_leader_announcements_skip_non_leaders(traveler):
    announce(Announcement.ALL_GROUP_LEADERS)
    assert pending_for(traveler.email) == []


def test_user_endpoint_is_self_or_admin(traveler_client, admin_client, traveler):
    announce(Announcement.SPECIFIC_TRAVELER, traveler.email)

    own = traveler_client.get(f"/api/announcements/user/{traveler.email}/")
    foreign = traveler_client.get("/api/announcements/user/kiran@example.com/")
    as_admin = admin_client.get(f"/api/announcements/user/{traveler.email}/")

    assert own.status_code == 200
    assert len(own.json()) == 1
    assert own.json()[0]["recipientType"] == Announcement.SPECIFIC_TRAVELER
    assert foreign.status_code == 403
    assert len(as_admin.json()) == 1


def test_mine_returns_callers_announcements(traveler_client, traveler):
    announce(Announcement.SPECIFIC_TRAVELER, traveler.email, message="Your room is 204")

    response = traveler_client.get("/api/announcements/mine/")

    assert [row["message"] for row in response.json()] == ["Your room is 204"]


def test_mark_sent_and_delete(admin_client):
    announcement = announce(Announcement.ALL_TRAVELERS)

    sent = admin_client.put(f"/api/announcements/{announcement.pk}/sent/")
    announcement.refresh_from_db()
    assert sent.status_code == 200
    assert announcement.sent is True
    assert announcement.sent_at is not None

    assert admin_client.put("/api/announcements/9999/sent/").status_code == 404
    assert admin_client.delete(f"/api/announcements/{announcement.pk}/").status_code == 200
    assert not Announcement.objects.exists()
