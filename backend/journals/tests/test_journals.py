from datetime import date

from rest_framework.test import APIClient

from journals.models import JournalEntry


def test_create_returns_entry_with_string_id(traveler_client, traveler):
    response = traveler_client.post(
        "/api/journals/",
        {"date": "2025-12-15", "content": "Reached Kathmandu", "mood": "Peaceful"},
        format="json",
    )

    assert response.status_code == 201
    body = response.json()
    assert isinstance(body["id"], str)
    assert body["userEmail"] == traveler.email
    assert body["location"] == ""
    assert JournalEntry.objects.get(pk=int(body["id"])).owner == traveler.user


def test_duplicate_date_is_rejected(traveler_client, traveler):
    JournalEntry.objects.create(owner=traveler.user, entry_date=date(2025, 12, 15), content="First")

    response = traveler_client.post(
        "/api/journals/",
        {"date": "2025-12-15", "content": "Second"},
        format="json",
    )

    assert response.status_code == 400
    assert "date" in response.json()


def test_content_and_date_are_required(traveler_client):
    response = traveler_client.post("/api/journals/", {"mood": "Tired"}, format="json")

    assert response.status_code == 400
    assert {"date", "content"} <= set(response.json())


def test_entries_are_private_and_newest_first(traveler_client, traveler, make_traveler):
    other = make_traveler(email="kiran@example.com", first_name="Kiran")
    JournalEntry.objects.create(owner=traveler.user, entry_date=date(2025, 12, 14), content="Day one")
    JournalEntry.objects.create(owner=traveler.user, entry_date=date(2025, 12, 16), content="Day three")
    foreign = JournalEntry.objects.create(owner=other.user, entry_date=date(2025, 12, 15), content="Not mine")

    listing = traveler_client.get("/api/journals/")

    assert [row["date"] for row in listing.json()] == ["2025-12-16", "2025-12-14"]
    assert traveler_client.get(f"/api/journals/{foreign.pk}/").status_code == 404


def test_put_updates_only_sent_fields(traveler_client, traveler):
    entry = JournalEntry.objects.create(
        owner=traveler.user, entry_date=date(2025, 12, 14), content="Day one", mood="Happy"
    )

    response = traveler_client.put(f"/api/journals/{entry.pk}/", {"content": "Day one, revised"}, format="json")

    assert response.status_code == 200
    assert response.json()["content"] == "Day one, revised"
    entry.refresh_from_db()
    assert entry.mood == "Happy"


def test_delete_returns_message(traveler_client, traveler):
    entry = JournalEntry.objects.create(owner=traveler.user, entry_date=date(2025, 12, 14), content="Day one")

    response = traveler_client.delete(f"/api/journals/{entry.pk}/")

    assert response.status_code == 200
    assert response.json() == {"message": "Journal entry deleted successfully"}


def test_journals_require_authentication(db):
    assert APIClient().get("/api/journals/").status_code == 401
