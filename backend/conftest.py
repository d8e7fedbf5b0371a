"""Shared fixtures: API clients, an admin, and traveler/vehicle factories."""

import pytest
from rest_framework.test import APIClient

from accounts.models import User
from travelers.models import Traveler
from vehicles.models import Vehicle

PASSWORD = "yatra-pass"


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def admin_user(db):
    return User.objects.create_user_for_email(
        "admin@example.com",
        password=PASSWORD,
        display_name="Yatra Admin",
        is_staff=True,
    )


@pytest.fixture
def admin_client(admin_user):
    api_client = APIClient()
    api_client.force_authenticate(admin_user)
    return api_client


@pytest.fixture
def make_vehicle(db):
    def factory(**overrides):
        fields = {"name": "Bus 1", "type": "Bus", "capacity": 40}
        fields.update(overrides)
        return Vehicle.objects.create(**fields)

    return factory


@pytest.fixture
def make_traveler(db):
    def factory(email="asha@example.com", first_name="Asha", last_name="Patel", **overrides):
        user = User.objects.create_user_for_email(email, password=PASSWORD)
        return Traveler.objects.create(user=user, first_name=first_name, last_name=last_name, **overrides)

    return factory


@pytest.fixture
def traveler(make_traveler):
    return make_traveler()


@pytest.fixture
def traveler_client(traveler):
    api_client = APIClient()
    api_client.force_authenticate(traveler.user)
    return api_client
