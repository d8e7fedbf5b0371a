from datetime import timedelta

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction
from django.utils import timezone

from accounts.models import User
from announcements.models import Announcement
from hotels.models import Hotel, RoomAllotment, RoomPair, RoomPairMember
from itinerary.models import ItineraryActivity, ItineraryDay
from travelers.models import Traveler
from vehicles.models import Vehicle


SEED_PASSWORD = "Yatra123!"
ADMIN_EMAIL = "admin@yatra.test"
ADMIN_PASSWORD = "AdminYatra123!"

VEHICLES = [
    {
        "name": "Bus 1",
        "type": "Bus",
        "capacity": 40,
        "reg_no": "GJ01AB1234",
        "group_leader_email": "leader1@yatra.test",
        "group_leader_name": "Rakesh Shah",
        "driver_name": "Mahesh",
        "driver_phone": "9800000001",
        "color": "#FF9933",
    },
    {
        "name": "Tempo Traveller",
        "type": "Tempo",
        "capacity": 12,
        "reg_no": "GJ01CD5678",
        "group_leader_email": "leader2@yatra.test",
        "group_leader_name": "Nisha Mehta",
        "driver_name": "Suresh",
        "driver_phone": "9800000002",
        "color": "#138808",
    },
]

TRAVELERS = [
    ("leader1@yatra.test", "Rakesh", "Shah", "Ahmedabad", "Bus 1"),
    ("leader2@yatra.test", "Nisha", "Mehta", "Mumbai", "Tempo Traveller"),
    ("asha@yatra.test", "Asha", "Patel", "Vadodara", "Bus 1"),
    ("kiran@yatra.test", "Kiran", "Desai", "Surat", "Bus 1"),
    ("meera@yatra.test", "Meera", "Joshi", "Pune", "Tempo Traveller"),
]

ITINERARY = [
    (1, "Ahmedabad", "Gujarat", 23.0225, 72.5714, [("06:00", "Departure"), ("13:00", "Lunch at Himmatnagar")]),
    (2, "Ambaji", "Gujarat", 24.3333, 72.8500, [("07:00", "Darshan"), ("16:00", "Gabbar hill")]),
    (3, "Mount Abu", "Rajasthan", 24.5926, 72.7156, [("08:00", "Dilwara temples"), ("18:00", "Sunset point")]),
]


class Command(BaseCommand):
    help = "Populate the local development database with sample yatra data."

    def handle(self, *args, **options):
        if not settings.DEBUG:
            raise CommandError("Refusing to seed data while DEBUG is False.")

        start = timezone.localdate() + timedelta(days=7)
        with transaction.atomic():
            self.stdout.write(self.style.MIGRATE_HEADING("Creating admin"))
            self._ensure_admin()

            self.stdout.write(self.style.MIGRATE_HEADING("Creating vehicles"))
            vehicles = {spec["name"]: self._ensure_vehicle(spec) for spec in VEHICLES}

            self.stdout.write(self.style.MIGRATE_HEADING("Creating travelers"))
            travelers = []
            for email, first_name, last_name, city, vehicle_name in TRAVELERS:
                travelers.append(
                    self._ensure_traveler(
                        email=email,
                        first_name=first_name,
                        last_name=last_name,
                        city=city,
                        vehicle=vehicles[vehicle_name],
                    )
                )

            self.stdout.write(self.style.MIGRATE_HEADING("Creating itinerary"))
            for day, place, state, lat, lng, activities in ITINERARY:
                self._ensure_itinerary_day(day, start + timedelta(days=day - 1), place, state, lat, lng, activities)

            self.stdout.write(self.style.MIGRATE_HEADING("Creating hotel and rooms"))
            self._ensure_hotel(start, travelers)

            self.stdout.write(self.style.MIGRATE_HEADING("Creating announcements"))
            self._ensure_announcements(vehicles["Bus 1"])

        self.stdout.write(self.style.SUCCESS("Development data ready."))
        self.stdout.write(f"Admin login: {ADMIN_EMAIL} / {ADMIN_PASSWORD}")
        self.stdout.write(f"Traveler password: {SEED_PASSWORD}")

    def _ensure_admin(self) -> User:
        user = User.objects.get_by_email(ADMIN_EMAIL)
        if user is None:
            user = User.objects.create_user_for_email(
                ADMIN_EMAIL,
                password=ADMIN_PASSWORD,
                display_name="Yatra Admin",
                is_staff=True,
                is_superuser=True,
            )
            self.stdout.write(self.style.NOTICE(f"Created admin {ADMIN_EMAIL}"))
        elif not user.is_staff:
            user.is_staff = True
            user.save(update_fields=["is_staff"])
        return user

    def _ensure_vehicle(self, spec: dict) -> Vehicle:
        defaults = dict(spec)
        reg_no = defaults.pop("reg_no")
        vehicle, _ = Vehicle.objects.update_or_create(reg_no=reg_no, defaults=defaults)
        return vehicle

    def _ensure_traveler(self, *, email, first_name, last_name, city, vehicle) -> Traveler:
        user = User.objects.get_by_email(email)
        if user is None:
            user = User.objects.create_user_for_email(
                email,
                password=SEED_PASSWORD,
                first_name=first_name,
                last_name=last_name,
            )
        traveler, created = Traveler.objects.update_or_create(
            user=user,
            defaults={
                "first_name": first_name,
                "last_name": last_name,
                "city": city,
                "vehicle": vehicle,
            },
        )
        if created:
            self.stdout.write(self.style.NOTICE(f"Added traveler {email} to {vehicle.name}"))
        return traveler

    def _ensure_itinerary_day(self, day, date, place, state, lat, lng, activities) -> ItineraryDay:
        itinerary_day, _ = ItineraryDay.objects.update_or_create(
            day=day,
            defaults={
                "date": date,
                "place": place,
                "city": place,
                "state": state,
                "lat": lat,
                "lng": lng,
                "description": f"Day {day} at {place}.",
            },
        )
        itinerary_day.activities.all().delete()
        ItineraryActivity.objects.bulk_create(
            [
                ItineraryActivity(itinerary_day=itinerary_day, time=time, activity=text, display_order=position)
                for position, (time, text) in enumerate(activities)
            ]
        )
        return itinerary_day

    def _ensure_hotel(self, start, travelers) -> Hotel:
        hotel, _ = Hotel.objects.update_or_create(
            name="Hotel Hilltone",
            defaults={
                "city": "Mount Abu",
                "state": "Rajasthan",
                "country": "India",
                "total_floors": 3,
                "total_rooms": 40,
                "check_in_date": start + timedelta(days=2),
                "check_out_date": start + timedelta(days=3),
            },
        )
        night = hotel.check_in_date
        RoomAllotment.objects.filter(hotel=hotel, date=night).delete()
        for index in range(0, len(travelers) - 1, 2):
            pair_no = index // 2 + 1
            pair, _ = RoomPair.objects.get_or_create(pair_no=pair_no)
            for traveler in travelers[index:index + 2]:
                RoomPairMember.objects.update_or_create(traveler=traveler, defaults={"pair": pair})
                RoomAllotment.objects.create(
                    hotel=hotel,
                    traveler=traveler,
                    date=night,
                    floor="1",
                    room=str(100 + pair_no),
                    pair_no=pair_no,
                )
        return hotel

    def _ensure_announcements(self, vehicle: Vehicle):
        Announcement.objects.get_or_create(
            recipient_type=Announcement.ALL_TRAVELERS,
            message="Welcome to the yatra! Please keep your ID card with you.",
            defaults={"display_type": Announcement.BANNER},
        )
        Announcement.objects.get_or_create(
            recipient_type=Announcement.SPECIFIC_VEHICLE,
            recipient_value=str(vehicle.pk),
            message=f"{vehicle.name} departs at 6:00 AM sharp.",
        )
