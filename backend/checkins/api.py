import logging

from django.shortcuts import get_object_or_404
from django.utils import timezone
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from core.permissions import IsAdmin, is_admin
from core.utils import date_or_today, parse_bool, parse_positive_int
from travelers.models import Traveler
from vehicles.models import Vehicle, vehicle_for_traveler_on

from .models import CheckIn
from .serializers import CheckInCreateSerializer, CheckInSerializer

logger = logging.getLogger(__name__)

INVALID_VEHICLE_ID = "Invalid vehicle ID"


class CheckInViewSet(mixins.ListModelMixin, viewsets.GenericViewSet):
    serializer_class = CheckInSerializer
    lookup_value_regex = r"\d+"
    filter_backends = []

    def get_queryset(self):
        queryset = CheckIn.objects.select_related("vehicle", "traveler")
        params = self.request.query_params
        vehicle_id = parse_positive_int(params.get("vehicleId"))
        if vehicle_id:
            queryset = queryset.filter(vehicle_id=vehicle_id)
        if params.get("active") is not None:
            queryset = queryset.filter(active=parse_bool(params.get("active")))
        if params.get("travelerEmail"):
            queryset = queryset.for_email(params["travelerEmail"])
        return queryset.order_by("-checked_in_at", "-id")

    def get_permissions(self):
        if self.action in ("create", "my_status", "checkout"):
            return [permissions.IsAuthenticated()]
        return [IsAdmin()]

    def create(self, request, *args, **kwargs):
        serializer = CheckInCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        vehicle_id = serializer.validated_data["vehicleId"]
        email = serializer.validated_data["travelerEmail"]

        if not is_admin(request.user) and request.user.email.lower() != email:
            return Response(
                {"detail": "You can only check in yourself"},
                status=status.HTTP_403_FORBIDDEN,
            )

        vehicle = get_object_or_404(Vehicle, pk=vehicle_id)
        if CheckIn.objects.active().for_email(email).filter(vehicle=vehicle).exists():
            return Response({"detail": "Already checked in"}, status=status.HTTP_400_BAD_REQUEST)

        traveler = None
        traveler_id = serializer.validated_data.get("travelerId")
        if traveler_id:
            traveler = Traveler.objects.filter(pk=traveler_id).first()
        if traveler is None:
            traveler = Traveler.objects.filter(user__email__iexact=email).first()

        check_in = CheckIn.objects.create(vehicle=vehicle, traveler_email=email, traveler=traveler)
        logger.info("%s checked in to vehicle %s", email, vehicle.pk)
        return Response(
            {"id": check_in.pk, "message": "Checked in successfully"},
            status=status.HTTP_201_CREATED,
        )

    @action(detail=False, methods=["get"], url_path="my-status")
    def my_status(self, request):
        day = date_or_today(request.query_params.get("date"))
        traveler = Traveler.objects.select_related("vehicle").filter(user=request.user).first()
        vehicle = vehicle_for_traveler_on(traveler, day) if traveler else None
        if vehicle is None:
            return Response({"vehicleId": None, "active": False, "checkedIn": [], "isCheckedIn": False})

        email = request.user.email
        is_checked_in = CheckIn.objects.active().for_email(email).filter(vehicle=vehicle).exists()
        return Response(
            {
                "vehicleId": vehicle.pk,
                "active": True,
                "checkedIn": [email] if is_checked_in else [],
                "isCheckedIn": is_checked_in,
            }
        )

    @action(detail=False, methods=["get", "delete"], url_path=r"vehicle/(?P<vehicle_id>[^/.]+)")
    def vehicle(self, request, vehicle_id=None):
        parsed_id = parse_positive_int(vehicle_id)
        if parsed_id is None:
            return Response({"detail": INVALID_VEHICLE_ID}, status=status.HTTP_400_BAD_REQUEST)
        if request.method == "DELETE":
            return self._clear_vehicle(parsed_id)
        return Response(self._vehicle_roster(parsed_id, request.query_params.get("active")))

    def _vehicle_roster(self, vehicle_id: int, active_param) -> dict:
        records = CheckIn.objects.filter(vehicle_id=vehicle_id).select_related("traveler")
        if active_param is not None:
            records = records.filter(active=parse_bool(active_param))

        # Newest record per email decides the status.
        latest = {}
        for record in records.order_by("-checked_in_at", "-id"):
            latest.setdefault(record.traveler_email.lower(), record)

        travelers = Traveler.objects.filter(vehicle_id=vehicle_id).select_related("user").order_by("first_name", "last_name")
        roster = []
        seen = set()
        for traveler in travelers:
            email = traveler.email
            record = latest.get(email.lower())
            seen.add(email.lower())
            roster.append(
                {
                    "email": email,
                    "name": traveler.name,
                    "checkedIn": bool(record and record.active),
                    "timestamp": record.checked_in_at if record else None,
                }
            )
        for email, record in latest.items():
            if email in seen:
                continue
            roster.append(
                {
                    "email": record.traveler_email,
                    "name": record.traveler.name if record.traveler else "",
                    "checkedIn": record.active,
                    "timestamp": record.checked_in_at,
                }
            )

        return {
            "vehicleId": vehicle_id,
            "active": travelers.exists(),
            "checkedIn": [entry["email"] for entry in roster if entry["checkedIn"]],
            "travelers": roster,
        }

    def _clear_vehicle(self, vehicle_id: int) -> Response:
        cleared = CheckIn.objects.active().filter(vehicle_id=vehicle_id).update(
            active=False,
            checked_out_at=timezone.now(),
        )
        logger.info("Cleared %s active check-ins on vehicle %s", cleared, vehicle_id)
        return Response({"message": "All check-ins cleared for vehicle", "cleared": cleared})

    @action(detail=True, methods=["post"])
    def checkout(self, request, pk=None):
        check_in = get_object_or_404(CheckIn, pk=pk)
        if not is_admin(request.user) and check_in.traveler_email.lower() != request.user.email.lower():
            return Response(
                {"detail": "You can only check out yourself"},
                status=status.HTTP_403_FORBIDDEN,
            )
        check_in.check_out()
        logger.info("%s checked out of vehicle %s", check_in.traveler_email, check_in.vehicle_id)
        return Response({"message": "Checked out successfully"})
