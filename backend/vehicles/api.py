import logging

from django.db.models import Count
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response

from core.permissions import IsAdmin, is_admin
from core.utils import parse_loose_date, parse_positive_int
from core.viewsets import MessageModelViewSet

from .models import Vehicle, VehicleAllotment
from .serializers import (
    BulkAllotmentSerializer,
    VehicleAllotmentSerializer,
    VehicleLocationSerializer,
    VehicleSerializer,
)

logger = logging.getLogger(__name__)


class VehicleViewSet(MessageModelViewSet):
    serializer_class = VehicleSerializer
    resource_name = "Vehicle"
    filterset_fields = ["status", "type"]
    search_fields = ["name", "reg_no", "driver_name", "group_leader_name"]

    def get_queryset(self):
        return Vehicle.objects.annotate(current_travelers=Count("travelers", distinct=True)).order_by("id")

    def get_permissions(self):
        if self.action in ("list", "retrieve", "location") or (
            self.action == "allotments" and self.request.method == "GET"
        ):
            return [permissions.IsAuthenticated()]
        return [IsAdmin()]

    @action(detail=True, methods=["post"])
    def location(self, request, pk=None):
        vehicle = get_object_or_404(Vehicle, pk=pk)
        if not is_admin(request.user) and not vehicle.is_led_by(request.user.email):
            return Response(
                {"detail": "Only admin or the assigned group leader can update location"},
                status=status.HTTP_403_FORBIDDEN,
            )
        serializer = VehicleLocationSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        vehicle.move_to(serializer.validated_data["lat"], serializer.validated_data["lng"])
        logger.info("Vehicle %s moved to %s,%s", vehicle.pk, vehicle.current_lat, vehicle.current_lng)
        return Response({"message": "Vehicle location updated successfully"})

    @action(detail=False, methods=["get", "delete"])
    def allotments(self, request):
        if request.method == "DELETE":
            return self._clear_allotments(request)

        queryset = VehicleAllotment.objects.select_related("traveler__user", "vehicle")
        params = request.query_params
        day = parse_loose_date(params.get("date"))
        if day:
            queryset = queryset.filter(date=day)
        vehicle_id = parse_positive_int(params.get("vehicleId"))
        if vehicle_id:
            queryset = queryset.filter(vehicle_id=vehicle_id)
        traveler_id = parse_positive_int(params.get("travelerId"))
        if traveler_id:
            queryset = queryset.filter(traveler_id=traveler_id)
        if not is_admin(request.user):
            queryset = queryset.filter(traveler__user=request.user)
        return Response(VehicleAllotmentSerializer(queryset, many=True).data)

    def _clear_allotments(self, request):
        day = parse_loose_date(request.query_params.get("date"))
        if not day:
            return Response({"detail": "date is required"}, status=status.HTTP_400_BAD_REQUEST)
        queryset = VehicleAllotment.objects.filter(date=day)
        vehicle_id = parse_positive_int(request.query_params.get("vehicleId"))
        if vehicle_id:
            queryset = queryset.filter(vehicle_id=vehicle_id)
        deleted, _ = queryset.delete()
        logger.info("Cleared %s vehicle allotments for %s", deleted, day)
        return Response({"date": day.isoformat(), "deleted": deleted})

    @action(detail=False, methods=["post"], url_path="allotments/bulk")
    def bulk_allotments(self, request):
        serializer = BulkAllotmentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        saved = serializer.save()
        day = serializer.validated_data["date"]
        logger.info("Saved %s vehicle allotments for %s", saved, day)
        return Response({"date": day.isoformat(), "saved": saved})
