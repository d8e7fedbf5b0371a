import logging

from django.http import JsonResponse
from rest_framework import permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response

from core.permissions import IsAdmin, IsAdminOrReadOnly, is_admin
from core.utils import date_or_today, parse_loose_date, parse_positive_int
from core.viewsets import MessageModelViewSet

from .models import Hotel, RoomAllotment, RoomPair
from .serializers import (
    BulkRoomAllotmentSerializer,
    HotelSerializer,
    RoomAllotmentSerializer,
    RoomAllotmentWriteSerializer,
    RoomPairSerializer,
)

logger = logging.getLogger(__name__)


class HotelViewSet(MessageModelViewSet):
    serializer_class = HotelSerializer
    resource_name = "Hotel"
    search_fields = ["name", "city"]

    def get_queryset(self):
        return Hotel.objects.order_by("check_in_date", "id")

    def get_permissions(self):
        if self.action in ("list", "retrieve", "my_room") or (
            self.action == "allotments" and self.request.method == "GET"
        ):
            return [permissions.IsAuthenticated()]
        return [IsAdmin()]

    @action(detail=False, methods=["get", "post", "delete"])
    def allotments(self, request):
        if request.method == "POST":
            return self._save_allotments(request)
        if request.method == "DELETE":
            return self._clear_allotments(request)

        queryset = RoomAllotment.objects.select_related("hotel", "traveler__user")
        params = request.query_params
        hotel_id = parse_positive_int(params.get("hotelId"))
        if hotel_id:
            queryset = queryset.filter(hotel_id=hotel_id)
        day = parse_loose_date(params.get("date"))
        if day:
            queryset = queryset.filter(date=day)
        traveler_id = parse_positive_int(params.get("travelerId"))
        if traveler_id:
            queryset = queryset.filter(traveler_id=traveler_id)
        if not is_admin(request.user):
            queryset = queryset.filter(traveler__user=request.user)
        return Response(RoomAllotmentSerializer(queryset, many=True).data)

    def _save_allotments(self, request):
        if "allotments" in request.data:
            serializer = BulkRoomAllotmentSerializer(data=request.data)
            serializer.is_valid(raise_exception=True)
            saved = serializer.save()
            hotel = serializer.validated_data["hotel"]
            day = serializer.validated_data["date"]
            logger.info("Saved %s room allotments for hotel %s on %s", saved, hotel.pk, day)
            return Response({"hotelId": hotel.pk, "date": day.isoformat(), "saved": saved})

        serializer = RoomAllotmentWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        allotment = serializer.save()
        logger.info("Room allotment %s created for traveler %s", allotment.pk, allotment.traveler_id)
        return Response(
            {"id": allotment.pk, "message": "Room allotment created successfully"},
            status=status.HTTP_201_CREATED,
        )

    def _clear_allotments(self, request):
        hotel_id = parse_positive_int(request.query_params.get("hotelId"))
        day = parse_loose_date(request.query_params.get("date"))
        if not hotel_id or not day:
            return Response({"detail": "hotelId and date are required"}, status=status.HTTP_400_BAD_REQUEST)
        deleted, _ = RoomAllotment.objects.filter(hotel_id=hotel_id, date=day).delete()
        logger.info("Cleared %s room allotments for hotel %s on %s", deleted, hotel_id, day)
        return Response({"hotelId": hotel_id, "date": day.isoformat(), "deleted": deleted})

    @action(detail=False, methods=["get"], url_path="my-room")
    def my_room(self, request):
        day = date_or_today(request.query_params.get("date"))
        allotment = (
            RoomAllotment.objects.select_related("hotel", "traveler__user")
            .filter(traveler__user=request.user, date=day)
            .order_by("-updated_at", "-id")
            .first()
        )
        if allotment is None:
            return JsonResponse(None, safe=False)
        return Response(RoomAllotmentSerializer(allotment).data)


class RoomPairViewSet(MessageModelViewSet):
    serializer_class = RoomPairSerializer
    permission_classes = [IsAdminOrReadOnly]
    resource_name = "Room pair"
    filter_backends = []

    def get_queryset(self):
        return RoomPair.objects.prefetch_related("members__traveler__user")
