from core.permissions import IsAdminOrReadOnly
from core.viewsets import MessageModelViewSet

from .models import ItineraryDay
from .serializers import ItineraryDaySerializer, ItineraryDayWriteSerializer


class ItineraryDayViewSet(MessageModelViewSet):
    """Day-by-day plan of the yatra; everyone reads, admins edit."""

    serializer_class = ItineraryDayWriteSerializer
    read_serializer_class = ItineraryDaySerializer
    permission_classes = [IsAdminOrReadOnly]
    resource_name = "Itinerary day"
    filterset_fields = ["day", "date", "city"]
    search_fields = ["place", "city", "description"]

    def get_queryset(self):
        return ItineraryDay.objects.prefetch_related("activities", "images").order_by("day", "id")
