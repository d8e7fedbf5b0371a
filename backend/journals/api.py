from rest_framework import permissions, status, viewsets
from rest_framework.response import Response

from .models import JournalEntry
from .serializers import JournalEntrySerializer


class JournalEntryViewSet(viewsets.ModelViewSet):
    """A traveler's own journal; entries of other travelers simply do not exist here."""

    serializer_class = JournalEntrySerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r"\d+"
    filter_backends = []

    def get_queryset(self):
        return (
            JournalEntry.objects.filter(owner=self.request.user)
            .select_related("owner")
            .order_by("-entry_date", "-created_at")
        )

    def perform_create(self, serializer):
        serializer.save(owner=self.request.user)

    def update(self, request, *args, **kwargs):
        kwargs["partial"] = True
        return super().update(request, *args, **kwargs)

    def destroy(self, request, *args, **kwargs):
        self.get_object().delete()
        return Response({"message": "Journal entry deleted successfully"}, status=status.HTTP_200_OK)
