import logging

from django.shortcuts import get_object_or_404
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response

from core.permissions import IsAdmin, is_admin

from .delivery import pending_for
from .models import Announcement
from .serializers import AnnouncementCreateSerializer, AnnouncementSerializer

logger = logging.getLogger(__name__)


class AnnouncementViewSet(
    mixins.ListModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    serializer_class = AnnouncementSerializer
    lookup_value_regex = r"\d+"
    filter_backends = []

    def get_queryset(self):
        return Announcement.objects.order_by("-created_at", "-id")

    def get_permissions(self):
        if self.action in ("pending", "user", "mine"):
            return [permissions.IsAuthenticated()]
        return [IsAdmin()]

    def create(self, request, *args, **kwargs):
        serializer = AnnouncementCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        announcement = serializer.save(created_by=request.user)
        logger.info(
            "Announcement %s created for %s by admin %s",
            announcement.pk,
            announcement.recipient_type,
            request.user.pk,
        )
        return Response(
            {"id": announcement.pk, "message": "Announcement created successfully"},
            status=status.HTTP_201_CREATED,
        )

    def destroy(self, request, *args, **kwargs):
        announcement = self.get_object()
        announcement.delete()
        return Response({"message": "Announcement deleted successfully"})

    @action(detail=False, methods=["get"])
    def pending(self, request):
        queryset = Announcement.objects.pending().order_by("-created_at", "-id")
        return Response(AnnouncementSerializer(queryset, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"user/(?P<email>[^/]+)")
    def user(self, request, email=None):
        if not is_admin(request.user) and email.strip().lower() != request.user.email.lower():
            raise PermissionDenied("You can only read your own announcements")
        return Response(AnnouncementSerializer(pending_for(email), many=True).data)

    @action(detail=False, methods=["get"])
    def mine(self, request):
        return Response(AnnouncementSerializer(pending_for(request.user.email), many=True).data)

    @action(detail=True, methods=["put"])
    def sent(self, request, pk=None):
        announcement = get_object_or_404(Announcement, pk=pk)
        announcement.mark_sent()
        logger.info("Announcement %s marked as sent", announcement.pk)
        return Response({"message": "Announcement marked as sent"})
