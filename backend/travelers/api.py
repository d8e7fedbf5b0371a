import logging

from django.conf import settings
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status
from rest_framework.decorators import action
from rest_framework.exceptions import PermissionDenied
from rest_framework.response import Response

from accounts.tokens import issue_tokens_for
from core.permissions import IsAdmin, is_admin
from core.viewsets import MessageModelViewSet, no_fields_response

from .models import Traveler
from .serializers import (
    TravelerLoginSerializer,
    TravelerPublicSerializer,
    TravelerSerializer,
    TravelerSummarySerializer,
)

logger = logging.getLogger(__name__)

ADMIN_ONLY_FIELDS = ("tirthId", "vehicleId")


class TravelerViewSet(MessageModelViewSet):
    serializer_class = TravelerSerializer
    resource_name = "Traveler"
    filterset_fields = ["vehicle", "gender", "hoodi_size", "center"]
    search_fields = ["first_name", "last_name", "user__email", "tirth_id", "city"]

    def get_queryset(self):
        return Traveler.objects.select_related("user", "vehicle").order_by("id")

    def get_permissions(self):
        if self.action == "login":
            return [permissions.AllowAny()]
        if self.action in ("retrieve", "update", "partial_update", "public", "by_email"):
            return [permissions.IsAuthenticated()]
        return [IsAdmin()]

    def _ensure_self_or_admin(self, traveler: Traveler):
        user = self.request.user
        if not is_admin(user) and traveler.user_id != user.pk:
            raise PermissionDenied("You can only access your own profile")

    def retrieve(self, request, *args, **kwargs):
        traveler = self.get_object()
        self._ensure_self_or_admin(traveler)
        return Response(self.get_serializer(traveler).data)

    def update(self, request, *args, **kwargs):
        if not request.data:
            return no_fields_response()
        traveler = self.get_object()
        self._ensure_self_or_admin(traveler)
        if not is_admin(request.user):
            blocked = [field for field in ADMIN_ONLY_FIELDS if field in request.data]
            if blocked:
                raise PermissionDenied(f"Only admins can change {', '.join(blocked)}")
        return super().update(request, *args, **kwargs)

    def perform_destroy(self, instance):
        # The login goes with the profile.
        instance.user.delete()

    @action(detail=False, methods=["get"])
    def public(self, request):
        queryset = self.get_queryset().order_by("first_name", "last_name")
        return Response(TravelerPublicSerializer(queryset, many=True).data)

    @action(detail=False, methods=["get"], url_path=r"email/(?P<email>[^/]+)")
    def by_email(self, request, email=None):
        email = (email or "").strip()
        if not is_admin(request.user) and request.user.email.lower() != email.lower():
            return Response(
                {"detail": "You can only access your own information"},
                status=status.HTTP_403_FORBIDDEN,
            )
        traveler = get_object_or_404(self.get_queryset(), user__email__iexact=email)
        return Response(TravelerSummarySerializer(traveler).data)

    @action(detail=False, methods=["post"])
    def login(self, request):
        serializer = TravelerLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        traveler = serializer.validated_data["traveler"]
        tokens = issue_tokens_for(traveler.user, lifetime=settings.TRAVELER_TOKEN_LIFETIME)
        logger.info("Traveler %s signed in", traveler.pk)
        return Response(
            {
                "token": tokens["token"],
                "refresh": tokens["refresh"],
                "traveler": TravelerSerializer(traveler).data,
                "expiresIn": tokens["expiresIn"],
            }
        )
