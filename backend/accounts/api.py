import logging

from django.contrib.auth import get_user_model
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework_simplejwt.views import TokenRefreshView

from core.permissions import IsAdmin

from .serializers import (
    AdminLoginSerializer,
    AdminProfileSerializer,
    AdminProfileUpdateSerializer,
    AdminSummarySerializer,
    MeSerializer,
    RoleAwareRefreshSerializer,
)
from .tokens import issue_tokens_for

logger = logging.getLogger(__name__)

User = get_user_model()


class AdminLoginView(APIView):
    """Exchange staff credentials for a short-lived admin token."""

    permission_classes = [AllowAny]

    def post(self, request, *args, **kwargs):
        serializer = AdminLoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]
        logger.info("Admin %s signed in", user.pk)
        tokens = issue_tokens_for(user)
        return Response(
            {
                "token": tokens["token"],
                "refresh": tokens["refresh"],
                "admin": AdminSummarySerializer(user).data,
                "expiresIn": tokens["expiresIn"],
            }
        )


class AdminProfileView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, *args, **kwargs):
        email = (request.query_params.get("email") or "").strip()
        user = request.user
        if email:
            user = get_object_or_404(User, email__iexact=email, is_staff=True)
        return Response(AdminProfileSerializer(user).data)

    def put(self, request, *args, **kwargs):
        if not request.data:
            return Response({"detail": "No fields to update"}, status=status.HTTP_400_BAD_REQUEST)
        serializer = AdminProfileUpdateSerializer(
            instance=request.user, data=request.data, partial=True
        )
        serializer.is_valid(raise_exception=True)
        user = serializer.save()
        return Response(
            {
                "message": "Profile updated successfully",
                "admin": AdminProfileSerializer(user).data,
            }
        )

    patch = put


class MeView(APIView):
    """Return the identity behind the current token."""

    def get(self, request, *args, **kwargs):
        return Response(MeSerializer(request.user).data)


class RefreshView(TokenRefreshView):
    serializer_class = RoleAwareRefreshSerializer
