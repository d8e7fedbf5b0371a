import logging

from django.shortcuts import get_object_or_404
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from core.permissions import IsAdmin

from .models import Setting
from .serializers import BulkSettingsSerializer, SettingSerializer, SettingUpdateSerializer

logger = logging.getLogger(__name__)


class PublicSettingsView(APIView):
    """Settings the traveler app reads before anyone signs in."""

    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        return Response(Setting.as_dict())


class PublicSettingDetailView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, key, *args, **kwargs):
        setting = get_object_or_404(Setting, key=key)
        return Response(SettingSerializer(setting).data)


class SettingsView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, *args, **kwargs):
        return Response(Setting.as_dict())

    def put(self, request, *args, **kwargs):
        serializer = BulkSettingsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        saved = serializer.save()
        logger.info("Admin %s updated settings %s", request.user.pk, ", ".join(s.key for s in saved))
        return Response({"message": "Settings updated successfully", "settings": Setting.as_dict()})


class SettingDetailView(APIView):
    permission_classes = [IsAdmin]

    def get(self, request, key, *args, **kwargs):
        setting = get_object_or_404(Setting, key=key)
        return Response(SettingSerializer(setting).data)

    def put(self, request, key, *args, **kwargs):
        serializer = SettingUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        setting = Setting.put(
            key,
            serializer.validated_data["value"],
            serializer.validated_data.get("type"),
        )
        logger.info("Admin %s set %s (%s)", request.user.pk, setting.key, setting.type)
        return Response({"message": "Setting updated successfully", "setting": SettingSerializer(setting).data})
