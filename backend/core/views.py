from django.http import JsonResponse
from django.utils import timezone
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        return Response(
            {
                "status": "ok",
                "message": "Yatra API Server is running",
                "timestamp": timezone.now().isoformat(),
            }
        )


def not_found(request, exception=None):
    return JsonResponse(
        {"detail": f"Route {request.method} {request.path} not found"},
        status=404,
    )
