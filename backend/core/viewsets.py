import logging

from rest_framework import status, viewsets
from rest_framework.response import Response

logger = logging.getLogger(__name__)

NO_FIELDS_TO_UPDATE = "No fields to update"


def no_fields_response() -> Response:
    return Response({"detail": NO_FIELDS_TO_UPDATE}, status=status.HTTP_400_BAD_REQUEST)


class MessageModelViewSet(viewsets.ModelViewSet):
    """
    ModelViewSet that answers writes with ``{id, message}`` bodies.

    Updates are always partial, and an update carrying no fields is rejected
    instead of silently succeeding.
    """

    resource_name = "Resource"
    read_serializer_class = None
    lookup_value_regex = r"\d+"

    def get_serializer_class(self):
        if self.read_serializer_class is not None and self.action in ("list", "retrieve"):
            return self.read_serializer_class
        return super().get_serializer_class()

    def get_read_serializer(self, *args, **kwargs):
        serializer_class = self.read_serializer_class or self.serializer_class
        kwargs.setdefault("context", self.get_serializer_context())
        return serializer_class(*args, **kwargs)

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        self.perform_create(serializer)
        instance = serializer.instance
        logger.info("%s %s created by user %s", self.resource_name, instance.pk, request.user.pk)
        return Response(
            {"id": instance.pk, "message": f"{self.resource_name} created successfully"},
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        if not request.data:
            return no_fields_response()
        instance = self.get_object()
        serializer = self.get_serializer(instance, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        self.perform_update(serializer)
        if getattr(instance, "_prefetched_objects_cache", None):
            # Children may have been replaced; drop the stale prefetch.
            instance._prefetched_objects_cache = {}
        return Response(
            {
                "message": f"{self.resource_name} updated successfully",
                self.response_key: self.get_read_serializer(serializer.instance).data,
            }
        )

    def destroy(self, request, *args, **kwargs):
        instance = self.get_object()
        pk = instance.pk
        self.perform_destroy(instance)
        logger.info("%s %s deleted by user %s", self.resource_name, pk, request.user.pk)
        return Response({"message": f"{self.resource_name} deleted successfully"})

    @property
    def response_key(self) -> str:
        return self.resource_name.lower().replace(" ", "_")
