import logging

from django.contrib.auth import get_user_model
from django.db.models import Count, Q
from django.shortcuts import get_object_or_404
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response
from rest_framework.views import APIView

from appsettings.models import Setting
from core.permissions import IsAdmin, IsAdminOrReadOnly, is_admin
from core.utils import parse_bool, parse_positive_int
from core.viewsets import MessageModelViewSet
from travelers.models import Traveler

from .models import Post, PostSection, Tag
from .serializers import PostSectionSerializer, PostSerializer, PostWriteSerializer, TagCreateSerializer

logger = logging.getLogger(__name__)

User = get_user_model()

DEFAULT_TOP_CONTRIBUTORS = 10


class PostViewSet(viewsets.ModelViewSet):
    serializer_class = PostSerializer
    permission_classes = [permissions.IsAuthenticated]
    lookup_value_regex = r"\d+"
    filter_backends = []

    def get_queryset(self):
        return Post.objects.select_related("section").prefetch_related("media", "tags")

    def get_permissions(self):
        if self.action == "approve":
            return [IsAdmin()]
        return super().get_permissions()

    def _ensure_author_or_admin(self, post: Post, verb: str):
        if not is_admin(self.request.user) and not post.is_authored_by(self.request.user):
            return Response(
                {"detail": f"You can only {verb} your own posts"},
                status=status.HTTP_403_FORBIDDEN,
            )
        return None

    def list(self, request, *args, **kwargs):
        params = request.query_params
        queryset = self.get_queryset()
        if is_admin(request.user):
            if params.get("approved") is not None:
                queryset = queryset.filter(approved=parse_bool(params["approved"]))
        else:
            queryset = queryset.approved().filter(
                Q(is_private=False) | Q(author_email__iexact=request.user.email)
            )

        section_id = parse_positive_int(params.get("section"))
        if section_id:
            queryset = queryset.filter(section_id=section_id)
        if params.get("author"):
            queryset = queryset.by_author(params["author"])

        queryset = queryset.order_by("-created_at", "-id")
        limit = parse_positive_int(params.get("limit"))
        if limit:
            offset = parse_positive_int(params.get("offset")) or 0
            queryset = queryset[offset:offset + limit]
        return Response(PostSerializer(queryset, many=True).data)

    def retrieve(self, request, *args, **kwargs):
        post = get_object_or_404(self.get_queryset(), pk=kwargs["pk"])
        if not is_admin(request.user) and not post.is_authored_by(request.user):
            if not post.approved or post.is_private:
                return Response({"detail": "Post not available"}, status=status.HTTP_403_FORBIDDEN)
        return Response(PostSerializer(post).data)

    def create(self, request, *args, **kwargs):
        serializer = PostWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        author_email = (data.get("authorEmail") or data.get("email") or request.user.email).strip().lower()
        admin = is_admin(request.user)
        if not admin and author_email != request.user.email.lower():
            return Response(
                {"detail": "You can only create posts for yourself"},
                status=status.HTTP_403_FORBIDDEN,
            )

        author_user = User.objects.filter(email__iexact=author_email).first()
        post = serializer.save(author_email=author_email, author_user=author_user, can_approve=admin)
        logger.info("Post %s created by %s (approved=%s)", post.pk, author_email, post.approved)
        return Response(
            {
                "id": post.pk,
                "message": "Post created successfully",
                "approved": post.approved,
                "isPrivate": post.is_private,
            },
            status=status.HTTP_201_CREATED,
        )

    def update(self, request, *args, **kwargs):
        post = get_object_or_404(Post, pk=kwargs["pk"])
        denied = self._ensure_author_or_admin(post, "update")
        if denied:
            return denied
        serializer = PostWriteSerializer(post, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save(can_approve=is_admin(request.user))
        return Response({"message": "Post updated successfully"})

    def destroy(self, request, *args, **kwargs):
        post = get_object_or_404(Post, pk=kwargs["pk"])
        denied = self._ensure_author_or_admin(post, "delete")
        if denied:
            return denied
        post.delete()
        logger.info("Post %s deleted by user %s", kwargs["pk"], request.user.pk)
        return Response({"message": "Post deleted successfully"})

    @action(detail=True, methods=["patch"])
    def approve(self, request, pk=None):
        post = get_object_or_404(Post, pk=pk)
        post.approved = parse_bool(request.data.get("approved"))
        post.save(update_fields=["approved", "updated_at"])
        verdict = "approved" if post.approved else "disapproved"
        logger.info("Post %s %s by admin %s", post.pk, verdict, request.user.pk)
        return Response(
            {
                "message": f"Post {verdict} successfully",
                "post": {
                    "id": post.pk,
                    "approved": post.approved,
                    "isPrivate": post.is_private,
                    "author_email": post.author_email,
                    "place": post.place,
                },
            }
        )

    @action(detail=False, methods=["get"])
    def contributors(self, request):
        limit = parse_positive_int(Setting.get_value("top_contributors_count", DEFAULT_TOP_CONTRIBUTORS))
        hidden = list(
            User.objects.filter(is_staff=True, include_in_contributors=False).values_list("email", flat=True)
        )
        ranked = (
            Post.objects.approved()
            .exclude(author_email__in=hidden)
            .values("author_email")
            .annotate(post_count=Count("id"))
            .order_by("-post_count", "author_email")
        )[: limit or DEFAULT_TOP_CONTRIBUTORS]

        emails = [row["author_email"] for row in ranked]
        travelers = {
            traveler.email.lower(): traveler
            for traveler in Traveler.objects.select_related("user").filter(user__email__in=emails)
        }
        users = {user.email.lower(): user for user in User.objects.filter(email__in=emails)}

        contributors = []
        for row in ranked:
            email = row["author_email"]
            traveler = travelers.get(email.lower())
            user = users.get(email.lower())
            if traveler:
                name, image = traveler.name, traveler.image_url
            elif user:
                name, image = user.name, user.image_url
            else:
                name, image = email, ""
            contributors.append(
                {"email": email, "name": name, "image": image, "postCount": row["post_count"]}
            )
        return Response(contributors)


class PostSectionViewSet(MessageModelViewSet):
    serializer_class = PostSectionSerializer
    permission_classes = [IsAdminOrReadOnly]
    resource_name = "Section"
    filter_backends = []

    def get_queryset(self):
        return PostSection.objects.annotate(post_count=Count("posts")).order_by("display_order", "id")

    def destroy(self, request, *args, **kwargs):
        section = self.get_object()
        in_use = section.posts.count()
        if in_use:
            return Response(
                {
                    "detail": f"Cannot delete section. It is being used by {in_use} post(s). "
                    "Please update or delete those posts first."
                },
                status=status.HTTP_400_BAD_REQUEST,
            )
        return super().destroy(request, *args, **kwargs)


class TagListView(APIView):
    permission_classes = [IsAdminOrReadOnly]

    def get(self, request, *args, **kwargs):
        return Response(list(Tag.objects.order_by("name").values_list("name", flat=True)))

    def post(self, request, *args, **kwargs):
        serializer = TagCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        tag = serializer.save()
        return Response({"message": "Tag added successfully", "tagName": tag.name}, status=status.HTTP_201_CREATED)


class TagDetailView(APIView):
    permission_classes = [IsAdmin]

    def delete(self, request, name, *args, **kwargs):
        tag = get_object_or_404(Tag, name=name)
        tag.delete()
        return Response({"message": "Tag deleted successfully"})
