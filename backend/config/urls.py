from django.contrib import admin
from django.urls import include, path
from rest_framework.routers import DefaultRouter

from accounts.api import AdminLoginView, AdminProfileView, MeView, RefreshView
from announcements.api import AnnouncementViewSet
from appsettings.api import (
    PublicSettingDetailView,
    PublicSettingsView,
    SettingDetailView,
    SettingsView,
)
from checkins.api import CheckInViewSet
from core.views import HealthView
from hotels.api import HotelViewSet, RoomPairViewSet
from itinerary.api import ItineraryDayViewSet
from journals.api import JournalEntryViewSet
from posts.api import PostSectionViewSet, PostViewSet, TagDetailView, TagListView
from travelers.api import TravelerViewSet
from vehicles.api import VehicleViewSet

router = DefaultRouter()
router.register(r"travelers", TravelerViewSet, basename="traveler")
router.register(r"vehicles", VehicleViewSet, basename="vehicle")
router.register(r"itinerary", ItineraryDayViewSet, basename="itinerary")
router.register(r"check-ins", CheckInViewSet, basename="check-in")
router.register(r"posts", PostViewSet, basename="post")
router.register(r"sections", PostSectionViewSet, basename="section")
router.register(r"journals", JournalEntryViewSet, basename="journal")
router.register(r"hotels", HotelViewSet, basename="hotel")
router.register(r"room-pairs", RoomPairViewSet, basename="room-pair")
router.register(r"announcements", AnnouncementViewSet, basename="announcement")

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health", HealthView.as_view(), name="health"),
    path("api/admin/login/", AdminLoginView.as_view(), name="admin-login"),
    path("api/admin/profile/", AdminProfileView.as_view(), name="admin-profile"),
    path("api/admin/tags/", TagListView.as_view(), name="admin-tags"),
    path("api/admin/tags/<str:name>/", TagDetailView.as_view(), name="admin-tag-detail"),
    path("api/auth/refresh/", RefreshView.as_view(), name="auth-refresh"),
    path("api/auth/me/", MeView.as_view(), name="auth-me"),
    path("api/settings/public/", PublicSettingsView.as_view(), name="settings-public"),
    path("api/settings/public/<str:key>/", PublicSettingDetailView.as_view(), name="settings-public-detail"),
    path("api/settings/", SettingsView.as_view(), name="settings"),
    path("api/settings/<str:key>/", SettingDetailView.as_view(), name="settings-detail"),
    path("api/", include(router.urls)),
]

handler404 = "core.views.not_found"
