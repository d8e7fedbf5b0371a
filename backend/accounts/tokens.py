from datetime import timedelta

from django.conf import settings
from rest_framework_simplejwt.tokens import RefreshToken


def _format_lifetime(lifetime: timedelta) -> str:
    hours = int(lifetime.total_seconds() // 3600)
    if hours >= 48 and hours % 24 == 0:
        return f"{hours // 24}d"
    return f"{hours}h"


def access_lifetime_for(token) -> timedelta:
    """Admin tokens stay short-lived no matter how they were minted."""
    return settings.ADMIN_TOKEN_LIFETIME if token.get("is_admin") else settings.TRAVELER_TOKEN_LIFETIME


def issue_tokens_for(user, lifetime: timedelta | None = None) -> dict:
    """Issue an access/refresh pair carrying the email and admin claims."""
    if lifetime is None:
        lifetime = settings.ADMIN_TOKEN_LIFETIME if user.is_staff else settings.TRAVELER_TOKEN_LIFETIME

    refresh = RefreshToken.for_user(user)
    refresh["email"] = user.email
    refresh["is_admin"] = user.is_staff

    access = refresh.access_token
    access.set_exp(lifetime=lifetime)
    return {
        "token": str(access),
        "refresh": str(refresh),
        "expiresIn": _format_lifetime(lifetime),
    }
