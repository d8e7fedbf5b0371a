"""Sanity checks for post media stored as URLs or base64 data URLs."""

import logging

from .models import PostMedia

logger = logging.getLogger(__name__)

URL_PREFIXES = ("data:", "http://", "https://", "/")
INLINE_MEDIA_PREFIXES = ("data:image/", "data:video/")
# A data URL shorter than this cannot hold a real image after its header.
MIN_INLINE_LENGTH = 100
MIN_HEADER_LENGTH = 20


def media_type_for(url: str) -> str:
    return PostMedia.VIDEO if url.startswith("data:video/") else PostMedia.IMAGE


def is_displayable(url: str, post_id=None) -> bool:
    """Return False for media a browser could not render."""
    if not url:
        return False
    if not url.startswith(URL_PREFIXES):
        logger.warning("Skipping media on post %s: raw base64 without a data: prefix", post_id)
        return False
    if url.startswith(INLINE_MEDIA_PREFIXES):
        if len(url) < MIN_INLINE_LENGTH:
            logger.warning("Skipping media on post %s: data URL truncated to %s chars", post_id, len(url))
            return False
        comma = url.find(",")
        if comma == -1 or comma < MIN_HEADER_LENGTH:
            logger.warning("Skipping media on post %s: data URL missing comma separator", post_id)
            return False
    elif url.startswith("data:") and "," not in url:
        logger.warning("Skipping media on post %s: data URL missing comma separator", post_id)
        return False
    return True


def normalize_incoming(entries) -> list[tuple[str, str]]:
    """
    Turn a submitted media list into ``(media_type, url)`` pairs.

    Entries may be plain strings or objects carrying ``url`` or ``data``.
    Data URLs without a comma are dropped.
    """
    cleaned = []
    for entry in entries or []:
        if isinstance(entry, dict):
            url = entry.get("url") or entry.get("data") or ""
        else:
            url = entry
        if not isinstance(url, str):
            continue
        url = url.strip()
        if not url:
            continue
        if url.startswith("data:") and "," not in url:
            logger.warning("Dropping submitted media: data URL missing comma separator")
            continue
        cleaned.append((media_type_for(url), url))
    return cleaned
