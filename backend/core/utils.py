from datetime import date, datetime

from django.utils import timezone
from django.utils.dateparse import parse_date as django_parse_date
from django.utils.dateparse import parse_datetime

TRUE_VALUES = {"true", "1", "yes", "on"}
DISPLAY_DATE_FORMATS = ("%d %b %Y", "%d %B %Y", "%b %d, %Y", "%d/%m/%Y")


def parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in TRUE_VALUES


def parse_positive_int(value) -> int | None:
    """Return ``value`` as an int when it is a positive whole number, else None."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if number > 0 else None


def parse_loose_date(value) -> date | None:
    """Accept ISO dates, ISO datetimes and the "29 Nov 2024" style the frontends send."""
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        parsed = django_parse_date(text[:10])
    except ValueError:
        parsed = None
    if parsed:
        return parsed
    try:
        moment = parse_datetime(text)
    except ValueError:
        moment = None
    if moment:
        return moment.date()
    for fmt in DISPLAY_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


def date_or_today(value) -> date:
    return parse_loose_date(value) or timezone.localdate()


def join_name(*parts) -> str:
    return " ".join(part.strip() for part in parts if part and part.strip())


def parse_float(value) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        text = str(value).strip()
        return float(text) if text else None
    except ValueError:
        return None
