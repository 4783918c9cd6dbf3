import datetime
import math
from typing import Optional

WORDS_PER_MINUTE = 200

_TIME_UNITS = (
    ("year", 365 * 24 * 60 * 60),
    ("month", 30 * 24 * 60 * 60),
    ("week", 7 * 24 * 60 * 60),
    ("day", 24 * 60 * 60),
    ("hour", 60 * 60),
    ("minute", 60),
    ("second", 1),
)


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min read"


def parse_post_date(value: str) -> datetime.datetime:
    """Parse an ISO-like date string; naive values are treated as UTC."""
    parsed = datetime.datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=datetime.timezone.utc)
    return parsed


def relative_date(
    post_date: str, now: Optional[datetime.datetime] = None
) -> str:
    """
    Describe post_date relative to now, e.g. "3 years ago" or "in 2 days".
    Raises ValueError if post_date is not an ISO-like date.
    """
    if not post_date:
        return ""

    then = parse_post_date(post_date)
    if now is None:
        now = datetime.datetime.now(datetime.timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=datetime.timezone.utc)

    delta = (now - then).total_seconds()
    distance = abs(delta)
    for unit, seconds in _TIME_UNITS:
        if distance >= seconds:
            count = int(distance // seconds)
            label = unit if count == 1 else f"{unit}s"
            if delta < 0:
                return f"in {count} {label}"
            return f"{count} {label} ago"
    return "just now"
