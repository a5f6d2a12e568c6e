"""Parse job posting dates and classify them into relative-age buckets."""

import math
import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from dateutil import parser as dateutil_parser

from job_scout.config import NEW_JOB_HOURS
from job_scout.schemas.state import Recency

# "3 hours ago", "Posted 2 days ago", "30+ days ago", "1 wk ago"
_RELATIVE_RE = re.compile(
    r"(?:posted\s+)?(\d+)\+?\s*(minute|min|hour|hr|h|day|d|week|wk|w|month|mo)s?\s+ago",
    re.IGNORECASE,
)

_UNIT_DELTAS = {
    "minute": timedelta(minutes=1),
    "min": timedelta(minutes=1),
    "hour": timedelta(hours=1),
    "hr": timedelta(hours=1),
    "h": timedelta(hours=1),
    "day": timedelta(days=1),
    "d": timedelta(days=1),
    "week": timedelta(weeks=1),
    "wk": timedelta(weeks=1),
    "w": timedelta(weeks=1),
    # Approximate: 30 days per month
    "month": timedelta(days=30),
    "mo": timedelta(days=30),
}

_KEYWORD_OFFSETS = {
    "just now": timedelta(0),
    "posted just now": timedelta(0),
    "today": timedelta(0),
    "posted today": timedelta(0),
    "yesterday": timedelta(days=1),
    "posted yesterday": timedelta(days=1),
}


def resolve_now(now: Optional[datetime] = None) -> datetime:
    """Current UTC time if now is None; naive values are taken as UTC."""
    if now is None:
        return datetime.now(timezone.utc)
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


def _parse_relative(text: str, now: datetime) -> Optional[datetime]:
    """Resolve relative phrases against now. Returns None if text is not relative."""
    if text in _KEYWORD_OFFSETS:
        return now - _KEYWORD_OFFSETS[text]
    m = _RELATIVE_RE.fullmatch(text)
    if m:
        try:
            return now - int(m.group(1)) * _UNIT_DELTAS[m.group(2).lower()]
        except OverflowError:
            return None
    return None


def parse_posted_date(raw: Optional[str], now: Optional[datetime] = None) -> Optional[datetime]:
    """
    Parse a posting date into an aware datetime.
    Handles ISO-8601 and other absolute formats, plus "2 days ago" style phrases.
    Naive timestamps are taken as UTC. Returns None if the date cannot be parsed.
    """
    if not isinstance(raw, str) or not raw.strip():
        return None

    text = raw.strip()
    relative = _parse_relative(text.lower(), resolve_now(now))
    if relative is not None:
        return relative

    try:
        posted = dateutil_parser.parse(text)
        if posted.tzinfo is None:
            posted = posted.replace(tzinfo=timezone.utc)
        # Out-of-range offsets such as +99:00 only fail here
        posted.utcoffset()
    except (ValueError, OverflowError):
        return None
    return posted


def age_in_days(raw: Optional[str], now: Optional[datetime] = None) -> Optional[float]:
    """Fractional days since posting, or None if unparseable."""
    now = resolve_now(now)
    posted = parse_posted_date(raw, now)
    if posted is None:
        return None
    return (now - posted).total_seconds() / 86400


def is_job_new(raw: Optional[str], now: Optional[datetime] = None) -> bool:
    """True if posted less than 24 hours ago. Unparseable dates are never new."""
    now = resolve_now(now)
    posted = parse_posted_date(raw, now)
    if posted is None:
        return False
    return (now - posted).total_seconds() / 3600 < NEW_JOB_HOURS


def format_relative_date(raw: Optional[str], now: Optional[datetime] = None) -> str:
    """
    Human-relative label for a posting date: "Just now", "5 hours ago", "Yesterday",
    "3 days ago", "2 weeks ago", or the local date for anything 30 days or older.
    Unparseable input is returned unchanged.
    """
    now = resolve_now(now)
    posted = parse_posted_date(raw, now)
    if posted is None:
        return raw if isinstance(raw, str) else ""

    hours = math.floor((now - posted).total_seconds() / 3600)
    days = math.floor(hours / 24)

    if hours < 1:
        return "Just now"
    if hours < 24:
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    if days == 1:
        return "Yesterday"
    if days < 7:
        return f"{days} days ago"
    if days < 30:
        weeks = days // 7
        return f"{weeks} week{'s' if weeks > 1 else ''} ago"
    try:
        local = posted.astimezone()
    except (OverflowError, ValueError, OSError):
        local = posted
    return local.strftime("%x")


def classify_recency(raw: Optional[str], now: Optional[datetime] = None) -> Recency:
    """Label and 'new' flag for one posting date, both evaluated against the same now."""
    now = resolve_now(now)
    return Recency(label=format_relative_date(raw, now), is_new=is_job_new(raw, now))
