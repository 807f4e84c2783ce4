from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Any, Optional, TypedDict

from dateutil import parser

from services.intel.geo import format_coords, locate
from services.intel.taxonomy import broad_category, classify

ORIGIN_CURATED = "curated"
ORIGIN_SERPER = "serper"
ORIGIN_GNEWS = "gnews"

_RELATIVE_DATE = re.compile(r"\b(ago|just now|yesterday|today)\b", re.IGNORECASE)


class EventRecord(TypedDict):
    sector: str
    subject: str
    keyPlayers: str
    timeline: str
    impact: str
    sourceLabel: str
    url: Optional[str]
    latitude: str
    longitude: str
    category: str
    isCurated: bool
    origin: str


def _normalize_text(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        value = str(value)
    return " ".join(value.strip().split())


def month_label(when: datetime) -> str:
    return f"LIVE - {when.strftime('%b %Y')}"


def timeline_label(raw_date: Any, *, now: Optional[datetime] = None) -> str:
    """
    Recency label for a provider date.

    Missing -> current month placeholder; relative strings ("2 days ago") are
    kept verbatim; anything dateutil can parse -> "LIVE - Mon YYYY".
    """
    now = now or datetime.now(timezone.utc)
    text = _normalize_text(raw_date)
    if not text:
        return month_label(now)
    if _RELATIVE_DATE.search(text):
        return f"LIVE - {text}"
    try:
        parsed = parser.parse(text)
    except (ValueError, OverflowError):
        return f"LIVE - {text}"
    return month_label(parsed)


def build_event_record(
    *,
    title: Any,
    snippet: Any,
    key_players: Any,
    source_label: Any,
    url: Any,
    timeline: str,
    origin: str,
) -> Optional[EventRecord]:
    """Classify and geolocate one provider item. Returns None when it has no title."""
    subject = _normalize_text(title)
    if not subject:
        return None
    summary = _normalize_text(snippet)
    combined = f"{subject} {summary}"

    sector = classify(combined)
    lat, lng = format_coords(locate(combined))
    link = _normalize_text(url) or None

    return {
        "sector": sector.value,
        "subject": subject,
        "keyPlayers": _normalize_text(key_players),
        "timeline": timeline,
        "impact": summary or subject,
        "sourceLabel": _normalize_text(source_label),
        "url": link,
        "latitude": lat,
        "longitude": lng,
        "category": broad_category(sector),
        "isCurated": False,
        "origin": origin,
    }
