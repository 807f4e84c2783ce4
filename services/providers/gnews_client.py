from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import httpx

from services.intel.records import ORIGIN_GNEWS, EventRecord, build_event_record, timeline_label
from services.providers.errors import ProviderError, read_json_object

GNEWS_API_URL = os.getenv("GNEWS_API_URL", "https://gnews.io/api/v4/search")

PROVIDER = "gnews"


class GNewsClientError(ProviderError):
    """Raised when GNews requests fail or are misconfigured."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(PROVIDER, message, status_code=status_code)


def get_gnews_key() -> Optional[str]:
    return os.getenv("GNEWS_API_KEY") or None


def _normalize_one(raw: Dict[str, Any]) -> Optional[EventRecord]:
    # GNews article schema: {title, description, content, url, image, publishedAt, source: {name, url}}
    source = raw.get("source") if isinstance(raw.get("source"), dict) else {}
    source_name = source.get("name")
    title = raw.get("title")
    return build_event_record(
        title=title,
        snippet=raw.get("description") or title,
        key_players=source_name or "Global News",
        source_label=source_name or "GNews",
        url=raw.get("url"),
        timeline=timeline_label(raw.get("publishedAt")),
        origin=ORIGIN_GNEWS,
    )


def normalize_articles(items: Any) -> List[EventRecord]:
    if not isinstance(items, list):
        raise GNewsClientError(f"'articles' is {type(items).__name__}, expected list")
    records: List[EventRecord] = []
    for raw in items:
        if not isinstance(raw, dict):
            continue
        record = _normalize_one(raw)
        if record is not None:
            records.append(record)
    return records


async def fetch_gnews(
    query: str,
    api_key: str,
    limit: int = 8,
    *,
    client: httpx.AsyncClient,
) -> List[EventRecord]:
    """Search GNews sorted by publish date and map articles to event records."""
    if not api_key:
        raise GNewsClientError("Missing GNEWS_API_KEY")
    params = {
        "q": query,
        "lang": "en",
        "country": "any",
        "max": int(limit),
        "sortby": "publishedAt",
        "token": api_key,
    }
    try:
        response = await client.get(GNEWS_API_URL, params=params)
    except httpx.HTTPError as exc:
        raise GNewsClientError(f"request failed: {exc}") from exc
    try:
        data = read_json_object(response, PROVIDER)
    except ProviderError as exc:
        raise GNewsClientError(exc.detail, status_code=exc.status_code) from exc
    return normalize_articles(data.get("articles") or [])
