from __future__ import annotations

import os
from typing import Any, Dict, List, Optional

import httpx

from services.intel.records import ORIGIN_SERPER, EventRecord, build_event_record, timeline_label
from services.providers.errors import ProviderError, read_json_object

SERPER_NEWS_URL = os.getenv("SERPER_NEWS_URL", "https://google.serper.dev/news")
SERPER_SEARCH_URL = os.getenv("SERPER_SEARCH_URL", "https://google.serper.dev/search")

PROVIDER = "serper"


class SerperClientError(ProviderError):
    """Raised when Serper requests fail or are misconfigured."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(PROVIDER, message, status_code=status_code)


def get_serper_key() -> Optional[str]:
    return os.getenv("SERPER_API_KEY") or None


async def _post(client: httpx.AsyncClient, url: str, api_key: str, body: Dict[str, Any]) -> Dict[str, Any]:
    if not api_key:
        raise SerperClientError("Missing SERPER_API_KEY")
    headers = {"X-API-KEY": api_key, "Content-Type": "application/json"}
    try:
        response = await client.post(url, json=body, headers=headers)
    except httpx.HTTPError as exc:
        raise SerperClientError(f"request failed: {exc}") from exc
    try:
        return read_json_object(response, PROVIDER)
    except ProviderError as exc:
        raise SerperClientError(exc.detail, status_code=exc.status_code) from exc


def _normalize_one(raw: Dict[str, Any]) -> Optional[EventRecord]:
    # Serper news schema: {title, link, snippet, date, source, imageUrl, position}
    title = raw.get("title")
    source = raw.get("source")
    return build_event_record(
        title=title,
        snippet=raw.get("snippet") or title,
        key_players=source or "Global News",
        source_label=source or "Google News",
        url=raw.get("link"),
        timeline=timeline_label(raw.get("date")),
        origin=ORIGIN_SERPER,
    )


def normalize_news_results(items: Any) -> List[EventRecord]:
    if not isinstance(items, list):
        raise SerperClientError(f"'news' is {type(items).__name__}, expected list")
    records: List[EventRecord] = []
    for raw in items:
        if not isinstance(raw, dict):
            continue
        record = _normalize_one(raw)
        if record is not None:
            records.append(record)
    return records


async def fetch_serper_news(
    query: str,
    api_key: str,
    limit: int = 8,
    *,
    client: httpx.AsyncClient,
) -> List[EventRecord]:
    """Search Serper news (past month) and map results to event records."""
    body = {"q": query, "num": int(limit), "gl": "us", "hl": "en", "tbs": "qdr:m"}
    data = await _post(client, SERPER_NEWS_URL, api_key, body)
    return normalize_news_results(data.get("news") or [])


async def serper_search(
    query: str,
    api_key: str,
    num: int = 5,
    *,
    client: httpx.AsyncClient,
) -> Dict[str, Any]:
    """Plain web search; returns the raw body (organic results, knowledge graph)."""
    body = {"q": query, "num": int(num), "gl": "us", "hl": "en"}
    return await _post(client, SERPER_SEARCH_URL, api_key, body)
