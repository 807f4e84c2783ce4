# services/intel_feed_service.py
"""
Live intel feed for the globe front-end.

Serves {items, minerals} from a single-slot 30 min cache so the free-tier
provider quotas survive; refreshes through the aggregator and degrades to the
bundled static snapshot (then to an empty array) instead of ever failing.
"""
from __future__ import annotations

import json
import logging
import os
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import httpx

from services.intel.aggregator import aggregate
from services.intel.fallback import FallbackSnapshotError, load_static_snapshot
from services.intel.feed_cache import FeedCache
from services.providers.gnews_client import get_gnews_key
from services.providers.serper_client import get_serper_key

logger = logging.getLogger(__name__)

INTEL_HTTP_TIMEOUT_SEC = float(os.getenv("INTEL_HTTP_TIMEOUT_SEC", "10"))

CACHE_STATUS_HIT = "HIT"
CACHE_STATUS_MISS = "MISS"

EMPTY_BODY = b"[]"


def encode_payload(payload: Any) -> bytes:
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


@dataclass
class FeedResponse:
    body: bytes
    cache_status: str = CACHE_STATUS_MISS
    fallback: bool = False
    cacheable: bool = True
    headers: Dict[str, str] = field(default_factory=dict)


def _make_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=httpx.Timeout(INTEL_HTTP_TIMEOUT_SEC))


async def refresh_feed(*, client: Optional[httpx.AsyncClient] = None, **aggregate_kwargs: Any) -> Dict[str, Any]:
    serper_key = get_serper_key()
    gnews_key = get_gnews_key()
    if not serper_key and not gnews_key:
        logger.info("intel_refresh_no_provider_keys curated_only=true")

    if client is not None:
        return await aggregate(client=client, serper_key=serper_key, gnews_key=gnews_key, **aggregate_kwargs)

    async with _make_client() as own_client:
        return await aggregate(client=own_client, serper_key=serper_key, gnews_key=gnews_key, **aggregate_kwargs)


async def get_intel_feed(
    cache: FeedCache,
    *,
    now: Optional[float] = None,
    client: Optional[httpx.AsyncClient] = None,
    **aggregate_kwargs: Any,
) -> FeedResponse:
    """
    Return the encoded feed.

    Fresh cache hit -> stored bytes verbatim. Otherwise one refresh cycle,
    stored on success. Any unexpected error -> static snapshot with the
    ``X-Fallback: static`` marker, or ``[]`` when the snapshot is unreadable.
    """
    cached = cache.get(now)
    if cached is not None:
        return FeedResponse(body=cached.body, cache_status=CACHE_STATUS_HIT)

    try:
        payload = await refresh_feed(client=client, **aggregate_kwargs)
        body = encode_payload(payload)
        item_count = len(payload.get("items") or [])
        # An empty feed means even the snapshot was unreadable; retry next request.
        if item_count:
            cache.set(payload, body, now)
        logger.info("intel_feed_refreshed items=%s bytes=%s cached=%s", item_count, len(body), bool(item_count))
        return FeedResponse(body=body, cacheable=bool(item_count))
    except Exception as exc:
        logger.exception("intel_feed_refresh_failed: %s", exc)

    try:
        snapshot = load_static_snapshot(aggregate_kwargs.get("fallback_path"))
    except FallbackSnapshotError as exc:
        logger.error("intel_feed_static_fallback_failed: %s", exc)
        return FeedResponse(body=EMPTY_BODY, cacheable=False)

    return FeedResponse(
        body=encode_payload(snapshot),
        fallback=True,
        cacheable=False,
        headers={"X-Fallback": "static"},
    )


def extract_items(payload: Any) -> List[Any]:
    """Accept both response shapes: the bare legacy array and ``{items: [...]}``."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and isinstance(payload.get("items"), list):
        return payload["items"]
    return []


def describe_feed(cache: FeedCache, *, now: Optional[float] = None) -> Dict[str, Any]:
    """Diagnostics snapshot; never triggers a provider call."""
    entry = cache.peek()
    age = cache.age(now)
    items = extract_items(entry.payload) if entry is not None else []
    origins = Counter(
        str(item.get("origin") or "unknown") for item in items if isinstance(item, dict)
    )
    return {
        "cache": {
            "fresh": cache.get(now) is not None,
            "age_sec": round(age, 1) if age is not None else None,
            "ttl_sec": cache.ttl_seconds,
        },
        "providers": {
            "serper": bool(get_serper_key()),
            "gnews": bool(get_gnews_key()),
        },
        "items_by_origin": dict(origins),
        "item_count": len(items),
    }
