from __future__ import annotations

import asyncio
import logging
import os
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple

import httpx

from config.intel_queries import load_queries
from services.intel.curated import get_curated_records
from services.intel.fallback import FallbackSnapshotError, load_static_snapshot
from services.intel.minerals import run_commodity_pipeline
from services.intel.records import EventRecord
from services.providers.errors import ProviderError
from services.providers.gnews_client import fetch_gnews
from services.providers.serper_client import fetch_serper_news

logger = logging.getLogger(__name__)

MIN_PRIMARY_ITEMS = int(os.getenv("INTEL_MIN_PRIMARY_ITEMS", "5"))

FetchFn = Callable[..., Awaitable[List[EventRecord]]]


async def fetch_fanout(
    fetch_fn: FetchFn,
    queries: Sequence[Tuple[str, int]],
    api_key: str,
    *,
    client: httpx.AsyncClient,
    provider: str,
) -> List[EventRecord]:
    """
    Run every query concurrently and flatten the results in query order.

    A failed query is logged and contributes nothing; if every query fails
    the provider simply yields an empty list.
    """
    if not queries:
        return []

    results = await asyncio.gather(
        *[fetch_fn(query, api_key, limit, client=client) for query, limit in queries],
        return_exceptions=True,
    )

    items: List[EventRecord] = []
    failed = 0
    for (query, _limit), result in zip(queries, results):
        if isinstance(result, ProviderError):
            failed += 1
            logger.warning(
                "intel_provider_query_failed provider=%s status=%s query=%r error=%s",
                provider, result.status_code, query, result.detail,
            )
            continue
        if isinstance(result, Exception):
            failed += 1
            logger.error(
                "intel_provider_query_crashed provider=%s query=%r",
                provider, query, exc_info=result,
            )
            continue
        items.extend(result)

    logger.info(
        "intel_provider_fanout provider=%s queries=%s failed=%s items=%s",
        provider, len(queries), failed, len(items),
    )
    return items


def merge_with_curated(curated: Iterable[EventRecord], scraped: Iterable[EventRecord]) -> List[EventRecord]:
    """
    Curated records first, then provider records deduplicated by URL.

    The seen set starts with every curated URL, so a provider copy of a curated
    story is always dropped. Records without a URL can't collide and are kept.
    """
    curated = list(curated)
    seen: Set[str] = {record["url"] for record in curated if record.get("url")}

    unique: List[EventRecord] = []
    dropped = 0
    for record in scraped:
        url = record.get("url")
        if not url:
            unique.append(record)
            continue
        if url in seen:
            dropped += 1
            continue
        seen.add(url)
        unique.append(record)

    if dropped:
        logger.info("intel_dedup_dropped count=%s", dropped)
    return curated + unique


async def collect_provider_items(
    *,
    client: httpx.AsyncClient,
    serper_key: Optional[str],
    gnews_key: Optional[str],
    queries: Optional[Dict[str, List[Tuple[str, int]]]] = None,
) -> List[EventRecord]:
    queries = queries if queries is not None else load_queries()
    items: List[EventRecord] = []

    if serper_key:
        items = await fetch_fanout(
            fetch_serper_news, queries.get("serper", []), serper_key, client=client, provider="serper"
        )

    # The backup only runs once the primary batch has fully resolved.
    if len(items) < MIN_PRIMARY_ITEMS and gnews_key:
        logger.info("intel_secondary_provider_engaged primary_items=%s", len(items))
        items = items + await fetch_fanout(
            fetch_gnews, queries.get("gnews", []), gnews_key, client=client, provider="gnews"
        )

    return items


async def aggregate_items(
    *,
    client: httpx.AsyncClient,
    serper_key: Optional[str],
    gnews_key: Optional[str],
    curated: Optional[List[EventRecord]] = None,
    fallback_path: Path | str | None = None,
    queries: Optional[Dict[str, List[Tuple[str, int]]]] = None,
) -> List[Any]:
    curated = get_curated_records() if curated is None else curated
    scraped = await collect_provider_items(
        client=client, serper_key=serper_key, gnews_key=gnews_key, queries=queries
    )
    items: List[Any] = merge_with_curated(curated, scraped)

    if not items:
        logger.warning("intel_aggregate_empty loading_static_snapshot=true")
        try:
            items = load_static_snapshot(fallback_path)
        except FallbackSnapshotError as exc:
            logger.error("intel_fallback_unavailable: %s", exc)
            items = []

    logger.info(
        "intel_aggregate_items curated=%s scraped=%s total=%s",
        len(curated), len(scraped), len(items),
    )
    return items


async def aggregate(
    *,
    client: httpx.AsyncClient,
    serper_key: Optional[str],
    gnews_key: Optional[str],
    curated: Optional[List[EventRecord]] = None,
    fallback_path: Path | str | None = None,
    queries: Optional[Dict[str, List[Tuple[str, int]]]] = None,
) -> Dict[str, Any]:
    """
    One refresh cycle: ``{"items": [...], "minerals": {...}}``.

    Commodity prices are resolved concurrently with the item pipeline and
    can't affect it; provider failures never surface here.
    """
    items, commodities = await asyncio.gather(
        aggregate_items(
            client=client,
            serper_key=serper_key,
            gnews_key=gnews_key,
            curated=curated,
            fallback_path=fallback_path,
            queries=queries,
        ),
        run_commodity_pipeline(serper_key, client=client),
    )
    if commodities.errors:
        logger.info("intel_minerals_partial errors=%s", len(commodities.errors))
    return {"items": items, "minerals": commodities.minerals}
