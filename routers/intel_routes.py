from __future__ import annotations

from fastapi import APIRouter, Request, Response

from schemas.intel import IntelDiagnostics, IntelFeedPayload
from services.intel.feed_cache import FeedCache
from services.intel_feed_service import describe_feed, get_intel_feed

router = APIRouter()


def _feed_cache(request: Request) -> FeedCache:
    cache = getattr(request.app.state, "intel_cache", None)
    if cache is None:
        cache = FeedCache()
        request.app.state.intel_cache = cache
    return cache


async def _serve_feed(request: Request) -> Response:
    cache = _feed_cache(request)
    feed = await get_intel_feed(cache)

    headers = {"X-Intel-Cache": feed.cache_status, **feed.headers}
    if feed.cacheable:
        headers["Cache-Control"] = f"public, max-age={cache.ttl_seconds}"
    return Response(content=feed.body, media_type="application/json", headers=headers)


@router.get(
    "/api/intel",
    response_model=IntelFeedPayload,
    responses={200: {"description": "Live feed, or the bare static snapshot array when X-Fallback is set"}},
)
async def get_intel(request: Request):
    return await _serve_feed(request)


# Older front-end builds still call the serverless function path.
@router.get("/.netlify/functions/fetch-intel", include_in_schema=False)
async def get_intel_legacy(request: Request):
    return await _serve_feed(request)


@router.get("/api/intel/diagnostics", response_model=IntelDiagnostics)
async def get_intel_diagnostics(request: Request):
    return describe_feed(_feed_cache(request))
