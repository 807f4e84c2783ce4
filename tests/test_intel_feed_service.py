import asyncio
import json
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from services.intel.curated import CURATED_RECORDS
from services.intel.feed_cache import FeedCache
from services.intel_feed_service import (
    CACHE_STATUS_HIT,
    CACHE_STATUS_MISS,
    EMPTY_BODY,
    describe_feed,
    encode_payload,
    extract_items,
    get_intel_feed,
)

PAYLOAD = {
    "items": [{"subject": "Ceasefire talks", "origin": "serper"}, {"subject": "Armada", "origin": "curated"}],
    "minerals": {"gold": {"symbol": "Au", "unit": "/oz", "origins": "", "players": "", "price": "$2600"}},
}


class IntelFeedCacheTests(unittest.TestCase):
    def test_second_call_within_ttl_replays_identical_bytes(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        with patch("services.intel_feed_service.aggregate", return_value=PAYLOAD) as agg:
            first = asyncio.run(get_intel_feed(cache, now=0))
            second = asyncio.run(get_intel_feed(cache, now=1799))

        self.assertEqual(agg.await_count, 1)
        self.assertEqual(first.cache_status, CACHE_STATUS_MISS)
        self.assertEqual(second.cache_status, CACHE_STATUS_HIT)
        self.assertEqual(first.body, second.body)
        self.assertEqual(json.loads(first.body), PAYLOAD)
        self.assertTrue(second.cacheable)

    def test_expired_entry_triggers_refresh(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        updated = {**PAYLOAD, "items": PAYLOAD["items"][:1]}
        with patch("services.intel_feed_service.aggregate", side_effect=[PAYLOAD, updated]) as agg:
            asyncio.run(get_intel_feed(cache, now=0))
            refreshed = asyncio.run(get_intel_feed(cache, now=1800))

        self.assertEqual(agg.await_count, 2)
        self.assertEqual(refreshed.cache_status, CACHE_STATUS_MISS)
        self.assertEqual(json.loads(refreshed.body), updated)
        self.assertEqual(cache.peek().timestamp, 1800)

    def test_empty_feed_is_not_cached(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        empty = {"items": [], "minerals": {}}
        with patch("services.intel_feed_service.aggregate", return_value=empty) as agg:
            first = asyncio.run(get_intel_feed(cache, now=0))
            asyncio.run(get_intel_feed(cache, now=5))

        self.assertEqual(agg.await_count, 2)
        self.assertFalse(first.cacheable)
        self.assertIsNone(cache.peek())


class IntelFeedFallbackTests(unittest.TestCase):
    def test_unexpected_error_serves_static_snapshot(self) -> None:
        snapshot = [{"subject": "Static entry"}]
        cache = FeedCache(ttl_seconds=1800)
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "live_intel.json"
            path.write_text(json.dumps(snapshot), encoding="utf-8")
            with patch("services.intel_feed_service.aggregate", side_effect=RuntimeError("boom")):
                feed = asyncio.run(get_intel_feed(cache, now=0, fallback_path=path))

        self.assertTrue(feed.fallback)
        self.assertFalse(feed.cacheable)
        self.assertEqual(feed.headers, {"X-Fallback": "static"})
        self.assertEqual(json.loads(feed.body), snapshot)
        self.assertIsNone(cache.peek())

    def test_unreadable_snapshot_serves_empty_array(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        with patch("services.intel_feed_service.aggregate", side_effect=RuntimeError("boom")):
            feed = asyncio.run(get_intel_feed(cache, now=0, fallback_path="/nonexistent/live_intel.json"))

        self.assertEqual(feed.body, EMPTY_BODY)
        self.assertFalse(feed.fallback)
        self.assertFalse(feed.cacheable)
        self.assertEqual(feed.headers, {})


class IntelFeedEndToEndTests(unittest.TestCase):
    def test_without_keys_serves_curated_feed(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        with patch("services.intel_feed_service.get_serper_key", return_value=None), patch(
            "services.intel_feed_service.get_gnews_key", return_value=None
        ):
            feed = asyncio.run(get_intel_feed(cache, now=0))

        payload = json.loads(feed.body)
        self.assertEqual(payload["items"], list(CURATED_RECORDS))
        self.assertEqual(
            set(payload["minerals"]), {"gold", "silver", "lithium", "cobalt", "copper", "rareEarths"}
        )
        self.assertTrue(all(entry["price"] is None for entry in payload["minerals"].values()))
        self.assertEqual(feed.body, encode_payload(payload))


class FeedHelpersTests(unittest.TestCase):
    def test_extract_items_accepts_both_shapes(self) -> None:
        self.assertEqual(extract_items([{"a": 1}]), [{"a": 1}])
        self.assertEqual(extract_items({"items": [{"a": 1}], "minerals": {}}), [{"a": 1}])
        self.assertEqual(extract_items({"minerals": {}}), [])
        self.assertEqual(extract_items("nope"), [])

    def test_describe_feed_reports_cache_and_origins(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        cache.set(PAYLOAD, encode_payload(PAYLOAD), now=100)
        with patch("services.intel_feed_service.get_serper_key", return_value="s"), patch(
            "services.intel_feed_service.get_gnews_key", return_value=None
        ):
            report = describe_feed(cache, now=400)

        self.assertEqual(report["cache"], {"fresh": True, "age_sec": 300.0, "ttl_sec": 1800})
        self.assertEqual(report["providers"], {"serper": True, "gnews": False})
        self.assertEqual(report["items_by_origin"], {"serper": 1, "curated": 1})
        self.assertEqual(report["item_count"], 2)

    def test_describe_empty_cache(self) -> None:
        report = describe_feed(FeedCache(ttl_seconds=1800), now=0)
        self.assertEqual(report["cache"], {"fresh": False, "age_sec": None, "ttl_sec": 1800})
        self.assertEqual(report["item_count"], 0)


if __name__ == "__main__":
    unittest.main()
