import unittest

from services.intel.feed_cache import FeedCache


class FakeClock:
    def __init__(self, start: float = 1_000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


class FeedCacheTests(unittest.TestCase):
    def test_empty_cache_misses(self) -> None:
        cache = FeedCache(ttl_seconds=1800)
        self.assertIsNone(cache.get(now=0))
        self.assertIsNone(cache.age(now=0))
        self.assertIsNone(cache.peek())

    def test_fresh_until_ttl_boundary(self) -> None:
        clock = FakeClock()
        cache = FeedCache(ttl_seconds=1800, clock=clock)
        cache.set({"items": [1]}, b'{"items":[1]}')

        clock.now += 1799
        self.assertIsNotNone(cache.get())
        self.assertEqual(cache.age(), 1799)

        clock.now += 1
        self.assertIsNone(cache.get())
        # stale entry is still visible for diagnostics
        self.assertIsNotNone(cache.peek())

    def test_hit_returns_stored_bytes(self) -> None:
        cache = FeedCache(ttl_seconds=60)
        body = '{"items":[{"subject":"Café"}]}'.encode("utf-8")
        cache.set({"items": [{"subject": "Café"}]}, body, now=10)
        self.assertIs(cache.get(now=20).body, body)
        self.assertEqual(cache.get(now=69).body, body)

    def test_set_replaces_slot(self) -> None:
        cache = FeedCache(ttl_seconds=60)
        cache.set({"v": 1}, b"1", now=0)
        cache.set({"v": 2}, b"2", now=50)
        entry = cache.get(now=100)
        self.assertEqual(entry.body, b"2")
        self.assertEqual(entry.timestamp, 50)

        cache.clear()
        self.assertIsNone(cache.get(now=100))


if __name__ == "__main__":
    unittest.main()
