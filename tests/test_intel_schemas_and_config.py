import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from config.intel_queries import DEFAULT_QUERIES, load_queries
from schemas.intel import EventRecordSchema, IntelFeedPayload
from services.intel.curated import CURATED_RECORDS, get_curated_records
from services.intel.fallback import FallbackSnapshotError, load_static_snapshot
from services.intel.minerals import seed_reference
from services.intel.taxonomy import broad_category


class CuratedSetTests(unittest.TestCase):
    def test_curated_records_validate_and_are_consistent(self) -> None:
        urls = set()
        for record in CURATED_RECORDS:
            parsed = EventRecordSchema.model_validate(record)
            self.assertTrue(parsed.isCurated)
            self.assertEqual(parsed.category, broad_category(parsed.sector))
            self.assertTrue(parsed.url)
            urls.add(parsed.url)
        self.assertEqual(len(urls), len(CURATED_RECORDS))

    def test_copies_do_not_leak_mutations(self) -> None:
        records = get_curated_records()
        records[0]["subject"] = "edited"
        self.assertNotEqual(CURATED_RECORDS[0]["subject"], "edited")


class StaticSnapshotTests(unittest.TestCase):
    def test_bundled_snapshot_matches_feed_schema(self) -> None:
        snapshot = load_static_snapshot()
        self.assertTrue(snapshot)
        payload = IntelFeedPayload.model_validate({"items": snapshot, "minerals": seed_reference()})
        self.assertEqual(len(payload.items), len(snapshot))

    def test_non_array_snapshot_is_rejected(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "snapshot.json"
            path.write_text(json.dumps({"items": []}), encoding="utf-8")
            with self.assertRaises(FallbackSnapshotError):
                load_static_snapshot(path)

    def test_env_override_is_honoured(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "snapshot.json"
            path.write_text(json.dumps([{"subject": "override"}]), encoding="utf-8")
            with patch.dict(os.environ, {"INTEL_FALLBACK_PATH": str(path)}):
                self.assertEqual(load_static_snapshot(), [{"subject": "override"}])


class QueryConfigTests(unittest.TestCase):
    def test_defaults_without_override(self) -> None:
        with patch.dict(os.environ, {}, clear=False):
            os.environ.pop("INTEL_QUERIES_PATH", None)
            queries = load_queries()
        self.assertEqual(queries, DEFAULT_QUERIES)
        self.assertEqual([limit for _q, limit in queries["serper"]], [8, 7, 5, 4])

    def test_override_replaces_named_providers_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "queries.json"
            path.write_text(json.dumps({"serper": [["sahel coup", 6], ["  ", 3]]}), encoding="utf-8")
            queries = load_queries(str(path))

        self.assertEqual(queries["serper"], [("sahel coup", 6)])
        self.assertEqual(queries["gnews"], DEFAULT_QUERIES["gnews"])

    def test_invalid_override_falls_back_to_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "queries.json"
            path.write_text(json.dumps({"serper": [["missing limit"]]}), encoding="utf-8")
            with self.assertLogs("config.intel_queries", level="WARNING"):
                queries = load_queries(str(path))

        self.assertEqual(queries, DEFAULT_QUERIES)


if __name__ == "__main__":
    unittest.main()
