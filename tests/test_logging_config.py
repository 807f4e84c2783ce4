import json
import logging
import os
import unittest
from unittest.mock import patch

from config.logging_config import HOSTED_ENV_MARKERS, JsonFormatter, _use_json


class JsonFormatterTests(unittest.TestCase):
    def _record(self, **extra) -> logging.LogRecord:
        record = logging.LogRecord(
            "services.intel.aggregator", logging.INFO, __file__, 1,
            "intel_provider_fanout provider=%s items=%s", ("serper", 12), None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_single_line_with_extra_fields(self) -> None:
        line = JsonFormatter().format(self._record(provider="serper", cache_status="MISS", skipped=None))
        self.assertNotIn("\n", line)
        payload = json.loads(line)
        self.assertEqual(payload["level"], "INFO")
        self.assertEqual(payload["logger"], "services.intel.aggregator")
        self.assertEqual(payload["message"], "intel_provider_fanout provider=serper items=12")
        self.assertEqual(payload["provider"], "serper")
        self.assertEqual(payload["cache_status"], "MISS")
        self.assertNotIn("skipped", payload)
        self.assertNotIn("args", payload)

    def test_hosted_platform_switches_to_json(self) -> None:
        clean = {key: value for key, value in os.environ.items() if key not in HOSTED_ENV_MARKERS + ("LOG_JSON",)}
        with patch.dict(os.environ, clean, clear=True):
            self.assertFalse(_use_json())
        with patch.dict(os.environ, {**clean, "NETLIFY": "true"}, clear=True):
            self.assertTrue(_use_json())
        with patch.dict(os.environ, {**clean, "LOG_JSON": "1"}, clear=True):
            self.assertTrue(_use_json())


if __name__ == "__main__":
    unittest.main()
