from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, List

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_PATH = Path(__file__).resolve().parents[2] / "data" / "live_intel.json"


class FallbackSnapshotError(RuntimeError):
    """Raised when the bundled static snapshot cannot be read or parsed."""


def fallback_path() -> Path:
    override = os.getenv("INTEL_FALLBACK_PATH")
    return Path(override) if override else DEFAULT_FALLBACK_PATH


def load_static_snapshot(path: Path | str | None = None) -> List[Any]:
    """Return the snapshot array exactly as stored on disk."""
    target = Path(path) if path else fallback_path()
    try:
        raw = target.read_text(encoding="utf-8")
        data = json.loads(raw)
    except (OSError, ValueError) as exc:
        raise FallbackSnapshotError(f"cannot load fallback snapshot {target}: {exc}") from exc

    if not isinstance(data, list):
        raise FallbackSnapshotError(f"fallback snapshot {target} is {type(data).__name__}, expected array")

    logger.info("intel_fallback_loaded path=%s items=%s", target, len(data))
    return data
