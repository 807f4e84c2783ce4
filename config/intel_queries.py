"""
Provider fan-out queries.

These are editorial choices (what counts as "breaking" right now) and change
without touching the pipeline. Set INTEL_QUERIES_PATH to a JSON file shaped
like DEFAULT_QUERIES to override them:

    {"serper": [["query text", 8], ...], "gnews": [["query text", 5], ...]}
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Dict, List, Tuple

logger = logging.getLogger(__name__)

Query = Tuple[str, int]

DEFAULT_QUERIES: Dict[str, List[Query]] = {
    # Primary, scoped to the past month by the adapter.
    "serper": [
        ("breaking geopolitics crisis conflict 2026 latest update", 8),
        ("Ukraine Gaza Sudan Taiwan ceasefire offensive latest development 2026", 7),
        ("global economy sanctions trade war tariffs 2026", 5),
        ("cyber attack AI surveillance military technology 2026", 4),
    ],
    # Backup, only used when the primary comes back thin.
    "gnews": [
        ("geopolitics war conflict UN sanctions", 8),
        ("global economy trade inflation crisis", 5),
    ],
}


def _parse_queries(raw: object) -> List[Query]:
    if not isinstance(raw, list):
        raise ValueError("query list must be a JSON array")
    out: List[Query] = []
    for entry in raw:
        if not isinstance(entry, (list, tuple)) or len(entry) != 2:
            raise ValueError(f"query entry must be [text, limit], got {entry!r}")
        text, limit = entry
        text = str(text).strip()
        if not text:
            continue
        out.append((text, max(1, int(limit))))
    return out


def load_queries(path: str | None = None) -> Dict[str, List[Query]]:
    """Return provider -> [(query, limit)], applying the JSON override when configured."""
    path = path or os.getenv("INTEL_QUERIES_PATH")
    queries = {provider: list(items) for provider, items in DEFAULT_QUERIES.items()}
    if not path:
        return queries

    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError("top level must be a JSON object")
        for provider in queries:
            if provider in raw:
                queries[provider] = _parse_queries(raw[provider])
    except (OSError, ValueError, TypeError) as exc:
        logger.warning("intel_queries_override_ignored path=%s error=%s", path, exc)
        return {provider: list(items) for provider, items in DEFAULT_QUERIES.items()}

    return queries
