"""
Best-effort critical-minerals price annotations.

Prices are scraped from free-text search snippets, so every extraction has a
sanity bound that rejects numbers in the wrong unit or currency. Nothing here
may fail the intel feed: each search is isolated and the caller gets the
reference table with whatever prices resolved (None for the rest).
"""
from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Pattern, Tuple

import httpx

from services.providers.errors import ProviderError
from services.providers.serper_client import serper_search

logger = logging.getLogger(__name__)

MINERAL_REFERENCE: Dict[str, Dict[str, Any]] = {
    "gold": {"symbol": "Au", "unit": "/oz", "origins": "China, Australia, Russia, USA", "players": "Newmont, Barrick Gold, AngloGold"},
    "silver": {"symbol": "Ag", "unit": "/oz", "origins": "Mexico, Peru, China, Australia", "players": "Fresnillo, Polymetal, Pan American Silver"},
    "lithium": {"symbol": "Li", "unit": "/t", "origins": "Australia, Chile, China, Argentina", "players": "Albemarle, SQM, Ganfeng Lithium"},
    "cobalt": {"symbol": "Co", "unit": "/t", "origins": "DRC (70%), Russia, Australia", "players": "Glencore, CMOC, ERG"},
    "copper": {"symbol": "Cu", "unit": "/lb", "origins": "Chile, Peru, DRC, China", "players": "Codelco, Freeport-McMoRan, BHP"},
    "rareEarths": {"symbol": "RE", "unit": "", "origins": "China (60%), Myanmar, USA, Australia", "players": "Northern Rare Earths, Lynas, MP Materials"},
}

PRECIOUS_QUERY = ("gold silver price per ounce today 2026", 5)
INDUSTRIAL_QUERY = ("lithium cobalt copper price 2026 per tonne", 5)
RARE_EARTH_QUERY = ("rare earth minerals supply chain status 2026", 2)

RARE_EARTH_CONSTRAINED = "⚠ CONSTRAINED"
RARE_EARTH_STABLE = "✅ STABLE"
RARE_EARTH_MONITORED = "⬤ MONITORED"

_CONSTRAINED = re.compile(r"shortage|crisis|disruption|restrict|ban|tension", re.IGNORECASE)
_STABLE = re.compile(r"stable|surplus|growth", re.IGNORECASE)
_DOLLAR = re.compile(r"\$[\d,]+\.?\d*")

Bound = Callable[[str], bool]


def _number(raw: str) -> float:
    return float(raw.replace(",", "").rstrip("."))


def _above(floor: float) -> Bound:
    return lambda raw: int(_number(raw)) > floor


def _below(ceiling: float) -> Bound:
    return lambda raw: _number(raw) < ceiling


def _any(raw: str) -> bool:
    _number(raw)
    return True


# Patterns are tried in order; the first match that passes its bound wins.
PRICE_PATTERNS: Dict[str, List[Tuple[Pattern[str], Bound]]] = {
    "gold": [
        (re.compile(r"gold.*?\$\s*([\d,]+\.?\d*)", re.IGNORECASE), _above(1000)),
        (re.compile(r"\$\s*([\d,]+\.?\d*).*?(?:per\s+ounce|/oz)", re.IGNORECASE), _above(1000)),
    ],
    "silver": [(re.compile(r"silver.*?\$\s*([\d,.]+)", re.IGNORECASE), _below(200))],
    "lithium": [(re.compile(r"lithium.*?\$\s*([\d,]+)", re.IGNORECASE), _above(1000))],
    "cobalt": [(re.compile(r"cobalt.*?\$\s*([\d,]+)", re.IGNORECASE), _above(1000))],
    "copper": [(re.compile(r"copper.*?\$\s*([\d,.]+)", re.IGNORECASE), _any)],
}


@dataclass
class CommodityResult:
    minerals: Dict[str, Dict[str, Any]]
    errors: List[str] = field(default_factory=list)


def seed_reference() -> Dict[str, Dict[str, Any]]:
    """Fresh reference table for one aggregation cycle, all prices unresolved."""
    return {key: {**copy.deepcopy(entry), "price": None} for key, entry in MINERAL_REFERENCE.items()}


def extract_price(commodity: str, text: str) -> Optional[str]:
    for pattern, in_range in PRICE_PATTERNS.get(commodity, []):
        match = pattern.search(text or "")
        if not match:
            continue
        raw = match.group(1)
        try:
            accepted = in_range(raw)
        except ValueError:
            continue
        if accepted:
            return f"${raw}"
    return None


def _knowledge_graph_price(data: Dict[str, Any]) -> Optional[str]:
    kg = data.get("knowledgeGraph") or {}
    if not isinstance(kg, dict):
        return None
    attributes = kg.get("attributes") if isinstance(kg.get("attributes"), dict) else {}
    text = attributes.get("Price") or kg.get("description") or ""
    match = _DOLLAR.search(str(text))
    if not match:
        return None
    try:
        if int(_number(match.group(0)[1:])) <= 1000:
            return None
    except ValueError:
        return None
    return match.group(0)


def _organic_texts(data: Dict[str, Any]) -> List[str]:
    texts: List[str] = []
    for result in data.get("organic") or []:
        if not isinstance(result, dict):
            continue
        texts.append(f"{result.get('title') or ''} {result.get('snippet') or ''}")
    return texts


def apply_snippet_prices(minerals: Dict[str, Dict[str, Any]], commodities: List[str], data: Dict[str, Any]) -> None:
    for text in _organic_texts(data):
        for commodity in commodities:
            if minerals[commodity]["price"]:
                continue
            price = extract_price(commodity, text)
            if price:
                minerals[commodity]["price"] = price


def rare_earth_status(data: Dict[str, Any]) -> str:
    organic = data.get("organic") or []
    first = organic[0] if organic and isinstance(organic[0], dict) else {}
    snippet = first.get("snippet") or ""
    if _CONSTRAINED.search(snippet):
        return RARE_EARTH_CONSTRAINED
    if _STABLE.search(snippet):
        return RARE_EARTH_STABLE
    return RARE_EARTH_MONITORED


async def enrich_prices(
    reference: Dict[str, Dict[str, Any]],
    api_key: Optional[str],
    *,
    client: httpx.AsyncClient,
    errors: Optional[List[str]] = None,
) -> Dict[str, Dict[str, Any]]:
    """
    Populate ``price`` fields in place from three sequential searches.

    Each search failure is logged and recorded in ``errors``; the remaining
    searches still run. Never retries.
    """
    if not api_key:
        return reference

    async def _search(label: str, query: Tuple[str, int]) -> Optional[Dict[str, Any]]:
        text, num = query
        try:
            return await serper_search(text, api_key, num, client=client)
        except ProviderError as exc:
            logger.warning("intel_minerals_query_failed batch=%s status=%s error=%s", label, exc.status_code, exc.detail)
            if errors is not None:
                errors.append(f"{label}: {exc.detail}")
            return None

    data = await _search("precious", PRECIOUS_QUERY)
    if data is not None:
        kg_price = _knowledge_graph_price(data)
        if kg_price:
            reference["gold"]["price"] = kg_price
        apply_snippet_prices(reference, ["gold", "silver"], data)

    data = await _search("industrial", INDUSTRIAL_QUERY)
    if data is not None:
        apply_snippet_prices(reference, ["lithium", "cobalt", "copper"], data)

    data = await _search("rare_earths", RARE_EARTH_QUERY)
    if data is not None:
        reference["rareEarths"]["price"] = rare_earth_status(data)

    resolved = sorted(key for key, entry in reference.items() if entry["price"])
    logger.info("intel_minerals_enriched resolved=%s", ",".join(resolved) or "none")
    return reference


async def run_commodity_pipeline(api_key: Optional[str], *, client: httpx.AsyncClient) -> CommodityResult:
    """Isolated failure domain: always returns a table, even on unexpected errors."""
    result = CommodityResult(minerals=seed_reference())
    try:
        await enrich_prices(result.minerals, api_key, client=client, errors=result.errors)
    except Exception as exc:
        logger.exception("intel_minerals_pipeline_failed: %s", exc)
        result.errors.append(f"pipeline: {exc}")
    return result
