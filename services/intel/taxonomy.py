from __future__ import annotations

import re
from enum import Enum
from typing import List, Pattern, Tuple


class Sector(str, Enum):
    CONFLICT = "Geopolitics / Conflict"
    ECONOMY = "Economy / Global"
    ENVIRONMENT = "Environment / Energy"
    TECHNOLOGY = "Technology / Security"
    HEALTH = "Health / Society"


# Secondary label used by the front-end for colour coding.
BROAD_CATEGORIES = {
    Sector.CONFLICT: "Geopolitics & Conflict",
    Sector.ECONOMY: "Economy & Trade",
    Sector.ENVIRONMENT: "Environment & Energy",
    Sector.TECHNOLOGY: "Technology & Science",
    Sector.HEALTH: "Health & Society",
}

DEFAULT_SECTOR = Sector.CONFLICT

# Bump the version whenever a rule is added, removed or moved: order is the
# tie-break for text that matches more than one rule.
SECTOR_RULES_VERSION = "v1"

SECTOR_RULES: List[Tuple[Pattern[str], Sector]] = [
    (
        re.compile(r"war|conflict|military|attack|missile|sanction|nato|nuclear|troops|coup|siege|weapons|drone"),
        Sector.CONFLICT,
    ),
    (
        re.compile(r"economy|trade|gdp|inflation|tariff|market|debt|recession|bank|supply chain|crypto"),
        Sector.ECONOMY,
    ),
    (
        re.compile(r"climate|energy|oil|gas|carbon|emissions|environment|flooding|drought|cop"),
        Sector.ENVIRONMENT,
    ),
    (
        re.compile(r"ai|tech|cyber|hack|satellite|space|chip|quantum|digital|surveillance"),
        Sector.TECHNOLOGY,
    ),
    (
        re.compile(r"health|pandemic|disease|vaccine|hospital|mental|food crisis|famine"),
        Sector.HEALTH,
    ),
]


def classify(text: str | None) -> Sector:
    """Return the sector of the first rule whose pattern occurs in ``text``."""
    lowered = (text or "").lower()
    for pattern, sector in SECTOR_RULES:
        if pattern.search(lowered):
            return sector
    return DEFAULT_SECTOR


def broad_category(sector: Sector) -> str:
    return BROAD_CATEGORIES[sector]
