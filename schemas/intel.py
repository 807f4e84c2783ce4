from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from services.intel.taxonomy import Sector


class EventRecordSchema(BaseModel):
    sector: Sector
    subject: str = Field(min_length=1)
    keyPlayers: str = ""
    timeline: str = ""
    impact: str = ""
    sourceLabel: str = ""
    url: Optional[str] = None
    latitude: str = "20.0"
    longitude: str = "0.0"
    category: str
    isCurated: bool = False
    origin: str


class CommodityEntrySchema(BaseModel):
    symbol: str
    unit: str
    origins: str
    players: str
    price: Optional[str] = None


class IntelFeedPayload(BaseModel):
    items: List[EventRecordSchema] = Field(default_factory=list)
    minerals: Dict[str, CommodityEntrySchema] = Field(default_factory=dict)


class FeedCacheState(BaseModel):
    fresh: bool
    age_sec: Optional[float] = None
    ttl_sec: int


class IntelDiagnostics(BaseModel):
    cache: FeedCacheState
    providers: Dict[str, bool]
    items_by_origin: Dict[str, int] = Field(default_factory=dict)
    item_count: int = 0
