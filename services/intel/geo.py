from __future__ import annotations

from typing import List, Tuple

Coords = Tuple[float, float]

DEFAULT_COORDS: Coords = (20.0, 0.0)

# Ordered (keyword, coords) pairs; the first keyword found in the text wins,
# so an earlier short keyword shadows any later name containing it
# ("china" is checked before "south china sea").
REGION_COORDS: List[Tuple[str, Coords]] = [
    ("ukraine", (49.0, 31.2)),
    ("russia", (61.5, 105.3)),
    ("gaza", (31.5, 34.5)),
    ("israel", (31.0, 34.9)),
    ("palestine", (31.9, 35.2)),
    ("iran", (32.4, 53.7)),
    ("iraq", (33.2, 43.7)),
    ("syria", (34.8, 38.9)),
    ("china", (35.9, 104.2)),
    ("taiwan", (23.7, 120.9)),
    ("hong kong", (22.3, 114.2)),
    ("north korea", (40.3, 127.5)),
    ("korea", (36.5, 127.9)),
    ("usa", (37.1, -95.6)),
    ("united states", (37.1, -95.6)),
    ("america", (37.1, -95.6)),
    ("europe", (54.5, 15.3)),
    ("germany", (51.2, 10.5)),
    ("france", (46.2, 2.2)),
    ("uk", (55.4, -3.4)),
    ("britain", (55.4, -3.4)),
    ("nato", (50.8, 4.3)),
    ("un", (40.7, -74.0)),
    ("africa", (8.8, 26.8)),
    ("sudan", (12.9, 30.2)),
    ("ethiopia", (9.1, 40.5)),
    ("somalia", (5.2, 46.2)),
    ("nigeria", (9.1, 8.7)),
    ("congo", (-4.0, 21.8)),
    ("india", (20.6, 79.0)),
    ("pakistan", (30.4, 69.3)),
    ("afghanistan", (33.9, 67.7)),
    ("myanmar", (19.2, 96.7)),
    ("thailand", (15.9, 101.0)),
    ("philippines", (12.9, 121.8)),
    ("japan", (36.2, 138.3)),
    ("south china sea", (14.0, 114.0)),
    ("venezuela", (6.4, -66.6)),
    ("colombia", (4.6, -74.1)),
    ("mexico", (23.6, -102.5)),
    ("brazil", (-14.2, -51.9)),
    ("haiti", (18.9, -72.3)),
    ("turkey", (38.9, 35.2)),
    ("saudi arabia", (23.9, 45.1)),
    ("yemen", (15.6, 48.5)),
]


def locate(text: str | None) -> Coords:
    lowered = (text or "").lower()
    for keyword, coords in REGION_COORDS:
        if keyword in lowered:
            return coords
    return DEFAULT_COORDS


def format_coords(coords: Coords) -> Tuple[str, str]:
    lat, lng = coords
    return str(float(lat)), str(float(lng))
