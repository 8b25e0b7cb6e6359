# ipma_dashboard/api/geo.py
"""Great-circle distance and nearest-point search."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

from ipma_dashboard.api.errors import EmptyCandidateSet
from ipma_dashboard.config import EARTH_RADIUS_KM

T = TypeVar("T")

Coordinate = tuple[float, float]


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two ``(lat, lon)`` points in kilometres.

    All arguments are in decimal degrees.
    """
    lat1, lon1 = a
    lat2, lon2 = b
    dlat = math.radians(lat2 - lat1)
    dlon = math.radians(lon2 - lon1)
    h = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlon / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def nearest(query: Coordinate, candidates: Sequence[tuple[Coordinate, T]], kind: str = "candidate") -> T:
    """
    Palauttaa lähimmän kandidaatin tunnisteen.

    Tasapelissä voittaa syötteessä ensimmäisenä oleva (min() on vakaa).
    Tyhjä kandidaattilista -> EmptyCandidateSet.
    """
    if not candidates:
        raise EmptyCandidateSet(kind)

    _, ident = min(candidates, key=lambda c: haversine_km(query, c[0]))
    return ident
