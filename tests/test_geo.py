# tests/test_geo.py
from __future__ import annotations

import pytest

import ipma_dashboard.api.geo as geo
from ipma_dashboard.api.errors import EmptyCandidateSet

LISBOA = (38.7660, -9.1286)
PORTO = (41.1580, -8.6294)
FARO = (37.0146, -7.9331)


def test_haversine_zero_for_same_point():
    assert geo.haversine_km(LISBOA, LISBOA) == 0.0


def test_haversine_lisboa_porto_is_about_270_km():
    d = geo.haversine_km(LISBOA, PORTO)
    assert 260 < d < 280
    # symmetrinen
    assert d == pytest.approx(geo.haversine_km(PORTO, LISBOA))


def test_haversine_one_degree_of_latitude():
    # 2πR / 360 ≈ 111.19 km
    assert geo.haversine_km((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111.195, abs=0.01)


def test_nearest_picks_minimum_distance():
    candidates = [(PORTO, "porto"), (FARO, "faro"), (LISBOA, "lisboa")]
    assert geo.nearest((38.72, -9.14), candidates) == "lisboa"
    assert geo.nearest((41.0, -8.6), candidates) == "porto"
    assert geo.nearest((37.1, -8.0), candidates) == "faro"


def test_nearest_tie_goes_to_first_in_input_order():
    # molemmat 1° päässä kyselypisteestä
    candidates = [((1.0, 0.0), "north"), ((-1.0, 0.0), "south")]
    assert geo.nearest((0.0, 0.0), candidates) == "north"

    candidates.reverse()
    assert geo.nearest((0.0, 0.0), candidates) == "south"


def test_nearest_duplicate_coordinates_resolve_to_first():
    candidates = [(PORTO, "a"), (LISBOA, "b"), (LISBOA, "c")]
    assert geo.nearest(LISBOA, candidates) == "b"


def test_nearest_empty_raises():
    with pytest.raises(EmptyCandidateSet) as exc:
        geo.nearest(LISBOA, [], kind="station")
    assert exc.value.kind == "station"
