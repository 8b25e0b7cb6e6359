# tests/test_observations.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

import ipma_dashboard.api.observations as obs
from ipma_dashboard.api.errors import NoCurrentObservation, UpstreamSchemaError
from ipma_dashboard.api.ipma_models import ObservationSnapshot

T = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def _snap(ts: datetime) -> ObservationSnapshot:
    return ObservationSnapshot(timestamp=ts, records={})


def test_select_current_returns_latest_not_in_future():
    a = _snap(T - timedelta(hours=2))
    b = _snap(T - timedelta(hours=1))
    c = _snap(T + timedelta(hours=1))
    # tarkoituksella sekaisin
    snapshots = {"c": c, "a": a, "b": b}

    assert obs.select_current(snapshots, T) is b


def test_select_current_includes_exact_now():
    exact = _snap(T)
    snapshots = {"old": _snap(T - timedelta(hours=3)), "now": exact}
    assert obs.select_current(snapshots, T) is exact


def test_select_current_all_future_raises():
    snapshots = {"x": _snap(T + timedelta(minutes=1)), "y": _snap(T + timedelta(hours=5))}
    with pytest.raises(NoCurrentObservation):
        obs.select_current(snapshots, T)


def test_select_current_empty_raises():
    with pytest.raises(NoCurrentObservation):
        obs.select_current({}, T)


def test_select_current_naive_now_is_utc():
    b = _snap(T - timedelta(hours=1))
    assert obs.select_current({"b": b}, T.replace(tzinfo=None)) is b


def test_parse_utc_timestamp_variants():
    assert obs.parse_utc_timestamp("2024-05-01T10:00") == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert obs.parse_utc_timestamp("2024-05-01T10:00:00Z") == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    # +01:00 -> 09:00 UTC
    assert obs.parse_utc_timestamp("2024-05-01T10:00+01:00") == datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    assert obs.parse_utc_timestamp("not a time") is None


def test_parse_observations_skips_broken_keys_and_null_stations():
    raw = {
        "2024-05-01T10:00": {
            "1200579": {"temperatura": 18.5, "humidade": 70.0},
            "1200545": None,
        },
        "garbage": {"1200579": {"temperatura": 1.0}},
    }

    out = obs.parse_observations(raw)

    assert list(out) == ["2024-05-01T10:00"]
    snap = out["2024-05-01T10:00"]
    assert snap.record_for(1200579).temperature == 18.5
    assert snap.record_for("1200545") is None


def test_parse_observations_requires_mapping():
    with pytest.raises(UpstreamSchemaError):
        obs.parse_observations([1, 2, 3])
