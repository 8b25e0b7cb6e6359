# tests/test_ipma_catalogs.py
from __future__ import annotations

import logging
import threading

import pytest
import requests

import ipma_dashboard.api.ipma_catalogs as cat
from ipma_dashboard.api.errors import UpstreamFetchError, UpstreamSchemaError

REGIONS = {
    "owner": "IPMA",
    "data": [
        {"globalIdLocal": 1110600, "local": "Lisboa", "latitude": "38.7660", "longitude": "-9.1286"},
        {"globalIdLocal": 1131200, "local": "Porto", "latitude": "41.1580", "longitude": "-8.6294"},
    ],
}

STATIONS = [
    {
        "geometry": {"type": "Point", "coordinates": [-9.1498, 38.766]},
        "type": "Feature",
        "properties": {"idEstacao": 1200579, "localEstacao": "Lisboa (Geofísico)"},
    },
]

WEATHER_TYPES = {
    "owner": "IPMA",
    "data": [
        {"descWeatherTypeEN": "Clear sky", "descWeatherTypePT": "Céu limpo", "idWeatherType": 1},
        {"descWeatherTypeEN": "Partly cloudy", "descWeatherTypePT": "Céu pouco nublado", "idWeatherType": 2},
    ],
}


class CountingFetcher:
    """Palauttaa dokumentin URL:n loppuosan perusteella ja laskee kutsut."""

    def __init__(self, routes: dict):
        self.routes = routes
        self.calls: dict[str, int] = {}

    def __call__(self, url: str):
        for suffix, doc in self.routes.items():
            if url.endswith(suffix):
                self.calls[suffix] = self.calls.get(suffix, 0) + 1
                if isinstance(doc, Exception):
                    raise doc
                return doc
        raise AssertionError(f"unexpected url {url}")


def _fetcher(**overrides) -> CountingFetcher:
    routes = {
        "distrits-islands.json": REGIONS,
        "stations.json": STATIONS,
        "weather-type-classe.json": WEATHER_TYPES,
    }
    routes.update(overrides)
    return CountingFetcher(routes)


def test_catalogs_fetch_once_and_memoize():
    fetch = _fetcher()
    catalogs = cat.IpmaCatalogs(fetch)

    first = catalogs.regions()
    for _ in range(3):
        assert catalogs.regions() is first
        catalogs.stations()
        catalogs.weather_types()

    assert [r.name for r in first] == ["Lisboa", "Porto"]
    assert fetch.calls == {
        "distrits-islands.json": 1,
        "stations.json": 1,
        "weather-type-classe.json": 1,
    }


def test_catalogs_are_lazy():
    fetch = _fetcher()
    catalogs = cat.IpmaCatalogs(fetch)
    catalogs.stations()
    assert fetch.calls == {"stations.json": 1}


def test_transport_error_becomes_upstream_fetch_error_and_is_not_cached():
    fetch = _fetcher(**{"distrits-islands.json": requests.ConnectionError("connection refused")})
    catalogs = cat.IpmaCatalogs(fetch)

    with pytest.raises(UpstreamFetchError) as exc:
        catalogs.regions()

    assert exc.value.resource == "regions"
    assert isinstance(exc.value.cause, requests.ConnectionError)
    # viesti ei vuoda alkuperäistä virhettä
    assert "connection refused" not in str(exc.value)

    # seuraava kutsu yrittää uudelleen
    fetch.routes["distrits-islands.json"] = REGIONS
    assert len(catalogs.regions()) == 2
    assert fetch.calls["distrits-islands.json"] == 2


def test_missing_data_field_is_schema_error():
    fetch = _fetcher(**{"weather-type-classe.json": {"owner": "IPMA"}})
    catalogs = cat.IpmaCatalogs(fetch)

    with pytest.raises(UpstreamSchemaError) as exc:
        catalogs.weather_types()
    assert exc.value.resource == "weather-types"
    assert not catalogs._weather_types.populated


def test_stations_must_be_a_bare_list():
    fetch = _fetcher(**{"stations.json": {"data": STATIONS}})
    with pytest.raises(UpstreamSchemaError):
        cat.IpmaCatalogs(fetch).stations()


def test_describe_exact_match_and_empty_fallback():
    catalogs = cat.IpmaCatalogs(_fetcher())
    assert catalogs.describe(2) == "Partly cloudy"
    assert catalogs.describe(1, "PT") == "Céu limpo"
    assert catalogs.describe(9999) == ""


def test_once_cell_failed_loader_leaves_cell_empty():
    cell: cat.OnceCell[int] = cat.OnceCell()

    def boom():
        raise UpstreamFetchError("x")

    with pytest.raises(UpstreamFetchError):
        cell.get_or_populate(boom)
    assert not cell.populated
    assert cell.get_or_populate(lambda: [1, 2]) == (1, 2)


def test_once_cell_concurrent_first_access_loads_once():
    cell: cat.OnceCell[int] = cat.OnceCell()
    calls = {"n": 0}
    start = threading.Event()

    def loader():
        calls["n"] += 1
        return [1, 2, 3]

    results: list[tuple[int, ...]] = []

    def worker():
        start.wait()
        results.append(cell.get_or_populate(loader))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    start.set()
    for t in threads:
        t.join()

    assert calls["n"] == 1
    assert all(r == (1, 2, 3) for r in results)


def _ipma_errors(caplog) -> list[logging.LogRecord]:
    return [r for r in caplog.records if r.name == "ipmadashboard" and r.levelno == logging.ERROR]


def test_invalid_region_entry_is_logged_once_before_raising(caplog):
    broken = {"owner": "IPMA", "data": [{"globalIdLocal": 1, "local": "X", "latitude": "38.7"}]}
    catalogs = cat.IpmaCatalogs(_fetcher(**{"distrits-islands.json": broken}))

    with caplog.at_level(logging.ERROR, logger="ipmadashboard"):
        with pytest.raises(UpstreamSchemaError):
            catalogs.regions()

    records = _ipma_errors(caplog)
    assert len(records) == 1
    assert "regions" in records[0].getMessage()
    assert "longitude" in records[0].getMessage()


def test_transport_error_is_logged_once(caplog):
    fetch = _fetcher(**{"stations.json": requests.Timeout("read timed out")})

    with caplog.at_level(logging.ERROR, logger="ipmadashboard"):
        with pytest.raises(UpstreamFetchError):
            cat.IpmaCatalogs(fetch).stations()

    records = _ipma_errors(caplog)
    assert len(records) == 1
    assert "stations" in records[0].getMessage()
