# ipma_dashboard/api/ipma_catalogs.py
"""
IPMA:n viitedatat (ennustealueet, asemat, säätyypit).

Jokainen lista haetaan kerran ensimmäisellä käyttökerralla ja pidetään
muistissa omistavan olion eliniän ajan. Epäonnistunut haku ei jätä
välimuistiin mitään, joten seuraava kutsu yrittää uudelleen.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

import requests

from ipma_dashboard.api.errors import UpstreamFetchError, UpstreamSchemaError
from ipma_dashboard.api.http import http_get_json
from ipma_dashboard.api.ipma_models import Region, Station, WeatherType
from ipma_dashboard.config import (
    IPMA_REGIONS_URL,
    IPMA_STATIONS_URL,
    IPMA_WEATHER_TYPES_URL,
)

logger = logging.getLogger("ipmadashboard")

T = TypeVar("T")

FetchJson = Callable[[str], Any]


def fetch_ipma_json(fetch_json: FetchJson, resource: str, url: str) -> Any:
    """Hakee yhden IPMA-resurssin ja muuntaa siirtovirheet UpstreamFetchErroriksi."""
    try:
        return fetch_json(url)
    except (requests.RequestException, ValueError, OSError) as err:
        logger.error("IPMA fetch failed resource=%s url=%s: %s", resource, url, err)
        raise UpstreamFetchError(resource, err) from err


@contextmanager
def schema_errors_logged(resource: str) -> Iterator[None]:
    """Kirjaa hylätyn IPMA-vastauksen lokiin kerran ja nostaa virheen eteenpäin."""
    try:
        yield
    except UpstreamSchemaError as err:
        logger.error("IPMA response rejected resource=%s: %s", resource, err.detail)
        raise


def data_field(doc: Any, resource: str) -> list[Any]:
    # {"owner": "IPMA", "data": [...]}
    if not isinstance(doc, Mapping) or not isinstance(doc.get("data"), list):
        raise UpstreamSchemaError(resource, "missing top-level field 'data'")
    return doc["data"]


class OnceCell(Generic[T]):
    """Kerran täytettävä solu: tyhjä tai koko kokoelma, ei mitään siltä väliltä."""

    __slots__ = ("_lock", "_value")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value: tuple[T, ...] | None = None

    @property
    def populated(self) -> bool:
        return self._value is not None

    def get_or_populate(self, loader: Callable[[], list[T]]) -> tuple[T, ...]:
        value = self._value
        if value is not None:
            return value

        with self._lock:
            # toinen säie ehti ensin
            if self._value is not None:
                return self._value
            value = tuple(loader())
            self._value = value
        return value


class IpmaCatalogs:
    """Lazily fetched, memoized IPMA reference data.

    Args:
        fetch_json: ``url -> parsed JSON`` collaborator; defaults to
            :func:`~ipma_dashboard.api.http.http_get_json`.
    """

    def __init__(self, fetch_json: FetchJson | None = None) -> None:
        self.fetch_json = fetch_json or http_get_json
        self._regions: OnceCell[Region] = OnceCell()
        self._stations: OnceCell[Station] = OnceCell()
        self._weather_types: OnceCell[WeatherType] = OnceCell()

    # --- haut ---

    def _load_regions(self) -> list[Region]:
        doc = fetch_ipma_json(self.fetch_json, "regions", IPMA_REGIONS_URL)
        with schema_errors_logged("regions"):
            return [Region.from_dict(r) for r in data_field(doc, "regions")]

    def _load_stations(self) -> list[Station]:
        doc = fetch_ipma_json(self.fetch_json, "stations", IPMA_STATIONS_URL)
        with schema_errors_logged("stations"):
            # asemalista on suoraan taulukko ilman kääreobjektia
            if not isinstance(doc, list):
                raise UpstreamSchemaError("stations", "top-level value is not a list")
            return [Station.from_dict(s) for s in doc]

    def _load_weather_types(self) -> list[WeatherType]:
        doc = fetch_ipma_json(self.fetch_json, "weather-types", IPMA_WEATHER_TYPES_URL)
        with schema_errors_logged("weather-types"):
            return [WeatherType.from_dict(w) for w in data_field(doc, "weather-types")]

    # --- julkiset ---

    def regions(self) -> tuple[Region, ...]:
        return self._regions.get_or_populate(self._load_regions)

    def stations(self) -> tuple[Station, ...]:
        return self._stations.get_or_populate(self._load_stations)

    def weather_types(self) -> tuple[WeatherType, ...]:
        return self._weather_types.get_or_populate(self._load_weather_types)

    def describe(self, code: int, lang: str = "EN") -> str:
        """Säätyypin kuvaus; tuntematon koodi → tyhjä merkkijono."""
        for weather_type in self.weather_types():
            if weather_type.code == code:
                return weather_type.description(lang)
        return ""
