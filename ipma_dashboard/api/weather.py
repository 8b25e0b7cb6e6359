"""
Säärajapinnan julkiset entrypointit.

Varsinainen logiikka on jaettu:
- geo -> lähimmän alueen/aseman haku
- ipma_catalogs -> kerran haettavat viitelistat
- observations -> nykyhetken havainnon valinta
- ipma_icon_map -> säätyyppi → ikoni
- weather_utils -> tyypin- ja yksikkömuunnokset
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, time, timezone
from typing import Any

import streamlit as st

from ipma_dashboard.api.errors import MissingStationDataError, UpstreamSchemaError
from ipma_dashboard.api.geo import nearest
from ipma_dashboard.api.ipma_catalogs import (
    FetchJson,
    IpmaCatalogs,
    data_field,
    fetch_ipma_json,
    schema_errors_logged,
)
from ipma_dashboard.api.ipma_icon_map import weather_type_to_icon
from ipma_dashboard.api.ipma_models import (
    ForecastDay,
    ForecastEntry,
    ObservationSnapshot,
    Region,
    Station,
    WeatherReport,
)
from ipma_dashboard.api.observations import parse_observations, select_current
from ipma_dashboard.api.weather_utils import (
    celsius_to_fahrenheit,
    kmh_to_mph,
    mm_to_inches_per_hour,
)
from ipma_dashboard.config import (
    CACHE_TTL_MED,
    DESCRIPTION_LANG,
    IPMA_FORECAST_URL,
    IPMA_OBSERVATIONS_URL,
    PROVIDER_NAME,
)

logger = logging.getLogger("ipmadashboard")


def _epoch_day(d: Any) -> int:
    return int(datetime.combine(d, time.min, tzinfo=timezone.utc).timestamp())


def _floor_f(celsius: float | None) -> int:
    return math.floor(celsius_to_fahrenheit(celsius))


class IpmaWeatherProvider:
    """Builds a :class:`WeatherReport` for a coordinate from IPMA open data.

    The nearest forecast region and the nearest observation station are
    resolved independently, so they need not be related to each other.
    Reference lists are fetched once per provider instance.

    Args:
        fetch_json: ``url -> parsed JSON`` collaborator.
        catalogs: Pre-built catalogs (shares their cache); built from
            *fetch_json* when omitted.
        lang: Weather type description variant, ``"EN"`` or ``"PT"``.
    """

    def __init__(
        self,
        fetch_json: FetchJson | None = None,
        catalogs: IpmaCatalogs | None = None,
        lang: str = DESCRIPTION_LANG,
    ) -> None:
        self.catalogs = catalogs or IpmaCatalogs(fetch_json)
        self._fetch_json = fetch_json or self.catalogs.fetch_json
        self.lang = lang

    # --- lähimmät ---

    def closest_region(self, lat: float, lon: float) -> Region:
        regions = self.catalogs.regions()
        return nearest((lat, lon), [(r.coordinate, r) for r in regions], kind="region")

    def closest_station(self, lat: float, lon: float) -> Station:
        stations = self.catalogs.stations()
        return nearest((lat, lon), [(s.coordinate, s) for s in stations], kind="station")

    # --- haut ---

    def fetch_forecast(self, region: Region) -> list[ForecastDay]:
        url = IPMA_FORECAST_URL.format(forecast_key=region.forecast_key)
        resource = f"forecast/{region.forecast_key}"
        doc = fetch_ipma_json(self._fetch_json, resource, url)

        with schema_errors_logged(resource):
            data = data_field(doc, resource)
            # päivä 0 tarvitaan kuvaukseen ja min/max-arvoihin
            if not data:
                raise UpstreamSchemaError(resource, "top-level field 'data' is empty")
            return [ForecastDay.from_dict(day, resource) for day in data]

    def fetch_observations(self) -> dict[str, ObservationSnapshot]:
        doc = fetch_ipma_json(self._fetch_json, "observations", IPMA_OBSERVATIONS_URL)
        with schema_errors_logged("observations"):
            return parse_observations(doc)

    # --- raportti ---

    def produce(self, lat: float, lon: float, now: datetime | None = None) -> WeatherReport:
        """Resolve, fetch, select and normalize.

        Any failure aborts the whole call with the originating error; a
        partial report is never returned.

        Raises:
            UpstreamFetchError, UpstreamSchemaError, EmptyCandidateSet,
            NoCurrentObservation, MissingStationDataError
        """
        logger.info("IPMA weather request for coordinates: (%s, %s)", lat, lon)

        region = self.closest_region(lat, lon)
        station = self.closest_station(lat, lon)

        forecast = self.fetch_forecast(region)
        snapshots = self.fetch_observations()

        current = select_current(snapshots, now)
        record = current.record_for(station.id)
        if record is None:
            raise MissingStationDataError(station.id, current.timestamp)

        today = forecast[0]
        # sama kuvaus kaikille päiville (vain päivä 0 on tarkka)
        description = self.catalogs.describe(today.weather_type, self.lang)

        entries = [
            ForecastEntry(
                temp_min=_floor_f(day.temp_min),
                temp_max=_floor_f(day.temp_max),
                date=_epoch_day(day.forecast_date),
                icon=weather_type_to_icon(day.weather_type),
                description=description,
            )
            for day in forecast
        ]

        report = WeatherReport(
            provider=PROVIDER_NAME,
            temp=_floor_f(record.temperature),
            humidity=record.humidity if record.humidity is not None else 0,
            wind=math.floor(kmh_to_mph(record.wind_speed_kmh)),
            description=description,
            icon=weather_type_to_icon(today.weather_type),
            region=region.name,
            city=station.name,
            min_temp=_floor_f(today.temp_min),
            max_temp=_floor_f(today.temp_max),
            precip=mm_to_inches_per_hour(record.precipitation),
            forecast=entries,
        )

        logger.info(
            "IPMA report region=%s station=%s temp=%s humidity=%s wind=%s",
            region.name,
            station.name,
            report.temp,
            report.humidity,
            report.wind,
        )
        return report


# --- dashboardin entrypointit --------------------------------------------------


@st.cache_resource
def get_provider() -> IpmaWeatherProvider:
    """Yksi provider per prosessi, jotta viitelistat haetaan vain kerran."""
    return IpmaWeatherProvider()


@st.cache_data(ttl=CACHE_TTL_MED)
def fetch_weather_report(lat: float, lon: float) -> WeatherReport:
    return get_provider().produce(lat, lon)


def get_weather_for_dashboard(lat: float, lon: float) -> dict[str, Any]:
    """Raportti palveluntarjoajasta riippumattomana dictinä."""
    return fetch_weather_report(lat, lon).to_dict()
