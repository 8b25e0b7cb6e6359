# ipma_dashboard/api/ipma_models.py
"""Typed IPMA records, validated where the JSON enters the application."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
from datetime import date, datetime
from typing import Any

from ipma_dashboard.api.errors import UpstreamSchemaError
from ipma_dashboard.api.weather_utils import as_float, as_int, as_reading


def _require(raw: Any, key: str, resource: str) -> Any:
    if not isinstance(raw, Mapping) or raw.get(key) is None:
        raise UpstreamSchemaError(resource, f"missing field '{key}'")
    return raw[key]


def _require_float(raw: Any, key: str, resource: str) -> float:
    value = as_float(_require(raw, key, resource))
    if value is None:
        raise UpstreamSchemaError(resource, f"field '{key}' is not numeric")
    return value


def _require_int(raw: Any, key: str, resource: str) -> int:
    value = as_int(_require(raw, key, resource))
    if value is None:
        raise UpstreamSchemaError(resource, f"field '{key}' is not an integer")
    return value


@dataclass(frozen=True)
class Region:
    """Ennustealue (kaupunki/saari) distrits-islands.json -listasta."""

    id: int
    name: str
    latitude: float
    longitude: float
    forecast_key: int  # globalIdLocal, ennuste-URL:n parametri
    area_id: str = ""
    district_id: int | None = None

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    @classmethod
    def from_dict(cls, raw: Any, resource: str = "regions") -> Region:
        global_id = _require_int(raw, "globalIdLocal", resource)
        return cls(
            id=global_id,
            name=str(_require(raw, "local", resource)),
            latitude=_require_float(raw, "latitude", resource),
            longitude=_require_float(raw, "longitude", resource),
            forecast_key=global_id,
            area_id=str(raw.get("idAreaAviso") or ""),
            district_id=as_int(raw.get("idDistrito")),
        )


@dataclass(frozen=True)
class Station:
    """Havaintoasema (GeoJSON feature)."""

    id: int
    name: str
    latitude: float
    longitude: float

    @property
    def coordinate(self) -> tuple[float, float]:
        return (self.latitude, self.longitude)

    @classmethod
    def from_dict(cls, raw: Any, resource: str = "stations") -> Station:
        props = _require(raw, "properties", resource)
        geometry = _require(raw, "geometry", resource)
        coords = _require(geometry, "coordinates", resource)
        if not isinstance(coords, list | tuple) or len(coords) < 2:
            raise UpstreamSchemaError(resource, "geometry.coordinates is not a [lon, lat] pair")

        # GeoJSON: [lon, lat]
        lon = as_float(coords[0])
        lat = as_float(coords[1])
        if lat is None or lon is None:
            raise UpstreamSchemaError(resource, "geometry.coordinates is not numeric")

        return cls(
            id=_require_int(props, "idEstacao", resource),
            name=str(_require(props, "localEstacao", resource)),
            latitude=lat,
            longitude=lon,
        )


@dataclass(frozen=True)
class WeatherType:
    code: int
    description_en: str
    description_pt: str

    def description(self, lang: str = "EN") -> str:
        return self.description_pt if lang.upper() == "PT" else self.description_en

    @classmethod
    def from_dict(cls, raw: Any, resource: str = "weather-types") -> WeatherType:
        return cls(
            code=_require_int(raw, "idWeatherType", resource),
            description_en=str(raw.get("descWeatherTypeEN") or ""),
            description_pt=str(raw.get("descWeatherTypePT") or ""),
        )


@dataclass(frozen=True)
class ObservationRecord:
    """
    Yhden aseman lukemat yhdellä hetkellä.

    None = lukema puuttuu (IPMA lähettää -99 tai null).
    """

    wind_speed_kmh: float | None
    temperature: float | None
    radiation: float | None
    wind_direction: int | None
    precipitation: float | None
    wind_speed_ms: float | None
    humidity: float | None
    pressure: float | None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> ObservationRecord:
        wind_dir = as_reading(raw.get("idDireccVento"))
        return cls(
            wind_speed_kmh=as_reading(raw.get("intensidadeVentoKM")),
            temperature=as_reading(raw.get("temperatura")),
            radiation=as_reading(raw.get("radiacao")),
            wind_direction=None if wind_dir is None else int(wind_dir),
            precipitation=as_reading(raw.get("precAcumulada")),
            wind_speed_ms=as_reading(raw.get("intensidadeVento")),
            humidity=as_reading(raw.get("humidade")),
            pressure=as_reading(raw.get("pressao")),
        )


@dataclass(frozen=True)
class ObservationSnapshot:
    """Kaikkien asemien lukemat yhdellä aikaleimalla."""

    timestamp: datetime
    records: dict[str, ObservationRecord] = field(default_factory=dict)

    def record_for(self, station_id: int | str) -> ObservationRecord | None:
        return self.records.get(str(station_id))

    @classmethod
    def from_dict(cls, timestamp: datetime, raw: Any, resource: str = "observations") -> ObservationSnapshot:
        if raw is None:
            return cls(timestamp=timestamp)
        if not isinstance(raw, Mapping):
            raise UpstreamSchemaError(resource, f"snapshot {timestamp.isoformat()} is not an object")

        records: dict[str, ObservationRecord] = {}
        for station_id, rec in raw.items():
            # null = asemalta ei tullut dataa tällä kertaa
            if isinstance(rec, Mapping):
                records[str(station_id)] = ObservationRecord.from_dict(rec)
        return cls(timestamp=timestamp, records=records)


@dataclass(frozen=True)
class ForecastDay:
    forecast_date: date
    temp_min: float | None
    temp_max: float | None
    weather_type: int
    precipitation_probability: float | None = None

    @classmethod
    def from_dict(cls, raw: Any, resource: str = "forecast") -> ForecastDay:
        raw_date = str(_require(raw, "forecastDate", resource))
        try:
            forecast_date = date.fromisoformat(raw_date)
        except ValueError as err:
            raise UpstreamSchemaError(resource, "field 'forecastDate' is not an ISO date") from err

        return cls(
            forecast_date=forecast_date,
            temp_min=as_reading(raw.get("tMin")),
            temp_max=as_reading(raw.get("tMax")),
            weather_type=_require_int(raw, "idWeatherType", resource),
            precipitation_probability=as_reading(raw.get("precipitaProb")),
        )


# --- normalisoitu raportti -----------------------------------------------------


@dataclass(frozen=True)
class ForecastEntry:
    temp_min: int
    temp_max: int
    date: int  # epoch-sekunnit, päivän 00:00 UTC
    icon: str
    description: str


@dataclass(frozen=True)
class WeatherReport:
    """Palveluntarjoajasta riippumaton sääraportti (nykytila + päiväennusteet)."""

    provider: str
    temp: int
    humidity: float
    wind: int
    description: str
    icon: str
    region: str
    city: str
    min_temp: int
    max_temp: int
    precip: float
    forecast: list[ForecastEntry] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "weatherProvider": self.provider,
            "temp": self.temp,
            "humidity": self.humidity,
            "wind": self.wind,
            "description": self.description,
            "icon": self.icon,
            "region": self.region,
            "city": self.city,
            "minTemp": self.min_temp,
            "maxTemp": self.max_temp,
            "precip": self.precip,
            "forecast": [asdict(f) for f in self.forecast],
        }
