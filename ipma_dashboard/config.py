# config.py
"""Configuration settings for the IPMA weather dashboard."""

import os
from zoneinfo import ZoneInfo

HTTP_TIMEOUT_S: float = 8.0
CACHE_TTL_MED: int = 300

DEV: bool = os.environ.get("DEV", "0") == "1"

# ------------------- IPMA OPEN DATA -------------------

IPMA_BASE_URL: str = os.getenv("IPMA_BASE_URL", "https://api.ipma.pt/open-data").rstrip("/")
"""Base URL of the IPMA open-data API."""

IPMA_REGIONS_URL: str = f"{IPMA_BASE_URL}/distrits-islands.json"
IPMA_STATIONS_URL: str = f"{IPMA_BASE_URL}/observation/meteorology/stations/stations.json"
IPMA_WEATHER_TYPES_URL: str = f"{IPMA_BASE_URL}/weather-type-classe.json"
IPMA_OBSERVATIONS_URL: str = f"{IPMA_BASE_URL}/observation/meteorology/stations/observations.json"
IPMA_FORECAST_URL: str = f"{IPMA_BASE_URL}/forecast/meteorology/cities/daily/{{forecast_key}}.json"
"""Forecast endpoint template, formatted with the region's globalIdLocal."""

PROVIDER_NAME: str = "IPMA"

DESCRIPTION_LANG: str = os.getenv("IPMA_DESCRIPTION_LANG", "EN").upper()
"""Weather type description variant: 'EN' or 'PT'."""

MISSING_READING: float = -99
"""IPMA sentinel value for 'no reading'."""

EARTH_RADIUS_KM: float = 6371.0

# ------------------- GEOLOCATION AND TIMEZONE -------------------

LAT: float = float(os.getenv("IPMA_LAT", "38.7223"))
LON: float = float(os.getenv("IPMA_LON", "-9.1393"))
"""Lisbon coordinates for weather data (latitude, longitude)."""

TZ: ZoneInfo = ZoneInfo("Europe/Lisbon")
"""Timezone used for display (observation selection is always UTC)."""

# ------------------- UNIT CONVERSIONS -------------------

KMH_TO_MPH: float = 0.621371
MM_TO_INCH: float = 0.03937007874
