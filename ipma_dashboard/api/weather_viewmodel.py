# ipma_dashboard/api/weather_viewmodel.py
from __future__ import annotations

from datetime import datetime
from typing import Any

from ipma_dashboard.api.weather import fetch_weather_report
from ipma_dashboard.config import LAT, LON, TZ

_WEEKDAYS = ("Ma", "Ti", "Ke", "To", "Pe", "La", "Su")


def _day_label(epoch: int, index: int) -> str:
    if index == 0:
        return "Tänään"
    return _WEEKDAYS[datetime.fromtimestamp(epoch, tz=TZ).weekday()]


def build_weather_view(lat: float = LAT, lon: float = LON) -> dict[str, Any]:
    """
    Palauttaa kortin tarvitsemat säädatan osat.
    Lämpötilat ovat fahrenheitteina, kuten normalisoitu raportti.
    """
    report = fetch_weather_report(lat, lon)

    days = [
        {
            "label": _day_label(entry.date, i),
            "icon": entry.icon,
            "temp_min": entry.temp_min,
            "temp_max": entry.temp_max,
        }
        for i, entry in enumerate(report.forecast)
    ]

    return {
        "title": f"{report.region} · {report.city}",
        "provider": report.provider,
        "temp": report.temp,
        "humidity": report.humidity,
        "wind": report.wind,
        "precip": round(report.precip, 2),
        "description": report.description,
        "icon": report.icon,
        "min_temp": report.min_temp,
        "max_temp": report.max_temp,
        "days": days,
    }
