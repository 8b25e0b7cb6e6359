from __future__ import annotations

import math
from typing import Any

import pandas as pd

from ipma_dashboard.config import KMH_TO_MPH, MISSING_READING, MM_TO_INCH


def _cast_to_float(value: Any) -> float | None:
    """Muunna annettu arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        result = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    # "NaN", "inf", "1e400" -> ei lukema
    return result if math.isfinite(result) else None


def _cast_to_int(value: Any) -> int | None:
    """Muunna annettu arvo int-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    as_f = _cast_to_float(value)
    if as_f is None:
        return None
    return int(as_f)


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely eri lähdetyypeille:
    - None → None
    - pandas NA / NaN → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # listat yms. joita pd.isna ei osaa tulkita skalaarina
        pass

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Turvallinen muunnos annetuksi tyypiksi (int, float, str).

    IPMA palauttaa osan luvuista merkkijonoina ("40.6413", "-99.0"),
    joten kaikki rajapinnan numerokentät kulkevat tämän kautta.
    Palauttaa None, jos muunnos ei onnistu.
    """
    value = _normalize_scalar(value)
    if value is None:
        return None

    if type_ is float:
        return _cast_to_float(value)
    if type_ is int:
        return _cast_to_int(value)
    if type_ is str:
        return str(value).strip()

    try:
        return type_(value)
    except (TypeError, ValueError):
        return None


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def as_reading(x: Any) -> float | None:
    """Lukema tai None, jos arvo puuttuu tai on IPMA:n -99-merkki."""
    value = as_float(x)
    if value is None or value == MISSING_READING:
        return None
    return value


# --- yksikkömuunnokset ---------------------------------------------------------
# Puuttuva lukema (None) muuttuu aina nollaksi, kuten IPMA-lähteen alkuperäinen
# käytös: -99 ei koskaan päädy raporttiin.


def celsius_to_fahrenheit(celsius: float | None) -> float:
    if celsius is None:
        return 0
    return celsius * 9 / 5 + 32


def kmh_to_mph(kmh: float | None) -> float:
    if kmh is None:
        return 0
    return kmh * KMH_TO_MPH


def mm_to_inches_per_hour(mm_per_hour: float | None) -> float:
    if mm_per_hour is None:
        return 0
    return mm_per_hour * MM_TO_INCH
