"""
paths.py – keskitetyt polut dashboardille.

Tämän ideana on, että voit aina kirjoittaa:
    from ipma_dashboard.paths import ASSETS, LOGS, asset_path

…ja saat oikean polun riippumatta siitä, kutsutaanko sovellusta
projektin juuresta (streamlit run main.py) vai jostain muualta.
"""

from __future__ import annotations

from pathlib import Path

_THIS_FILE = Path(__file__).resolve()

# ipma_dashboard/paths.py -> ipma_dashboard -> projektin juuri
ROOT_DIR = _THIS_FILE.parent.parent

ASSETS = ROOT_DIR / "assets"
LOGS = ROOT_DIR / "logs"


def asset_path(*parts: str) -> Path:
    """Palauttaa polun assets-kansioon."""
    return ASSETS.joinpath(*parts)


def ensure_dirs() -> None:
    """Varmistaa, että tietyt hakemistot ovat olemassa (esim. logs/)."""
    LOGS.mkdir(parents=True, exist_ok=True)
