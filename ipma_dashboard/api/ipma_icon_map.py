from __future__ import annotations

from typing import Final

DEFAULT_ICON: Final[str] = "01d"  # clear sky

# IPMA idWeatherType → OpenWeatherMap-tyylinen ikonikoodi
_ICON_BY_WEATHER_TYPE: Final[dict[int, str]] = {
    -99: "01d",  # no information
    0: "01d",  # no information
    1: "01d",  # clear sky
    2: "02d",  # partly cloudy
    3: "03d",  # sunny intervals
    4: "04d",  # cloudy
    5: "02d",  # cloudy (high cloud)
    6: "09d",  # showers/rain
    7: "10d",  # light showers/rain
    8: "11d",  # heavy showers/rain
    9: "09d",  # rain/showers
    10: "10d",  # light rain
    11: "11d",  # heavy rain/showers
    12: "10d",  # intermittent rain
    13: "10d",  # intermittent light rain
    14: "11d",  # intermittent heavy rain
    15: "09d",  # drizzle
    16: "50d",  # mist
    17: "50d",  # fog
    18: "13d",  # snow
    19: "11d",  # thunderstorms
    20: "11d",  # showers and thunderstorms
    21: "13d",  # hail
    22: "50d",  # frost
    23: "11d",  # rain and thunderstorms
    24: "04d",  # convective clouds
    25: "02d",  # partly cloudy
    26: "50d",  # fog
    27: "04d",  # cloudy
    28: "13d",  # snow showers
    29: "13d",  # rain and snow
    30: "13d",  # rain and snow
}


def weather_type_to_icon(code: int | None) -> str:
    """
    IPMA-säätyyppi → ikoniavain.

    Tuntematon tai puuttuva koodi → "01d" (selkeää), ei koskaan virhettä.
    """
    if code is None:
        return DEFAULT_ICON
    return _ICON_BY_WEATHER_TYPE.get(code, DEFAULT_ICON)
