# weather_icons.py
import html

ICON_BASE_URL = "https://openweathermap.org/img/wn"


def icon_url(key: str) -> str:
    return f"{ICON_BASE_URL}/{key}@2x.png"


def render_weather_icon(key: str, size: int = 48) -> str:
    """
    key = '01d'…'50d'. Palauttaa <img>-HTML:n.
    """
    if not key:
        # näytä neutraali placeholder
        return (
            f'<span style="display:inline-block;width:{size}px;height:{size}px;'
            f"background:#eee;border-radius:8px;text-align:center;line-height:{size}px;"
            f'color:#888;">?</span>'
        )
    safe_key = html.escape(key)
    return (
        f'<img src="{icon_url(safe_key)}" width="{size}" height="{size}" alt="{safe_key}" '
        f'style="vertical-align:middle;" />'
    )
