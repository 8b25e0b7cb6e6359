# ipma_dashboard/ui/card_weather.py
from __future__ import annotations

import html

from streamlit.components.v1 import html as st_html

from ipma_dashboard.api.weather_viewmodel import build_weather_view
from ipma_dashboard.ui.common import card, section_title
from ipma_dashboard.utils import report_error
from ipma_dashboard.weather_icons import render_weather_icon

_CARD_CSS = """
  :root { --fg:#e7eaee; --bg2:rgba(255,255,255,0.06); }
  html,body {margin:0;padding:0;background:transparent;color:var(--fg);
             font-family:ui-sans-serif,system-ui,-apple-system,Segoe UI,Roboto,Ubuntu;}
  .now {display:flex;align-items:center;gap:14px;padding:6px 12px;}
  .now .temp{font-size:2rem;}
  .now .meta{font-size:.85rem;opacity:.85;line-height:1.4;}
  .days {display:grid;grid-template-columns:repeat(auto-fit,minmax(80px,1fr));
         gap:10px;padding:6px 12px;}
  .day {display:grid;justify-items:center;background:var(--bg2);
        border-radius:14px;padding:6px;}
  .label{font-size:.9rem;opacity:.9;}
  .range{font-size:.95rem;margin-top:4px;}
"""


def _day_cell(day: dict) -> str:
    return f"""
        <div class="day">
          <div class="label">{html.escape(day["label"])}</div>
          <div class="icon">{render_weather_icon(day["icon"], size=48)}</div>
          <div class="range">{day["temp_min"]}° / {day["temp_max"]}°F</div>
        </div>
    """


def card_weather() -> None:
    """Render a card with current IPMA conditions and the daily forecast."""
    try:
        vm = build_weather_view()

        title = f"🌤️ Sää — {html.escape(vm['title'])}"
        title += f"&nbsp; | &nbsp; Tänään: {vm['min_temp']}°F — {vm['max_temp']}°F"
        section_title(title, mb=3)

        now_html = f"""
            <div class="now">
              {render_weather_icon(vm["icon"], size=64)}
              <div class="temp">{vm["temp"]}°F</div>
              <div class="meta">
                {html.escape(vm["description"])}<br/>
                Kosteus {vm["humidity"]}% · Tuuli {vm["wind"]} mph · Sade {vm["precip"]} in/h
              </div>
            </div>
        """

        inner_html = (
            "<!doctype html><html><head><meta charset='utf-8'><style>"
            + _CARD_CSS
            + "</style></head><body>"
            + now_html
            + "<div class='days'>"
            + "".join(_day_cell(d) for d in vm["days"])
            + f"</div><div class='label' style='padding:0 12px'>Lähde: {vm['provider']}</div>"
            + "</body></html>"
        )

        st_html(inner_html, height=260, scrolling=False)

    except Exception as e:
        report_error("card_weather", e)
        card("Sää", f"<span class='hint'>Virhe: {html.escape(str(e))}</span>", height_dvh=15)
