"""Output formatters for outlooks."""

import json

from outlook.models.common import TrendDirection
from outlook.models.outlook import ClimateTrend, Outlook

_TREND_VERBS = {
    TrendDirection.INCREASING: "increased",
    TrendDirection.DECREASING: "decreased",
    TrendDirection.STABLE: "shown no meaningful change",
}


def _em(text: str, html: bool) -> str:
    return f"<strong>{text}</strong>" if html else text


def assessment_narrative(o: Outlook, html: bool = True) -> str:
    return (
        f"Outlook for the selected date in {_em(str(o.target_year), html)}: "
        f"estimated temperature {_em(f'{o.temperature_c:.1f}°C', html)}, "
        f"average wind speed {_em(f'{o.wind_speed_ms:.1f} m/s', html)}, "
        f"relative humidity {_em(f'{o.humidity_percent}%', html)} and "
        f"average daily precipitation {_em(f'{o.precipitation_mm:.1f} mm', html)}. "
        "Based on historical data, precipitation is expected on this day with "
        f"{_em(f'{o.precipitation_probability_percent}%', html)} probability."
    )


def trend_narrative(t: ClimateTrend, html: bool = True) -> str:
    magnitude = _em(f"{abs(t.slope):.3f}°C", html)
    if t.direction == TrendDirection.STABLE:
        change = f"has {_TREND_VERBS[t.direction]} (about {magnitude} per year)"
    else:
        change = f"has {_TREND_VERBS[t.direction]} by about {magnitude} per year"
    return (
        f"Based on {t.period_start}-{t.period_end} records for this location, "
        f"the annual mean temperature {change}. "
        "This reflects the long-term climate trend in the area."
    )


def confidence_notice(t: ClimateTrend) -> str:
    years = t.period_end - t.period_start
    return (
        f"This is a statistical outlook based on trend analysis of the past {years} "
        "years of data and a weighted average of neighbouring days. "
        "It is not a weather forecast."
    )


def format_outlook_response(o: Outlook) -> dict:
    """Response payload for the HTTP API."""
    t = o.trend
    return {
        "target_year": o.target_year,
        "assessment": {
            "temperature_celsius": o.temperature_c,
            "wind_speed_mps": o.wind_speed_ms,
            "relative_humidity_percent": o.humidity_percent,
            "precipitation_mm_per_day": o.precipitation_mm,
            "precipitation_probability_percent": o.precipitation_probability_percent,
            "snow_depth_display": o.snow_depth_display,
            "full_narrative": assessment_narrative(o),
        },
        "climate_trend": {
            "period_start": t.period_start,
            "period_end": t.period_end,
            "annual_temp_change_celsius": round(t.slope, 4),
            "change_direction": t.direction.value,
            "full_narrative": trend_narrative(t),
        },
        "confidence_notice": confidence_notice(t),
    }


def format_outlook_json(o: Outlook) -> str:
    return json.dumps(format_outlook_response(o), indent=2, ensure_ascii=False)


def format_outlook_text(o: Outlook) -> str:
    """Plain text rendering for the terminal."""
    t = o.trend
    lines = [
        f"=== Outlook {o.target_year}-{o.month:02d}-{o.day:02d} ===",
        f"Temperature: {o.temperature_c:.1f} C | Wind: {o.wind_speed_ms:.1f} m/s",
        f"Humidity: {o.humidity_percent}% | Precipitation: {o.precipitation_mm:.1f} mm/day "
        f"({o.precipitation_probability_percent}% chance)",
        f"Snow depth (display): {o.snow_depth_display:.1f}",
        f"Trend {t.period_start}-{t.period_end}: {t.slope:+.4f} C/yr ({t.direction})",
        "",
        assessment_narrative(o, html=False),
        trend_narrative(t, html=False),
    ]
    return "\n".join(lines)
