# =============================================================================
# core/weather.py : Current Weather via the Open-Meteo API
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Turns a city name into a current-conditions report in two calls:
#     1. Geocoding:  city name → latitude / longitude / display name
#     2. Forecast:   latitude / longitude → current temperature, humidity...
#
#   Open-Meteo is free and needs no API key.
#
# FAILURE MODES:
#   - Unknown city: NOT an exception.  lookup_weather() returns an
#     {"error": True, "message": ...} payload so the agent can tell the
#     user the name was not recognized.
#   - Network or HTTP errors: raised to the caller.  There is no retry and
#     no fallback data.
# =============================================================================

from dataclasses import asdict
import json
from typing import Any, Optional
import urllib.parse
import urllib.request

from core.models import Location, WeatherReport

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
CURRENT_FIELDS = (
    "temperature_2m,relative_humidity_2m,apparent_temperature,"
    "weather_code,wind_speed_10m"
)
SOURCE = "Open-Meteo API（实时数据）"
REQUEST_TIMEOUT = 10  # seconds


# =============================================================================
# WMO Weather Code Mapping
# =============================================================================
# Open-Meteo reports conditions as WMO codes.  Codes missing from this
# table render as "未知(<code>)".
# =============================================================================
_WMO_CODE_TO_TEXT: dict[int, str] = {
    0: "晴天",
    1: "大部晴朗",
    2: "局部多云",
    3: "阴天",
    45: "雾",
    48: "沉积雾凇",
    51: "轻微毛毛雨",
    53: "中度毛毛雨",
    55: "密集毛毛雨",
    56: "冻毛毛雨（轻）",
    57: "冻毛毛雨（密）",
    61: "小雨",
    63: "中雨",
    65: "大雨",
    66: "冻雨（轻）",
    67: "冻雨（重）",
    71: "小雪",
    73: "中雪",
    75: "大雪",
    77: "雪粒",
    80: "小阵雨",
    81: "中阵雨",
    82: "大阵雨",
    85: "小阵雪",
    86: "大阵雪",
    95: "雷暴",
    96: "雷暴伴小冰雹",
    99: "雷暴伴大冰雹",
}


def weather_code_to_text(code: int) -> str:
    """Render a WMO weather code as Chinese text."""
    return _WMO_CODE_TO_TEXT.get(code, f"未知({code})")


def _fetch_json(url: str, params: dict[str, Any]) -> dict:
    """GET ``url`` with query ``params`` and decode the JSON body."""
    query = urllib.parse.urlencode(params)
    req = urllib.request.Request(f"{url}?{query}")
    with urllib.request.urlopen(req, timeout=REQUEST_TIMEOUT) as response:
        return json.loads(response.read().decode())


def _number(value: Any) -> str:
    # 18.0 → "18", 18.5 → "18.5"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def geocode_city(city: str) -> Optional[Location]:
    """Resolve a city name to coordinates, or None when nothing matches."""
    data = _fetch_json(
        GEOCODING_URL,
        {"name": city, "count": 1, "language": "zh"},
    )
    results = data.get("results") or []
    if not results:
        return None

    first = results[0]
    return Location(
        latitude=first["latitude"],
        longitude=first["longitude"],
        name=first.get("name", city),
        country=first.get("country", ""),
    )


def fetch_current_conditions(location: Location) -> dict:
    """Fetch the raw ``current`` block for a location."""
    data = _fetch_json(
        FORECAST_URL,
        {
            "latitude": location.latitude,
            "longitude": location.longitude,
            "current": CURRENT_FIELDS,
            "timezone": "auto",
        },
    )
    return data["current"]


def lookup_weather(city: str) -> dict:
    """Current weather for ``city`` as a JSON-ready dict.

    Returns {"error": True, "message": ...} when the city cannot be
    geocoded; otherwise the fields of WeatherReport.
    """
    location = geocode_city(city)
    if location is None:
        return {
            "error": True,
            "message": f'无法找到城市 "{city}"，请检查城市名称是否正确。',
        }

    current = fetch_current_conditions(location)
    report = WeatherReport(
        city=location.name,
        country=location.country,
        temperature=f"{_number(current['temperature_2m'])}°C",
        apparent_temperature=f"{_number(current['apparent_temperature'])}°C",
        weather=weather_code_to_text(current["weather_code"]),
        humidity=f"{_number(current['relative_humidity_2m'])}%",
        wind_speed=f"{_number(current['wind_speed_10m'])} km/h",
        source=SOURCE,
    )
    return asdict(report)
