from __future__ import annotations

from datetime import datetime
from typing import Any, Mapping, Optional
import math

from .models import Location, WeatherObservation

REQUIRED_FIELDS = ("temperature", "humidity", "wind_speed", "cloudiness")


def _to_float(name: str, value: Any) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{name} must be numeric, got {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"{name} must be finite, got {value!r}")
    return number


def _optional_float(name: str, value: Any) -> Optional[float]:
    if value is None:
        return None
    return _to_float(name, value)


def _timestamp(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def observation_from_payload(payload: Mapping[str, Any]) -> WeatherObservation:
    for name in REQUIRED_FIELDS:
        if payload.get(name) is None:
            raise ValueError(f"{name} is required")

    temperature = _to_float("temperature", payload["temperature"])
    feels_like = _optional_float("feels_like", payload.get("feels_like"))
    precipitation = _optional_float("precipitation", payload.get("precipitation"))
    return WeatherObservation(
        temperature=temperature,
        feels_like=temperature if feels_like is None else feels_like,
        humidity=_to_float("humidity", payload["humidity"]),
        wind_speed=_to_float("wind_speed", payload["wind_speed"]),
        cloudiness=_to_float("cloudiness", payload["cloudiness"]),
        description=str(payload.get("description") or ""),
        precipitation=precipitation if precipitation is not None else 0.0,
        timestamp=_timestamp(payload.get("timestamp")),
    )


def location_from_payload(payload: Mapping[str, Any]) -> Location:
    city = payload.get("city")
    if not city:
        raise ValueError("city is required")
    location_id = payload.get("id") or city
    return Location(
        id=str(location_id),
        name=str(payload.get("name") or city),
        city=str(city),
        latitude=_optional_float("latitude", payload.get("latitude")),
        longitude=_optional_float("longitude", payload.get("longitude")),
    )
