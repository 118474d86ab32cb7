from __future__ import annotations

from typing import List
import math

from .models import DryingFactors, DryingIndexResult, WeatherObservation

WEIGHTS = {
    "temperature": 0.25,
    "humidity": 0.35,
    "wind": 0.25,
    "cloudiness": 0.15,
}

# Placeholder until a real UV source exists; reported but never weighted
UV_FACTOR = 50.0

MS_TO_KMH = 3.6
OPTIMAL_THRESHOLD = 70.0

CONDITION_LABELS = [
    (80.0, "Excellent drying conditions"),
    (60.0, "Good drying conditions"),
    (40.0, "Fair drying conditions"),
    (20.0, "Poor drying conditions"),
]
FALLBACK_CONDITION = "Very poor drying conditions"

MSG_TEMP_LOW = "Temperature is too low. Consider drying indoors with ventilation."
MSG_TEMP_HIGH = "Temperature is too high. Drying may be too fast and uneven."
MSG_HUMIDITY_VERY_HIGH = "Very high humidity. Drying will be significantly slower."
MSG_HUMIDITY_HIGH = "High humidity detected. Allow extra drying time."
MSG_WIND_CALM = "Very calm conditions. Wind speed is too low for optimal drying."
MSG_WIND_STRONG = "Very strong wind. Secure laundry to prevent damage or loss."
MSG_PRECIPITATION = "Rain or precipitation expected. Consider indoor drying."
MSG_PERFECT = "Perfect time to dry laundry outside!"
MSG_GOOD = "Good conditions. Laundry will dry efficiently."
MSG_NOT_IDEAL = "Not ideal for outdoor drying. Consider using a dryer or wait for better conditions."
MSG_ACCEPTABLE = "Current conditions are acceptable for drying laundry."


def _clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def round_half_away(value: float) -> int:
    """Round to the nearest integer, ties away from zero (Python's round() is banker's)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def temperature_factor(temperature: float) -> float:
    t = temperature
    if 25 <= t <= 35:
        factor = 100.0
    elif 20 <= t < 25:
        factor = 60 + (t - 20) * 8
    elif 35 < t <= 40:
        factor = 100 - (t - 35) * 20
    elif t < 20:
        factor = max(0.0, 20 + t * 2)
    else:
        # above 40 the curve restarts near 100; kept as-is
        factor = max(0.0, 100 - (t - 40) * 5)
    return _clamp(factor)


def humidity_factor(humidity: float) -> float:
    h = humidity
    if h <= 40:
        factor = 100.0
    elif h <= 60:
        factor = 100 - (h - 40) * 1.5
    elif h <= 80:
        factor = 70 - (h - 60) * 1
    else:
        factor = max(0.0, 50 - (h - 80) * 0.5)
    return _clamp(factor)


def wind_factor(wind_speed: float) -> float:
    """Wind speed arrives in m/s; the breakpoints are in km/h (optimal 5-15)."""
    w_kmh = wind_speed * MS_TO_KMH
    if w_kmh <= 0:
        factor = 20.0
    elif 5 <= w_kmh <= 15:
        factor = 100.0
    elif w_kmh < 5:
        factor = 20 + (w_kmh / 5) * 80
    elif w_kmh <= 25:
        factor = 100 - (w_kmh - 15) * 5
    else:
        factor = max(0.0, 50 - (w_kmh - 25) * 2)
    return _clamp(factor)


def cloudiness_factor(cloudiness: float) -> float:
    return _clamp(max(0.0, 100 - cloudiness))


def weighted_index(temp: float, humidity: float, wind: float, cloudiness: float) -> float:
    return (
        temp * WEIGHTS["temperature"]
        + humidity * WEIGHTS["humidity"]
        + wind * WEIGHTS["wind"]
        + cloudiness * WEIGHTS["cloudiness"]
    )


def classify_conditions(raw_index: float) -> str:
    for threshold, label in CONDITION_LABELS:
        if raw_index >= threshold:
            return label
    return FALLBACK_CONDITION


def build_recommendations(
    observation: WeatherObservation,
    raw_index: float,
    temp: float,
    humidity: float,
    wind: float,
) -> List[str]:
    recommendations: List[str] = []

    if temp < 50:
        if observation.temperature < 20:
            recommendations.append(MSG_TEMP_LOW)
        elif observation.temperature > 40:
            recommendations.append(MSG_TEMP_HIGH)

    if humidity < 50:
        if observation.humidity > 80:
            recommendations.append(MSG_HUMIDITY_VERY_HIGH)
        elif observation.humidity > 60:
            recommendations.append(MSG_HUMIDITY_HIGH)

    if wind < 40:
        if observation.wind_speed < 0.5:
            recommendations.append(MSG_WIND_CALM)
        elif observation.wind_speed > 9:
            recommendations.append(MSG_WIND_STRONG)

    if (observation.precipitation or 0.0) > 0:
        recommendations.append(MSG_PRECIPITATION)

    if raw_index >= 80:
        recommendations.append(MSG_PERFECT)
    elif raw_index >= 60:
        recommendations.append(MSG_GOOD)
    elif raw_index < 30:
        recommendations.append(MSG_NOT_IDEAL)

    return recommendations or [MSG_ACCEPTABLE]


def calculate_drying_index(observation: WeatherObservation) -> DryingIndexResult:
    temp = temperature_factor(observation.temperature)
    humidity = humidity_factor(observation.humidity)
    wind = wind_factor(observation.wind_speed)
    cloudiness = cloudiness_factor(observation.cloudiness)

    raw_index = weighted_index(temp, humidity, wind, cloudiness)

    return DryingIndexResult(
        drying_index=round_half_away(raw_index),
        conditions=classify_conditions(raw_index),
        recommendations=tuple(build_recommendations(observation, raw_index, temp, humidity, wind)),
        optimal_for_drying=raw_index >= OPTIMAL_THRESHOLD,
        factors=DryingFactors(
            temperature_factor=round_half_away(temp),
            humidity_factor=round_half_away(humidity),
            wind_factor=round_half_away(wind),
            cloudiness_factor=round_half_away(cloudiness),
            uv_factor=round_half_away(UV_FACTOR),
        ),
    )
