from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class WeatherObservation:
    temperature: float
    feels_like: float
    humidity: float
    wind_speed: float
    cloudiness: float
    description: str = ""
    precipitation: Optional[float] = None
    timestamp: str = ""

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DryingFactors:
    temperature_factor: int
    humidity_factor: int
    wind_factor: int
    cloudiness_factor: int
    uv_factor: int


@dataclass(frozen=True)
class DryingIndexResult:
    drying_index: int
    conditions: str
    recommendations: Tuple[str, ...]
    optimal_for_drying: bool
    factors: DryingFactors

    def to_dict(self) -> dict:
        return {
            "drying_index": self.drying_index,
            "conditions": self.conditions,
            "recommendations": list(self.recommendations),
            "optimal_for_drying": self.optimal_for_drying,
            "factors": asdict(self.factors),
        }


@dataclass(frozen=True)
class Location:
    id: str
    name: str
    city: str
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass(frozen=True)
class LocationReport:
    location: Location
    timestamp: str
    weather: Optional[WeatherObservation] = None
    drying_index: Optional[DryingIndexResult] = None
    provider: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_dict(self) -> dict:
        payload: dict = {"location": asdict(self.location)}
        if self.ok:
            payload["weather"] = self.weather.to_dict() if self.weather else None
            payload["drying_index"] = self.drying_index.to_dict() if self.drying_index else None
            payload["provider"] = self.provider
        else:
            payload["error"] = self.error
        payload["timestamp"] = self.timestamp
        return payload
