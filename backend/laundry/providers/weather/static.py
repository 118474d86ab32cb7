from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Union

from laundry.domain.canonical import observation_from_payload
from laundry.domain.models import Location, WeatherObservation

from .base import ObservationNotFound, WeatherProvider


class StaticWeatherProvider(WeatherProvider):
    """Serves observations from memory, keyed by location id or city name."""

    def __init__(self, observations: Mapping[str, Any]):
        self._entries: Dict[str, Any] = {}
        for name, entry in observations.items():
            key = self._key(name)
            if key in self._entries:
                raise ValueError(f"Duplicate observation key '{name}'")
            self._entries[key] = entry

    def get_observation(self, location: Location) -> WeatherObservation:
        for key in (location.id, location.city):
            entry = self._entries.get(self._key(key))
            if entry is not None:
                return self._to_observation(entry)
        raise ObservationNotFound(f"No observation for {location.city!r}")

    def _to_observation(self, entry: Any) -> WeatherObservation:
        return entry

    @staticmethod
    def _key(value: str) -> str:
        return value.strip().lower()


class JsonFileWeatherProvider(StaticWeatherProvider):
    """Loads a JSON object mapping city (or location id) to observation payloads.

    Payloads are normalized on lookup, so a malformed entry only fails its own location.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(self._read(self.path))

    def _to_observation(self, entry: Any) -> WeatherObservation:
        if not isinstance(entry, dict):
            raise ValueError(f"Observation entry must be a JSON object, got {type(entry).__name__}")
        return observation_from_payload(entry)

    @staticmethod
    def _read(path: Path) -> Dict[str, Any]:
        if not path.exists():
            raise FileNotFoundError(f"Observations file not found: {path}")
        payload = json.loads(path.read_text())
        if not isinstance(payload, dict):
            raise ValueError(f"{path} must contain a JSON object keyed by city")
        return payload
