from __future__ import annotations

from typing import Protocol

from laundry.domain.models import Location, WeatherObservation


class ProviderError(RuntimeError):
    """Base error for weather providers."""


class ObservationNotFound(ProviderError):
    """Raised when a provider has no observation for a location."""


class WeatherProvider(Protocol):
    """Contract for current-weather providers."""

    def get_observation(self, location: Location) -> WeatherObservation:
        raise NotImplementedError
