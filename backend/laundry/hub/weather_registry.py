from __future__ import annotations

from typing import Dict, List, Tuple

from laundry.providers.weather.base import WeatherProvider


class WeatherProviderRegistry:
    """Ordered set of named providers; the hub consults them in registration order."""

    def __init__(self) -> None:
        self._providers: Dict[str, WeatherProvider] = {}

    def register(self, name: str, provider: WeatherProvider) -> None:
        name = name.strip()
        if not name:
            raise ValueError("Provider name must not be empty")
        if not callable(getattr(provider, "get_observation", None)):
            raise TypeError(f"Provider '{name}' does not implement get_observation()")
        if name in self._providers:
            raise ValueError(f"Provider '{name}' already registered")
        self._providers[name] = provider

    def get(self, name: str) -> WeatherProvider:
        if name not in self._providers:
            raise KeyError(f"Provider '{name}' is not registered")
        return self._providers[name]

    def list(self) -> List[str]:
        return list(self._providers)

    def items(self) -> List[Tuple[str, WeatherProvider]]:
        return list(self._providers.items())

    def __len__(self) -> int:
        return len(self._providers)
