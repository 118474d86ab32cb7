from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from laundry.domain.models import Location, LocationReport
from laundry.domain.scoring import calculate_drying_index

from .weather_registry import WeatherProviderRegistry

logger = logging.getLogger(__name__)

NO_PROVIDERS_ERROR = "No weather providers registered"


class DryingHub:
    """Scores each location independently; one failing location never affects the rest."""

    def __init__(self, registry: WeatherProviderRegistry, max_workers: Optional[int] = None) -> None:
        self._registry = registry
        self._max_workers = max_workers

    def evaluate(self, location: Location) -> LocationReport:
        last_error: Optional[str] = None
        for name, provider in self._registry.items():
            # a malformed observation counts as a failure of the provider that returned it
            try:
                observation = provider.get_observation(location)
                result = calculate_drying_index(observation)
            except Exception as exc:  # noqa: BLE001 - provider failures are logged
                logger.warning("Weather provider %s failed for %s: %s", name, location.city, exc)
                last_error = str(exc) or exc.__class__.__name__
                continue
            return LocationReport(
                location=location,
                timestamp=_now_iso(),
                weather=observation,
                drying_index=result,
                provider=name,
            )
        return LocationReport(
            location=location,
            timestamp=_now_iso(),
            error=last_error or NO_PROVIDERS_ERROR,
        )

    def evaluate_all(self, locations: Iterable[Location]) -> List[LocationReport]:
        location_list = list(locations)
        if self._max_workers and self._max_workers > 1 and len(location_list) > 1:
            with ThreadPoolExecutor(max_workers=self._max_workers) as pool:
                reports = list(pool.map(self.evaluate, location_list))
        else:
            reports = [self.evaluate(location) for location in location_list]
        failed = sum(1 for report in reports if not report.ok)
        logger.info("Evaluated %d locations (%d failed)", len(reports), failed)
        return reports


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
