from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, List, Optional, Union

import typer

from laundry.domain.canonical import location_from_payload
from laundry.domain.models import Location, LocationReport
from laundry.hub.drying_hub import DryingHub
from laundry.hub.weather_registry import WeatherProviderRegistry
from laundry.providers.weather.base import WeatherProvider
from laundry.providers.weather.static import JsonFileWeatherProvider

app = typer.Typer(help="Score drying conditions for a batch of locations")
DEFAULT_LOCATIONS_FILE = os.getenv("DRYING_LOCATIONS_FILE", "locations.json")
DEFAULT_OBSERVATIONS_FILE = os.getenv("DRYING_OBSERVATIONS_FILE", "observations.json")
DEFAULT_MAX_WORKERS = int(os.getenv("DRYING_MAX_WORKERS", "4"))


def evaluate_locations(
    *,
    locations: Optional[List[Location]] = None,
    locations_file: Optional[Union[str, Path]] = None,
    observations_file: Optional[Union[str, Path]] = None,
    provider: Optional[WeatherProvider] = None,
    max_workers: Optional[int] = None,
) -> Dict[str, object]:
    if locations is None:
        locations = load_locations(locations_file or DEFAULT_LOCATIONS_FILE)
    if provider is None:
        provider = JsonFileWeatherProvider(observations_file or DEFAULT_OBSERVATIONS_FILE)
    registry = WeatherProviderRegistry()
    registry.register("primary", provider)
    hub = DryingHub(registry, max_workers=max_workers if max_workers is not None else DEFAULT_MAX_WORKERS)

    reports = hub.evaluate_all(locations)
    result = {
        "evaluated": len(reports),
        "failed": sum(1 for report in reports if not report.ok),
        "reports": reports,
    }
    _log_summary(result["evaluated"], result["failed"], reports)
    return result


def load_locations(path: Union[str, Path]) -> List[Location]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Locations file not found: {path}")
    payload = json.loads(path.read_text())
    if not isinstance(payload, list):
        raise ValueError(f"{path} must contain a JSON list of locations")
    return [location_from_payload(item) for item in payload]


@app.command()
def run(
    locations_file: str = typer.Option(DEFAULT_LOCATIONS_FILE, help="JSON list of locations"),
    observations_file: str = typer.Option(DEFAULT_OBSERVATIONS_FILE, help="JSON observations keyed by city"),
    workers: int = typer.Option(DEFAULT_MAX_WORKERS, help="Thread pool size"),
):
    """CLI entrypoint for batch evaluation."""
    result = evaluate_locations(
        locations_file=locations_file,
        observations_file=observations_file,
        max_workers=workers,
    )
    typer.echo(json.dumps([report.to_dict() for report in result["reports"]], indent=2))


def _log_summary(evaluated: int, failed: int, reports: List[LocationReport]):
    optimal = sum(1 for report in reports if report.ok and report.drying_index.optimal_for_drying)
    print(f"[evaluate_locations] evaluated={evaluated} failed={failed} optimal={optimal}")


if __name__ == "__main__":
    app()
