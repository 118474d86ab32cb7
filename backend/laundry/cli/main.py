import json
import logging
import os
from typing import Optional

import typer

from laundry.domain.canonical import observation_from_payload
from laundry.domain.models import DryingIndexResult
from laundry.domain.scoring import calculate_drying_index
from laundry.jobs.evaluate_locations import (
    DEFAULT_LOCATIONS_FILE,
    DEFAULT_MAX_WORKERS,
    DEFAULT_OBSERVATIONS_FILE,
    evaluate_locations,
)

app = typer.Typer(help="CLI for the laundry drying index")

LOG_LEVEL = os.getenv("DRYING_LOG_LEVEL", "WARNING")


@app.callback()
def main():
    logging.basicConfig(level=LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@app.command("score")
def cli_score(
    temperature: float = typer.Option(..., help="Air temperature in °C"),
    humidity: float = typer.Option(..., help="Relative humidity in %"),
    wind_speed: float = typer.Option(..., help="Wind speed in m/s"),
    cloudiness: float = typer.Option(..., help="Cloud cover in %"),
    precipitation: float = typer.Option(0.0, help="Precipitation in mm/h"),
    feels_like: Optional[float] = typer.Option(None, help="Apparent temperature in °C"),
    description: str = typer.Option("", help="Free-text weather description"),
    timestamp: str = typer.Option("", help="Observation timestamp"),
    as_json: bool = typer.Option(False, "--json/--no-json", help="Print the raw JSON result"),
):
    observation = observation_from_payload(
        {
            "temperature": temperature,
            "feels_like": feels_like,
            "humidity": humidity,
            "wind_speed": wind_speed,
            "cloudiness": cloudiness,
            "description": description,
            "precipitation": precipitation,
            "timestamp": timestamp,
        }
    )
    result = calculate_drying_index(observation)
    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
        return
    _print_result(result)


@app.command("locations")
def cli_locations(
    locations_file: str = typer.Option(DEFAULT_LOCATIONS_FILE, help="JSON list of locations"),
    observations_file: str = typer.Option(DEFAULT_OBSERVATIONS_FILE, help="JSON observations keyed by city"),
    workers: int = typer.Option(DEFAULT_MAX_WORKERS, help="Thread pool size"),
):
    try:
        result = evaluate_locations(
            locations_file=locations_file,
            observations_file=observations_file,
            max_workers=workers,
        )
    except (FileNotFoundError, ValueError) as exc:
        typer.echo(f"Cannot evaluate locations: {exc}", err=True)
        raise typer.Exit(code=2)
    for report in result["reports"]:
        if report.ok:
            typer.echo(
                f"{report.location.name}\t{report.drying_index.drying_index}\t{report.drying_index.conditions}"
            )
        else:
            typer.echo(f"{report.location.name}\tERROR\t{report.error}")
    if result["evaluated"] and result["failed"] == result["evaluated"]:
        raise typer.Exit(code=1)


def _print_result(result: DryingIndexResult) -> None:
    typer.echo(f"Drying index: {result.drying_index}/100")
    typer.echo(f"Conditions: {result.conditions}")
    typer.echo(f"Optimal for drying: {'yes' if result.optimal_for_drying else 'no'}")
    typer.echo("factor\tvalue")
    for name, value in vars(result.factors).items():
        typer.echo(f"{name}\t{value}")
    typer.echo("Recommendations:")
    for item in result.recommendations:
        typer.echo(f"- {item}")


if __name__ == "__main__":
    app()
