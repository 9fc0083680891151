from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from cli.client import ApiClient
from cli.config import CLIConfig, load_config
from cli.loader import LoadReport, parse_airport_rows
from cli.render import render_health, render_load_report, render_summaries


@dataclass
class CLIState:
    config: CLIConfig
    client: ApiClient


app = typer.Typer(
    help="Utilities for interacting with the airport weather service.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _get_state(ctx: typer.Context) -> CLIState:
    state = ctx.obj
    if not isinstance(state, CLIState):
        typer.secho("CLI state is uninitialized.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return state


@app.callback()
def main(
    ctx: typer.Context,
    base_url: Optional[str] = typer.Option(
        None,
        "--base-url",
        "-b",
        help="Weather API base URL (defaults to API_BASE_URL env or http://localhost:9090).",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="HTTP timeout in seconds.",
    ),
) -> None:
    """Entry point for the CLI."""
    config = load_config(base_url=base_url, timeout=timeout)
    client = ApiClient(config)
    ctx.obj = CLIState(config=config, client=client)
    ctx.call_on_close(client.close)


@app.command("load")
def load_command(
    ctx: typer.Context,
    file: Path = typer.Argument(
        ..., exists=True, dir_okay=False, readable=True, help="Path to the airports data file."
    ),
) -> None:
    """Register every well-formed airport in FILE with the service."""
    state = _get_state(ctx)
    if file.stat().st_size == 0:
        typer.secho(f"{file} is not a valid input", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Loading airports from {file} into {state.config.base_url} ...")
    report = LoadReport()
    with file.open("r", encoding="utf-8", newline="") as handle:
        for row in parse_airport_rows(handle):
            if state.client.add_airport(row):
                report.loaded.append(row.iata)
            else:
                report.failed.append(row.iata)

    render_load_report(report)
    if not report.succeeded:
        typer.secho("No airports were loaded.", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("airports")
def airports_command(ctx: typer.Context) -> None:
    """List the IATA codes known to the service."""
    state = _get_state(ctx)
    for iata in state.client.list_airports():
        typer.echo(iata)


@app.command("query")
def query_command(
    ctx: typer.Context,
    iata: str = typer.Argument(..., help="IATA code of the reference airport."),
    radius: float = typer.Option(0.0, "--radius", "-r", min=0, help="Search radius in km."),
) -> None:
    """Show weather summaries around an airport."""
    state = _get_state(ctx)
    summaries = state.client.query_weather(iata, radius)
    render_summaries(iata, radius, summaries)


@app.command("health")
def health_command(ctx: typer.Context) -> None:
    """Show data size and request frequency statistics."""
    state = _get_state(ctx)
    render_health(state.client.health())
