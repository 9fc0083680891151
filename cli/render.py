from __future__ import annotations

from typing import Any, Dict, Iterable, List

import typer

from cli.loader import LoadReport

_METRICS = ("wind", "temperature", "humidity", "pressure", "cloud_cover", "precipitation")


def echo_heading(text: str) -> None:
    typer.secho(text, bold=True)


def echo_key_values(pairs: Iterable[tuple[str, Any]]) -> None:
    for key, value in pairs:
        typer.echo(f"{key}: {value}")


def render_load_report(report: LoadReport) -> None:
    echo_heading("Load Report")
    echo_key_values([("loaded", len(report.loaded)), ("failed", len(report.failed))])
    if report.failed:
        typer.echo("rejected airports:")
        for iata in report.failed:
            typer.echo(f"  - {iata}")


def render_summaries(iata: str, radius: float, summaries: List[Dict[str, Any]]) -> None:
    echo_heading(f"Weather within {radius} km of {iata}")
    if not summaries:
        typer.echo("No weather data available.")
        return

    for summary in summaries:
        typer.echo()
        echo_heading(str(summary.get("iata")))
        echo_key_values([("last_update_time", summary.get("last_update_time"))])
        for metric in _METRICS:
            reading = summary.get(metric)
            if not reading:
                continue
            typer.echo(
                f"  {metric}: mean={reading.get('mean')} "
                f"q1={reading.get('first')} median={reading.get('second')} "
                f"q3={reading.get('third')} count={reading.get('count')}"
            )


def render_health(payload: Dict[str, Any]) -> None:
    echo_heading("Service Health")
    echo_key_values([("datasize", payload.get("datasize"))])

    typer.echo()
    echo_heading("IATA Frequency")
    frequencies = payload.get("iata_freq") or {}
    if frequencies:
        for iata, fraction in sorted(frequencies.items()):
            typer.echo(f"  - {iata}: {fraction}")
    else:
        typer.echo("No airports registered.")

    typer.echo()
    echo_heading("Radius Frequency")
    histogram = payload.get("radius_freq") or []
    populated = [(index, count) for index, count in enumerate(histogram) if count]
    typer.echo(f"buckets: {len(histogram)}")
    for index, count in populated:
        typer.echo(f"  - {index}: {count}")
