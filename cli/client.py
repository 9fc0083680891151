from __future__ import annotations

from typing import Any, Dict, List

import httpx
import typer

from cli.config import CLIConfig
from cli.loader import AirportRow


class ApiClient:
    """Minimal HTTP client for the weather service."""

    def __init__(self, config: CLIConfig) -> None:
        self._config = config
        self._client = httpx.Client(base_url=config.base_url, timeout=config.timeout)

    def close(self) -> None:
        self._client.close()

    def add_airport(self, row: AirportRow) -> bool:
        """Register one airport; returns False when the service rejects the row."""
        try:
            response = self._client.post(
                f"/collect/airport/{row.iata}/{row.latitude}/{row.longitude}"
            )
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.is_success

    def list_airports(self) -> List[str]:
        try:
            response = self._client.get("/collect/airports")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.json()

    def query_weather(self, iata: str, radius: float) -> List[Dict[str, Any]]:
        try:
            response = self._client.get(f"/query/weather/{iata}/{radius}")
            if response.status_code == 404:
                raise typer.BadParameter(f"Airport {iata} was not found.")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.json()

    def health(self) -> Dict[str, Any]:
        try:
            response = self._client.get("/query/ping")
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            self._handle_http_error(exc)
        except httpx.TransportError as exc:
            self._handle_transport_error(exc)
        return response.json()

    def _handle_transport_error(self, exc: httpx.TransportError) -> None:
        typer.secho(
            f"Could not reach {self._config.base_url}: {exc}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    @staticmethod
    def _handle_http_error(exc: httpx.HTTPStatusError) -> None:
        detail: str | None = None
        try:
            data = exc.response.json()
            detail = data.get("detail")
        except Exception:  # noqa: BLE001 - best effort parsing
            detail = exc.response.text.strip()
        message = (
            f"Request failed with status {exc.response.status_code}: {detail or 'no detail provided.'}"
        )
        typer.secho(message, fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
