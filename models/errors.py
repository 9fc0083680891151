"""Typed failures raised by the weather core."""

from __future__ import annotations


class WeatherServiceError(Exception):
    """Base class for validation failures surfaced to the caller."""


class UnknownLocationError(WeatherServiceError, LookupError):
    """An operation referenced an IATA code that is not registered."""

    def __init__(self, code: str) -> None:
        super().__init__(f"Airport {code!r} is not registered.")
        self.code = code


class UnknownMetricError(WeatherServiceError, ValueError):
    """A metric name outside of :class:`models.records.MetricKind`."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown metric {name!r}.")
        self.name = name


class InvalidCoordinateError(WeatherServiceError, ValueError):
    def __init__(self, latitude: float, longitude: float) -> None:
        super().__init__(
            f"Coordinates ({latitude}, {longitude}) are outside "
            "latitude [-90, 90] / longitude [-180, 180]."
        )
        self.latitude = latitude
        self.longitude = longitude


class InvalidRadiusError(WeatherServiceError, ValueError):
    def __init__(self, radius: float, limit: float) -> None:
        super().__init__(f"Radius must be between 0 and {limit:.1f} km, got {radius}.")
        self.radius = radius
        self.limit = limit
