"""Domain models shared across services."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from models.errors import UnknownMetricError


@dataclass(frozen=True, slots=True)
class Location:
    """A named point on Earth. Two locations are equal when their codes are."""

    code: str
    latitude: float = field(compare=False)
    longitude: float = field(compare=False)


class MetricKind(str, Enum):
    """Closed set of metrics a location summary can hold.

    Values double as the slot names on :class:`LocationSummary`.
    """

    WIND = "wind"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    PRESSURE = "pressure"
    CLOUD_COVER = "cloud_cover"
    PRECIPITATION = "precipitation"

    @classmethod
    def parse(cls, name: str) -> "MetricKind":
        """Resolve a metric name case-insensitively, ignoring ``_`` and ``-``.

        ``"wind"``, ``"CLOUD_COVER"`` and ``"cloudcover"`` all parse; anything
        else raises :class:`UnknownMetricError`.
        """
        key = _normalize(name)
        for kind in cls:
            if _normalize(kind.name) == key:
                return kind
        raise UnknownMetricError(name)


def _normalize(name: str) -> str:
    return name.strip().upper().replace("_", "").replace("-", "")


@dataclass(frozen=True, slots=True)
class Reading:
    """Statistical summary of one batch of sensor samples, stored as observed."""

    mean: float
    first: int = 0
    second: int = 0
    third: int = 0
    count: int = 0


@dataclass(slots=True)
class LocationSummary:
    """Latest accepted reading per metric for one location."""

    code: str
    wind: Optional[Reading] = None
    temperature: Optional[Reading] = None
    humidity: Optional[Reading] = None
    pressure: Optional[Reading] = None
    cloud_cover: Optional[Reading] = None
    precipitation: Optional[Reading] = None
    last_update: Optional[datetime] = None

    def reading_for(self, kind: MetricKind) -> Optional[Reading]:
        return getattr(self, kind.value)

    def has_any_reading(self) -> bool:
        return any(self.reading_for(kind) is not None for kind in MetricKind)

    def copy(self) -> "LocationSummary":
        # Readings are frozen, so a shallow copy is independent of the original.
        return replace(self)
