from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from threading import Lock
from typing import Callable, Dict, Optional

from models.errors import UnknownLocationError
from models.records import LocationSummary, MetricKind, Reading
from services.histogram import build_histogram
from settings import DAY_IN_MILLIS

logger = logging.getLogger(__name__)

# Accepted mean per metric: low <= mean < high (no upper bound when high is None).
_ACCEPTED_RANGES: Dict[MetricKind, tuple[float, Optional[float]]] = {
    MetricKind.WIND: (0, None),
    MetricKind.TEMPERATURE: (-50, 100),
    MetricKind.HUMIDITY: (0, 100),
    MetricKind.PRECIPITATION: (0, 100),
    MetricKind.PRESSURE: (650, 800),
    MetricKind.CLOUD_COVER: (0, 100),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def is_within_range(kind: MetricKind, mean: float) -> bool:
    low, high = _ACCEPTED_RANGES[kind]
    if not math.isfinite(mean) or mean < low:
        return False
    return high is None or mean < high


class ReadingStore:
    """Current summary per location plus the radius query counters."""

    def __init__(self, clock: Callable[[], datetime] = _utcnow) -> None:
        self._clock = clock
        self._summaries: Dict[str, LocationSummary] = {}
        self._radius_counts: Dict[float, int] = {}
        self._lock = Lock()

    def create_summary(self, code: str) -> None:
        """Start (or restart) an empty summary for ``code``."""
        with self._lock:
            self._summaries[code] = LocationSummary(code=code)

    def remove_summary(self, code: str) -> None:
        with self._lock:
            self._summaries.pop(code, None)

    def clear_summaries(self) -> None:
        with self._lock:
            self._summaries.clear()

    def get_summary(self, code: str) -> Optional[LocationSummary]:
        with self._lock:
            summary = self._summaries.get(code)
            if summary is None:
                return None
            return summary.copy()

    def ingest(self, code: str, metric: str | MetricKind, reading: Reading) -> bool:
        """Apply ``reading`` to the ``metric`` slot of ``code``'s summary.

        Raises :class:`UnknownMetricError` or :class:`UnknownLocationError` for a
        malformed request. A reading whose mean falls outside the metric's sensor
        range is dropped without error; the return value tells the two outcomes
        apart (``True`` when stored).
        """
        kind = metric if isinstance(metric, MetricKind) else MetricKind.parse(metric)

        with self._lock:
            summary = self._summaries.get(code)
            if summary is None:
                raise UnknownLocationError(code)

            if not is_within_range(kind, reading.mean):
                logger.debug(
                    "Dropped out-of-range reading",
                    extra={"iata": code, "metric": kind.value, "mean": reading.mean},
                )
                return False

            setattr(summary, kind.value, reading)
            summary.last_update = self._clock()

        logger.debug(
            "Stored reading",
            extra={"iata": code, "metric": kind.value, "mean": reading.mean},
        )
        return True

    def record_radius_query(self, radius: float) -> None:
        # Known quirk kept for compatibility: a radius is registered with a zero
        # count and never incremented afterwards.
        with self._lock:
            self._radius_counts.setdefault(radius, 0)

    def radius_counts(self) -> Dict[float, int]:
        with self._lock:
            return dict(self._radius_counts)

    def radius_histogram(self) -> list[int]:
        return build_histogram(self.radius_counts())

    def fresh_data_count(
        self,
        now: Optional[datetime] = None,
        window_ms: int = DAY_IN_MILLIS,
    ) -> int:
        """Count summaries holding any reading updated within ``window_ms`` of ``now``."""
        cutoff = (now or self._clock()) - timedelta(milliseconds=window_ms)
        with self._lock:
            return sum(
                1
                for summary in self._summaries.values()
                if summary.has_any_reading()
                and summary.last_update is not None
                and summary.last_update > cutoff
            )

    def reset(self) -> None:
        with self._lock:
            self._summaries.clear()
            self._radius_counts.clear()
