from __future__ import annotations

import logging
import math
from threading import Lock
from typing import Dict, Optional

from datastore.reading_store import ReadingStore
from models.errors import InvalidCoordinateError
from models.records import Location

logger = logging.getLogger(__name__)


def _validate_coordinates(latitude: float, longitude: float) -> None:
    if not (math.isfinite(latitude) and math.isfinite(longitude)):
        raise InvalidCoordinateError(latitude, longitude)
    if not -90 <= latitude <= 90 or not -180 <= longitude <= 180:
        raise InvalidCoordinateError(latitude, longitude)


class LocationRegistry:
    """Known airports keyed by IATA code, plus per-code query counters.

    Every add/remove is mirrored into the :class:`ReadingStore` so each live
    code has exactly one summary.
    """

    def __init__(self, store: ReadingStore) -> None:
        self.store = store
        self._locations: Dict[str, Location] = {}
        self._query_counts: Dict[str, int] = {}
        self._lock = Lock()

    def add_location(self, code: str, latitude: float, longitude: float) -> Location:
        _validate_coordinates(latitude, longitude)
        location = Location(code=code, latitude=latitude, longitude=longitude)
        with self._lock:
            self._locations[code] = location
            self.store.create_summary(code)
        logger.debug("Registered airport", extra={"iata": code})
        return location

    def remove_location(self, code: str) -> Optional[Location]:
        with self._lock:
            removed = self._locations.pop(code, None)
            self.store.remove_summary(code)
        if removed is not None:
            logger.debug("Removed airport", extra={"iata": code})
        return removed

    def find_location(self, code: str) -> Optional[Location]:
        with self._lock:
            return self._locations.get(code)

    def list_codes(self) -> set[str]:
        with self._lock:
            return set(self._locations)

    def list_locations(self) -> list[Location]:
        """Snapshot of the registered locations in registration order."""

        with self._lock:
            return list(self._locations.values())

    def record_location_query(self, code: str) -> None:
        with self._lock:
            if code not in self._locations:
                logger.debug("Ignoring query hit for unknown airport", extra={"iata": code})
                return
            self._query_counts[code] = self._query_counts.get(code, 0) + 1

    def query_frequencies(self) -> Dict[str, float]:
        """Fraction of queries per known airport.

        Each count is divided by the number of airports that have ever been
        queried, not by the total number of queries. Existing clients rely on
        these values, so the normalization is kept as is.
        """
        with self._lock:
            entries = len(self._query_counts)
            if not entries:
                return {code: 0.0 for code in self._locations}
            return {
                code: self._query_counts.get(code, 0) / entries
                for code in self._locations
            }

    def reset(self) -> None:
        with self._lock:
            self._locations.clear()
            self._query_counts.clear()
            self.store.clear_summaries()
