"""Parsing of the airports data file used for bulk loading."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

logger = logging.getLogger(__name__)

EXPECTED_COLUMNS = 11
IATA_COLUMN = 4
LATITUDE_COLUMN = 6
LONGITUDE_COLUMN = 7


@dataclass(frozen=True)
class AirportRow:
    iata: str
    latitude: float
    longitude: float


@dataclass
class LoadReport:
    """Outcome of a bulk load run."""

    loaded: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return bool(self.loaded)


def _unquote(value: str) -> str:
    candidate = value.strip()
    if len(candidate) > 1 and candidate.startswith('"') and candidate.endswith('"'):
        candidate = candidate[1:-1]
    return candidate.strip()


def parse_airport_rows(lines: Iterable[str]) -> Iterator[AirportRow]:
    """Yield one :class:`AirportRow` per well-formed line.

    Lines without exactly eleven columns, without an IATA code, or with
    non-numeric coordinates are skipped.
    """
    reader = csv.reader(lines, skipinitialspace=True)
    for row_number, columns in enumerate(reader, start=1):
        if len(columns) != EXPECTED_COLUMNS:
            logger.debug(
                "Skipping row",
                extra={"row_number": row_number, "reason": f"{len(columns)} columns"},
            )
            continue

        iata = _unquote(columns[IATA_COLUMN])
        if not iata:
            logger.debug("Skipping row", extra={"row_number": row_number, "reason": "missing iata"})
            continue

        try:
            latitude = float(columns[LATITUDE_COLUMN].strip())
            longitude = float(columns[LONGITUDE_COLUMN].strip())
        except ValueError:
            logger.debug(
                "Skipping row", extra={"row_number": row_number, "reason": "invalid coordinates"}
            )
            continue

        yield AirportRow(iata=iata, latitude=latitude, longitude=longitude)
