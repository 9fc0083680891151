"""Fixed-bucket histogram over query frequency counters."""

from __future__ import annotations

import math
from typing import Mapping

DEFAULT_MAX_KEY = 1000.0
BUCKET_MODULUS = 10


def build_histogram(counters: Mapping[float, int]) -> list[int]:
    """Fold ``{value: count}`` counters into a list of bucket totals.

    The list holds ``floor(max(key)) + 1`` buckets (``1001`` when there are no
    counters) but each key lands in bucket ``floor(key) % 10``, so only the first
    ten buckets ever accumulate anything.
    """
    largest = max(counters, default=DEFAULT_MAX_KEY)
    histogram = [0] * (math.floor(largest) + 1)
    for key, count in counters.items():
        histogram[math.floor(key) % BUCKET_MODULUS] += count
    return histogram
