"""Measurement of elapsed time."""

from __future__ import annotations

import time
from typing import Callable

from bpdf.metrics import Time, TimeScale


def get_time_spent(closure: Callable[[], object]) -> Time:
    """Run ``closure`` and return how long it took, in nanoseconds."""
    start = time.perf_counter_ns()
    closure()
    return Time(float(time.perf_counter_ns() - start), TimeScale.NANO)