"""Timing and size metrics with scale normalisation and text reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

_STEP = 1000.0


class TimeScale(str, Enum):
    """Unit of a measured duration."""

    NANO = "ns"
    MICRO = "μs"
    MILLI = "ms"


class SizeScale(str, Enum):
    """Unit of a measured size."""

    BYTE = "b"
    KILO_BYTE = "Kb"
    MEGA_BYTE = "Mb"
    GIGA_BYTE = "Gb"


_NEXT_TIME_SCALE = {
    TimeScale.NANO: TimeScale.MICRO,
    TimeScale.MICRO: TimeScale.MILLI,
}

_NEXT_SIZE_SCALE = {
    SizeScale.BYTE: SizeScale.KILO_BYTE,
    SizeScale.KILO_BYTE: SizeScale.MEGA_BYTE,
    SizeScale.MEGA_BYTE: SizeScale.GIGA_BYTE,
}


@dataclass
class Time:
    """A duration with its scale."""

    value: float
    scale: TimeScale

    def normalize(self) -> bool:
        """Move to the next larger scale; return False if already the largest."""
        nxt = _NEXT_TIME_SCALE.get(self.scale)
        if nxt is None:
            return False
        self.scale = nxt
        self.value /= _STEP
        return True

    def __str__(self) -> str:
        return f"{self.value:.2f}{TimeScale(self.scale).value}"


@dataclass
class Size:
    """A size with its scale."""

    value: float
    scale: SizeScale

    def normalize(self) -> bool:
        """Move to the next larger scale; return False if already the largest."""
        nxt = _NEXT_SIZE_SCALE.get(self.scale)
        if nxt is None:
            return False
        self.scale = nxt
        self.value /= _STEP
        return True

    def __str__(self) -> str:
        return f"{self.value:.2f}{SizeScale(self.scale).value}"


@dataclass
class TimeMetric:
    """A named series of durations and their average."""

    key: str
    times: list[Time] = field(default_factory=list)
    avg: Time | None = None

    def normalize(self) -> None:
        """Raise the scale of every time while any of them exceeds 1000."""
        while any(t.value > _STEP for t in self.times):
            for t in self.times:
                if not t.normalize():
                    return

    def __str__(self) -> str:
        executions = ", ".join(str(t) for t in self.times)
        return f"{self.key} -> avg: {self.avg}, executions: [{executions}]"


@dataclass
class SizeMetric:
    """A named size."""

    key: str
    size: Size

    def normalize(self) -> None:
        """Raise the scale while the value is at least 1000."""
        while self.size.value >= _STEP:
            if not self.size.normalize():
                return

    def __str__(self) -> str:
        return f"{self.key} -> {self.size}"


@dataclass
class Report:
    """A collection of time metrics and the produced file size."""

    time_metrics: list[TimeMetric] = field(default_factory=list)
    size_metric: SizeMetric = field(
        default_factory=lambda: SizeMetric("", Size(0.0, SizeScale.BYTE))
    )

    def normalize(self) -> Report:
        """Normalise every metric in place and return the report."""
        for metric in self.time_metrics:
            metric.normalize()
        self.size_metric.normalize()
        return self

    def __str__(self) -> str:
        return "".join(str(metric) for metric in self.time_metrics)

    def save(self, file) -> None:
        """Write the report, one metric per line, to ``file``."""
        lines = [str(metric) for metric in self.time_metrics]
        lines.append(str(self.size_metric))
        Path(file).write_text("".join(line + "\n" for line in lines), encoding="utf-8")