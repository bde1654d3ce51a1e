"""A document builder wrapper that measures the time spent in each call."""

from __future__ import annotations

from typing import Any

from bpdf.document import Pdf
from bpdf.metrics import Report, Size, SizeMetric, SizeScale, Time, TimeMetric
from bpdf.timing import get_time_spent


def _average(times: list[Time]) -> Time:
    return Time(sum(t.value for t in times) / len(times), times[0].scale)


class MetricsDecorator:
    """Delegates to an inner builder and reports timings with the generated PDF."""

    def __init__(self, inner: Any) -> None:
        self.inner = inner
        self._add_rows_times: list[Time] = []
        self._add_row_times: list[Time] = []
        self._add_auto_row_times: list[Time] = []
        self._add_page_times: list[Time] = []
        self._header_time: Time | None = None
        self._footer_time: Time | None = None
        self._generate_time: Time | None = None
        self._structure_time: Time | None = None

    def _timed(self, func, *args) -> tuple[Any, Time]:
        result: list[Any] = []
        spent = get_time_spent(lambda: result.append(func(*args)))
        return result[0], spent

    def get_structure(self):
        tree, self._structure_time = self._timed(self.inner.get_structure)
        return tree

    def get_current_config(self):
        return self.inner.get_current_config()

    def generate(self) -> Pdf:
        """Generate through the inner builder and attach a metrics report."""
        doc, self._generate_time = self._timed(self.inner.generate)
        data = doc.data
        report = self._build_report(len(data)).normalize()
        return Pdf(data, report)

    def register_header(self, *args) -> None:
        _, self._header_time = self._timed(self.inner.register_header, *args)

    def register_footer(self, *args) -> None:
        _, self._footer_time = self._timed(self.inner.register_footer, *args)

    def add_row(self, row_height: float, *args):
        row, spent = self._timed(self.inner.add_row, row_height, *args)
        self._add_row_times.append(spent)
        return row

    def add_rows(self, *args) -> None:
        _, spent = self._timed(self.inner.add_rows, *args)
        self._add_rows_times.append(spent)

    def add_auto_row(self, *args):
        row, spent = self._timed(self.inner.add_auto_row, *args)
        self._add_auto_row_times.append(spent)
        return row

    def add_pages(self, *args) -> None:
        _, spent = self._timed(self.inner.add_pages, *args)
        self._add_page_times.append(spent)

    def fit_in_current_page(self, height_new_line: float) -> bool:
        return self.inner.fit_in_current_page(height_new_line)

    def _build_report(self, size: int) -> Report:
        metrics: list[TimeMetric] = []
        for key, spent in (
            ("get_tree_structure", self._structure_time),
            ("generate", self._generate_time),
            ("header", self._header_time),
            ("footer", self._footer_time),
        ):
            if spent is not None:
                metrics.append(TimeMetric(key, [spent], spent))
        for key, times in (
            ("add_page", self._add_page_times),
            ("add_row", self._add_row_times),
            ("add_rows", self._add_rows_times),
        ):
            if times:
                metrics.append(TimeMetric(key, list(times), _average(times)))
        return Report(
            time_metrics=metrics,
            size_metric=SizeMetric("file_size", Size(float(size), SizeScale.BYTE)),
        )