from bpdf.document import Pdf, Structure
from bpdf.entity import Config
from bpdf.metrics import SizeScale
from bpdf.metricsdecorator import MetricsDecorator
from bpdf.node import Node


class FakeBuilder:
    def __init__(self, doc=None):
        self.calls = []
        self.doc = doc if doc is not None else Pdf(bytes([1, 2, 3]))
        self.config = Config(max_grid_size=15)

    def add_pages(self, *pages):
        self.calls.append(("add_pages", pages))

    def add_row(self, height, *cols):
        self.calls.append(("add_row", height, cols))
        return "row"

    def add_rows(self, *rows):
        self.calls.append(("add_rows", rows))

    def add_auto_row(self, *cols):
        self.calls.append(("add_auto_row", cols))
        return "auto"

    def register_header(self, *rows):
        self.calls.append(("register_header", rows))

    def register_footer(self, *rows):
        self.calls.append(("register_footer", rows))

    def get_structure(self):
        self.calls.append(("get_structure",))
        return Node(Structure(type="bpdf"))

    def get_current_config(self):
        return self.config

    def fit_in_current_page(self, height):
        return height < 15

    def generate(self):
        return self.doc


def _names(inner):
    return [call[0] for call in inner.calls]


def test_add_pages():
    inner = FakeBuilder()
    sut = MetricsDecorator(inner)
    sut.add_pages("page")
    sut.add_pages("page")
    report = sut.generate().report
    assert [m.key for m in report.time_metrics] == ["generate", "add_page"]
    assert len(report.time_metrics[1].times) == 2
    assert _names(inner).count("add_pages") == 2


def test_add_row():
    inner = FakeBuilder()
    sut = MetricsDecorator(inner)
    assert sut.add_row(10.0, "col") == "row"
    sut.add_row(10.0, "col")
    report = sut.generate().report
    assert [m.key for m in report.time_metrics] == ["generate", "add_row"]
    assert len(report.time_metrics[1].times) == 2
    assert inner.calls[0] == ("add_row", 10.0, ("col",))


def test_add_rows():
    inner = FakeBuilder()
    sut = MetricsDecorator(inner)
    sut.add_rows("row")
    sut.add_rows("row")
    report = sut.generate().report
    assert [m.key for m in report.time_metrics] == ["generate", "add_rows"]
    assert len(report.time_metrics[1].times) == 2
    assert _names(inner).count("add_rows") == 2


def test_register_header():
    inner = FakeBuilder(Pdf())
    sut = MetricsDecorator(inner)
    sut.register_header("row")
    report = sut.generate().report
    assert [m.key for m in report.time_metrics] == ["generate", "header"]
    assert inner.calls == [("register_header", ("row",))]


def test_register_footer():
    inner = FakeBuilder(Pdf())
    sut = MetricsDecorator(inner)
    sut.register_footer("row")
    report = sut.generate().report
    assert [m.key for m in report.time_metrics] == ["generate", "footer"]


def test_get_structure():
    inner = FakeBuilder()
    sut = MetricsDecorator(inner)
    sut.add_rows("row")
    tree = sut.get_structure()
    assert tree.data.type == "bpdf"
    report = sut.generate().report
    assert [m.key for m in report.time_metrics] == [
        "get_tree_structure", "generate", "add_rows"]
    assert len(report.time_metrics[1].times) == 1
    assert _names(inner).count("get_structure") == 1


def test_generate_keeps_bytes_and_size():
    sut = MetricsDecorator(FakeBuilder())
    doc = sut.generate()
    assert doc.data == bytes([1, 2, 3])
    assert doc.report.size_metric.key == "file_size"
    assert doc.report.size_metric.size.value == 3.0
    assert doc.report.size_metric.size.scale == SizeScale.BYTE


def test_auto_row_delegates_but_is_not_reported():
    sut = MetricsDecorator(FakeBuilder())
    assert sut.add_auto_row("col") == "auto"
    assert [m.key for m in sut.generate().report.time_metrics] == ["generate"]


def test_get_current_config():
    assert MetricsDecorator(FakeBuilder()).get_current_config().max_grid_size == 15


def test_fit_in_current_page():
    sut = MetricsDecorator(FakeBuilder())
    assert sut.fit_in_current_page(10) is True
    assert sut.fit_in_current_page(20) is False