"""A generated document and the structure description of its components."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any

from bpdf.metrics import Report


@dataclass
class Structure:
    """Description of one node of the component tree."""

    type: str = ""
    value: Any = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class Pdf:
    """The bytes of a generated PDF and its optional metrics report."""

    data: bytes = b""
    report: Report | None = None

    def base64(self) -> str:
        """Return the PDF bytes encoded as base64."""
        return base64.b64encode(self.data).decode("ascii")

    def save(self, file) -> None:
        """Write the PDF bytes to ``file``."""
        with open(file, "wb") as out:
            out.write(self.data)