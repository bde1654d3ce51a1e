"""Configuration entities of a document: fonts, images, metadata, protection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from bpdf.geometry import Dimensions, Margins
from bpdf.typography import Font, FontStyle, PageNumber

_TRIM_SIZE = 10


class Extension(str, Enum):
    """Image file formats that can be embedded."""

    JPG = "jpg"
    JPEG = "jpeg"
    PNG = "png"

    def is_valid(self) -> bool:
        return self in _VALID_EXTENSIONS


_VALID_EXTENSIONS = frozenset(Extension)


class ProtectionType(IntEnum):
    """Permissions granted on a protected document."""

    NONE = 0
    PRINT = 4
    MODIFY = 8
    COPY = 16
    ANNOT_FORMS = 32


class ProviderType(str, Enum):
    """Backend that writes the document."""

    GOFPDF = "gofpdf"


class GenerationMode(str, Enum):
    """How pages are generated."""

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"
    SEQUENTIAL_LOW_MEMORY = "sequential_low_memory"


@dataclass
class CustomFont:
    """A font that can be added to the document."""

    family: str = ""
    style: FontStyle | None = None
    file: str = ""
    data: bytes = b""


@dataclass
class Image:
    """An image that can be added to the document."""

    data: bytes = b""
    extension: Extension | None = None
    dimensions: Dimensions | None = None

    def append_map(self, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the image fields to ``mapping``; bytes are shown trimmed."""
        if self.data:
            shown = " ".join(str(b) for b in self.data[:_TRIM_SIZE])
            mapping["entity_image_bytes"] = f"[{shown}]"
        if self.extension:
            mapping["entity_extension"] = self.extension
        if self.dimensions is not None:
            mapping = self.dimensions.append_map("background", mapping)
        return mapping


@dataclass
class Utf8Text:
    """Text with a flag telling whether it is UTF-8."""

    text: str = ""
    utf8: bool = False

    def __str__(self) -> str:
        return f"Utf8Text({self.text}, {'true' if self.utf8 else 'false'})"


@dataclass
class Metadata:
    """Document metadata."""

    author: Utf8Text | None = None
    creator: Utf8Text | None = None
    subject: Utf8Text | None = None
    title: Utf8Text | None = None
    creation_date: datetime | None = None
    keywords: Utf8Text | None = None

    def append_map(self, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the set metadata to ``mapping``."""
        for key, value in (
            ("config_metadata_author", self.author),
            ("config_metadata_creator", self.creator),
            ("config_metadata_subject", self.subject),
            ("config_metadata_title", self.title),
        ):
            if value is not None:
                mapping[key] = str(value)
        if self.creation_date is not None:
            mapping["config_metadata_creation_date"] = True
        if self.keywords is not None:
            mapping["config_metadata_keywords"] = str(self.keywords)
        return mapping


@dataclass
class Protection:
    """Document protection settings."""

    type: ProtectionType = ProtectionType.NONE
    user_password: str = ""
    owner_password: str = ""

    def append_map(self, mapping: dict[str, Any]) -> dict[str, Any]:
        """Add the set protection fields to ``mapping``."""
        if self.type != 0:
            mapping["config_protection_type"] = self.type
        if self.user_password:
            mapping["config_user_password"] = self.user_password
        if self.owner_password:
            mapping["config_owner_password"] = self.owner_password
        return mapping


@dataclass
class Config:
    """Configuration of a document builder."""

    provider_type: ProviderType | None = None
    dimensions: Dimensions | None = None
    margins: Margins | None = None
    default_font: Font | None = None
    custom_fonts: list[CustomFont] = field(default_factory=list)
    generation_mode: GenerationMode | None = None
    chunk_workers: int = 0
    debug: bool = False
    max_grid_size: int = 0
    page_number: PageNumber | None = None
    protection: Protection | None = None
    compression: bool = False
    metadata: Metadata | None = None
    background_image: Image | None = None
    disable_auto_page_break: bool = False

    def to_map(self) -> dict[str, Any]:
        """Describe the configuration as a flat mapping."""
        m: dict[str, Any] = {}
        if self.provider_type:
            m["config_provider_type"] = self.provider_type
        if self.dimensions is not None:
            m = self.dimensions.append_map("bpdf", m)
        if self.margins is not None:
            m = self.margins.append_map(m)
        if self.default_font is not None:
            m = self.default_font.append_map(m)
        m["generation_mode"] = self.generation_mode
        m["chunk_workers"] = self.chunk_workers
        if self.debug:
            m["config_debug"] = self.debug
        if self.max_grid_size != 0:
            m["config_max_grid_sum"] = self.max_grid_size
        if self.page_number is not None:
            m = self.page_number.append_map(m)
        if self.protection is not None:
            m = self.protection.append_map(m)
        if self.compression:
            m["config_compression"] = self.compression
        if self.metadata is not None:
            m = self.metadata.append_map(m)
        if self.background_image is not None:
            m = self.background_image.append_map(m)
        if self.disable_auto_page_break:
            m["config_disable_auto_page_break"] = self.disable_auto_page_break
        return m