"""In-memory cache of images keyed by name and extension."""

from __future__ import annotations

import threading
from enum import Enum
from pathlib import Path

from bpdf.entity import Extension, Image


class ImageNotFoundError(LookupError):
    """Raised when an image is not in the cache."""


def _key(value: str, extension: Extension | str | None) -> str:
    if extension is None:
        return value
    if isinstance(extension, Enum):
        return value + str(extension.value)
    return value + str(extension)


class ImageCache:
    """Stores images by name and extension."""

    def __init__(self) -> None:
        self._images: dict[str, Image] = {}

    def get_image(self, value: str, extension: Extension | str) -> Image:
        """Return a cached image or raise ImageNotFoundError."""
        try:
            return self._images[_key(value, extension)]
        except KeyError:
            raise ImageNotFoundError("image not found") from None

    def load_image(self, file, extension: Extension | str) -> None:
        """Read an image file into the cache."""
        data = Path(file).read_bytes()
        self._images[_key(str(file), extension)] = Image(data=data, extension=extension)

    def add_image(self, value: str, image: Image) -> None:
        self._images[_key(value, image.extension)] = image


class LockedCache:
    """Wraps a cache so that writes are serialised by a lock."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self._lock = threading.Lock()

    def get_image(self, value: str, extension: Extension | str) -> Image:
        return self.inner.get_image(value, extension)

    def load_image(self, file, extension: Extension | str) -> None:
        with self._lock:
            self.inner.load_image(file, extension)

    def add_image(self, value: str, image: Image) -> None:
        with self._lock:
            self.inner.add_image(value, image)