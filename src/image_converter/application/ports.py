"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from image_converter.types import DecodedImage


class ImageDecoder(Protocol):
    """Decode an image file into an in-memory representation."""

    def decode(self, path: Path, ext: str) -> DecodedImage:
        """Decode file using the codec for ``ext``."""


class ImageEncoder(Protocol):
    """Encode an in-memory image into a file."""

    def encode(self, image: DecodedImage, path: Path, ext: str) -> Path:
        """Encode image and return the written path."""
