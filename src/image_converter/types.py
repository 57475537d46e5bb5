"""Shared type aliases and format tables for converter modules."""

from __future__ import annotations

from typing import Protocol

EXT_JPEG = ".jpeg"
EXT_PNG = ".png"
EXT_GIF = ".gif"

SUPPORTED_EXTENSIONS: tuple[str, ...] = (EXT_JPEG, EXT_PNG, EXT_GIF)

EXTENSION_ALIASES: dict[str, str] = {".jpg": EXT_JPEG}

PIL_FORMATS: dict[str, str] = {
    EXT_JPEG: "JPEG",
    EXT_PNG: "PNG",
    EXT_GIF: "GIF",
}


class DecodedImage(Protocol):
    """Marker protocol for in-memory decoded images."""

    @property
    def size(self) -> tuple[int, int]:
        """Return ``(width, height)``."""
