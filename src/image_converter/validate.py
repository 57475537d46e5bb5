"""Argument validation for tree conversions."""

from __future__ import annotations

import logging
import stat
from pathlib import Path
from typing import TYPE_CHECKING

from image_converter.errors import (
    SameExtensionError,
    SourceDirectoryError,
    UnsupportedExtensionError,
)
from image_converter.types import EXTENSION_ALIASES, SUPPORTED_EXTENSIONS

if TYPE_CHECKING:
    from image_converter.schemas import ConverterConfig

logger = logging.getLogger(__name__)


def normalize_extension(ext: str) -> str:
    """Normalize a user supplied extension.

    A leading dot is added when missing and ``jpg`` is folded into ``jpeg``.
    The result is not checked against the supported set.

    Parameters
    ----------
    ext : str
        Extension such as ``"png"``, ``".JPG"`` or ``"jpeg"``.

    Returns
    -------
    str
        Lower-case extension with a leading dot.
    """
    value = ext.strip().lower()
    if not value.startswith("."):
        value = f".{value}"
    return EXTENSION_ALIASES.get(value, value)


def is_supported(ext: str) -> bool:
    """Return ``True`` if ``ext`` names a supported image format."""
    return normalize_extension(ext) in SUPPORTED_EXTENSIONS


def validate_source_dir(source_dir: Path) -> None:
    """Ensure ``source_dir`` exists and is a directory.

    Raises
    ------
    SourceDirectoryError
        If the path cannot be stat'ed or is not a directory.
    """
    try:
        mode = source_dir.stat().st_mode
    except OSError as exc:
        raise SourceDirectoryError(
            f"{source_dir} failed to get directory: {exc.strerror or exc}"
        ) from exc
    if not stat.S_ISDIR(mode):
        raise SourceDirectoryError(f"{source_dir} is not directory")


def validate_config(config: ConverterConfig) -> None:
    """Run all pre-flight checks on a converter configuration.

    Checks run in order: source directory, source extension, target
    extension, then source/target equality.

    Raises
    ------
    SourceDirectoryError
        If the source directory is unusable.
    UnsupportedExtensionError
        If either extension is outside the supported set.
    SameExtensionError
        If both extensions resolve to the same format.
    """
    logger.debug("config: %s", config.model_dump())

    validate_source_dir(config.source_dir)

    if not is_supported(config.from_ext):
        raise UnsupportedExtensionError(f"from ext {config.from_ext} is not supported")
    if not is_supported(config.to_ext):
        raise UnsupportedExtensionError(f"to ext {config.to_ext} is not supported")

    if config.from_ext == config.to_ext:
        raise SameExtensionError(
            f"-from and -to are same. -from {config.from_ext}, -to {config.to_ext}"
        )
