"""Top-level API for recursive image format conversion."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from image_converter.application.results import TreeConversionResult

__version__ = "0.1.0"


def convert_directory(
    source_dir: Path,
    dest_dir: Path = Path("output"),
    from_ext: str = ".jpeg",
    to_ext: str = ".png",
    debug: bool = False,
) -> TreeConversionResult:
    """Convert a directory tree of images from one format to another.

    Parameters
    ----------
    source_dir : Path
        Root of the tree to scan. Must exist and be a directory.
    dest_dir : Path, default=Path("output")
        Destination root. Output lands under ``dest_dir / source_dir.name``.
    from_ext : str, default=".jpeg"
        Source format: ``jpeg`` (or ``jpg``), ``png`` or ``gif``.
    to_ext : str, default=".png"
        Target format, same choices as ``from_ext`` but different from it.
    debug : bool, default=False
        Enable DEBUG records on the ``image_converter`` logger.

    Returns
    -------
    TreeConversionResult
        Source/destination mapping of every converted file.
    """
    from .api import convert_directory as _impl

    return _impl(
        source_dir=source_dir,
        dest_dir=dest_dir,
        from_ext=from_ext,
        to_ext=to_ext,
        debug=debug,
    )


__all__ = ["convert_directory"]
