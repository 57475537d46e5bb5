"""Directory walking for source image discovery."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from image_converter.validate import normalize_extension

logger = logging.getLogger(__name__)


def matches_extension(path: Path, from_ext: str) -> bool:
    """Return ``True`` if ``path`` carries the (normalized) source extension.

    Comparison is case-insensitive and folds ``.jpg`` into ``.jpeg``.
    """
    if not path.suffix:
        return False
    return normalize_extension(path.suffix) == normalize_extension(from_ext)


def iter_source_files(source_dir: Path, from_ext: str) -> Iterator[Path]:
    """Yield files under ``source_dir`` whose extension matches ``from_ext``.

    Parameters
    ----------
    source_dir : Path
        Root of the tree to scan.
    from_ext : str
        Source extension, normalized or not.

    Yields
    ------
    Path
        Matching file paths, directories visited top-down in sorted order.

    Raises
    ------
    OSError
        If a directory in the tree cannot be listed.
    """

    def _raise(exc: OSError) -> None:
        raise exc

    for dirpath, dirnames, filenames in os.walk(source_dir, onerror=_raise):
        dirnames.sort()
        for filename in sorted(filenames):
            path = Path(dirpath) / filename
            if matches_extension(path, from_ext):
                logger.debug("found. %s", path)
                yield path
