"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileConversion:
    """Single source-to-destination mapping."""

    source_path: Path
    output_path: Path


@dataclass(frozen=True)
class TreeConversionResult:
    """Structured outcome of a directory tree conversion."""

    source_dir: Path
    output_root: Path
    from_ext: str
    to_ext: str
    conversions: tuple[FileConversion, ...] = field(default_factory=tuple)

    @property
    def count(self) -> int:
        return len(self.conversions)
