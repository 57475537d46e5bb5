"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path

from image_converter.application import TreeConversionResult, build_config, convert_tree
from image_converter.schemas import ConverterConfig
from image_converter.validate import validate_config


def validate_arguments(
    source_dir: Path,
    dest_dir: Path = Path("output"),
    from_ext: str = ".jpeg",
    to_ext: str = ".png",
    debug: bool = False,
) -> ConverterConfig:
    """Validate converter arguments without converting anything."""
    config = build_config(
        source_dir=source_dir,
        dest_dir=dest_dir,
        from_ext=from_ext,
        to_ext=to_ext,
        debug=debug,
    )
    validate_config(config)
    return config


def convert_directory(
    source_dir: Path,
    dest_dir: Path = Path("output"),
    from_ext: str = ".jpeg",
    to_ext: str = ".png",
    debug: bool = False,
) -> TreeConversionResult:
    """Convert every ``from_ext`` image under ``source_dir`` into ``to_ext``."""
    config = build_config(
        source_dir=source_dir,
        dest_dir=dest_dir,
        from_ext=from_ext,
        to_ext=to_ext,
        debug=debug,
    )
    return convert_tree(config)
