"""Application-layer use-cases and result objects."""

from __future__ import annotations

from pathlib import Path

from image_converter.application.ports import ImageDecoder, ImageEncoder
from image_converter.application.results import FileConversion, TreeConversionResult
from image_converter.schemas import ConverterConfig


def build_config(
    *,
    source_dir: Path,
    dest_dir: Path = Path("output"),
    from_ext: str = ".jpeg",
    to_ext: str = ".png",
    debug: bool = False,
) -> ConverterConfig:
    """Build typed converter config via lazy use-case import."""
    from image_converter.application.use_cases import build_config as _impl

    return _impl(
        source_dir=source_dir,
        dest_dir=dest_dir,
        from_ext=from_ext,
        to_ext=to_ext,
        debug=debug,
    )


def convert_tree(
    config: ConverterConfig,
    *,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> TreeConversionResult:
    """Convert a source tree via lazy use-case import."""
    from image_converter.application.use_cases import convert_tree as _impl

    return _impl(config, decoder=decoder, encoder=encoder)


__all__ = [
    "ConverterConfig",
    "FileConversion",
    "TreeConversionResult",
    "build_config",
    "convert_tree",
]
