"""Application use-cases orchestrating tree conversion workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from image_converter.adapters.codecs import PillowDecoder, PillowEncoder
from image_converter.adapters.walker import iter_source_files
from image_converter.application.ports import ImageDecoder, ImageEncoder
from image_converter.application.results import FileConversion, TreeConversionResult
from image_converter.errors import (
    ConfigurationError,
    ImageConverterError,
    OutputConflictError,
)
from image_converter.schemas import ConverterConfig
from image_converter.validate import validate_config

logger = logging.getLogger(__name__)


def build_config(
    *,
    source_dir: Path,
    dest_dir: Path = Path("output"),
    from_ext: str = ".jpeg",
    to_ext: str = ".png",
    debug: bool = False,
) -> ConverterConfig:
    """Build a typed converter configuration from command/API params."""
    try:
        return ConverterConfig(
            source_dir=source_dir,
            dest_dir=dest_dir,
            from_ext=from_ext,
            to_ext=to_ext,
            debug=debug,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid converter parameters: {exc}") from exc


def mirrored_output_path(
    source_file: Path,
    source_dir: Path,
    output_root: Path,
    to_ext: str,
) -> Path:
    """Return the destination path mirroring ``source_file`` under ``output_root``.

    The layout is ``output_root / <source dir name> / <relative dirs> /
    <stem><to_ext>``.
    """
    relative = source_file.relative_to(source_dir)
    root_name = source_dir.resolve().name
    return output_root / root_name / relative.parent / f"{source_file.stem}{to_ext}"


def convert_file(
    *,
    source_file: Path,
    output_path: Path,
    from_ext: str,
    to_ext: str,
    decoder: ImageDecoder,
    encoder: ImageEncoder,
) -> FileConversion:
    """Use-case: decode one file and re-encode it at ``output_path``."""
    logger.debug("target file path=%s", source_file)
    logger.debug("output path=%s", output_path.parent)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ImageConverterError(
            f"failed to create output directory {output_path.parent}: {exc}"
        ) from exc

    image = decoder.decode(source_file, from_ext)
    written = encoder.encode(image, output_path, to_ext)

    logger.info(
        "conversion complete. converted file from %s to %s", source_file, written
    )
    return FileConversion(source_path=source_file, output_path=written)


def plan_conversions(
    config: ConverterConfig, output_root: Path
) -> list[tuple[Path, Path]]:
    """Map every matching source file to its mirrored output path.

    Raises
    ------
    OutputConflictError
        If two source files map to the same output path, e.g. ``a.jpg`` and
        ``a.jpeg`` in one directory.
    ImageConverterError
        If the source tree cannot be read.
    """
    planned: dict[Path, Path] = {}
    try:
        for source_file in iter_source_files(config.source_dir, config.from_ext):
            output_path = mirrored_output_path(
                source_file, config.source_dir, output_root, config.to_ext
            )
            if output_path in planned:
                raise OutputConflictError(
                    f"{planned[output_path]} and {source_file} "
                    f"would both be written to {output_path}"
                )
            planned[output_path] = source_file
    except OSError as exc:
        raise ImageConverterError(
            f"failed to read {config.source_dir}: {exc}"
        ) from exc
    return [(source_file, output_path) for output_path, source_file in planned.items()]


def convert_tree(
    config: ConverterConfig,
    *,
    decoder: ImageDecoder | None = None,
    encoder: ImageEncoder | None = None,
) -> TreeConversionResult:
    """Use-case: convert every matching image under the source tree.

    The whole tree is planned before anything is written, so output path
    conflicts abort the run without touching the destination. Files are then
    processed one at a time; the first failure aborts the run and propagates
    unchanged. ``config.debug`` lowers the package logger to DEBUG.
    """
    if config.debug:
        logging.getLogger("image_converter").setLevel(logging.DEBUG)

    validate_config(config)

    decoder = decoder or PillowDecoder()
    encoder = encoder or PillowEncoder()

    output_root = config.dest_dir.absolute()
    logger.debug("output root path : %s", output_root)
    logger.debug("src dir name : %s", config.source_dir.resolve().name)

    conversions = [
        convert_file(
            source_file=source_file,
            output_path=output_path,
            from_ext=config.from_ext,
            to_ext=config.to_ext,
            decoder=decoder,
            encoder=encoder,
        )
        for source_file, output_path in plan_conversions(config, output_root)
    ]

    return TreeConversionResult(
        source_dir=config.source_dir,
        output_root=output_root,
        from_ext=config.from_ext,
        to_ext=config.to_ext,
        conversions=tuple(conversions),
    )
