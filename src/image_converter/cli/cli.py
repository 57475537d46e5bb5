#!/usr/bin/env python3
"""
image_converter.cli.cli

Typer-based CLI for converting a directory tree of images between formats.

Examples
--------
Convert every JPEG under ``photos/`` into PNG files below ``out/photos/``:

    convert-images convert photos --dest out --from jpg --to png

Show debug tracing and full tracebacks:

    convert-images --debug convert photos --from png --to gif
"""

from __future__ import annotations

import importlib.metadata as metadata
import logging
import sys
import traceback
from pathlib import Path

import typer

from image_converter.errors import ImageConverterError
from image_converter.types import EXTENSION_ALIASES, PIL_FORMATS, SUPPORTED_EXTENSIONS

app = typer.Typer(
    name="convert-images",
    help="Recursively convert images (JPEG / PNG / GIF) into another format.",
    no_args_is_help=True,
)

LOG_FORMAT = "[%(levelname)s] %(message)s"


# -----------------------------
# Logging / error utilities
# -----------------------------
class _EchoHandler(logging.Handler):
    """Route log records through ``typer.echo`` on stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            typer.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def _configure_logging(debug: bool) -> None:
    """Attach a single stderr handler to the package logger.

    Parameters
    ----------
    debug : bool
        Whether to emit DEBUG records instead of INFO and above.
    """
    package_logger = logging.getLogger("image_converter")
    for handler in list(package_logger.handlers):
        if isinstance(handler, _EchoHandler):
            package_logger.removeHandler(handler)
    handler = _EchoHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if debug else logging.INFO)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False, "--debug", help="Enable debug logging and show full tracebacks on error."
    ),
) -> None:
    """Initialize shared CLI state.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug output.
    """
    ctx.obj = {"debug": debug}
    _configure_logging(debug)


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_dir: Path = typer.Argument(..., help="Directory tree to scan for images."),
    dest_dir: Path = typer.Option(
        Path("output"),
        "--dest",
        "-d",
        help="Destination root; output mirrors the source tree below it.",
    ),
    from_ext: str = typer.Option(
        "jpeg", "--from", "-f", help="Source extension: jpeg|jpg|png|gif."
    ),
    to_ext: str = typer.Option(
        "png", "--to", "-t", help="Target extension: jpeg|jpg|png|gif."
    ),
) -> None:
    """Convert every matching image under SOURCE_DIR.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    source_dir : Path
        Root directory of the tree to convert.
    dest_dir : Path, default=Path("output")
        Destination root directory.
    from_ext : str, default="jpeg"
        Extension of the images to convert.
    to_ext : str, default="png"
        Extension of the images to produce.

    Notes
    -----
    - The first decode/encode failure aborts the run.
    - Exit status is 2 for invalid arguments and 1 for conversion failures.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    try:
        from image_converter.api import convert_directory

        result = convert_directory(
            source_dir=source_dir,
            dest_dir=dest_dir,
            from_ext=from_ext,
            to_ext=to_ext,
            debug=debug,
        )
        typer.echo(
            f"✓ Converted {result.count} file(s) "
            f"{result.from_ext} -> {result.to_ext} into {result.output_root}"
        )
    except ImageConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_conversion_error(exc, debug))


@app.command("formats")
def formats_cmd() -> None:
    """Print supported extensions and the installed imaging backend."""
    typer.echo(f"Python: {sys.version.split()[0]}")
    try:
        typer.echo(f"pillow: {metadata.version('pillow')}")
    except metadata.PackageNotFoundError:
        typer.echo("pillow: <not installed>")

    for ext in SUPPORTED_EXTENSIONS:
        aliases = [alias for alias, target in EXTENSION_ALIASES.items() if target == ext]
        alias_note = f" (alias: {', '.join(aliases)})" if aliases else ""
        typer.echo(f"{ext}: {PIL_FORMATS[ext]}{alias_note}")


if __name__ == "__main__":
    app()
