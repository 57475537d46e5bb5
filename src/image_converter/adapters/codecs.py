"""Pillow-backed image decoder and encoder implementing application ports."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Any

from image_converter.errors import (
    DecodeError,
    DependencyError,
    EncodeError,
    UnsupportedExtensionError,
)
from image_converter.types import EXT_GIF, EXT_JPEG, PIL_FORMATS

logger = logging.getLogger(__name__)

JPEG_QUALITY = 100
GIF_COLORS = 256
PNG_MODES = ("1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA")


@contextmanager
def scoped_handle(path: Path, mode: str) -> Iterator[IO[bytes]]:
    """Open ``path`` and close it on every exit path.

    If closing fails while another error is already propagating, the close
    error is logged and the original error is re-raised unchanged. A close
    failure on the success path propagates to the caller.
    """
    handle: IO[bytes] = open(path, mode)  # noqa: SIM115
    try:
        yield handle
    except BaseException:
        try:
            handle.close()
        except OSError as close_exc:
            logger.error("failed to close %s: %s", path, close_exc)
        raise
    handle.close()


def _pil_format(ext: str) -> str:
    try:
        return PIL_FORMATS[ext]
    except KeyError as exc:
        raise UnsupportedExtensionError(
            f"no codec registered for extension {ext}"
        ) from exc


def _load_pillow() -> Any:
    try:
        from PIL import Image
    except Exception as exc:
        raise DependencyError("Pillow is required for image conversion.") from exc
    return Image


class PillowDecoder:
    """Decode image files with the Pillow codec for a single format."""

    def decode(self, path: Path, ext: str) -> Any:
        """Decode ``path`` as the format named by ``ext``.

        Parameters
        ----------
        path : Path
            Source image file.
        ext : str
            Normalized source extension selecting the codec.

        Returns
        -------
        PIL.Image.Image
            Fully loaded image detached from the file handle.

        Raises
        ------
        DecodeError
            If the file cannot be opened or decoded as ``ext``.
        """
        image_module = _load_pillow()
        pil_format = _pil_format(ext)
        logger.debug("decode %s file %s", ext, path)
        try:
            with scoped_handle(path, "rb") as handle:
                image = image_module.open(handle, formats=[pil_format])
                image.load()
                return image.copy()
        except Exception as exc:
            raise DecodeError(f"failed to decode {path} as {ext}: {exc}") from exc


class PillowEncoder:
    """Encode in-memory images with the Pillow codec for a single format."""

    def encode(self, image: Any, path: Path, ext: str) -> Path:
        """Encode ``image`` into ``path`` using the format named by ``ext``.

        JPEG is written at quality 100, GIF with an adaptive 256 colour
        palette, PNG with codec defaults (modes PNG cannot store, such as
        CMYK, are converted to RGB first).

        Raises
        ------
        EncodeError
            If the image cannot be encoded or the file cannot be written.
        """
        image_module = _load_pillow()
        pil_format = _pil_format(ext)
        logger.debug("encode %s file and output to %s", ext, path)
        try:
            prepared, options = _prepare(image_module, image, ext)
            with scoped_handle(path, "wb") as handle:
                prepared.save(handle, format=pil_format, **options)
        except Exception as exc:
            raise EncodeError(f"failed to encode {path} as {ext}: {exc}") from exc
        return path


def _prepare(image_module: Any, image: Any, ext: str) -> tuple[Any, dict[str, object]]:
    """Convert ``image`` into a mode the target codec accepts."""
    if ext == EXT_JPEG:
        if image.mode not in ("RGB", "L", "CMYK"):
            image = image.convert("RGB")
        return image, {"quality": JPEG_QUALITY}
    if ext == EXT_GIF:
        if image.mode not in ("P", "L"):
            image = image.convert("RGB").convert(
                "P", palette=image_module.Palette.ADAPTIVE, colors=GIF_COLORS
            )
        return image, {}
    if image.mode not in PNG_MODES:
        image = image.convert("RGB")
    return image, {}
