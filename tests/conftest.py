"""Shared pytest configuration, marker assignment and image fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

from image_converter.types import PIL_FORMATS
from image_converter.validate import normalize_extension

ImageWriter = Callable[..., Path]


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_image() -> ImageWriter:
    """Return a factory writing a small solid-colour image in a given format.

    The suffix of ``path`` picks the codec, ``mode`` the in-memory pixel mode
    handed to it and ``save_options`` are forwarded to ``Image.save``.
    """

    def _write(
        path: Path,
        size: tuple[int, int] = (8, 6),
        mode: str = "RGB",
        **save_options: object,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        image = Image.new("RGB", size, color=(200, 30, 60))
        if mode != "RGB":
            image = image.convert(mode)
        image.save(
            path, format=PIL_FORMATS[normalize_extension(path.suffix)], **save_options
        )
        return path

    return _write
