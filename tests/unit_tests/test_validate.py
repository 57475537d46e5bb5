"""Unit tests for extension normalization and config validation."""

from __future__ import annotations

from pathlib import Path

import pytest

from image_converter.application.use_cases import build_config
from image_converter.errors import (
    ConfigurationError,
    SameExtensionError,
    SourceDirectoryError,
    UnsupportedExtensionError,
)
from image_converter.validate import (
    is_supported,
    normalize_extension,
    validate_config,
    validate_source_dir,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("png", ".png"),
        (".gif", ".gif"),
        ("jpg", ".jpeg"),
        (".JPG", ".jpeg"),
        ("jpeg", ".jpeg"),
        ("jjpeg", ".jjpeg"),
    ],
)
def test_normalize_extension(raw: str, expected: str) -> None:
    assert normalize_extension(raw) == expected


def test_is_supported() -> None:
    assert is_supported("jpg")
    assert is_supported(".png")
    assert not is_supported("bmp")
    assert not is_supported("ppng")


def test_missing_source_dir_is_rejected(tmp_path: Path) -> None:
    missing = tmp_path / "aaa"
    with pytest.raises(SourceDirectoryError, match="failed to get directory"):
        validate_source_dir(missing)


def test_file_source_is_rejected(tmp_path: Path) -> None:
    file_path = tmp_path / "file"
    file_path.write_text("x")
    with pytest.raises(SourceDirectoryError, match="is not directory"):
        validate_source_dir(file_path)


@pytest.mark.parametrize(
    ("from_ext", "to_ext", "error", "message"),
    [
        ("jjpeg", "png", UnsupportedExtensionError, "from ext .jjpeg is not supported"),
        ("jpeg", "ppng", UnsupportedExtensionError, "to ext .ppng is not supported"),
        ("png", "png", SameExtensionError, "-from .png, -to .png"),
        ("jpeg", "jpg", SameExtensionError, "-from .jpeg, -to .jpeg"),
    ],
)
def test_validate_config_rejections(
    tmp_path: Path,
    from_ext: str,
    to_ext: str,
    error: type[Exception],
    message: str,
) -> None:
    config = build_config(source_dir=tmp_path, from_ext=from_ext, to_ext=to_ext)
    with pytest.raises(error) as exc_info:
        validate_config(config)
    assert message in str(exc_info.value)
    assert isinstance(exc_info.value, ConfigurationError)


def test_source_dir_checked_before_extensions(tmp_path: Path) -> None:
    config = build_config(source_dir=tmp_path / "nope", from_ext="bmp", to_ext="bmp")
    with pytest.raises(SourceDirectoryError):
        validate_config(config)


def test_validate_config_accepts_valid_arguments(tmp_path: Path) -> None:
    config = build_config(source_dir=tmp_path, from_ext="jpg", to_ext="gif")
    validate_config(config)
    assert config.from_ext == ".jpeg"
    assert config.to_ext == ".gif"


def test_build_config_wraps_schema_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Invalid converter parameters"):
        build_config(source_dir=tmp_path, from_ext="  ")


def test_configuration_errors_exit_with_usage_code() -> None:
    assert SameExtensionError("x").exit_code == 2


def test_validate_arguments_returns_normalized_config(tmp_path: Path) -> None:
    from image_converter.api import validate_arguments

    config = validate_arguments(tmp_path, from_ext="GIF", to_ext="jpg")

    assert config.from_ext == ".gif"
    assert config.to_ext == ".jpeg"
    with pytest.raises(UnsupportedExtensionError):
        validate_arguments(tmp_path, from_ext="bmp")
