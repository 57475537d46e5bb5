"""Domain exceptions raised by the image converter."""

from __future__ import annotations


class ImageConverterError(Exception):
    """Base error for all conversion failures."""

    exit_code: int = 1


class DependencyError(ImageConverterError):
    """Raised when the imaging backend cannot be imported."""


class ConfigurationError(ImageConverterError):
    """Raised when converter arguments fail validation."""

    exit_code = 2


class SourceDirectoryError(ConfigurationError):
    """Raised when the source path is missing or not a directory."""


class UnsupportedExtensionError(ConfigurationError):
    """Raised when a from/to extension is not a supported image format."""


class SameExtensionError(ConfigurationError):
    """Raised when source and target extensions resolve to the same format."""


class DecodeError(ImageConverterError):
    """Raised when a source image cannot be decoded."""


class EncodeError(ImageConverterError):
    """Raised when an image cannot be encoded to the target format."""


class OutputConflictError(ImageConverterError):
    """Raised when two source files would be written to the same output path."""
