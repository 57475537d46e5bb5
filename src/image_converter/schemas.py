"""Pydantic schemas for runtime validation of converter inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from image_converter.types import EXT_JPEG, EXT_PNG
from image_converter.validate import normalize_extension


class ConverterConfig(BaseModel):
    """Validated input for a directory tree conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_dir: Path
    dest_dir: Path = Path("output")
    from_ext: str = EXT_JPEG
    to_ext: str = EXT_PNG
    debug: bool = False

    @field_validator("from_ext", "to_ext")
    @classmethod
    def _normalize_ext(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("extension cannot be empty.")
        return normalize_extension(value)
