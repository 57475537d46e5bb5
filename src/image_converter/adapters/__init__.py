"""Filesystem and codec adapters."""

from .codecs import PillowDecoder, PillowEncoder
from .walker import iter_source_files

__all__ = ["PillowDecoder", "PillowEncoder", "iter_source_files"]
