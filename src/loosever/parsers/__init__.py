"""Raw input parsers."""

from __future__ import annotations

from .loose import (
    RawVersion,
    VersionParser,
    cache_key,
    default_parser,
    parse_text,
    reset_default_parser,
)

__all__ = [
    "RawVersion",
    "VersionParser",
    "cache_key",
    "default_parser",
    "parse_text",
    "reset_default_parser",
]
