"""Data models for parsed versions."""

from __future__ import annotations

from .version import SEGMENT_COUNT, Version

__all__ = [
    "SEGMENT_COUNT",
    "Version",
]
