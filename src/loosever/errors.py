"""Error types raised by the version parser, comparator and sorter."""

from __future__ import annotations


class VersionError(Exception):
    """Base error for all loosever failures."""


class InvalidVersion(VersionError, ValueError):
    """Raised when a raw input cannot be interpreted as a version."""


class InvalidOperator(VersionError, ValueError):
    """Raised when ``cmp()`` receives an unknown comparison operator."""


class InvalidArgument(VersionError, TypeError):
    """Raised when an API receives an argument of the wrong kind."""


class SegmentTooLarge(VersionError, ValueError):
    """Raised when a segment does not fit the requested fixed-width encoding."""
