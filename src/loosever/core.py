"""Module-level version helpers.

Every function accepts any raw version shape understood by
:class:`~loosever.parsers.loose.VersionParser` and an optional ``parser``
keyword. Without one, the shared :func:`~loosever.parsers.loose.default_parser`
is used.
"""

from __future__ import annotations

from .models.version import SEGMENT_COUNT, Version
from .parsers.loose import RawVersion, VersionParser, default_parser


def _resolve(parser: VersionParser | None) -> VersionParser:
    return parser if parser is not None else default_parser()


def parse(raw: RawVersion, *, parser: VersionParser | None = None) -> Version:
    """Parse ``raw`` into a new :class:`Version`.

    Raises:
        InvalidVersion: If ``raw`` cannot be interpreted as a version.
    """
    return _resolve(parser).parse(raw)


def valid(raw: RawVersion, *, parser: VersionParser | None = None) -> Version:
    """Like :func:`parse`, but hands back ``Version`` inputs unchanged."""
    if isinstance(raw, Version):
        return raw
    return _resolve(parser).parse(raw)


def normalize(
    raw: RawVersion, num_segments: int = SEGMENT_COUNT, *, parser: VersionParser | None = None
) -> str:
    return valid(raw, parser=parser).normalize(num_segments)


def to_semver(raw: RawVersion, *, parser: VersionParser | None = None) -> str:
    return valid(raw, parser=parser).to_semver()


def to_unique(raw: RawVersion, digits: int = 6, *, parser: VersionParser | None = None) -> str:
    """Fixed-width sortable form of ``raw``.

    Raises:
        SegmentTooLarge: If a segment is wider than ``digits``.
    """
    return valid(raw, parser=parser).to_unique(digits)


def major(raw: RawVersion, *, parser: VersionParser | None = None) -> int:
    return valid(raw, parser=parser).major


def minor(raw: RawVersion, *, parser: VersionParser | None = None) -> int:
    return valid(raw, parser=parser).minor


def patch(raw: RawVersion, *, parser: VersionParser | None = None) -> int:
    return valid(raw, parser=parser).patch


def build(raw: RawVersion, *, parser: VersionParser | None = None) -> int:
    return valid(raw, parser=parser).build


def tag(raw: RawVersion, *, parser: VersionParser | None = None) -> str:
    return valid(raw, parser=parser).tag


def delta(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> list[int]:
    """Return the per-segment difference ``v1 - v2``.

    Absent inputs (``None`` or ``""``) count as version 0.
    """
    left = valid(v1, parser=parser)
    right = valid(v2, parser=parser)
    return [a - b for a, b in zip(left.segments, right.segments)]


def get_cache_size() -> int:
    """Return the cache capacity of the shared parser (0 when disabled)."""
    return default_parser().cache_size


def set_cache_size(size: int) -> None:
    """Resize the shared parser's cache; 0 disables caching."""
    default_parser().cache_size = size
