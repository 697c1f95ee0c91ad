"""Normalized version record."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import Any

from ..errors import InvalidVersion, SegmentTooLarge

SEGMENT_COUNT = 4


@functools.total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Four numeric segments plus an optional free-form tag.

    ``original`` keeps the raw input for diagnostics and takes no part in
    equality, hashing or ordering.
    """

    segments: tuple[int, int, int, int]
    tag: str = ""
    original: Any = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.segments, (tuple, list)):
            raise InvalidVersion(f"Version segments must be a sequence: {self.segments!r}")
        if len(self.segments) != SEGMENT_COUNT:
            raise InvalidVersion(
                f"Version must have exactly {SEGMENT_COUNT} segments, got {len(self.segments)}"
            )
        for segment in self.segments:
            if isinstance(segment, bool) or not isinstance(segment, int) or segment < 0:
                raise InvalidVersion(f"Version segments must be non-negative integers: {segment!r}")
        if not isinstance(self.tag, str):
            raise InvalidVersion(f"Version tag must be a string: {self.tag!r}")
        # tuple() so a list passed by the caller cannot be mutated afterwards
        object.__setattr__(self, "segments", tuple(self.segments))

    @property
    def major(self) -> int:
        return self.segments[0]

    @property
    def minor(self) -> int:
        return self.segments[1]

    @property
    def patch(self) -> int:
        return self.segments[2]

    @property
    def build(self) -> int:
        return self.segments[3]

    @property
    def sort_key(self) -> tuple[tuple[int, ...], bool, str]:
        """Key realising the version order.

        Segments dominate. On a tie an untagged release outranks any tagged
        pre-release, and two tags compare by code point.
        """
        return (self.segments, not self.tag, self.tag)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.sort_key < other.sort_key

    def normalize(self, num_segments: int = SEGMENT_COUNT) -> str:
        """Return the leading ``num_segments`` (clamped to 1..4) joined by dots."""
        count = min(max(int(num_segments), 1), SEGMENT_COUNT)
        return ".".join(str(segment) for segment in self.segments[:count])

    def to_semver(self) -> str:
        return self.normalize(3) + self._tag_suffix()

    def to_unique(self, digits: int = 6) -> str:
        """Return a fixed-width string whose plain string order follows the segments.

        Raises:
            SegmentTooLarge: If any segment needs more than ``digits`` characters.
        """
        parts: list[str] = []
        for segment in self.segments:
            text = str(segment)
            if len(text) > digits:
                raise SegmentTooLarge(
                    f"Version segment is {len(text)} digit{'' if len(text) == 1 else 's'}, "
                    f"however max digits is set to {digits}."
                )
            parts.append(text.zfill(digits))
        return "".join(parts) + self._tag_suffix()

    def to_list(self) -> list[int]:
        return list(self.segments)

    def to_dict(self) -> dict[str, object]:
        return {
            "original": None if self.original is None else str(self.original),
            "segments": list(self.segments),
            "major": self.major,
            "minor": self.minor,
            "patch": self.patch,
            "build": self.build,
            "tag": self.tag,
        }

    def __str__(self) -> str:
        return self.normalize() + self._tag_suffix()

    def _tag_suffix(self) -> str:
        return f"-{self.tag}" if self.tag else ""
