"""Loose version parsing.

Accepts strings such as ``"v1.2"``, ``".2.3"`` or ``"1.2.3-beta2"``, numbers,
sequences of parts (``["v", 1, 2, "beta"]``) and already parsed
:class:`~loosever.models.version.Version` records, and normalizes them to four
numeric segments plus a tag.
"""

from __future__ import annotations

import dataclasses
import logging
import re
import threading
from typing import TypeAlias, Union

from ..config import ParserOptions, load_options
from ..errors import InvalidArgument, InvalidVersion
from ..lru import RecencyCache
from ..models.version import SEGMENT_COUNT, Version

logger = logging.getLogger(__name__)

RawVersion: TypeAlias = Union[str, int, float, list, tuple, Version, None]

# prefix, up to four dotted numeric segments, optional separator, tag
_VERSION_PATTERN = re.compile(r"([^0-9.]*)(\.?[0-9]+(?:\.[0-9]+){0,3})?[.\-]?(.*)")
# a bare number, dotted numbers included, so [1.5, 2] joins as "1.5.2"
_NUMERIC_TOKEN = re.compile(r"[0-9]+(?:\.[0-9]+)*")


def _join_parts(parts: list | tuple) -> str:
    """Concatenate sequence parts, dotting each part that follows a number."""
    text = ""
    previous: str | None = None
    for part in parts:
        if isinstance(part, bool) or not isinstance(part, (str, int, float)):
            raise InvalidVersion(f"Invalid version part {part!r} in {parts!r}")
        token = str(part)
        if previous is not None and _NUMERIC_TOKEN.fullmatch(previous.strip()):
            text += "."
        text += token
        previous = token
    return text


def _to_text(raw: RawVersion) -> str:
    if raw is None:
        return "0"
    if isinstance(raw, str):
        return raw if raw.strip() else "0"
    if isinstance(raw, bool):
        raise InvalidVersion(f"Invalid version {raw!r}")
    if isinstance(raw, (int, float)):
        return str(raw)
    if isinstance(raw, (list, tuple)):
        return _join_parts(raw) if raw else "0"
    raise InvalidVersion(f"Invalid version {raw!r}")


def parse_text(text: str, original: object = None) -> Version:
    """Parse one version string without consulting any cache.

    Raises:
        InvalidVersion: If ``text`` has no numeric segment or cannot be matched.
    """
    match = _VERSION_PATTERN.fullmatch(text.strip())
    if match is None or match.group(2) is None:
        raise InvalidVersion(f'Invalid version "{text}"')

    try:
        numbers = [int(segment) if segment else 0 for segment in match.group(2).split(".")]
    except ValueError as exc:
        # int() refuses strings past sys.get_int_max_str_digits()
        raise InvalidVersion(f'Invalid version "{text}"') from exc
    numbers.extend([0] * (SEGMENT_COUNT - len(numbers)))
    return Version(
        segments=tuple(numbers),
        tag=match.group(3) or "",
        original=original,
    )


def cache_key(raw: RawVersion) -> str:
    """Canonical cache key, equal for structurally equal inputs of the same type."""
    return f"{type(raw).__name__}:{raw!r}"


class VersionParser:
    """Parses raw inputs into :class:`Version` records, memoizing results.

    Each parser owns its cache; construct separate parsers for isolated caches.
    """

    def __init__(self, options: ParserOptions | None = None) -> None:
        options = options or ParserOptions()
        self._lock = threading.Lock()
        self._cache: RecencyCache[str, Version] | None = None
        if options.cache_size > 0:
            self._cache = RecencyCache(options.cache_size)

    @property
    def cache(self) -> RecencyCache[str, Version] | None:
        return self._cache

    @property
    def cache_size(self) -> int:
        """Cache capacity; 0 when caching is disabled."""
        return 0 if self._cache is None else self._cache.capacity

    @cache_size.setter
    def cache_size(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            raise InvalidArgument(f"Cache size must be an integer, got {size!r}")
        size = max(size, 0)
        with self._lock:
            if size == 0:
                if self._cache is not None:
                    logger.debug("Version cache disabled")
                self._cache = None
            elif self._cache is None:
                logger.debug("Version cache enabled with capacity %d", size)
                self._cache = RecencyCache(size)
            else:
                logger.debug("Version cache capacity %d -> %d", self._cache.capacity, size)
                self._cache.capacity = size

    def parse(self, raw: RawVersion) -> Version:
        """Return the normalized version for ``raw``.

        Raises:
            InvalidVersion: If ``raw`` has an unsupported type or cannot be parsed.
        """
        if isinstance(raw, Version):
            return dataclasses.replace(raw)

        text = _to_text(raw)
        key = cache_key(raw)

        with self._lock:
            cached = self._cache.get(key) if self._cache is not None else None
        if isinstance(cached, Version):
            return cached

        original = tuple(raw) if isinstance(raw, list) else raw
        version = parse_text(text, original=original)

        with self._lock:
            if self._cache is not None:
                self._cache.set(key, version)
        return version


_default_parser: VersionParser | None = None
_default_lock = threading.Lock()


def default_parser() -> VersionParser:
    """Return the shared parser, creating it from :func:`load_options` on first use."""
    global _default_parser
    with _default_lock:
        if _default_parser is None:
            _default_parser = VersionParser(load_options())
        return _default_parser


def reset_default_parser() -> None:
    """Discard the shared parser so the next call rebuilds it from the environment."""
    global _default_parser
    with _default_lock:
        _default_parser = None
