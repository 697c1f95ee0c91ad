"""loosever: parse, compare and sort loosely formatted version numbers.

The module-level helpers share one process-wide parser (see
:func:`loosever.parsers.default_parser`). Construct a
:class:`~loosever.parsers.VersionParser` and pass it as ``parser=`` to keep an
isolated cache.
"""

from __future__ import annotations

from .compare import OPERATORS, cmp, compare, eq, gt, gte, lt, lte, neq, rcompare, sort
from .config import ConfigError, ParserOptions, load_options
from .core import (
    build,
    delta,
    get_cache_size,
    major,
    minor,
    normalize,
    parse,
    patch,
    set_cache_size,
    tag,
    to_semver,
    to_unique,
    valid,
)
from .errors import InvalidArgument, InvalidOperator, InvalidVersion, SegmentTooLarge, VersionError
from .lru import RecencyCache
from .models import Version
from .parsers import VersionParser, default_parser, reset_default_parser

__all__ = [
    # Models and parser
    "Version",
    "VersionParser",
    "RecencyCache",
    "default_parser",
    "reset_default_parser",
    # Configuration
    "ConfigError",
    "ParserOptions",
    "load_options",
    "get_cache_size",
    "set_cache_size",
    # Parsing and formatting
    "parse",
    "valid",
    "normalize",
    "to_semver",
    "to_unique",
    "major",
    "minor",
    "patch",
    "build",
    "tag",
    "delta",
    # Comparison
    "OPERATORS",
    "compare",
    "rcompare",
    "cmp",
    "eq",
    "neq",
    "gt",
    "gte",
    "lt",
    "lte",
    "sort",
    # Errors
    "VersionError",
    "InvalidVersion",
    "InvalidOperator",
    "InvalidArgument",
    "SegmentTooLarge",
]
