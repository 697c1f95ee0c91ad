"""Version comparison and sorting.

Order: segments compare left to right; on a tie an untagged release beats any
tagged pre-release, and two tags compare by code point (``"beta10" < "beta2"``).
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Sequence
from typing import Any

from .core import valid
from .errors import InvalidArgument, InvalidOperator
from .parsers.loose import RawVersion, VersionParser

CompareFunction = Callable[[Any, Any], int]


def compare(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> int:
    """Return 1 if ``v1`` is greater, -1 if ``v2`` is greater, else 0.

    Raises:
        InvalidVersion: If either side cannot be parsed.
    """
    left = valid(v1, parser=parser).sort_key
    right = valid(v2, parser=parser).sort_key
    if left > right:
        return 1
    if left < right:
        return -1
    return 0


def rcompare(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> int:
    """Reverse of :func:`compare`; sorting with it yields descending order."""
    return -compare(v1, v2, parser=parser)


def eq(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> bool:
    return compare(v1, v2, parser=parser) == 0


def neq(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> bool:
    return compare(v1, v2, parser=parser) != 0


def gt(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> bool:
    return compare(v1, v2, parser=parser) == 1


def gte(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> bool:
    return compare(v1, v2, parser=parser) != -1


def lt(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> bool:
    return compare(v1, v2, parser=parser) == -1


def lte(v1: RawVersion, v2: RawVersion, *, parser: VersionParser | None = None) -> bool:
    return compare(v1, v2, parser=parser) != 1


OPERATORS: dict[str, Callable[..., bool]] = {
    "===": eq,
    "==": eq,
    "!==": neq,
    "!=": neq,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
}


def cmp(
    v1: RawVersion, operator: str, v2: RawVersion, *, parser: VersionParser | None = None
) -> bool:
    """Evaluate ``v1 <operator> v2``.

    Raises:
        InvalidOperator: If ``operator`` is not one of :data:`OPERATORS`.
    """
    predicate = OPERATORS.get(operator) if isinstance(operator, str) else None
    if predicate is None:
        known = ", ".join(OPERATORS)
        raise InvalidOperator(f'Invalid comparator "{operator}". Expected one of: {known}')
    return predicate(v1, v2, parser=parser)


def sort(
    versions: Sequence[RawVersion],
    compare_fn: CompareFunction | None = None,
    *,
    parser: VersionParser | None = None,
) -> list[RawVersion]:
    """Return a new list with ``versions`` ordered by ``compare_fn``.

    ``compare_fn`` defaults to :func:`compare`. Every element is validated
    before ordering starts, so one bad element fails the whole call and the
    input is never touched. The sort is stable.

    Raises:
        InvalidArgument: If ``versions`` is not a sequence or ``compare_fn``
            is not callable.
        InvalidVersion: If any element cannot be parsed.
    """
    if isinstance(versions, (str, bytes)) or not isinstance(versions, Sequence):
        raise InvalidArgument(f"Expected versions to be a sequence, got {type(versions).__name__}")

    if compare_fn is None:
        compare_fn = functools.partial(compare, parser=parser)
    if not callable(compare_fn):
        raise InvalidArgument("Expected compare function to be callable")

    for version in versions:
        valid(version, parser=parser)

    return sorted(versions, key=functools.cmp_to_key(compare_fn))
