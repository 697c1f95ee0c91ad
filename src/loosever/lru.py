"""Fixed-capacity least-recently-used cache.

Entries live in a dict keyed by cache key. Each entry also records the keys of
its neighbours in the recency order, so the dict doubles as a doubly linked
list running from the tail (least recently used) to the head (most recently
used). Lookup, promotion, insertion and eviction are all O(1).
"""

from __future__ import annotations

import logging
from collections.abc import Hashable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

# Marks the end of the recency list; never a valid key.
_END: Any = object()


@dataclass(slots=True)
class _Node:
    value: Any
    older: Any = _END
    newer: Any = _END


def _check_capacity(capacity: int) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise ValueError(f"Cache capacity must be an integer, got {capacity!r}")
    if capacity < 1:
        raise ValueError(f"Cache capacity must be at least 1, got {capacity}")
    return capacity


class RecencyCache(Generic[K, V]):
    """Key/value store that evicts the least recently used key when full."""

    def __init__(self, capacity: int = 100) -> None:
        self._capacity = _check_capacity(capacity)
        self._nodes: dict[K, _Node] = {}
        self._head: Any = _END
        self._tail: Any = _END

    @property
    def capacity(self) -> int:
        return self._capacity

    @capacity.setter
    def capacity(self, capacity: int) -> None:
        capacity = _check_capacity(capacity)
        while len(self._nodes) > capacity:
            self._evict()
        self._capacity = capacity

    @property
    def size(self) -> int:
        return len(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, key: object) -> bool:
        return key in self._nodes

    def get(self, key: K, default: V | None = None) -> V | None:
        """Return the value for ``key`` and mark it most recently used."""
        node = self._nodes.get(key)
        if node is None:
            return default
        self._promote(key, node)
        return node.value

    def set(self, key: K, value: V) -> V:
        """Store ``value`` under ``key`` and return it.

        Replacing the value of an existing key only promotes it. Inserting a new
        key into a full cache evicts the least recently used key first.
        """
        node = self._nodes.get(key)
        if node is not None:
            node.value = value
            self._promote(key, node)
            return value

        if len(self._nodes) >= self._capacity:
            self._evict()

        node = _Node(value)
        self._nodes[key] = node
        self._push_head(key, node)
        return value

    def remove(self, key: K, default: V | None = None) -> V | None:
        """Drop ``key`` from the cache, returning its value or ``default``."""
        node = self._nodes.pop(key, None)
        if node is None:
            return default
        self._unlink(node)
        return node.value

    def keys(self) -> list[K]:
        """Return the keys ordered from least to most recently used."""
        ordered: list[K] = []
        key = self._tail
        while key is not _END:
            ordered.append(key)
            key = self._nodes[key].newer
        return ordered

    def clear(self) -> None:
        self._nodes.clear()
        self._head = self._tail = _END

    def _promote(self, key: K, node: _Node) -> None:
        if node.newer is _END:
            # already the head
            return
        self._unlink(node)
        self._push_head(key, node)

    def _push_head(self, key: K, node: _Node) -> None:
        node.older = self._head
        node.newer = _END
        if self._head is not _END:
            self._nodes[self._head].newer = key
        self._head = key
        if self._tail is _END:
            self._tail = key

    def _unlink(self, node: _Node) -> None:
        if node.older is _END:
            self._tail = node.newer
        else:
            self._nodes[node.older].newer = node.newer

        if node.newer is _END:
            self._head = node.older
        else:
            self._nodes[node.newer].older = node.older

        node.older = node.newer = _END

    def _evict(self) -> None:
        key = self._tail
        node = self._nodes.pop(key)
        self._unlink(node)
        logger.debug("Evicted least recently used cache key %r", key)
