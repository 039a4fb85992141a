# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Membership trackers backing deduplication and set operations.

A tracker answers "has this value been seen before?" and records it when not.
``ScanTracker`` relies on equality alone and costs O(n) per query.
``HashTracker`` keeps hashable values in a set and unhashable ones in a list.
Equal values may differ in hashability, so a query consults both stores and
the two trackers report exactly the same answers.
"""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from typing import Generic, Protocol, TypeVar, cast

from seqkit.core.model_types import DedupeStrategy
from seqkit.search import contains

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class MembershipTracker(Protocol[T_contra]):
    """Seen-set abstraction shared by the dedupe strategies."""

    def add(self, value: T_contra) -> bool:
        """Record ``value``; return True when it had not been seen before."""
        ...

    def __contains__(self, value: object) -> bool: ...


class ScanTracker(Generic[T]):
    """Equality-only tracker backed by a list and a linear scan."""

    __slots__ = ("_seen",)

    def __init__(self) -> None:
        self._seen: list[T] = []

    def add(self, value: T) -> bool:
        if contains(self._seen, value):
            return False
        self._seen.append(value)
        return True

    def __contains__(self, value: object) -> bool:
        return contains(self._seen, value)

    def __len__(self) -> int:
        return len(self._seen)


class HashTracker(Generic[T]):
    """Set-backed tracker with a linear-scan fallback for unhashable values.

    A hashable value can equal an unhashable one (``frozenset({1}) == {1}``),
    so each query also scans the other store whenever that store is non-empty.
    """

    __slots__ = ("_hashed", "_unhashable")

    def __init__(self) -> None:
        self._hashed: set[Hashable] = set()
        self._unhashable: list[T] = []

    def add(self, value: T) -> bool:
        hashable = _is_hashable(value)
        if self._seen(value, hashable=hashable):
            return False
        if hashable:
            self._hashed.add(cast("Hashable", value))
        else:
            self._unhashable.append(value)
        return True

    def __contains__(self, value: object) -> bool:
        return self._seen(value, hashable=_is_hashable(value))

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashable)

    def _seen(self, value: object, *, hashable: bool) -> bool:
        if hashable:
            return value in self._hashed or (bool(self._unhashable) and contains(self._unhashable, value))
        if contains(self._unhashable, value):
            return True
        return any(item is value or item == value for item in self._hashed)


def _is_hashable(value: object) -> bool:
    # ``isinstance(value, Hashable)`` misses tuples holding unhashable items.
    try:
        hash(value)
    except TypeError:
        return False
    return True


def membership_tracker(strategy: DedupeStrategy) -> MembershipTracker[T]:
    """Return a fresh tracker implementing ``strategy``."""
    if strategy is DedupeStrategy.HASH:
        return HashTracker()
    return ScanTracker()


def hashed_lookup(values: Iterable[T]) -> HashTracker[T]:
    """Return a ``HashTracker`` pre-loaded with ``values``."""
    tracker: HashTracker[T] = HashTracker()
    for value in values:
        _ = tracker.add(value)
    return tracker


__all__ = ["HashTracker", "MembershipTracker", "ScanTracker", "hashed_lookup", "membership_tracker"]
