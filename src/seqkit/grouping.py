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

"""Associative and grouping operations.

Every result is freshly allocated. Dictionaries preserve insertion order, so
keys appear in the order they were first produced by the input.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from seqkit.core.type_aliases import H, K, T, V


def associate_by(seq: Sequence[T], key_fn: Callable[[T], K]) -> dict[K, T]:
    """Map ``key_fn(element)`` to ``element``; a later element wins on key clashes."""
    associated: dict[K, T] = {}
    for item in seq:
        associated[key_fn(item)] = item
    return associated


def associate_with(seq: Sequence[H], value_fn: Callable[[H], V]) -> dict[H, V]:
    """Map each element to ``value_fn(element)``.

    Elements are used as keys and must be hashable. Duplicate elements collapse
    into a single entry; ``value_fn`` is still called for every occurrence.
    """
    associated: dict[H, V] = {}
    for item in seq:
        associated[item] = value_fn(item)
    return associated


def group_by(seq: Sequence[T], key_fn: Callable[[T], K]) -> dict[K, list[T]]:
    """Bucket elements by ``key_fn``, preserving input order inside each bucket.

    Args:
        seq: Elements to group.
        key_fn: Key derivation, called once per element.

    Returns:
        Mapping from key to the list of elements producing it. Buckets are created
        on first encounter of a key.
    """
    groups: dict[K, list[T]] = {}
    for item in seq:
        key = key_fn(item)
        bucket = groups.get(key)
        if bucket is None:
            bucket = groups[key] = []
        bucket.append(item)
    return groups


def partition(seq: Sequence[T], predicate: Callable[[T], bool]) -> tuple[list[T], list[T]]:
    """Split ``seq`` into ``(matched, unmatched)`` lists, both in input order."""
    matched: list[T] = []
    unmatched: list[T] = []
    for item in seq:
        (matched if predicate(item) else unmatched).append(item)
    return matched, unmatched


__all__ = ["associate_by", "associate_with", "group_by", "partition"]
