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

"""Deduplication and set algebra over ordered sequences.

All operations keep the first occurrence of each value (or key) and preserve
input order. The default ``DedupeStrategy.SCAN`` needs nothing but equality
from the element type: every candidate is checked against the values kept so
far with a linear scan, which is O(n^2) in the worst case. Passing
``strategy=DedupeStrategy.HASH`` (or ``"hash"``) switches to a set-backed
membership test for hashable values. Unhashable values still go through the
scan, and each store is checked against the other, so both strategies select
the same elements in the same order even when an unhashable value equals a
hashable one.

``unique_in_place`` and ``unique_by_in_place`` compact the survivors into the
front of the caller's list, truncate it and return that same object.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableSequence, Sequence

from seqkit._internal.collection_utils import hashed_lookup, membership_tracker
from seqkit._internal.logging_utils import structured_extra
from seqkit._internal.selection import FreshWriter, OutputWriter, PrefixWriter, select_into
from seqkit.core.model_types import DedupeStrategy, LogComponent
from seqkit.core.type_aliases import K, T
from seqkit.search import contains

logger: logging.Logger = logging.getLogger("seqkit.dedupe")


def unique(seq: Sequence[T], *, strategy: DedupeStrategy | str = DedupeStrategy.SCAN) -> list[T]:
    """Return a new list of the distinct elements of ``seq`` in first-occurrence order.

    Args:
        seq: Elements to deduplicate. Not modified.
        strategy: Membership algorithm; see the module docstring.

    Returns:
        Fresh list without duplicates.
    """
    writer: FreshWriter[T] = FreshWriter()
    _ = _select_unique(seq, writer, _resolve(strategy, "unique", len(seq)))
    return writer.close()


def unique_in_place(
    seq: MutableSequence[T],
    *,
    strategy: DedupeStrategy | str = DedupeStrategy.SCAN,
) -> MutableSequence[T]:
    """Remove duplicates from ``seq`` in place, keeping first occurrences.

    Returns:
        ``seq`` itself, truncated to the distinct elements.
    """
    input_size = len(seq)
    result = _select_unique(seq, PrefixWriter(seq), _resolve(strategy, "unique_in_place", input_size))
    _log_compaction("unique_in_place", input_size, len(result))
    return result


def unique_by(
    seq: Sequence[T],
    key_fn: Callable[[T], K],
    *,
    strategy: DedupeStrategy | str = DedupeStrategy.SCAN,
) -> list[T]:
    """Return a new list keeping the first element for each distinct ``key_fn`` value.

    Args:
        seq: Elements to deduplicate. Not modified.
        key_fn: Key derivation, called exactly once per element.
        strategy: Membership algorithm applied to the derived keys.

    Returns:
        Fresh list holding one element per key, in input order.
    """
    writer: FreshWriter[T] = FreshWriter()
    _ = _select_unique_by(seq, key_fn, writer, _resolve(strategy, "unique_by", len(seq)))
    return writer.close()


def unique_by_in_place(
    seq: MutableSequence[T],
    key_fn: Callable[[T], K],
    *,
    strategy: DedupeStrategy | str = DedupeStrategy.SCAN,
) -> MutableSequence[T]:
    """In-place counterpart of ``unique_by``; returns ``seq`` itself."""
    input_size = len(seq)
    result = _select_unique_by(seq, key_fn, PrefixWriter(seq), _resolve(strategy, "unique_by_in_place", input_size))
    _log_compaction("unique_by_in_place", input_size, len(result))
    return result


def intersect(
    seq1: Sequence[T],
    seq2: Sequence[T],
    *,
    strategy: DedupeStrategy | str = DedupeStrategy.SCAN,
) -> list[T]:
    """Return the distinct elements of ``seq1`` that also occur in ``seq2``.

    Order follows ``unique(seq1)``.
    """
    resolved = _resolve(strategy, "intersect", len(seq1) + len(seq2))
    in_other = _presence_test(seq2, resolved)
    return [item for item in unique(seq1, strategy=resolved) if in_other(item)]


def distinct(
    seq1: Sequence[T],
    seq2: Sequence[T],
    *,
    strategy: DedupeStrategy | str = DedupeStrategy.SCAN,
) -> list[T]:
    """Return the symmetric difference of ``seq1`` and ``seq2`` as an ordered list.

    The distinct elements of ``seq1`` missing from ``seq2`` come first, followed
    by the distinct elements of ``seq2`` missing from ``seq1``.
    """
    resolved = _resolve(strategy, "distinct", len(seq1) + len(seq2))
    in_second = _presence_test(seq2, resolved)
    in_first = _presence_test(seq1, resolved)
    only_first = [item for item in unique(seq1, strategy=resolved) if not in_second(item)]
    only_second = [item for item in unique(seq2, strategy=resolved) if not in_first(item)]
    return only_first + only_second


def _select_unique(
    seq: Sequence[T],
    writer: OutputWriter[T],
    strategy: DedupeStrategy,
) -> MutableSequence[T]:
    seen = membership_tracker(strategy)
    return select_into(seq, seen.add, writer)


def _select_unique_by(
    seq: Sequence[T],
    key_fn: Callable[[T], K],
    writer: OutputWriter[T],
    strategy: DedupeStrategy,
) -> MutableSequence[T]:
    seen_keys = membership_tracker(strategy)

    def first_for_key(item: T) -> bool:
        return seen_keys.add(key_fn(item))

    return select_into(seq, first_for_key, writer)


def _presence_test(seq: Sequence[T], strategy: DedupeStrategy) -> Callable[[T], bool]:
    if strategy is DedupeStrategy.HASH:
        return hashed_lookup(seq).__contains__

    def scan(value: T) -> bool:
        return contains(seq, value)

    return scan


def _resolve(strategy: DedupeStrategy | str, operation: str, input_size: int) -> DedupeStrategy:
    resolved = DedupeStrategy.coerce(strategy)
    logger.debug(
        "%s using %s strategy",
        operation,
        resolved.value,
        extra=structured_extra(
            component=LogComponent.DEDUPE,
            operation=operation,
            strategy=resolved,
            input_size=input_size,
        ),
    )
    return resolved


def _log_compaction(operation: str, input_size: int, result_size: int) -> None:
    logger.debug(
        "%s kept %d of %d elements",
        operation,
        result_size,
        input_size,
        extra=structured_extra(
            component=LogComponent.DEDUPE,
            operation=operation,
            input_size=input_size,
            result_size=result_size,
        ),
    )


__all__ = [
    "distinct",
    "intersect",
    "unique",
    "unique_by",
    "unique_by_in_place",
    "unique_in_place",
]
