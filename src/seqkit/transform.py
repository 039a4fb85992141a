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

"""Filtering, mapping and folding primitives.

Allocating operations return a new ``list`` and never touch their input.
``filter_in_place`` instead compacts the selection into the caller's own list,
truncates it and returns that same object; any earlier view of the full-length
list must be treated as invalidated.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableSequence, Sequence

from seqkit._internal.exceptions import EmptySequenceError
from seqkit._internal.logging_utils import structured_extra
from seqkit._internal.selection import FreshWriter, PrefixWriter, select_into
from seqkit.core.model_types import LogComponent
from seqkit.core.type_aliases import T, U

logger: logging.Logger = logging.getLogger("seqkit.transform")


def filter_items(seq: Sequence[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return a new list of the elements satisfying ``predicate``, in input order."""
    writer: FreshWriter[T] = FreshWriter()
    _ = select_into(seq, predicate, writer)
    return writer.close()


def filter_in_place(seq: MutableSequence[T], predicate: Callable[[T], bool]) -> MutableSequence[T]:
    """Keep only the elements satisfying ``predicate``, reusing ``seq``'s storage.

    Args:
        seq: List to compact. It is modified and truncated.
        predicate: Selection test, called once per element in order.

    Returns:
        ``seq`` itself, now holding only the matching elements.
    """
    input_size = len(seq)
    result = select_into(seq, predicate, PrefixWriter(seq))
    logger.debug(
        "filter_in_place kept %d of %d elements",
        len(result),
        input_size,
        extra=structured_extra(
            component=LogComponent.TRANSFORM,
            operation="filter_in_place",
            input_size=input_size,
            result_size=len(result),
        ),
    )
    return result


def map_items(seq: Sequence[T], transform: Callable[[T], U]) -> list[U]:
    """Return a new list where element ``i`` is ``transform(seq[i])``."""
    return [transform(item) for item in seq]


def reduce_items(seq: Sequence[T], combine: Callable[[T, T], T]) -> T:
    """Left-fold ``seq`` with ``combine``, seeded by the first element.

    A single-element sequence is returned as-is without calling ``combine``.

    Raises:
        EmptySequenceError: If ``seq`` is empty; there is no identity to return.
    """
    if not seq:
        logger.debug(
            "reduce_items called on an empty sequence",
            extra=structured_extra(component=LogComponent.TRANSFORM, operation="reduce_items", input_size=0),
        )
        raise EmptySequenceError("reduce_items")
    accumulator = seq[0]
    for position in range(1, len(seq)):
        accumulator = combine(accumulator, seq[position])
    return accumulator


def all_match(seq: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    """Return True when every element satisfies ``predicate``.

    An empty sequence returns False: vacuous truth is not used here.
    """
    if not seq:
        return False
    return all(predicate(item) for item in seq)


def any_match(seq: Sequence[T], predicate: Callable[[T], bool]) -> bool:
    """Return True when at least one element satisfies ``predicate``."""
    return any(predicate(item) for item in seq)


def count_matching(seq: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """Return how many elements satisfy ``predicate``."""
    return sum(1 for item in seq if predicate(item))


__all__ = [
    "all_match",
    "any_match",
    "count_matching",
    "filter_in_place",
    "filter_items",
    "map_items",
    "reduce_items",
]
