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

"""Structural operations: flattening, chunking and reversal."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence, Sequence
from typing import cast

from seqkit._internal.exceptions import InvalidChunkSizeError
from seqkit._internal.logging_utils import structured_extra
from seqkit.aggregate import sum_of
from seqkit.core.model_types import LogComponent
from seqkit.core.type_aliases import T

logger: logging.Logger = logging.getLogger("seqkit.structure")


def flatten(seqs: Sequence[Sequence[T]]) -> list[T]:
    """Concatenate the inner sequences of ``seqs`` into one new list.

    The result is sized up front from the total element count, then filled in
    outer-then-inner order.
    """
    total = sum_of(seqs, len)
    flat = cast("list[T]", [None] * total)
    position = 0
    for inner in seqs:
        for item in inner:
            flat[position] = item
            position += 1
    return flat


def chunked(seq: Sequence[T], size: int) -> list[list[T]]:
    """Split ``seq`` into consecutive lists of ``size`` elements.

    The final chunk holds the remainder when ``len(seq)`` is not a multiple of
    ``size``. Every chunk is a fresh list.

    Args:
        seq: Sequence to split.
        size: Number of elements per chunk; must be a positive integer.

    Returns:
        List of chunks, empty when ``seq`` is empty.

    Raises:
        InvalidChunkSizeError: If ``size`` is not a positive integer.
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        logger.debug(
            "chunked rejected chunk size %r",
            size,
            extra=structured_extra(
                component=LogComponent.STRUCTURE,
                operation="chunked",
                input_size=len(seq),
                details={"size": repr(size)},
            ),
        )
        raise InvalidChunkSizeError(size)
    return [list(seq[start : start + size]) for start in range(0, len(seq), size)]


def reversed_items(seq: Sequence[T]) -> list[T]:
    """Return a new list holding the elements of ``seq`` in reverse order."""
    return [seq[position] for position in range(len(seq) - 1, -1, -1)]


def reverse_in_place(seq: MutableSequence[T]) -> MutableSequence[T]:
    """Reverse ``seq`` by swapping elements pairwise and return ``seq`` itself."""
    low, high = 0, len(seq) - 1
    while low < high:
        seq[low], seq[high] = seq[high], seq[low]
        low += 1
        high -= 1
    return seq


__all__ = ["chunked", "flatten", "reverse_in_place", "reversed_items"]
