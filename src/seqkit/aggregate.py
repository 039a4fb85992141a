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

"""Numeric aggregation over mapped values.

``sum_of`` has an identity element and returns ``0`` for empty input.
``min_of`` and ``max_of`` have none and raise ``EmptySequenceError`` instead.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import cast

from seqkit._internal.exceptions import EmptySequenceError
from seqkit._internal.logging_utils import structured_extra
from seqkit.core.model_types import LogComponent
from seqkit.core.type_aliases import N, T

logger: logging.Logger = logging.getLogger("seqkit.aggregate")


def sum_of(seq: Sequence[T], value_fn: Callable[[T], N]) -> N:
    """Return the sum of ``value_fn`` over ``seq``, or ``0`` when ``seq`` is empty."""
    total = cast("N", 0)
    for item in seq:
        total = total + value_fn(item)
    return total


def min_of(seq: Sequence[T], value_fn: Callable[[T], N]) -> N:
    """Return the smallest mapped value; ties keep the first one seen.

    Raises:
        EmptySequenceError: If ``seq`` is empty.
    """
    return _extreme_of(seq, value_fn, operation="min_of", prefer=lambda candidate, best: candidate < best)


def max_of(seq: Sequence[T], value_fn: Callable[[T], N]) -> N:
    """Return the largest mapped value; ties keep the first one seen.

    Raises:
        EmptySequenceError: If ``seq`` is empty.
    """
    return _extreme_of(seq, value_fn, operation="max_of", prefer=lambda candidate, best: candidate > best)


def _extreme_of(
    seq: Sequence[T],
    value_fn: Callable[[T], N],
    *,
    operation: str,
    prefer: Callable[[N, N], bool],
) -> N:
    if not seq:
        logger.debug(
            "%s called on an empty sequence",
            operation,
            extra=structured_extra(component=LogComponent.AGGREGATE, operation=operation, input_size=0),
        )
        raise EmptySequenceError(operation)
    best = value_fn(seq[0])
    for position in range(1, len(seq)):
        candidate = value_fn(seq[position])
        if prefer(candidate, best):
            best = candidate
    return best


__all__ = ["max_of", "min_of", "sum_of"]
