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

"""Search and membership primitives.

``index_of`` is the primitive most other operations build on: a plain linear
scan that needs nothing from the element type beyond equality. Equality follows
Python's container rules (an object is always equal to itself), so results
agree with ``list.index`` and with set membership.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Final, Generic

from seqkit._internal.exceptions import ElementNotFoundError
from seqkit._internal.logging_utils import structured_extra
from seqkit.core.model_types import LogComponent
from seqkit.core.type_aliases import T

logger: logging.Logger = logging.getLogger("seqkit.search")

NOT_FOUND: Final[int] = -1


@dataclass(slots=True, frozen=True)
class Lookup(Generic[T]):
    """Result of ``find``/``find_last``.

    ``found`` distinguishes a matched element that happens to equal the
    default from no match at all. Unpacks as ``element, found``.

    Attributes:
        element: The matched element, or the caller's default when nothing matched.
        found: Whether an element satisfied the predicate.
        operation: Name of the lookup that produced this result.
    """

    element: T
    found: bool
    operation: str = "find"

    def __iter__(self) -> Iterator[object]:
        yield self.element
        yield self.found

    def unwrap(self) -> T:
        """Return the matched element.

        Raises:
            ElementNotFoundError: If the lookup did not match any element.
        """
        if not self.found:
            logger.debug(
                "%s result unwrapped without a match",
                self.operation,
                extra=structured_extra(component=LogComponent.SEARCH, operation=self.operation),
            )
            raise ElementNotFoundError(self.operation)
        return self.element


def index_of(seq: Sequence[T], value: T, start: int = 0, stop: int | None = None) -> int:
    """Return the lowest index in ``seq[start:stop]`` whose element equals ``value``.

    Args:
        seq: Sequence to scan.
        value: Value to look for.
        start: First index to inspect.
        stop: Index at which to stop scanning (exclusive). Defaults to ``len(seq)``.

    Returns:
        The index of the first equal element, or ``NOT_FOUND`` (-1).
    """
    end = len(seq) if stop is None else min(stop, len(seq))
    for position in range(max(start, 0), end):
        item = seq[position]
        if item is value or item == value:
            return position
    return NOT_FOUND


def contains(seq: Sequence[T], value: T) -> bool:
    """Report whether ``value`` is present in ``seq``."""
    return index_of(seq, value) >= 0


def find(seq: Sequence[T], predicate: Callable[[T], bool], default: T | None = None) -> Lookup[T | None]:
    """Return the first element satisfying ``predicate``.

    Args:
        seq: Sequence to scan front to back.
        predicate: Test applied to each element until one passes.
        default: Placeholder element reported when nothing matches.

    Returns:
        ``Lookup(element, True)`` for the first match, otherwise
        ``Lookup(default, False)``.
    """
    for item in seq:
        if predicate(item):
            return Lookup(item, True, "find")
    return Lookup(default, False, "find")


def find_last(seq: Sequence[T], predicate: Callable[[T], bool], default: T | None = None) -> Lookup[T | None]:
    """Return the last element satisfying ``predicate``, scanning back to front."""
    for position in range(len(seq) - 1, -1, -1):
        item = seq[position]
        if predicate(item):
            return Lookup(item, True, "find_last")
    return Lookup(default, False, "find_last")


__all__ = ["NOT_FOUND", "Lookup", "contains", "find", "find_last", "index_of"]
