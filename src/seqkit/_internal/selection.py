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

"""Shared selection routine for allocating and in-place operations.

Each filtering-style operation exists twice: an allocating form that returns a
fresh list and an in-place form that compacts the selection into the front of
the caller's list. Both drive ``select_into`` with the same ``keep`` predicate
and differ only in the writer that receives the kept elements.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class OutputWriter(Protocol[T]):
    """Destination for the elements kept by ``select_into``."""

    def write(self, item: T) -> None: ...

    def close(self) -> MutableSequence[T]: ...


class FreshWriter(Generic[T]):
    """Collects kept elements into a newly allocated list."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[T] = []

    def write(self, item: T) -> None:
        self._items.append(item)

    def close(self) -> list[T]:
        return self._items


class PrefixWriter(Generic[T]):
    """Compacts kept elements into the prefix of ``target``.

    The write position never overtakes the read position of a single forward
    pass over ``target``, so unread elements are never clobbered. ``close``
    deletes the stale tail and returns ``target`` itself.
    """

    __slots__ = ("_count", "_target")

    def __init__(self, target: MutableSequence[T]) -> None:
        self._target = target
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def write(self, item: T) -> None:
        self._target[self._count] = item
        self._count += 1

    def close(self) -> MutableSequence[T]:
        del self._target[self._count :]
        return self._target


def select_into(items: Iterable[T], keep: Callable[[T], bool], writer: OutputWriter[T]) -> MutableSequence[T]:
    """Write every element of ``items`` accepted by ``keep`` to ``writer``.

    ``keep`` is called exactly once per element, in order.

    Returns:
        Whatever ``writer.close()`` produces.
    """
    for item in items:
        if keep(item):
            writer.write(item)
    return writer.close()


__all__ = ["FreshWriter", "OutputWriter", "PrefixWriter", "select_into"]
