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

"""Shared Hypothesis strategies for property-based tests."""

from __future__ import annotations

from hypothesis import strategies as st

__all__ = [
    "chunk_sizes",
    "int_lists",
    "mixed_lists",
    "nested_int_lists",
]


def int_lists(max_value: int = 10, max_size: int = 30) -> st.SearchStrategy[list[int]]:
    """Return a strategy for short integer lists with plenty of duplicates."""
    return st.lists(st.integers(min_value=0, max_value=max_value), max_size=max_size)


def nested_int_lists(max_size: int = 6) -> st.SearchStrategy[list[list[int]]]:
    """Return a strategy for lists of integer lists, including empty inner lists."""
    return st.lists(int_lists(max_size=max_size), max_size=max_size)


def chunk_sizes(max_value: int = 12) -> st.SearchStrategy[int]:
    """Strategy that emits valid (positive) chunk sizes.

    Args:
        max_value: Largest chunk size to emit.

    Returns:
        Hypothesis strategy producing integers between 1 and ``max_value``.
    """
    return st.integers(min_value=1, max_value=max_value)


def mixed_lists(max_size: int = 20) -> st.SearchStrategy[list[object]]:
    """Lists mixing hashable and unhashable elements.

    Returns:
        Hypothesis strategy emitting small ints, short strings, small int lists
        and int sets drawn as either ``set`` or ``frozenset``. The last two
        compare equal across hashability.
    """
    small_sets = st.sets(st.integers(min_value=0, max_value=2), max_size=2)
    element = st.one_of(
        st.integers(min_value=0, max_value=5),
        st.sampled_from(["a", "b", "c"]),
        st.lists(st.integers(min_value=0, max_value=2), max_size=2),
        small_sets,
        small_sets.map(frozenset),
    )
    return st.lists(element, max_size=max_size)
