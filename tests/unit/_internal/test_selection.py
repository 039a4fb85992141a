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

"""Unit tests for the shared selection routine and its writers."""

from __future__ import annotations

import pytest

from seqkit._internal.selection import FreshWriter, PrefixWriter, select_into

pytestmark = pytest.mark.unit


def is_even(value: int) -> bool:
    return value % 2 == 0


def test_fresh_writer_and_prefix_writer_select_the_same_elements() -> None:
    source = [1, 2, 3, 4, 5, 6]
    fresh = select_into(source, is_even, FreshWriter())
    compacted = select_into(list(source), is_even, PrefixWriter(list(source)))
    assert fresh == [2, 4, 6]
    assert list(compacted) == list(fresh)


def test_prefix_writer_truncates_and_returns_target() -> None:
    target = [1, 2, 3, 4]
    writer = PrefixWriter(target)
    result = select_into(target, lambda value: value > 2, writer)
    assert result is target
    assert target == [3, 4]
    assert writer.count == 2


def test_select_into_calls_keep_once_per_element_in_order() -> None:
    seen: list[int] = []

    def keep(value: int) -> bool:
        seen.append(value)
        return True

    _ = select_into([5, 6, 7], keep, FreshWriter())
    assert seen == [5, 6, 7]


def test_fresh_writer_never_returns_the_source() -> None:
    source = [1, 2]
    result = select_into(source, lambda _value: True, FreshWriter())
    assert result == source
    assert result is not source
