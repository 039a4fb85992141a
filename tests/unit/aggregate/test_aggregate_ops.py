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

"""Unit tests for numeric aggregation."""

from __future__ import annotations

from decimal import Decimal

import pytest

from seqkit.aggregate import max_of, min_of, sum_of
from seqkit.exceptions import EmptySequenceError

pytestmark = pytest.mark.unit


def identity(value: int) -> int:
    return value


def test_sum_of_mapped_values() -> None:
    assert sum_of(["a", "bb", "ccc"], len) == 6
    assert sum_of([Decimal("1.5"), Decimal("2.5")], lambda value: value) == Decimal("4.0")


def test_sum_of_empty_input_is_zero() -> None:
    assert sum_of([], identity) == 0


def test_min_and_max_of_mapped_values() -> None:
    words = ["pear", "fig", "banana"]
    assert min_of(words, len) == 3
    assert max_of(words, len) == 6
    assert min_of([5], identity) == max_of([5], identity) == 5


def test_min_and_max_of_floats() -> None:
    values = [2.5, -1.0, 7.25]
    assert min_of(values, lambda value: value) == -1.0
    assert max_of(values, lambda value: value) == 7.25


@pytest.mark.parametrize(("func", "name"), [(min_of, "min_of"), (max_of, "max_of")])
def test_min_and_max_of_reject_empty_input(func: object, name: str) -> None:
    with pytest.raises(EmptySequenceError) as excinfo:
        _ = func([], identity)  # type: ignore[operator]
    assert excinfo.value.operation == name


def test_value_fn_called_once_per_element() -> None:
    calls: list[int] = []

    def value_fn(value: int) -> int:
        calls.append(value)
        return value

    _ = max_of([3, 1, 2], value_fn)
    assert calls == [3, 1, 2]
