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

"""Unit tests for search and membership primitives."""

from __future__ import annotations

import logging
import math

import pytest

from seqkit.core.model_types import LogComponent
from seqkit.exceptions import ElementNotFoundError
from seqkit.search import NOT_FOUND, Lookup, contains, find, find_last, index_of

pytestmark = pytest.mark.unit


def test_index_of_returns_lowest_matching_position() -> None:
    assert index_of([3, 1, 4, 1, 5], 1) == 1
    assert index_of([3, 1, 4, 1, 5], 3) == 0


def test_index_of_reports_absent_value() -> None:
    assert index_of([1, 2, 3], 9) == NOT_FOUND == -1
    assert index_of([], 1) == NOT_FOUND


def test_index_of_respects_bounds() -> None:
    values = [7, 8, 7, 8]
    assert index_of(values, 7, start=1) == 2
    assert index_of(values, 7, stop=0) == NOT_FOUND
    assert index_of(values, 8, start=2, stop=10) == 3


def test_index_of_treats_identical_objects_as_equal() -> None:
    nan = math.nan
    assert index_of([1.0, nan], nan) == 1
    assert index_of([1.0, float("nan")], float("nan")) == NOT_FOUND


def test_contains_uses_value_equality() -> None:
    assert contains(["a", "b"], "b")
    assert contains([[1, 2], [3]], [3])
    assert not contains([], "a")


def test_find_returns_first_match() -> None:
    result = find([1, 2, 3, 4], lambda value: value % 2 == 0)
    assert result == Lookup(2, True, "find")
    element, found = result
    assert (element, found) == (2, True)


def test_find_last_returns_last_match() -> None:
    element, found = find_last([1, 2, 3, 4, 5], lambda value: value % 2 == 0)
    assert element == 4
    assert found


def test_find_on_empty_input_reports_not_found() -> None:
    assert find([], bool) == Lookup(None, False, "find")
    assert find_last([], bool) == Lookup(None, False, "find_last")


def test_find_distinguishes_zero_value_from_missing() -> None:
    hit = find([0, 1], lambda value: value == 0, default=0)
    miss = find([1, 2], lambda value: value == 0, default=0)
    assert hit.element == miss.element == 0
    assert hit.found
    assert not miss.found


def test_find_stops_at_first_match() -> None:
    calls: list[int] = []

    def predicate(value: int) -> bool:
        calls.append(value)
        return value == 2

    _ = find([1, 2, 3], predicate)
    assert calls == [1, 2]


def test_unwrap_raises_for_missing_element() -> None:
    with pytest.raises(ElementNotFoundError, match="find_last: no such element") as excinfo:
        _ = find_last([1, 3], lambda value: value > 5).unwrap()
    assert excinfo.value.operation == "find_last"
    assert isinstance(excinfo.value, LookupError)


def test_unwrap_returns_found_element() -> None:
    assert find(["x", "yy"], lambda value: len(value) == 2).unwrap() == "yy"


def test_unwrap_logs_before_raising(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="seqkit.search"), pytest.raises(ElementNotFoundError):
        _ = find([], lambda value: True).unwrap()
    record = next(record for record in caplog.records if record.name == "seqkit.search")
    assert record.__dict__["component"] is LogComponent.SEARCH
    assert record.__dict__["operation"] == "find"
