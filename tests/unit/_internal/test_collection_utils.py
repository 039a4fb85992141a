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

"""Unit tests for membership trackers."""

from __future__ import annotations

import math

import pytest

from seqkit._internal.collection_utils import HashTracker, ScanTracker, hashed_lookup, membership_tracker
from seqkit.core.model_types import DedupeStrategy

pytestmark = pytest.mark.unit


def test_membership_tracker_selects_implementation() -> None:
    assert isinstance(membership_tracker(DedupeStrategy.SCAN), ScanTracker)
    assert isinstance(membership_tracker(DedupeStrategy.HASH), HashTracker)


@pytest.mark.parametrize("tracker_type", [ScanTracker, HashTracker])
def test_add_reports_first_sighting_only(tracker_type: type[ScanTracker[object] | HashTracker[object]]) -> None:
    tracker = tracker_type()
    assert tracker.add(1)
    assert not tracker.add(1)
    assert tracker.add([1])
    assert not tracker.add([1])
    assert tracker.add((1, [2]))
    assert not tracker.add((1, [2]))
    assert 1 in tracker
    assert [1] in tracker
    assert 2 not in tracker
    assert len(tracker) == 3


@pytest.mark.parametrize("tracker_type", [ScanTracker, HashTracker])
def test_trackers_agree_on_nan_identity(tracker_type: type[ScanTracker[float] | HashTracker[float]]) -> None:
    nan = math.nan
    tracker = tracker_type()
    assert tracker.add(nan)
    assert not tracker.add(nan)
    assert tracker.add(float("nan"))


def test_hashed_lookup_preloads_values() -> None:
    lookup = hashed_lookup([1, 2, [3], 2])
    assert 2 in lookup
    assert [3] in lookup
    assert 4 not in lookup
    assert len(lookup) == 3


@pytest.mark.parametrize("tracker_type", [ScanTracker, HashTracker])
def test_trackers_match_equal_values_of_mixed_hashability(
    tracker_type: type[ScanTracker[object] | HashTracker[object]],
) -> None:
    tracker = tracker_type()
    assert tracker.add({1})
    assert not tracker.add(frozenset({1}))
    assert frozenset({1}) in tracker

    other = tracker_type()
    assert other.add(frozenset({2}))
    assert not other.add({2})
    assert {2} in other
    assert {3} not in other
    assert len(other) == 1
