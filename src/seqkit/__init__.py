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

"""seqkit - functional helpers for ordered sequences.

Provides membership tests, filtering, mapping, folding, grouping,
deduplication, set algebra, chunking and numeric aggregation over lists and
other sequences. Allocating operations always return fresh lists; the
``*_in_place`` variants reuse and return the caller's list.
"""

from __future__ import annotations

from seqkit.exceptions import (
    ElementNotFoundError,
    EmptySequenceError,
    InvalidChunkSizeError,
    InvalidStrategyError,
    SeqkitError,
    SeqkitValidationError,
)

from ._internal.logging_utils import configure_logging
from .aggregate import max_of, min_of, sum_of
from .api import apply_config, configure_from_file
from .config import Config, load_config
from .core.model_types import DedupeStrategy
from .dedupe import distinct, intersect, unique, unique_by, unique_by_in_place, unique_in_place
from .grouping import associate_by, associate_with, group_by, partition
from .search import NOT_FOUND, Lookup, contains, find, find_last, index_of
from .structure import chunked, flatten, reverse_in_place, reversed_items
from .transform import (
    all_match,
    any_match,
    count_matching,
    filter_in_place,
    filter_items,
    map_items,
    reduce_items,
)

__all__ = [
    "NOT_FOUND",
    "Config",
    "DedupeStrategy",
    "ElementNotFoundError",
    "EmptySequenceError",
    "InvalidChunkSizeError",
    "InvalidStrategyError",
    "Lookup",
    "SeqkitError",
    "SeqkitValidationError",
    "__version__",
    "all_match",
    "any_match",
    "apply_config",
    "associate_by",
    "associate_with",
    "chunked",
    "configure_from_file",
    "configure_logging",
    "contains",
    "count_matching",
    "distinct",
    "filter_in_place",
    "filter_items",
    "find",
    "find_last",
    "flatten",
    "group_by",
    "index_of",
    "intersect",
    "load_config",
    "map_items",
    "max_of",
    "min_of",
    "partition",
    "reduce_items",
    "reverse_in_place",
    "reversed_items",
    "sum_of",
    "unique",
    "unique_by",
    "unique_by_in_place",
    "unique_in_place",
]

__version__ = "0.1.0"
