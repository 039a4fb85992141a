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

"""Enumerations used across seqkit."""

from __future__ import annotations

from typing import Final

from seqkit._internal.exceptions import InvalidStrategyError
from seqkit.compat import StrEnum


class LogFormat(StrEnum):
    """Enumeration of log output formats.

    Attributes:
        TEXT: Human-readable text format.
        JSON: Machine-readable JSON format.
    """

    TEXT = "text"
    JSON = "json"

    @classmethod
    def from_str(cls, raw: str) -> LogFormat:
        """Create a LogFormat enum from a string value.

        Args:
            raw: String representation of the log format.

        Returns:
            LogFormat enum value.

        Raises:
            ValueError: If the string does not match any LogFormat value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log format '{raw}'"
            raise ValueError(msg) from exc


class LogComponent(StrEnum):
    """Enumeration of loggable library components.

    Attributes:
        SEARCH: Index and lookup operations.
        TRANSFORM: Filter, map and fold operations.
        STRUCTURE: Flattening, chunking and reversal.
        DEDUPE: Deduplication and set algebra.
        AGGREGATE: Numeric aggregation.
        CONFIG: Configuration loading.
    """

    SEARCH = "search"
    TRANSFORM = "transform"
    STRUCTURE = "structure"
    DEDUPE = "dedupe"
    AGGREGATE = "aggregate"
    CONFIG = "config"

    @classmethod
    def from_str(cls, raw: str) -> LogComponent:
        """Create a LogComponent enum from a string value.

        Args:
            raw: String representation of the log component.

        Returns:
            LogComponent enum value.

        Raises:
            ValueError: If the string does not match any LogComponent value.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            msg = f"Unknown log component '{raw}'"
            raise ValueError(msg) from exc


class DedupeStrategy(StrEnum):
    """Membership algorithm used by deduplication and set operations.

    Attributes:
        SCAN: Linear scan using equality only. Works for any element type and
            costs O(n^2) in the worst case. This is the default.
        HASH: Track hashable values in a set and fall back to the linear scan
            for unhashable ones. Selects exactly the same elements as ``SCAN``.
    """

    SCAN = "scan"
    HASH = "hash"

    @classmethod
    def from_str(cls, raw: str) -> DedupeStrategy:
        """Create a DedupeStrategy enum from a string value.

        Args:
            raw: String representation of the strategy.

        Returns:
            DedupeStrategy enum value.

        Raises:
            InvalidStrategyError: If the string does not name a strategy.
        """
        value = raw.strip().lower()
        try:
            return cls(value)
        except ValueError as exc:
            raise InvalidStrategyError(raw, DEDUPE_STRATEGIES) from exc

    @classmethod
    def coerce(cls, value: DedupeStrategy | str) -> DedupeStrategy:
        """Return ``value`` as a strategy, parsing strings when needed."""
        if isinstance(value, DedupeStrategy):
            return value
        return cls.from_str(str(value))


DEDUPE_STRATEGIES: Final[tuple[str, ...]] = ("scan", "hash")

__all__ = ["DEDUPE_STRATEGIES", "DedupeStrategy", "LogComponent", "LogFormat"]
