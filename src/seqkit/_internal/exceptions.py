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

"""Common exception hierarchy for seqkit."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = [
    "ElementNotFoundError",
    "EmptySequenceError",
    "InvalidChunkSizeError",
    "InvalidStrategyError",
    "SeqkitError",
    "SeqkitValidationError",
]


class SeqkitError(Exception):
    """Base error for all seqkit exceptions."""


class SeqkitValidationError(SeqkitError, ValueError):
    """Raised when input data fails validation checks."""


class EmptySequenceError(SeqkitValidationError):
    """Raised by operations without an identity element when given no elements."""

    def __init__(self, operation: str) -> None:
        """Initialize the exception with the failing operation name.

        Args:
            operation: Name of the operation that received an empty sequence.
        """
        self.operation = operation
        super().__init__(f"{operation}: empty sequence")


class ElementNotFoundError(SeqkitError, LookupError):
    """Raised when a lookup result without a match is unwrapped."""

    def __init__(self, operation: str) -> None:
        """Initialize the exception with the lookup operation name.

        Args:
            operation: Name of the lookup that found no matching element.
        """
        self.operation = operation
        super().__init__(f"{operation}: no such element")


class InvalidChunkSizeError(SeqkitValidationError):
    """Raised when a chunk size is not a positive integer."""

    def __init__(self, size: object) -> None:
        self.size = size
        super().__init__(f"chunk size must be a positive integer, got {size!r}")


class InvalidStrategyError(SeqkitValidationError):
    """Raised when an unknown dedupe strategy name is supplied."""

    def __init__(self, value: object, allowed: Sequence[str]) -> None:
        """Initialize the exception with the rejected value and the valid names.

        Args:
            value: The strategy value that could not be parsed.
            allowed: Strategy names accepted by seqkit.
        """
        self.value = value
        self.allowed = tuple(allowed)
        allowed_text = ", ".join(sorted(self.allowed))
        super().__init__(f"Unknown dedupe strategy {value!r}; expected one of: {allowed_text}")
