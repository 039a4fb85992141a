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

"""Type variables and protocols describing element constraints."""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any, Protocol, TypeVar

T = TypeVar("T")
U = TypeVar("U")
K = TypeVar("K")
V = TypeVar("V")
H = TypeVar("H", bound=Hashable)


class SupportsSumAndOrder(Protocol):
    """Numeric capability set needed by aggregation: addition and ordering."""

    def __add__(self, other: Any, /) -> Any: ...

    def __radd__(self, other: Any, /) -> Any: ...

    def __lt__(self, other: Any, /) -> bool: ...

    def __gt__(self, other: Any, /) -> bool: ...


N = TypeVar("N", bound=SupportsSumAndOrder)

__all__ = [
    "H",
    "K",
    "N",
    "SupportsSumAndOrder",
    "T",
    "U",
    "V",
]
