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

"""Version-tolerant imports shared by seqkit modules.

seqkit supports Python 3.10 and newer. Names that moved into the standard
library after 3.10 are imported from it when present and from the
``typing_extensions`` / ``tomli`` backports otherwise, so the rest of the
package can import them from one place without version checks.
"""

from __future__ import annotations

import datetime as _dt
import enum as _enum
from datetime import timezone as _timezone
from typing import TYPE_CHECKING, cast

if TYPE_CHECKING:
    import tomli as tomllib
    from typing_extensions import TypedDict, override
else:
    try:
        import tomllib  # py311+
    except ModuleNotFoundError:  # py<3.11
        import tomli as tomllib

    try:
        from typing import TypedDict, override  # py>=3.12
    except ImportError:
        from typing_extensions import TypedDict, override


UTC = getattr(_dt, "UTC", _timezone.utc)


class _StrEnumBase(str, _enum.Enum):
    """Type base for StrEnum-like enums."""


_StrEnum = getattr(_enum, "StrEnum", None)

if _StrEnum is None:

    class _CompatStrEnum(_StrEnumBase):
        """Backport of enum.StrEnum for Python 3.10."""

        def __str__(self) -> str:
            return str(self.value)

    StrEnum: type[_StrEnumBase] = _CompatStrEnum
else:
    StrEnum: type[_StrEnumBase] = cast("type[_StrEnumBase]", _StrEnum)


__all__ = [
    "UTC",
    "StrEnum",
    "TypedDict",
    "override",
    "tomllib",
]
