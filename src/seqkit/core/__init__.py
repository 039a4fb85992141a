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

"""Core enumerations and type definitions shared by seqkit modules.

- Model types: enums for log formats, log components and dedupe strategies
- Type aliases: type variables and protocols describing element constraints
"""

from __future__ import annotations

from . import model_types, type_aliases

__all__ = ["model_types", "type_aliases"]
