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

"""Pytest entry point that wires shared fixtures and markers."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with the custom markers used by the test suite."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "property: Property-based tests")


@pytest.fixture(autouse=True)
def _reset_seqkit_logger() -> Iterator[None]:
    """Undo any handler or level installed by ``configure_logging``."""
    yield
    root = logging.getLogger("seqkit")
    root.handlers.clear()
    root.setLevel(logging.NOTSET)
    root.propagate = True
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("seqkit."):
            logging.getLogger(name).setLevel(logging.NOTSET)
