#!/usr/bin/env python3
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

"""Verify that every public seqkit exception has a code and a documented row.

The check imports ``seqkit.exceptions`` and ``seqkit.config``, collects the
exception classes they export, and compares three views of them:

* the registry in ``seqkit._internal.error_codes``; an exported class without
  its own entry would silently report its parent's code,
* the ``| SKnnn | `ClassName` | ...`` rows of ``docs/EXCEPTIONS.md``,
* the codes themselves, which must be unique.

Run from a checkout; ``src/`` is put on ``sys.path`` so no install is needed.
"""

from __future__ import annotations

import importlib
import re
import sys
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
DOC_PATH = REPO_ROOT / "docs" / "EXCEPTIONS.md"
PUBLIC_MODULES = ("seqkit.exceptions", "seqkit.config")
DOC_ROW = re.compile(r"^\|\s*(SK\d{3})\s*\|\s*`(\w+)`\s*\|", re.MULTILINE)


def registered_codes() -> dict[str, str]:
    """Map each exported exception class name to its own registry code.

    Classes missing from the registry map to an empty string.
    """
    src = str(REPO_ROOT / "src")
    if src not in sys.path:
        sys.path.insert(0, src)
    catalog = importlib.import_module("seqkit._internal.error_codes").error_code_catalog()
    own_codes = {qualified.rsplit(".", 1)[-1]: str(code) for qualified, code in catalog.items()}
    codes: dict[str, str] = {}
    for module_name in PUBLIC_MODULES:
        module = importlib.import_module(module_name)
        for name in module.__all__:
            exported = getattr(module, name)
            if isinstance(exported, type) and issubclass(exported, BaseException):
                codes[name] = own_codes.get(name, "")
    return codes


def documented_codes(text: str) -> dict[str, list[str]]:
    """Map class names to every code the exceptions table lists for them."""
    rows: dict[str, list[str]] = {}
    for code, name in DOC_ROW.findall(text):
        rows.setdefault(name, []).append(code)
    return rows


def find_problems(registered: Mapping[str, str], documented: Mapping[str, Sequence[str]]) -> list[str]:
    """Return one human-readable line per inconsistency, sorted by class name."""
    problems: list[str] = []
    owners: dict[str, str] = {}
    for name, code in sorted(registered.items()):
        if not code:
            problems.append(f"{name} has no entry in the error-code registry")
            continue
        if code in owners:
            problems.append(f"{name} reuses {code} already assigned to {owners[code]}")
        owners[code] = name
        listed = documented.get(name, [])
        if not listed:
            problems.append(f"{name} ({code}) has no row in {DOC_PATH.name}")
        elif list(listed) != [code]:
            problems.append(f"{name} is documented as {', '.join(listed)} but registered as {code}")
    problems.extend(
        f"{DOC_PATH.name} documents {name}, which seqkit does not export"
        for name in sorted(set(documented) - set(registered))
    )
    return problems


def main(argv: Sequence[str] | None = None) -> int:
    """Print any registry/documentation mismatches and return a process exit code."""
    if argv:
        print(f"[seqkit] usage: {Path(__file__).name} (takes no arguments)", file=sys.stderr)
        return 2
    try:
        registered = registered_codes()
    except ImportError as exc:
        print(f"[seqkit] cannot import seqkit: {exc}", file=sys.stderr)
        return 1
    if not DOC_PATH.is_file():
        print(f"[seqkit] missing {DOC_PATH}", file=sys.stderr)
        return 1
    problems = find_problems(registered, documented_codes(DOC_PATH.read_text(encoding="utf-8")))
    for problem in problems:
        print(f"[seqkit] {problem}", file=sys.stderr)
    if problems:
        return 1
    print(f"[seqkit] {len(registered)} exception classes registered and documented")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
