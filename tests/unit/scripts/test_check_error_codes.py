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

"""Tests for the check_error_codes maintenance script."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from scripts import check_error_codes

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.unit

TABLE = """
| Code  | Exception | Raised when |
|-------|-----------|-------------|
| SK000 | `SeqkitError` | Base class. |
| SK200 | `EmptySequenceError` | Empty input. |
"""


def test_registered_codes_cover_every_public_exception() -> None:
    registered = check_error_codes.registered_codes()
    assert registered["SeqkitError"] == "SK000"
    assert registered["InvalidChunkSizeError"] == "SK202"
    assert registered["InvalidConfigFileError"] == "SK305"
    assert "ErrorCode" not in registered
    assert "load_config" not in registered
    assert all(registered.values())


def test_documented_codes_reads_table_rows_only() -> None:
    text = TABLE + "\nProse mentioning SK999 and `OtherError` is ignored.\n"
    assert check_error_codes.documented_codes(text) == {
        "SeqkitError": ["SK000"],
        "EmptySequenceError": ["SK200"],
    }


def test_find_problems_accepts_consistent_views() -> None:
    documented = check_error_codes.documented_codes(TABLE)
    assert check_error_codes.find_problems({"SeqkitError": "SK000", "EmptySequenceError": "SK200"}, documented) == []


def test_find_problems_reports_each_kind_of_mismatch() -> None:
    registered = {
        "SeqkitError": "SK000",
        "EmptySequenceError": "SK201",
        "ElementNotFoundError": "SK201",
        "InvalidChunkSizeError": "",
        "InvalidStrategyError": "SK203",
    }
    documented = {"SeqkitError": ["SK000"], "EmptySequenceError": ["SK200"], "RetiredError": ["SK100"]}
    assert check_error_codes.find_problems(registered, documented) == [
        "ElementNotFoundError (SK201) has no row in EXCEPTIONS.md",
        "EmptySequenceError reuses SK201 already assigned to ElementNotFoundError",
        "EmptySequenceError is documented as SK200 but registered as SK201",
        "InvalidChunkSizeError has no entry in the error-code registry",
        "InvalidStrategyError (SK203) has no row in EXCEPTIONS.md",
        "EXCEPTIONS.md documents RetiredError, which seqkit does not export",
    ]


def test_main_succeeds_against_real_registry_and_docs(capsys: pytest.CaptureFixture[str]) -> None:
    assert check_error_codes.main() == 0
    assert "exception classes registered and documented" in capsys.readouterr().out


def test_main_fails_when_docs_are_missing(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    monkeypatch.setattr(check_error_codes, "DOC_PATH", tmp_path / "EXCEPTIONS.md")
    assert check_error_codes.main() == 1
    assert "[seqkit] missing" in capsys.readouterr().err


def test_main_reports_import_failure(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    def _broken() -> dict[str, str]:
        raise ImportError("no module named seqkit")

    monkeypatch.setattr(check_error_codes, "registered_codes", _broken)
    assert check_error_codes.main() == 1
    assert "cannot import seqkit" in capsys.readouterr().err


def test_main_rejects_arguments(capsys: pytest.CaptureFixture[str]) -> None:
    assert check_error_codes.main(["--verbose"]) == 2
    assert "takes no arguments" in capsys.readouterr().err
