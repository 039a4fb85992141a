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

"""Structured logging for seqkit.

Library modules log DEBUG records under ``seqkit.<module>`` and never install
handlers themselves. ``configure_logging`` is the single opt-in entry point;
it attaches one stream handler to the ``seqkit`` logger, and child loggers
inherit its level.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Final, Literal, cast

from seqkit.compat import UTC, TypedDict, override
from seqkit.core.model_types import DedupeStrategy, LogComponent, LogFormat

ROOT_LOGGER_NAME: Final[str] = "seqkit"
LOG_FORMAT_ENV: Final[str] = "SEQKIT_LOG_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SEQKIT_LOG_LEVEL"

LOG_FORMATS: Final[tuple[Literal["text", "json"], ...]] = cast(
    "tuple[Literal['text', 'json'], ...]",
    tuple(format_.value for format_ in LogFormat),
)
_LEVEL_VALUES: Final[Mapping[str, int]] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
LOG_LEVELS: Final[tuple[Literal["debug", "info", "warning", "error"], ...]] = cast(
    "tuple[Literal['debug', 'info', 'warning', 'error'], ...]",
    tuple(_LEVEL_VALUES),
)


class StructuredLogExtra(TypedDict, total=False):
    """Fields seqkit attaches to its log records through ``extra=``."""

    component: LogComponent
    operation: str
    strategy: DedupeStrategy
    input_size: int
    result_size: int
    details: dict[str, object]


STRUCTURED_FIELDS: Final[tuple[str, ...]] = tuple(StructuredLogExtra.__annotations__)


@dataclass(slots=True, frozen=True)
class LogConfig:
    """Resolved logging configuration for diagnostics and debugging."""

    format: LogFormat
    level: int
    level_name: str


def _structured_fields(record: logging.LogRecord) -> dict[str, object]:
    fields: dict[str, object] = {}
    for name in STRUCTURED_FIELDS:
        value = record.__dict__.get(name)
        if value is not None:
            fields[name] = value.value if isinstance(value, Enum) else value
    return fields


class JSONLogFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, then the structured fields."""

    @override
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            **_structured_fields(record),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=repr)


class TextLogFormatter(logging.Formatter):
    """``[LEVEL] message`` followed by ``(component.operation)`` when the record carries them."""

    def __init__(self) -> None:
        super().__init__("[%(levelname)s] %(message)s")

    @override
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _structured_fields(record)
        where = ".".join(str(fields[name]) for name in ("component", "operation") if name in fields)
        return f"{line} ({where})" if where else line


def _resolve_format(preferred: LogFormat | str | None) -> LogFormat:
    raw = preferred if preferred is not None else os.getenv(LOG_FORMAT_ENV) or LogFormat.TEXT
    return raw if isinstance(raw, LogFormat) else LogFormat.from_str(raw)


def _resolve_level(preferred: str | int | None) -> tuple[int, str]:
    raw = preferred if preferred is not None else os.getenv(LOG_LEVEL_ENV) or "info"
    if isinstance(raw, int):
        return raw, logging.getLevelName(raw).lower()
    name = raw.strip().lower()
    if name not in _LEVEL_VALUES:
        name = "info"
    return _LEVEL_VALUES[name], name


def configure_logging(
    log_format: LogFormat | str | None = None,
    *,
    log_level: str | int | None = None,
) -> LogConfig:
    """Install seqkit's log handler; seqkit never calls this on its own.

    Args:
        log_format: ``text`` or ``json``. ``None`` falls back to
            ``SEQKIT_LOG_FORMAT`` and then ``text``.
        log_level: Level name or number. ``None`` falls back to
            ``SEQKIT_LOG_LEVEL`` and then ``info``. Unknown names mean ``info``.

    Returns:
        The resolved format and level.
    """
    selected_format = _resolve_format(log_format)
    level_value, level_name = _resolve_level(log_level)

    handler = logging.StreamHandler()
    handler.setFormatter(JSONLogFormatter() if selected_format is LogFormat.JSON else TextLogFormatter())

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level_value)
    root_logger.propagate = False
    return LogConfig(format=selected_format, level=level_value, level_name=level_name)


def structured_extra(
    component: LogComponent,
    *,
    operation: str | None = None,
    strategy: DedupeStrategy | str | None = None,
    input_size: int | None = None,
    result_size: int | None = None,
    details: Mapping[str, object] | None = None,
) -> StructuredLogExtra:
    """Build the ``extra=`` payload for a seqkit log record.

    ``None`` fields and empty ``details`` are left out. ``strategy`` strings
    are parsed into ``DedupeStrategy``.
    """
    extra: StructuredLogExtra = {"component": component}
    if operation is not None:
        extra["operation"] = operation
    if strategy is not None:
        extra["strategy"] = DedupeStrategy.coerce(strategy)
    if input_size is not None:
        extra["input_size"] = input_size
    if result_size is not None:
        extra["result_size"] = result_size
    if details:
        extra["details"] = dict(details)
    return extra


__all__ = [
    "LOG_FORMATS",
    "LOG_LEVELS",
    "LogConfig",
    "StructuredLogExtra",
    "configure_logging",
    "structured_extra",
]
