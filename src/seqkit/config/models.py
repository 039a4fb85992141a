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

"""Configuration models and validation for seqkit.

Pydantic models validate the TOML payload; validated models are converted into
plain dataclasses for runtime use.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar, Final

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from seqkit._internal.exceptions import InvalidStrategyError, SeqkitValidationError
from seqkit._internal.logging_utils import LOG_LEVELS
from seqkit.core.model_types import DEDUPE_STRATEGIES, DedupeStrategy, LogFormat

if TYPE_CHECKING:
    from pathlib import Path

CONFIG_VERSION: Final[int] = 0
LOG_FORMAT_ALLOWED_VALUES: Final[tuple[str, ...]] = tuple(format_.value for format_ in LogFormat)


class ConfigValidationError(SeqkitValidationError):
    """Raised when configuration data contains invalid values."""


class ConfigFieldTypeError(ConfigValidationError):
    """Raised when a configuration field has an invalid type."""

    def __init__(self, field: str) -> None:
        """Initialize the exception with the field name that has an invalid type.

        Args:
            field: The name of the configuration field with an invalid type.
        """
        self.field = field
        super().__init__(f"{field} must be a string")


class ConfigFieldChoiceError(ConfigValidationError):
    """Raised when a configuration field is provided with an unsupported value."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        """Initialize the exception with the field name and allowed values.

        Args:
            field: The name of the configuration field with an invalid value.
            allowed: Tuple of allowed values for this field.
        """
        self.field = field
        self.allowed = allowed
        allowed_text = ", ".join(sorted(allowed))
        super().__init__(f"{field} must be one of: {allowed_text}")


class UnsupportedConfigVersionError(ConfigValidationError):
    """Raised when a configuration file declares an unsupported schema version."""

    def __init__(self, provided: int, expected: int) -> None:
        self.provided = provided
        self.expected = expected
        super().__init__(f"Unsupported config_version {provided}; expected {expected}")


class ConfigReadError(ConfigValidationError):
    """Raised when a configuration file cannot be read from disk."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with file path and underlying error.

        Args:
            path: The path to the configuration file that could not be read.
            error: The underlying exception that caused the read failure.
        """
        self.path = path
        self.error = error
        super().__init__(f"Unable to read {path}: {error}")


class InvalidConfigFileError(ConfigValidationError):
    """Raised when the root configuration file fails validation."""

    def __init__(self, path: Path, error: Exception) -> None:
        """Initialize the exception with configuration file path and validation error.

        Args:
            path: The path to the configuration file that failed validation.
            error: The underlying validation exception.
        """
        self.path = path
        self.error = error
        super().__init__(f"Invalid seqkit configuration in {path}: {error}")


@dataclass(slots=True)
class LoggingConfig:
    """Logging preferences applied through ``configure_logging``.

    Attributes:
        format: Output format for the ``seqkit`` logger.
        level: Lower-case level name (``debug``, ``info``, ``warning``, ``error``).
    """

    format: LogFormat = LogFormat.TEXT
    level: str = "info"


@dataclass(slots=True)
class DedupeConfig:
    """Defaults for deduplication and set operations.

    Attributes:
        strategy: Membership algorithm callers pass as ``strategy=`` to
            ``unique``, ``unique_by``, ``intersect`` and ``distinct``.
    """

    strategy: DedupeStrategy = DedupeStrategy.SCAN


@dataclass(slots=True)
class Config:
    """Top-level configuration for seqkit.

    Attributes:
        logging: Logging preferences.
        dedupe: Deduplication defaults.
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    dedupe: DedupeConfig = field(default_factory=DedupeConfig)


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[logging]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    format: LogFormat = LogFormat.TEXT
    level: str = "info"

    @field_validator("format", mode="before")
    @classmethod
    def _normalise_format(cls, value: object) -> LogFormat:
        if isinstance(value, LogFormat):
            return value
        if isinstance(value, str):
            try:
                return LogFormat.from_str(value)
            except ValueError as exc:
                msg = "logging.format"
                raise ConfigFieldChoiceError(msg, LOG_FORMAT_ALLOWED_VALUES) from exc
        msg = "logging.format"
        raise ConfigFieldTypeError(msg)

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: object) -> str:
        if not isinstance(value, str):
            msg = "logging.level"
            raise ConfigFieldTypeError(msg)
        level = value.strip().lower()
        if level not in LOG_LEVELS:
            msg = "logging.level"
            raise ConfigFieldChoiceError(msg, LOG_LEVELS)
        return level


class DedupeConfigModel(BaseModel):
    """Pydantic model for the ``[dedupe]`` table."""

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    strategy: DedupeStrategy = DedupeStrategy.SCAN

    @field_validator("strategy", mode="before")
    @classmethod
    def _normalise_strategy(cls, value: object) -> DedupeStrategy:
        if isinstance(value, DedupeStrategy):
            return value
        if isinstance(value, str):
            try:
                return DedupeStrategy.from_str(value)
            except InvalidStrategyError as exc:
                msg = "dedupe.strategy"
                raise ConfigFieldChoiceError(msg, DEDUPE_STRATEGIES) from exc
        msg = "dedupe.strategy"
        raise ConfigFieldTypeError(msg)


class ConfigModel(BaseModel):
    """Pydantic model for validating the top-level seqkit configuration from TOML.

    Attributes:
        config_version: Schema version number for the configuration file.
        logging: Logging settings.
        dedupe: Deduplication settings.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid")
    config_version: int = Field(default=CONFIG_VERSION)
    logging: LoggingConfigModel = Field(default_factory=LoggingConfigModel)
    dedupe: DedupeConfigModel = Field(default_factory=DedupeConfigModel)

    @model_validator(mode="after")
    def _check_version(self) -> ConfigModel:
        if self.config_version != CONFIG_VERSION:
            raise UnsupportedConfigVersionError(self.config_version, CONFIG_VERSION)
        return self


def model_to_dataclass(model: ConfigModel) -> Config:
    """Convert a validated ConfigModel into the runtime Config dataclass.

    Args:
        model: The validated ConfigModel from TOML parsing.

    Returns:
        A Config dataclass ready for runtime use.
    """
    return Config(
        logging=LoggingConfig(format=model.logging.format, level=model.logging.level),
        dedupe=DedupeConfig(strategy=model.dedupe.strategy),
    )


__all__ = [
    "CONFIG_VERSION",
    "Config",
    "ConfigFieldChoiceError",
    "ConfigFieldTypeError",
    "ConfigModel",
    "ConfigReadError",
    "ConfigValidationError",
    "DedupeConfig",
    "DedupeConfigModel",
    "InvalidConfigFileError",
    "LoggingConfig",
    "LoggingConfigModel",
    "UnsupportedConfigVersionError",
    "model_to_dataclass",
]
