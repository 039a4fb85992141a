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

"""Configuration loading for seqkit.

Settings are read from ``seqkit.toml``, ``.seqkit.toml`` or the
``[tool.seqkit]`` table of ``pyproject.toml``. Standalone files may also nest
their settings under ``[tool.seqkit]``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Final, cast

from pydantic import ValidationError

from seqkit._internal.logging_utils import structured_extra
from seqkit.compat import tomllib
from seqkit.core.model_types import LogComponent

from .models import (
    Config,
    ConfigModel,
    ConfigReadError,
    InvalidConfigFileError,
    model_to_dataclass,
)

logger: logging.Logger = logging.getLogger("seqkit.config")

CONFIG_FILENAMES: Final[tuple[str, ...]] = ("seqkit.toml", ".seqkit.toml", "pyproject.toml")


@dataclass(slots=True, frozen=True)
class LoadedConfig:
    """Container for a loaded configuration and its source path.

    Attributes:
        config: Parsed configuration instance.
        path: Filesystem path the configuration was loaded from, or None when
            defaults are used.
    """

    config: Config
    path: Path | None


def load_config(explicit_path: Path | None = None) -> Config:
    """Load seqkit configuration from a TOML file or use defaults.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked. If None, standard locations are searched.

    Returns:
        The resolved Config object.
    """
    return load_config_with_metadata(explicit_path).config


def load_config_with_metadata(explicit_path: Path | None = None) -> LoadedConfig:
    """Load seqkit configuration with metadata about the source file.

    The search order is ``seqkit.toml``, ``.seqkit.toml`` and finally
    ``pyproject.toml`` in the current working directory; the first file that
    carries seqkit settings wins. A ``pyproject.toml`` without a
    ``[tool.seqkit]`` table is skipped.

    Args:
        explicit_path: Optional explicit path to a configuration file. If provided,
            only this file will be checked.

    Returns:
        LoadedConfig: Parsed configuration and the path it originated from.

    Raises:
        ConfigReadError: If a candidate file cannot be read or parsed as TOML.
        InvalidConfigFileError: If a candidate file fails schema validation.
    """
    for candidate in _config_search_order(explicit_path):
        loaded = _load_candidate_config(candidate, explicit=explicit_path is not None)
        if loaded is not None:
            logger.debug(
                "Loaded configuration from %s",
                loaded.path,
                extra=structured_extra(component=LogComponent.CONFIG, details={"path": str(loaded.path)}),
            )
            return loaded
    logger.debug(
        "No seqkit configuration found; using defaults",
        extra=structured_extra(component=LogComponent.CONFIG),
    )
    return LoadedConfig(config=Config(), path=None)


def _config_search_order(explicit_path: Path | None) -> list[Path]:
    if explicit_path:
        return [_resolve_candidate_path(explicit_path)]
    base_dir = Path.cwd()
    return [base_dir / name for name in CONFIG_FILENAMES]


def _resolve_candidate_path(candidate: Path) -> Path:
    return candidate if candidate.is_absolute() else (Path.cwd() / candidate).resolve()


def _load_candidate_config(candidate: Path, *, explicit: bool) -> LoadedConfig | None:
    if not candidate.exists():
        if explicit:
            raise ConfigReadError(candidate, FileNotFoundError(str(candidate)))
        return None
    try:
        raw_map: dict[str, object] = tomllib.loads(candidate.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigReadError(candidate, exc) from exc

    payload = _extract_seqkit_payload(candidate, raw_map)
    if payload is None:
        if explicit:
            message = f"{candidate.name} does not define a [tool.seqkit] section"
            raise InvalidConfigFileError(candidate, ValueError(message))
        return None

    try:
        cfg_model = ConfigModel.model_validate(payload)
    except ValidationError as exc:
        raise InvalidConfigFileError(candidate, exc) from exc

    return LoadedConfig(config=model_to_dataclass(cfg_model), path=candidate.resolve())


def _extract_seqkit_payload(candidate: Path, raw_map: dict[str, object]) -> dict[str, object] | None:
    """Extract the seqkit configuration payload from a TOML mapping.

    Args:
        candidate: Source configuration path.
        raw_map: Data parsed from the TOML document.

    Returns:
        Mapping to validate or None when no seqkit configuration is present (only
        for pyproject.toml lookups).

    Raises:
        InvalidConfigFileError: If [tool.seqkit] exists but is not a table.
    """
    tool_section_raw = raw_map.get("tool")
    is_pyproject = candidate.name == "pyproject.toml"
    if tool_section_raw is not None and not isinstance(tool_section_raw, dict):
        if is_pyproject:
            message = "[tool] in pyproject.toml must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        # standalone configs ignore unrelated tool entries
        tool_section_raw = None

    if isinstance(tool_section_raw, dict):
        tool_section = cast("dict[str, object]", tool_section_raw)
        seqkit_section = tool_section.get("seqkit")
        if seqkit_section is not None and not isinstance(seqkit_section, dict):
            message = "[tool.seqkit] must be a TOML table"
            raise InvalidConfigFileError(candidate, ValueError(message))
        if isinstance(seqkit_section, dict):
            return cast("dict[str, object]", seqkit_section)

    if is_pyproject:
        return None
    payload = dict(raw_map)
    payload.pop("tool", None)
    return payload


__all__ = ["CONFIG_FILENAMES", "LoadedConfig", "load_config", "load_config_with_metadata"]
