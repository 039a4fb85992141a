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

"""Public API façade for configuring seqkit from settings files."""

from __future__ import annotations

from typing import TYPE_CHECKING

from seqkit._internal.logging_utils import LogConfig, configure_logging
from seqkit.config import Config, LoadedConfig, load_config_with_metadata

if TYPE_CHECKING:
    from pathlib import Path


def apply_config(config: Config) -> LogConfig:
    """Configure the ``seqkit`` logger from a loaded configuration.

    Args:
        config: Configuration whose ``logging`` section should be applied.

    Returns:
        The resolved logging configuration.
    """
    return configure_logging(config.logging.format, log_level=config.logging.level)


def configure_from_file(path: Path | None = None) -> LoadedConfig:
    """Load settings (see ``load_config_with_metadata``) and apply their logging section.

    The dedupe defaults are returned for callers to pass on as ``strategy=``;
    seqkit keeps no process-wide default strategy.
    """
    loaded = load_config_with_metadata(path)
    _ = apply_config(loaded.config)
    return loaded


__all__ = ["apply_config", "configure_from_file"]
