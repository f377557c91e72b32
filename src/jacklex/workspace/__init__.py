# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration and source discovery for jacklex."""

from jacklex.workspace.config import (
    CONFIG_FILE_NAME,
    JackConfig,
    JackConfigError,
    find_config,
    load_config,
)
from jacklex.workspace.discovery import DiscoveryError, find_sources, output_path_for

__all__ = [
    "CONFIG_FILE_NAME",
    "DiscoveryError",
    "JackConfig",
    "JackConfigError",
    "find_config",
    "find_sources",
    "load_config",
    "output_path_for",
]
