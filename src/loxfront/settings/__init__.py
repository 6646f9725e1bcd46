# Copyright 2026 Loxfront Contributors
# SPDX-License-Identifier: Apache-2.0

"""Driver configuration for loxfront."""

from loxfront.settings.config import CONFIG_FILE_NAME, ConfigError, DriverConfig, load_config

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "DriverConfig",
    "load_config",
]
