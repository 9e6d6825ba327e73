# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extractor configuration for doctag."""

from doctag.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    ExtractorConfig,
    default_config_text,
    load_config,
    parse_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ExtractorConfig",
    "default_config_text",
    "load_config",
    "parse_config",
]
