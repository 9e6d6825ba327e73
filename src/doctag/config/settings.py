# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML parser for the doctag configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".doctag.yaml"


class ConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


@dataclass(frozen=True)
class ExtractorConfig:
    """Settings of the comment mini-grammar.

    Attributes:
        marker: Single character that starts a tag inside a comment.
        description_placeholder: Description text used when a comment has none.
        default_type: Type name substituted for an empty brace annotation.
        required_tags: Tag labels that must carry a type annotation.
    """

    marker: str = "@"
    description_placeholder: str = "_no description provided_"
    default_type: str = "any"
    required_tags: frozenset[str] = field(default_factory=lambda: frozenset({"property", "return", "param"}))


def load_config(path: Path) -> ExtractorConfig:
    """Load and parse a doctag configuration file.

    Args:
        path: Path to the ``.doctag.yaml`` file.

    Returns:
        An ExtractorConfig populated from the file; absent keys keep their defaults.

    Raises:
        ConfigError: If the file cannot be read or the configuration is invalid.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file: {exc}") from exc

    return parse_config(text, source_label=str(path))


def parse_config(text: str, source_label: str = "<string>") -> ExtractorConfig:
    """Parse configuration YAML text into an ExtractorConfig.

    Raises:
        ConfigError: If the YAML is invalid or a field has the wrong shape.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        return ExtractorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source_label}: config must be a YAML mapping")

    unknown = sorted(set(data) - _KNOWN_KEYS)
    if unknown:
        raise ConfigError(f"{source_label}: unknown field(s): {', '.join(unknown)}")

    defaults = ExtractorConfig()
    marker = _optional_string(data, "marker", defaults.marker, source_label)
    if len(marker) != 1 or marker.isalnum() or marker.isspace() or marker in "{}*/":
        raise ConfigError(f"{source_label}: 'marker' must be a single punctuation character, got {marker!r}")

    return ExtractorConfig(
        marker=marker,
        description_placeholder=_optional_string(
            data, "description-placeholder", defaults.description_placeholder, source_label
        ),
        default_type=_optional_string(data, "default-type", defaults.default_type, source_label),
        required_tags=_optional_string_list(data, "required-tags", defaults.required_tags, source_label),
    )


def default_config_text() -> str:
    """Return the text of a configuration file holding every default value."""
    defaults = ExtractorConfig()
    tags = ", ".join(sorted(defaults.required_tags))
    return (
        "# doctag configuration\n"
        f'marker: "{defaults.marker}"\n'
        f'description-placeholder: "{defaults.description_placeholder}"\n'
        f"default-type: {defaults.default_type}\n"
        f"required-tags: [{tags}]\n"
    )


# ################
# Implementation
# ################

_KNOWN_KEYS = frozenset({"marker", "description-placeholder", "default-type", "required-tags"})


def _optional_string(mapping: dict[str, object], key: str, default: str, source_label: str) -> str:
    """Extract an optional string field, raising ConfigError on a wrong type."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{source_label}: '{key}' must be a non-empty string")
    return value


def _optional_string_list(
    mapping: dict[str, object], key: str, default: frozenset[str], source_label: str
) -> frozenset[str]:
    """Extract an optional list-of-strings field as a frozenset."""
    if key not in mapping:
        return default
    value = mapping[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigError(f"{source_label}: '{key}' must be a list of strings")
    return frozenset(value)
