# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loader for node files written by an upstream lexer.

A node file is YAML (or JSON, which YAML accepts) holding either a bare list
of nodes or a mapping with an optional ``source`` entry and a ``nodes`` list::

    source: lib/tasks/build.js
    nodes:
      - label: COMMENT
        content: "/** Builds the bundle */"
      - label: PROTO
        content: "function build(target)"
"""

from __future__ import annotations

from pathlib import Path

import yaml

from doctag.parser.nodes import SourceNode, coerce_kind

# ###############
# Public Interface
# ###############


class NodeFileError(Exception):
    """Raised when a node file cannot be read or has an invalid shape."""


def load_nodes(path: Path) -> tuple[str, list[SourceNode]]:
    """Load a node file.

    Args:
        path: Path to the node file.

    Returns:
        A ``(source, nodes)`` pair. *source* is the owning source file named
        in the document, or *path* itself when the document names none.

    Raises:
        NodeFileError: If the file cannot be read or is malformed.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise NodeFileError(f"Node file not found: {path}") from None
    except OSError as exc:
        raise NodeFileError(f"Cannot read node file: {exc}") from exc

    return parse_nodes_document(text, source_label=str(path))


def parse_nodes_document(text: str, source_label: str = "<string>") -> tuple[str, list[SourceNode]]:
    """Parse node-file text into a ``(source, nodes)`` pair.

    Raises:
        NodeFileError: If the YAML is invalid or an entry is malformed.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise NodeFileError(f"Invalid YAML in {source_label}: {exc}") from exc

    source = source_label
    if data is None:
        return source, []
    if isinstance(data, dict):
        if "source" in data:
            if not isinstance(data["source"], str):
                raise NodeFileError(f"{source_label}: 'source' must be a string")
            source = data["source"]
        raw_nodes = data.get("nodes", [])
    else:
        raw_nodes = data

    if not isinstance(raw_nodes, list):
        raise NodeFileError(f"{source_label}: 'nodes' must be a list")

    return source, [_parse_node(entry, index, source_label) for index, entry in enumerate(raw_nodes)]


# ################
# Implementation
# ################


def _parse_node(entry: object, index: int, source_label: str) -> SourceNode:
    """Parse a single node entry from the YAML list."""
    location = f"{source_label}: nodes[{index}]"

    if not isinstance(entry, dict):
        raise NodeFileError(f"{location} must be a mapping")

    for key in ("label", "content"):
        if key not in entry:
            raise NodeFileError(f"{location}: missing required field '{key}'")
        if not isinstance(entry[key], str):
            raise NodeFileError(f"{location}: '{key}' must be a string")

    return SourceNode(label=coerce_kind(entry["label"]), content=entry["content"])
