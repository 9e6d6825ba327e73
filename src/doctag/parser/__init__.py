# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input contract: the labeled node sequence produced by an upstream lexer."""

from doctag.parser.loader import NodeFileError, load_nodes, parse_nodes_document
from doctag.parser.nodes import NodeKind, SourceNode, coerce_kind

__all__ = [
    "NodeKind",
    "SourceNode",
    "coerce_kind",
    "NodeFileError",
    "load_nodes",
    "parse_nodes_document",
]
