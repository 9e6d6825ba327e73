# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Labeled text nodes consumed by the sequencer.

An upstream lexer splits raw source text into an ordered sequence of nodes,
each carrying a kind label and the raw text of that node.
"""

import enum
from dataclasses import dataclass

# ###############
# Public Interface
# ###############


class NodeKind(enum.Enum):
    """All node kinds an upstream lexer may produce."""

    COMMENT = "COMMENT"
    DATA_TYPE = "DATA_TYPE"
    PROTO = "PROTO"
    OTHER = "OTHER"


@dataclass(frozen=True)
class SourceNode:
    """A labeled span of raw source text.

    Attributes:
        label: The kind of node.
        content: The raw text, including the original comment punctuation.
    """

    label: NodeKind
    content: str


def coerce_kind(label: str | NodeKind) -> NodeKind:
    """Map a raw label to a NodeKind.

    Matching is case-insensitive and treats ``-`` and ``_`` alike, so
    ``"data-type"`` and ``"DATA_TYPE"`` are the same kind. Unrecognized
    labels map to ``NodeKind.OTHER``.
    """
    if isinstance(label, NodeKind):
        return label
    normalized = label.strip().upper().replace("-", "_")
    return _LABELS.get(normalized, NodeKind.OTHER)


# ################
# Implementation
# ################

_LABELS: dict[str, NodeKind] = {
    "COMMENT": NodeKind.COMMENT,
    "DATA_TYPE": NodeKind.DATA_TYPE,
    "DATATYPE": NodeKind.DATA_TYPE,
    "PROTO": NodeKind.PROTO,
    "PROTOTYPE": NodeKind.PROTO,
}
