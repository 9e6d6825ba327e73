# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Declaration extractors: data-type and prototype variants.

Both turn the text of the declaration that follows a comment into flat
name/value tokens appended to that comment's node.
"""

from __future__ import annotations

from doctag.extraction.grammar import Grammar
from doctag.model.tokens import Token
from doctag.model.tree import CommentNode

# ###############
# Public Interface
# ###############


def extract_data_type(text: str, target: CommentNode, grammar: Grammar) -> int:
    """Append one token per ``key: value`` entry of a data-type declaration.

    Returns:
        The number of tokens appended to *target*.
    """
    count = 0
    for entry in grammar.data_type_entries(text):
        target.append(Token(label=entry.name, content=entry.value))
        count += 1
    return count


def extract_proto(text: str, target: CommentNode, grammar: Grammar) -> int:
    """Append one token per parameter of a function prototype.

    Each token is labeled with the parameter name and holds the full
    parameter text.

    Returns:
        The number of tokens appended to *target*.
    """
    count = 0
    for entry in grammar.proto_entries(text):
        target.append(Token(label=entry.name, content=entry.value))
        count += 1
    return count
