# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Comment extractor: turns one documentation comment into a comment node."""

from __future__ import annotations

import logging
from collections.abc import Callable

from doctag.extraction.grammar import Grammar, clean_content
from doctag.model.tokens import DESCRIPTION_LABEL, Token
from doctag.model.tree import CommentNode, TokenTree

logger = logging.getLogger(__name__)

# Called with a finished tag token whose required type annotation is missing.
MissingTypeHandler = Callable[[Token], None]

# ###############
# Public Interface
# ###############


def extract_comment(
    text: str,
    tree: TokenTree,
    grammar: Grammar,
    on_missing_type: MissingTypeHandler,
) -> CommentNode:
    """Extract a comment's description and tags into a new node of *tree*.

    The node's first child is the description token, falling back to the
    configured placeholder. One token per tag follows, in source order.

    Args:
        text: Raw comment text, delimiters included.
        tree: Tree that receives the new comment node.
        grammar: Compiled comment grammar.
        on_missing_type: Invoked for a required tag (``param``, ``return``,
            ``property`` by default) that carries no type annotation. The
            handler may raise to abort the run.

    Returns:
        The comment node created for *text*.
    """
    node = tree.add_comment()
    description = grammar.description(text) or grammar.config.description_placeholder
    node.append(Token(label=DESCRIPTION_LABEL, content=description))

    for label, content in grammar.tags(text):
        token = _build_tag(label, content, grammar)
        if token.type is None and token.label in grammar.config.required_tags:
            on_missing_type(token)
        node.append(token)

    logger.debug("Extracted comment %d with %d tag(s)", len(tree) - 1, len(node.children) - 1)
    return node


# ################
# Implementation
# ################


def _build_tag(label: str, content: str, grammar: Grammar) -> Token:
    """Build one tag token from a raw tag label and its raw content."""
    token = Token(label=label.replace(grammar.marker, ""), content=clean_content(content))

    for description in grammar.descriptions(token.content):
        token.description = description

    for match in grammar.types(token.content):
        token.add_type(match.type or grammar.config.default_type)
        if token.arg_name is None:
            token.arg_name = match.name

    for name in grammar.names(token.content):
        token.add_name(name)

    return token
