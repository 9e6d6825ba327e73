# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""State machine that pairs documentation comments with the following declaration.

The sequencer walks the node sequence once. A comment always opens a new
comment node. A data-type or prototype declaration contributes tokens only
when it directly claims the latest comment; once claimed, another comment
must appear before the next declaration is attached.

+-----------+------------------------------------------------+---------------------+
| Node      | Accepted in state                              | Next state          |
+===========+================================================+=====================+
| COMMENT   | STARTING, FOUND_A_COMMENT, LOOKING_FOR_COMMENT | FOUND_A_COMMENT     |
| DATA_TYPE | FOUND_A_COMMENT                                | LOOKING_FOR_COMMENT |
| PROTO     | FOUND_A_COMMENT                                | LOOKING_FOR_COMMENT |
+-----------+------------------------------------------------+---------------------+

Any other node, or a node arriving in a state that does not accept it, is
ignored without a state change.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable

from doctag.compiler.diagnostics import Diagnostic, MissingTypeError, ParseResult
from doctag.config.settings import ExtractorConfig
from doctag.extraction.comment import extract_comment
from doctag.extraction.declaration import extract_data_type, extract_proto
from doctag.extraction.grammar import Grammar
from doctag.model.tokens import Token
from doctag.model.tree import CommentNode, TokenTree
from doctag.parser.nodes import NodeKind, SourceNode

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ParserState(enum.Enum):
    """States of the comment/declaration pairing machine."""

    STARTING = "starting"
    FOUND_A_COMMENT = "found_a_comment"
    LOOKING_FOR_COMMENT = "looking_for_comment"


class Sequencer:
    """Single-use state machine for one node sequence.

    Args:
        source_file: Identity of the file the nodes came from, used in diagnostics.
        grammar: Compiled comment grammar.
        fail_fast: Stop at the first diagnostic and drop the tree. When False,
            the offending tag is kept without a type and the run continues.
    """

    def __init__(self, source_file: str, grammar: Grammar, *, fail_fast: bool = True) -> None:
        self.source_file = source_file
        self.grammar = grammar
        self.fail_fast = fail_fast
        self.state = ParserState.STARTING
        self.tree = TokenTree()
        self._current: CommentNode | None = None
        self._diagnostics: list[Diagnostic] = []

    def run(self, nodes: Iterable[SourceNode]) -> ParseResult:
        """Process every node in order and return the result of the run."""
        try:
            for node in nodes:
                self.feed(node)
        except MissingTypeError as exc:
            logger.info("Aborted %s: %s", self.source_file, exc)
            return ParseResult(source_file=self.source_file, tree=None, diagnostics=[exc.diagnostic])

        logger.info(
            "Extracted %d comment(s) from %s with %d diagnostic(s)",
            len(self.tree),
            self.source_file,
            len(self._diagnostics),
        )
        return ParseResult(source_file=self.source_file, tree=self.tree, diagnostics=list(self._diagnostics))

    def feed(self, node: SourceNode) -> None:
        """Dispatch one node according to its label and the current state."""
        accepted = _ACCEPTING_STATES.get(node.label)
        if accepted is None or self.state not in accepted:
            logger.debug("Ignoring %s node in state %s", node.label.name, self.state.name)
            return

        if node.label is NodeKind.COMMENT:
            self._current = extract_comment(node.content, self.tree, self.grammar, self._missing_type)
            self._transition(ParserState.FOUND_A_COMMENT)
            return

        target = self._current
        if target is None:
            return
        if node.label is NodeKind.DATA_TYPE:
            extract_data_type(node.content, target, self.grammar)
        else:
            extract_proto(node.content, target, self.grammar)
        self._transition(ParserState.LOOKING_FOR_COMMENT)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _transition(self, state: ParserState) -> None:
        logger.debug("State %s -> %s", self.state.name, state.name)
        self.state = state

    def _missing_type(self, token: Token) -> None:
        """Record a missing-type diagnostic, raising in fail-fast mode."""
        diagnostic = Diagnostic(
            source_file=self.source_file,
            tag=token.label,
            comment_index=len(self.tree) - 1,
            content=token.content,
        )
        if self.fail_fast:
            raise MissingTypeError(diagnostic)
        logger.warning("%s", diagnostic.message)
        self._diagnostics.append(diagnostic)


def parse(
    nodes: Iterable[SourceNode],
    source_file: str = "<string>",
    *,
    config: ExtractorConfig | None = None,
    fail_fast: bool = True,
) -> ParseResult:
    """Build the token tree for a node sequence.

    Args:
        nodes: Labeled nodes in document order.
        source_file: Identity of the owning file, reported in diagnostics.
        config: Grammar configuration; defaults apply when omitted.
        fail_fast: Abort at the first missing required type (see :class:`Sequencer`).

    Returns:
        A ParseResult holding the tree and any diagnostics.
    """
    return Sequencer(source_file, Grammar(config), fail_fast=fail_fast).run(nodes)


def generate_token_tree(
    nodes: Iterable[SourceNode],
    source_file: str = "<string>",
    config: ExtractorConfig | None = None,
) -> TokenTree:
    """Build the token tree, raising on the first missing required type.

    Raises:
        MissingTypeError: If a required tag carries no type annotation.
    """
    return parse(nodes, source_file, config=config, fail_fast=True).unwrap()


# ################
# Implementation
# ################

_ACCEPTING_STATES: dict[NodeKind, frozenset[ParserState]] = {
    NodeKind.COMMENT: frozenset(ParserState),
    NodeKind.DATA_TYPE: frozenset({ParserState.FOUND_A_COMMENT}),
    NodeKind.PROTO: frozenset({ParserState.FOUND_A_COMMENT}),
}
