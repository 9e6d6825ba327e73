# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Diagnostics and the structured result of one extraction run."""

from __future__ import annotations

from dataclasses import dataclass, field

from doctag.model.tree import TokenTree

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class Diagnostic:
    """A required tag that carries no type annotation.

    Attributes:
        source_file: Identity of the file whose comments were processed.
        tag: Label of the offending tag (marker stripped).
        comment_index: 0-based index of the comment node holding the tag.
        content: Cleaned content of the offending tag.
    """

    source_file: str
    tag: str
    comment_index: int
    content: str = ""

    @property
    def message(self) -> str:
        """Human-readable description of the problem."""
        return (
            f"Missing argument type or argument description for a parameter in {self.source_file} "
            f"(tag '{self.tag}' in comment {self.comment_index + 1})"
        )


class MissingTypeError(Exception):
    """Raised when a required tag lacks a type annotation.

    Attributes:
        source_file: Identity of the file being processed.
        diagnostic: The diagnostic describing the offending tag.
    """

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.source_file = diagnostic.source_file
        self.diagnostic = diagnostic


@dataclass
class ParseResult:
    """Outcome of one run over a node sequence.

    Attributes:
        source_file: Identity of the file whose nodes were processed.
        tree: The extracted tree, or None when a fail-fast run was aborted.
        diagnostics: Every missing-type problem that was reported.
    """

    source_file: str
    tree: TokenTree | None = None
    diagnostics: list[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True if a tree was produced and no diagnostics were reported."""
        return self.tree is not None and not self.diagnostics

    def unwrap(self) -> TokenTree:
        """Return the tree, raising MissingTypeError for the first diagnostic.

        Raises:
            MissingTypeError: If any diagnostic was reported.
            ValueError: If the result holds neither a tree nor a diagnostic.
        """
        if self.diagnostics:
            raise MissingTypeError(self.diagnostics[0])
        if self.tree is None:
            raise ValueError(f"No token tree was produced for {self.source_file}")
        return self.tree
