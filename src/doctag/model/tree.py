# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""The token tree: a root whose children are comment nodes in source order."""

from __future__ import annotations

from collections.abc import Iterator

from pydantic import BaseModel
from pydantic import Field as _Field

from doctag.model.tokens import DESCRIPTION_LABEL, Token

# ###############
# Public Interface
# ###############


class CommentNode(BaseModel):
    """One documentation comment plus any declaration tokens paired with it.

    The first child is always the description token. Tag tokens follow in
    source order, then the tokens of the paired declaration, if any.
    """

    children: list[Token] = _Field(default_factory=list)

    def append(self, token: Token) -> Token:
        """Append *token* as the last child and return it."""
        self.children.append(token)
        return token

    @property
    def description(self) -> str | None:
        """Text of the leading description token, or None for an empty node."""
        if self.children and self.children[0].label == DESCRIPTION_LABEL:
            return self.children[0].content
        return None

    def tags(self, label: str) -> list[Token]:
        """Return all children carrying *label*, in order."""
        return [tok for tok in self.children if tok.label == label]


class TokenTree(BaseModel):
    """Root of the extracted metadata, grown append-only during one run."""

    comments: list[CommentNode] = _Field(default_factory=list)

    def add_comment(self) -> CommentNode:
        """Create a new, empty comment node at the end and return it."""
        node = CommentNode()
        self.comments.append(node)
        return node

    def walk(self) -> Iterator[tuple[int, Token]]:
        """Yield ``(comment_index, token)`` pairs in document order."""
        for index, comment in enumerate(self.comments):
            for token in comment.children:
                yield index, token

    def __len__(self) -> int:
        return len(self.comments)
