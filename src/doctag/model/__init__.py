# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output model: tag tokens and the token tree handed to a generator."""

from doctag.model.tokens import DESCRIPTION_LABEL, Token
from doctag.model.tree import CommentNode, TokenTree

__all__ = [
    "DESCRIPTION_LABEL",
    "Token",
    "CommentNode",
    "TokenTree",
]
