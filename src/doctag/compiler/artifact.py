# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization and deserialization of token-tree artifacts.

An artifact is the handoff to a documentation or stub generator. It is stored
as compact JSON; the format is versioned so future schema changes can be
detected.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from doctag.model.tokens import Token
from doctag.model.tree import CommentNode, TokenTree

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".doctag.json"


class ArtifactError(Exception):
    """Raised when an artifact cannot be decoded."""


def serialize(tree: TokenTree, source: str | None = None) -> str:
    """Serialize a token tree to a compact JSON string."""
    obj: dict[str, Any] = {"v": ARTIFACT_FORMAT_VERSION}
    if source is not None:
        obj["source"] = source
    obj["comments"] = [[_token_to_dict(tok) for tok in comment.children] for comment in tree.comments]
    return json.dumps(obj, separators=(",", ":"))


def deserialize(data: str) -> TokenTree:
    """Deserialize a token tree from a JSON string.

    Args:
        data: JSON string produced by :func:`serialize`.

    Returns:
        The reconstructed :class:`TokenTree`.

    Raises:
        ArtifactError: If the data is not JSON, the format version is not recognised,
            or a token entry is malformed.
    """
    try:
        obj = json.loads(data)
    except json.JSONDecodeError as exc:
        raise ArtifactError(f"Invalid artifact JSON: {exc}") from exc
    if not isinstance(obj, dict):
        raise ArtifactError("Artifact must be a JSON object")
    version = obj.get("v")
    if version != ARTIFACT_FORMAT_VERSION:
        raise ArtifactError(f"Unsupported artifact format version: {version!r}")
    try:
        return TokenTree(
            comments=[
                CommentNode(children=[_token_from_dict(t) for t in comment]) for comment in obj.get("comments", [])
            ]
        )
    except (KeyError, TypeError, ValidationError) as exc:
        raise ArtifactError(f"Malformed artifact token: {exc!r}") from exc


def artifact_path(source_file: Path, output_dir: Path) -> Path:
    """Return the artifact path for *source_file* inside *output_dir*.

    The full file name is kept, so node files differing only in a suffix
    (``a.nodes.yaml`` and ``a.nodes.json``) get distinct artifacts.
    """
    return output_dir / (source_file.name + ARTIFACT_SUFFIX)


def write_artifact(tree: TokenTree, path: Path, source: str | None = None) -> None:
    """Write an artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(tree, source), encoding="utf-8")


def read_artifact(path: Path) -> TokenTree:
    """Read and deserialize an artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))


# ################
# Implementation
# ################


def _token_to_dict(tok: Token) -> dict[str, Any]:
    d: dict[str, Any] = {"label": tok.label, "content": tok.content}
    if tok.description is not None:
        d["description"] = tok.description
    if tok.type is not None:
        d["type"] = tok.type
    if tok.name is not None:
        d["name"] = tok.name
    if tok.arg_name is not None:
        d["argName"] = tok.arg_name
    return d


def _token_from_dict(obj: dict[str, Any]) -> Token:
    return Token(
        label=obj["label"],
        content=obj["content"],
        description=obj.get("description"),
        type=obj.get("type"),
        name=obj.get("name"),
        arg_name=obj.get("argName"),
    )
