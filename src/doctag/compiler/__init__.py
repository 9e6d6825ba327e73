# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction pipeline: comment/declaration pairing, diagnostics, and artifacts."""

from doctag.compiler.artifact import (
    ARTIFACT_SUFFIX,
    ArtifactError,
    deserialize,
    read_artifact,
    serialize,
    write_artifact,
)
from doctag.compiler.build import BuildError, extract_file
from doctag.compiler.diagnostics import Diagnostic, MissingTypeError, ParseResult
from doctag.compiler.sequencer import ParserState, Sequencer, generate_token_tree, parse

__all__ = [
    "parse",
    "generate_token_tree",
    "Sequencer",
    "ParserState",
    "Diagnostic",
    "MissingTypeError",
    "ParseResult",
    "serialize",
    "deserialize",
    "write_artifact",
    "read_artifact",
    "ARTIFACT_SUFFIX",
    "ArtifactError",
    "extract_file",
    "BuildError",
]
