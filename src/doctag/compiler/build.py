# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""File-level extraction workflow.

Loads a node file, runs the sequencer over it, and optionally writes the
resulting tree as an artifact for a downstream generator.
"""

from __future__ import annotations

import logging
from pathlib import Path

from doctag.compiler.artifact import artifact_path, write_artifact
from doctag.compiler.diagnostics import ParseResult
from doctag.compiler.sequencer import parse
from doctag.config.settings import ExtractorConfig
from doctag.parser.loader import NodeFileError, load_nodes

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class BuildError(Exception):
    """Raised when a node file cannot be processed or its artifact cannot be written."""


def extract_file(
    node_file: Path,
    *,
    config: ExtractorConfig | None = None,
    output_dir: Path | None = None,
    fail_fast: bool = True,
) -> ParseResult:
    """Extract the token tree of one node file.

    Args:
        node_file: Path to a node file produced by an upstream lexer.
        config: Grammar configuration; defaults apply when omitted.
        output_dir: Directory receiving the artifact. No artifact is written
            when omitted, or when the run produced no tree.
        fail_fast: Abort at the first missing required type.

    Returns:
        The ParseResult of the run. Missing-type problems are reported as
        diagnostics, not raised.

    Raises:
        BuildError: If the node file cannot be loaded or the artifact cannot be written.
    """
    try:
        source, nodes = load_nodes(node_file)
    except NodeFileError as exc:
        raise BuildError(str(exc)) from exc

    result = parse(nodes, source, config=config, fail_fast=fail_fast)

    if output_dir is not None and result.tree is not None:
        target = artifact_path(node_file, output_dir)
        try:
            write_artifact(result.tree, target, source=source)
        except OSError as exc:
            raise BuildError(f"Cannot write artifact '{target}': {exc}") from exc
        logger.info("Wrote %s", target)

    return result
