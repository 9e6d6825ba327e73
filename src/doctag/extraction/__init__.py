# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction of structured tokens from comment and declaration text."""

from doctag.extraction.comment import extract_comment
from doctag.extraction.declaration import extract_data_type, extract_proto
from doctag.extraction.grammar import Grammar, clean_content

__all__ = [
    "Grammar",
    "clean_content",
    "extract_comment",
    "extract_data_type",
    "extract_proto",
]
