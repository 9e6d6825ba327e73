# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Sphinx configuration for doctag documentation."""

project = "doctag"
author = "doctag Contributors"
release = "0.1.0"

extensions: list[str] = ["sphinx.ext.autodoc"]

html_theme = "alabaster"
