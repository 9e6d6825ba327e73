# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Documentation-comment tag extraction and declaration pairing."""

__version__ = "0.1.0"
