#!/usr/bin/env python3
# Copyright 2026 doctag Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the doctag CI checks locally.

Usage: ``tools/ci.py [STEP ...]`` runs only the named steps (case-insensitive
prefixes such as ``lint`` or ``tests``); without arguments every step runs.
"""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

REPO_ROOT = Path(__file__).resolve().parent.parent

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=doctag", "--cov-report=term-missing"]),
    ("Example extraction", ["uv", "run", "doctag", "extract", "examples/add.nodes.yaml"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str]) -> int:
    """Run the selected CI steps and print a summary; return the exit code."""
    selected = _select(argv)
    if not selected:
        print(chalk.red(f"No CI step matches: {' '.join(argv)}"))
        return 2

    failures = 0
    timings: list[tuple[str, bool, float]] = []
    for name, cmd in selected:
        print(chalk.blue(f"\n>>> {name}: {' '.join(cmd)}"))
        start = time.monotonic()
        passed = subprocess.run(cmd, cwd=REPO_ROOT).returncode == 0
        timings.append((name, passed, time.monotonic() - start))
        failures += not passed

    print(chalk.blue("\nSummary"))
    for name, passed, elapsed in timings:
        status = chalk.green("PASS") if passed else chalk.red("FAIL")
        print(f"  {status}  {name} ({elapsed:.1f}s)")
    return 1 if failures else 0


# ################
# Implementation
# ################


def _select(argv: list[str]) -> list[tuple[str, list[str]]]:
    if not argv:
        return STEPS
    wanted = [arg.lower() for arg in argv]
    return [step for step in STEPS if any(step[0].lower().startswith(w) for w in wanted)]


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
