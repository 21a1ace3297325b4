#!/usr/bin/env python3
# Copyright 2026 SDLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the CI checks locally: format, lint, tests with coverage, and build."""

import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["uv", "run", "pytest", "--cov=sdlang", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main(argv: list[str] | None = None) -> int:
    """Run the CI steps (all of them, or those named in *argv*) and report results."""
    selected = set(argv if argv is not None else sys.argv[1:])
    steps = [(name, cmd) for name, cmd in STEPS if not selected or name.lower() in selected]
    if not steps:
        print(chalk.red(f"No CI step matches: {', '.join(sorted(selected))}"))
        return 2

    results: list[tuple[str, bool, float]] = []
    for name, cmd in steps:
        _banner(name)
        start = time.monotonic()
        proc = subprocess.run(cmd, cwd=_REPO_ROOT)
        results.append((name, proc.returncode == 0, time.monotonic() - start))

    _banner("Summary")
    for name, passed, elapsed in results:
        paint = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(paint(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_REPO_ROOT = Path(__file__).resolve().parent.parent


def _banner(title: str) -> None:
    sep = chalk.blue("=" * 60)
    print(f"\n{sep}")
    print(chalk.blue(f"  {title}"))
    print(sep)


if __name__ == "__main__":
    sys.exit(main())
