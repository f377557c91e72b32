#!/usr/bin/env python3
# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local CI pipeline for jacklex: formatting, lint, tests and packaging."""

import argparse
import subprocess
import sys
import time
from pathlib import Path

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: list[tuple[str, list[str]]] = [
    ("Format check", ["ruff", "format", "--check", "src/", "tests/", "tools/"]),
    ("Lint", ["ruff", "check", "src/", "tests/", "tools/"]),
    ("Tests", ["pytest", "--cov=jacklex", "--cov-report=term-missing"]),
    ("Build", ["uv", "build"]),
]


def main() -> int:
    """Run the selected CI steps and print a colored summary."""
    parser = argparse.ArgumentParser(description="Run jacklex CI checks locally.")
    parser.add_argument(
        "--skip-build",
        action="store_true",
        help="Skip building the distribution packages",
    )
    parser.add_argument(
        "--fail-fast",
        action="store_true",
        help="Stop at the first failing step",
    )
    args = parser.parse_args()

    steps = [step for step in STEPS if not (args.skip_build and step[0] == "Build")]
    results: list[tuple[str, bool, float]] = []
    for name, cmd in steps:
        passed, elapsed = _run_step(name, cmd)
        results.append((name, passed, elapsed))
        if args.fail_fast and not passed:
            break

    _print_summary(results)
    return 0 if all(passed for _, passed, _ in results) else 1


# ################
# Implementation
# ################

_RULE = "=" * 60


def _run_step(name: str, cmd: list[str]) -> tuple[bool, float]:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue(name))
    print(chalk.blue(_RULE))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=Path(__file__).resolve().parent.parent)
    return proc.returncode == 0, time.monotonic() - start


def _print_summary(results: list[tuple[str, bool, float]]) -> None:
    print(f"\n{chalk.blue(_RULE)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_RULE))
    for name, passed, elapsed in results:
        color = chalk.green if passed else chalk.red
        status = "PASS" if passed else "FAIL"
        print(color(f"  {status}  {name} ({elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main())
