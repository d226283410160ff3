#!/usr/bin/env python3
"""Composite quality checks for local and CI use."""

from __future__ import annotations

import argparse
import os
import subprocess
from pathlib import Path


def _run_checked(*, label: str, command: list[str], env: dict[str, str]) -> None:
    print(label, flush=True)
    completed = subprocess.run(command, env=env, check=False)
    if completed.returncode != 0:
        raise SystemExit(f"{label} failed with exit code {completed.returncode}.")


def main() -> int:
    parser = argparse.ArgumentParser(description="Run repository quality checks.")
    parser.add_argument("--skip-typecheck", action="store_true")
    parser.add_argument("--skip-tests", action="store_true")
    args = parser.parse_args()

    root = Path(__file__).resolve().parent.parent
    os.chdir(root)

    env = os.environ.copy()
    env["PYTHONPATH"] = "."

    if not args.skip_typecheck:
        _run_checked(label="Running mypy...", command=["mypy"], env=env)

    if not args.skip_tests:
        _run_checked(
            label="Running colorlink tests with coverage gate...",
            command=[
                "pytest",
                "tests/colorlink",
                "--cov=colorlink",
                "--cov-report=term-missing",
                "--cov-fail-under=80",
            ],
            env=env,
        )
        _run_checked(
            label="Running puzzle core coverage gate...",
            command=[
                "pytest",
                "tests/colorlink/unit/core",
                "tests/colorlink/unit/boards",
                "--cov=colorlink.core",
                "--cov=colorlink.boards",
                "--cov-report=term-missing",
                "--cov-fail-under=90",
            ],
            env=env,
        )

    print("All checks passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
