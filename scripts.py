#!/usr/bin/env python3
"""
Development checks for chibi-autowire, run through uv.

Usage: python scripts.py <test|lint|typecheck|demos|readme|check>
"""

import subprocess
import sys
import tempfile
from pathlib import Path

PACKAGE_DIR = "src/chibi/autowire/"
DEMOS = ["demo/demo.py", "demo/logger_injection_demo.py"]

type Step = tuple[str, list[str]]


def run_steps(steps: list[Step]) -> bool:
    """Run every step, reporting each one; True if all of them succeed."""
    passed = True
    for description, cmd in steps:
        print(f"\n>> {description}: {' '.join(cmd)}")
        try:
            returncode = subprocess.run(cmd).returncode
        except FileNotFoundError:
            print(f"!! Command not found: {cmd[0]}")
            returncode = 127
        if returncode != 0:
            print(f"!! {description} failed with exit code {returncode}")
            passed = False
    return passed


def test_steps() -> list[Step]:
    return [("Tests", ["uv", "run", "pytest", "-v"])]


def lint_steps() -> list[Step]:
    return [
        ("Ruff linting", ["uv", "run", "ruff", "check", "."]),
        ("Ruff formatting", ["uv", "run", "ruff", "format", "--check", "."]),
    ]


def typecheck_steps() -> list[Step]:
    return [
        ("MyPy", ["uv", "run", "mypy", PACKAGE_DIR]),
        ("Pyright", ["uv", "run", "pyright", PACKAGE_DIR]),
    ]


def demo_steps() -> list[Step]:
    return [(f"Demo {Path(demo).name}", ["uv", "run", "python", demo]) for demo in DEMOS]


def check_readme() -> bool:
    """Turn the README quick start into a pytest module with phmdoctest and run it."""
    with tempfile.TemporaryDirectory() as tmp:
        generated = str(Path(tmp) / "test_readme.py")
        return run_steps(
            [
                ("README extraction", ["uv", "run", "phmdoctest", "README.md", "--outfile", generated]),
                ("README examples", ["uv", "run", "pytest", generated, "-v"]),
            ]
        )


COMMANDS = {
    "test": lambda: run_steps(test_steps()),
    "lint": lambda: run_steps(lint_steps()),
    "typecheck": lambda: run_steps(typecheck_steps()),
    "demos": lambda: run_steps(demo_steps()),
    "readme": check_readme,
}


def check_all() -> bool:
    """Run every command and print a summary."""
    results = {name: command() for name, command in COMMANDS.items()}

    print("\n== chibi-autowire summary ==")
    for name, passed in results.items():
        print(f"{name:<10} {'PASS' if passed else 'FAIL'}")
    return all(results.values())


if __name__ == "__main__":
    command = sys.argv[1] if len(sys.argv) > 1 else None
    if command == "check":
        sys.exit(0 if check_all() else 1)
    if command in COMMANDS:
        sys.exit(0 if COMMANDS[command]() else 1)

    print(__doc__.strip().splitlines()[-1])
    sys.exit(1 if command else 0)
