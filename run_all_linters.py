#!/usr/bin/env python3
"""Run every formatter, linter and the test suite in one go.

Steps, in order:
1. Black format check
2. isort import order check
3. Ruff static checks
4. Pylint static analysis
5. pytest

Output is collected and summarised at the end.
"""

from pathlib import Path
import subprocess
import sys


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """Run a command and return its success flag and combined output."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print("=" * 60)

    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, check=False, cwd=Path(__file__).parent
        )
    except OSError as e:
        print(f"Could not run: {e}")
        return False, str(e)

    success = result.returncode == 0
    output = result.stdout + result.stderr
    print("OK" if success else "FAILED")
    if output.strip():
        print("\nOutput:")
        print(output)
    return success, output


def main() -> None:
    commands = [
        ([sys.executable, "-m", "black", ".", "--check"], "Black"),
        ([sys.executable, "-m", "isort", ".", "--check-only"], "isort"),
        ([sys.executable, "-m", "ruff", "check", "."], "Ruff"),
        ([sys.executable, "-m", "pylint", "app", "core", "infrastructure"], "Pylint"),
        ([sys.executable, "-m", "pytest", "-q"], "pytest"),
    ]

    results = [(description, *run_command(cmd, description)) for cmd, description in commands]

    print(f"\n{'='*60}")
    print("Summary")
    print("=" * 60)
    all_passed = all(success for _, success, _ in results)
    for description, success, _ in results:
        print(f"{description}: {'passed' if success else 'failed'}")

    if not all_passed:
        print("\nFailures:")
        for description, success, output in results:
            if not success and output.strip():
                print(f"\n--- {description} ---")
                print(output)

    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
