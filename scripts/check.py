#!/usr/bin/env python3
"""
Проверка проекта neutrino-api-client перед коммитом.

Шаги: black, ruff, mypy (опционально), pytest.

Usage:
    python scripts/check.py
    python scripts/check.py --fast        # Без mypy
    python scripts/check.py --unit-only   # Без tests/integration
"""

import argparse
import subprocess
import sys
from pathlib import Path
from typing import List

GREEN = '\033[92m'
RED = '\033[91m'
YELLOW = '\033[93m'
RESET = '\033[0m'


def run_step(name: str, command: List[str], cwd: Path) -> bool:
    """Запустить шаг; отсутствующий инструмент считается пропуском."""
    print(f"\n▶ {name}: {' '.join(command)}")
    try:
        result = subprocess.run(command, cwd=cwd)
    except FileNotFoundError:
        print(f"{YELLOW}⚠ {command[0]} not installed - skipped{RESET}")
        return True

    ok = result.returncode == 0
    color = GREEN if ok else RED
    print(f"{color}{'✓' if ok else '✗'} {name}{RESET}")
    return ok


def main() -> int:
    parser = argparse.ArgumentParser(description="Lint, type-check and test neutrino_api")
    parser.add_argument("--fast", action="store_true", help="skip mypy")
    parser.add_argument("--unit-only", action="store_true", help="skip integration tests")
    args = parser.parse_args()

    root_dir = Path(__file__).resolve().parent.parent

    steps = [
        ("black", ["black", "--check", "src", "tests"]),
        ("ruff", ["ruff", "check", "src", "tests"]),
    ]
    if not args.fast:
        steps.append(("mypy", ["mypy", "src/neutrino_api"]))

    pytest_command = ["pytest", "-q"]
    if args.unit_only:
        pytest_command += ["-m", "not integration"]
    steps.append(("pytest", pytest_command))

    failed = [name for name, command in steps if not run_step(name, command, root_dir)]

    if failed:
        print(f"\n{RED}Failed: {', '.join(failed)}{RESET}")
        return 1
    print(f"\n{GREEN}All checks passed{RESET}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
