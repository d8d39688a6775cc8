#!/usr/bin/env python3
"""
Management script for running project commands
Usage: python manage.py <command>
"""
import sys
import importlib
from pathlib import Path

COMMANDS_DIR = Path(__file__).resolve().parent / "management" / "commands"


def available_commands():
    return sorted(
        file.stem for file in COMMANDS_DIR.glob("*.py") if file.name != "__init__.py"
    )


def main():
    if len(sys.argv) < 2:
        print("Usage: python manage.py <command>")
        print("Available commands:")
        for name in available_commands():
            module = importlib.import_module(f"management.commands.{name}")
            doc = getattr(getattr(module, "run", None), "__doc__", None) or ""
            print(f"  {name:<12} {doc.strip()}")
        return 1

    command = sys.argv[1]
    if command not in available_commands():
        print(f"Command '{command}' not found")
        return 1

    module = importlib.import_module(f"management.commands.{command}")
    if not hasattr(module, 'run'):
        print(f"Command '{command}' does not have a run() function")
        return 1
    return module.run() or 0

if __name__ == "__main__":
    sys.exit(main())
