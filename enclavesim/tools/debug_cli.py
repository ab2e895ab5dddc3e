"""Interactive debugging console for the enclave."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

_EXIT = "exit"

_HELP = "\n".join(
    [
        "Commands:",
        "  help        - Show this message",
        "  status      - Show enclave status",
        "  exit        - Exit CLI",
    ]
)


def handle_command(command: str) -> str:
    """Return the console's reply to ``command``."""
    command = command.strip()
    if command == "help":
        return _HELP
    if command == "status":
        return "[Debug] Enclave status: RUNNING (simulated)"
    if command == _EXIT:
        return "Exiting..."
    return f"Unknown command: {command}"


def main(argv: Sequence[str] | None = None) -> int:
    """Read commands from standard input until ``exit`` or end of input."""
    parser = argparse.ArgumentParser(
        prog="enclavesim-debug",
        description="Interactive enclave debug console.",
    )
    parser.parse_args(argv)

    print("Linux Enclave Debug CLI")
    print("Type 'help' for commands.")

    while True:
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            print()
            break
        command = line.strip()
        print(handle_command(command))
        if command == _EXIT:
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())