"""Prints the enclave configuration file."""

import sys
from pathlib import Path

CONFIG_PATH = Path("configs/default.toml")


def main(argv=None):
    """Load the configuration file and print its contents."""
    print("[Inspector] Inspecting enclave state...")
    try:
        contents = CONFIG_PATH.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"[Inspector] Failed to read config: {exc}", file=sys.stderr)
    else:
        print("[Inspector] Loaded config:")
        print(contents)
    print("[Inspector] Inspection complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())