"""Generates and prints a random simulated key pair."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from enclavesim.crypto.rng import secure_random_bytes

_KEY_SIZE = 32


def _hex_list(data: bytes) -> str:
    return "[" + ", ".join(f"{byte:02x}" for byte in data) + "]"


def main(argv: Sequence[str] | None = None) -> int:
    """Print a freshly generated public and private key."""
    parser = argparse.ArgumentParser(
        prog="enclavesim-keygen",
        description="Generate a simulated key pair.",
    )
    parser.parse_args(argv)

    print("[KeyGen] Generating simulated keypair...")
    public_key = secure_random_bytes(_KEY_SIZE)
    private_key = secure_random_bytes(_KEY_SIZE)
    print(f"Public Key: {_hex_list(public_key)}")
    print(f"Private Key: {_hex_list(private_key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())