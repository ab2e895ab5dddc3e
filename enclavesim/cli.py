"""Command that runs one task through a simulated enclave."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from enclavesim.core.runtime import EnclaveError, EnclaveRuntime

_TASK = b"hello secure enclave task"


def main(argv: Sequence[str] | None = None) -> int:
    """Start an enclave, execute a sample task, print the result and shut down."""
    parser = argparse.ArgumentParser(
        prog="enclavesim",
        description="Run a sample task through a simulated enclave.",
    )
    parser.parse_args(argv)

    print("[Linux Enclave] Starting runtime...")

    runtime = EnclaveRuntime()
    runtime.init()

    try:
        result = runtime.execute(_TASK)
    except EnclaveError as exc:
        print(f"[Enclave Error] {exc}", file=sys.stderr)
    else:
        print(f"[Enclave Result] {list(result)}")

    runtime.shutdown()

    print("[Linux Enclave] Shutdown complete.")
    return 0


if __name__ == "__main__":
    sys.exit(main())