"""The enclave runtime: seals and signs tasks while running."""

from __future__ import annotations

from enclavesim.core.lifecycle import LifecycleState
from enclavesim.crypto.keys import KeyPair, generate_keypair
from enclavesim.crypto.sealing import seal
from enclavesim.crypto.signing import sign


class EnclaveError(RuntimeError):
    """Raised when the enclave cannot carry out a request."""


class EnclaveRuntime:
    """A simulated enclave with a lifecycle and its own key pair."""

    def __init__(self) -> None:
        self.state = LifecycleState.CREATED
        self.keys: KeyPair | None = None

    def init(self) -> None:
        """Generate keys and start running."""
        print("[Runtime] Initializing enclave...")
        self.keys = generate_keypair()
        self.state = LifecycleState.RUNNING
        print("[Runtime] Enclave initialized.")

    def execute(self, data: bytes) -> bytes:
        """Seal ``data`` with the public key and append a signature of the result."""
        if self.state is not LifecycleState.RUNNING:
            raise EnclaveError("Enclave not running")
        if self.keys is None:
            raise EnclaveError("Missing keys")

        sealed = seal(bytes(data), self.keys.public_key)
        signature = sign(sealed, self.keys.private_key)
        return sealed + signature

    def shutdown(self) -> None:
        """Stop the enclave and drop its keys."""
        print("[Runtime] Shutting down enclave...")
        self.state = LifecycleState.STOPPED
        self.keys = None
        print("[Runtime] Secure memory cleared (simulated).")