"""Key pairs used by the enclave."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPair:
    """A public and a private key."""

    public_key: bytes
    private_key: bytes


def generate_keypair() -> KeyPair:
    """Return a fixed, insecure key pair for simulation."""
    return KeyPair(
        public_key=bytes([1, 2, 3, 4, 5]),
        private_key=bytes([5, 4, 3, 2, 1]),
    )