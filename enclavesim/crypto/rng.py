"""Random bytes from the operating system's secure source."""

import secrets


def secure_random_bytes(length: int) -> bytes:
    """Return ``length`` cryptographically secure random bytes."""
    if length < 0:
        raise ValueError("length must not be negative")
    return secrets.token_bytes(length)