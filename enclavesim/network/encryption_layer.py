"""Session keys and a hash-tagged envelope for channel traffic."""

import hashlib

_TAG_SIZE = 32


def generate_session_key() -> bytes:
    """Return a fixed session key for simulation."""
    return bytes([42, 99, 13, 7, 255])


def encrypt(data: bytes, key: bytes) -> bytes:
    """Return the SHA-256 digest of ``data`` and ``key`` followed by ``data``."""
    digest = hashlib.sha256()
    digest.update(data)
    digest.update(key)
    return digest.digest() + bytes(data)


def decrypt(data: bytes, key: bytes) -> bytes:
    """Strip the 32-byte tag and return the payload; empty if there is none.

    The tag is not checked, so ``key`` has no effect.
    """
    if len(data) <= _TAG_SIZE:
        return b""
    return bytes(data[_TAG_SIZE:])