"""Hash-based signatures for simulation only."""

import hashlib
import hmac


def sign(data: bytes, private_key: bytes) -> bytes:
    """Return the SHA-256 digest of ``data`` followed by ``private_key``."""
    digest = hashlib.sha256()
    digest.update(data)
    digest.update(private_key)
    return digest.digest()


def verify(data: bytes, signature: bytes, private_key: bytes) -> bool:
    """Return whether ``signature`` is the signature of ``data`` under the key."""
    return hmac.compare_digest(sign(data, private_key), bytes(signature))