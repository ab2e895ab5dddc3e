"""Sealing: a SHA-256 tag over data and key, followed by the data itself."""

import hashlib
import hmac

_TAG_SIZE = 32


class UnsealError(ValueError):
    """Raised when sealed data is malformed or its tag does not match."""


def _tag(data: bytes, key: bytes) -> bytes:
    digest = hashlib.sha256()
    digest.update(data)
    digest.update(key)
    return digest.digest()


def seal(data: bytes, key: bytes) -> bytes:
    """Return the 32-byte tag of ``data`` under ``key`` followed by ``data``."""
    return _tag(data, key) + bytes(data)


def unseal(sealed: bytes, key: bytes) -> bytes:
    """Check the tag of ``sealed`` under ``key`` and return the data it holds."""
    if len(sealed) < _TAG_SIZE:
        raise UnsealError("sealed data is shorter than its tag")
    tag, data = bytes(sealed[:_TAG_SIZE]), bytes(sealed[_TAG_SIZE:])
    if not hmac.compare_digest(tag, _tag(data, key)):
        raise UnsealError("seal tag does not match")
    return data