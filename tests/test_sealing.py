import hashlib

import pytest

from enclavesim.crypto.sealing import UnsealError, seal, unseal


def test_seal_unseal():
    data = b"secret"
    key = b"key"

    sealed = seal(data, key)
    unsealed = unseal(sealed, key)

    assert unsealed == data


def test_tampering_detected():
    data = b"secure"
    key = b"key"

    sealed = bytearray(seal(data, key))
    sealed[0] ^= 0xFF

    with pytest.raises(UnsealError):
        unseal(bytes(sealed), key)


def test_tampered_payload_detected():
    sealed = bytearray(seal(b"secure", b"key"))
    sealed[-1] ^= 0x01
    with pytest.raises(UnsealError):
        unseal(bytes(sealed), b"key")


def test_sealed_layout():
    data = b"secret"
    key = b"key"
    sealed = seal(data, key)
    assert len(sealed) == 32 + len(data)
    assert sealed[32:] == data
    assert sealed[:32] == hashlib.sha256(data + key).digest()


def test_wrong_key_rejected():
    sealed = seal(b"secret", b"key")
    with pytest.raises(UnsealError):
        unseal(sealed, b"other")


def test_too_short_rejected():
    with pytest.raises(UnsealError):
        unseal(b"\x00" * 31, b"key")


def test_empty_data_round_trip():
    sealed = seal(b"", b"key")
    assert len(sealed) == 32
    assert unseal(sealed, b"key") == b""


def test_unseal_error_is_value_error():
    with pytest.raises(ValueError):
        unseal(b"", b"key")