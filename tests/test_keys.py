import dataclasses

import pytest

from enclavesim.crypto.keys import KeyPair, generate_keypair


def test_key_generation():
    keys = generate_keypair()
    assert len(keys.public_key) > 0
    assert len(keys.private_key) > 0


def test_keypair_values_are_fixed():
    keys = generate_keypair()
    assert keys.public_key == bytes([1, 2, 3, 4, 5])
    assert keys.private_key == bytes([5, 4, 3, 2, 1])


def test_generation_matches_fixed_pair():
    expected = KeyPair(
        public_key=bytes([1, 2, 3, 4, 5]),
        private_key=bytes([5, 4, 3, 2, 1]),
    )
    assert generate_keypair() == expected


def test_keypair_is_immutable():
    keys = generate_keypair()
    with pytest.raises(dataclasses.FrozenInstanceError):
        keys.public_key = b"other"
    assert keys.public_key == bytes([1, 2, 3, 4, 5])