from enclavesim.network.encryption_layer import encrypt, generate_session_key
from enclavesim.network.secure_channel import SecureChannel


def test_secure_channel():
    channel = SecureChannel(1)
    msg = b"hello"
    encrypted = channel.send(msg)
    decrypted = channel.receive(encrypted)
    assert decrypted == msg


def test_peer_id_kept():
    assert SecureChannel(7).peer_id == 7


def test_send_uses_session_key():
    channel = SecureChannel(3)
    assert channel.send(b"data") == encrypt(b"data", generate_session_key())


def test_receive_short_message_is_empty():
    assert SecureChannel(1).receive(b"short") == b""


def test_channels_to_different_peers_interoperate():
    sent = SecureChannel(1).send(b"cross")
    assert SecureChannel(2).receive(sent) == b"cross"