"""A channel to one peer, protected by a session key."""

from enclavesim.network.encryption_layer import decrypt, encrypt, generate_session_key


class SecureChannel:
    """Wraps outgoing data and unwraps incoming data for a single peer."""

    def __init__(self, peer_id: int) -> None:
        self.peer_id = peer_id
        self._key = generate_session_key()

    def send(self, data: bytes) -> bytes:
        """Return ``data`` wrapped for transmission."""
        return encrypt(data, self._key)

    def receive(self, data: bytes) -> bytes:
        """Return the payload of received ``data``."""
        return decrypt(data, self._key)

    def __repr__(self) -> str:
        return f"SecureChannel(peer_id={self.peer_id!r})"