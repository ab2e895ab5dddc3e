"""Routes messages to registered peers over their secure channels."""

from __future__ import annotations

from enclavesim.network.secure_channel import SecureChannel


class MessageRouter:
    """Keeps one secure channel per registered peer."""

    def __init__(self) -> None:
        self._channels: dict[int, SecureChannel] = {}

    def register_peer(self, peer_id: int) -> None:
        """Open a fresh channel to ``peer_id``, replacing any existing one."""
        self._channels[peer_id] = SecureChannel(peer_id)

    def route(self, peer_id: int, message: bytes) -> bytes | None:
        """Send ``message`` to ``peer_id``; None if the peer is not registered."""
        channel = self._channels.get(peer_id)
        if channel is None:
            return None
        return channel.send(message)