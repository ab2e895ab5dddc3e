from enclavesim.network.encryption_layer import decrypt
from enclavesim.network.message_router import MessageRouter
from enclavesim.network.secure_channel import SecureChannel


def test_route_to_unknown_peer_is_none():
    router = MessageRouter()
    assert router.route(5, b"msg") is None


def test_route_to_registered_peer():
    router = MessageRouter()
    router.register_peer(5)
    routed = router.route(5, b"msg")
    assert routed == SecureChannel(5).send(b"msg")


def test_routed_message_decrypts_to_original():
    router = MessageRouter()
    router.register_peer(1)
    assert decrypt(router.route(1, b"ping"), b"") == b"ping"


def test_only_registered_peers_are_reachable():
    router = MessageRouter()
    router.register_peer(1)
    assert router.route(2, b"ping") is None
    assert router.route(1, b"ping").endswith(b"ping")


def test_reregister_keeps_routing():
    router = MessageRouter()
    router.register_peer(9)
    first = router.route(9, b"x")
    router.register_peer(9)
    assert router.route(9, b"x") == first