"""Runs payloads only where a policy allows them."""

from enclavesim.security.policy_engine import Policy, PolicyDecision, evaluate_policy


class SandboxError(PermissionError):
    """Raised when the sandbox policy refuses execution."""


class Sandbox:
    """Executes payloads under a fixed policy."""

    def __init__(self, policy: Policy) -> None:
        self.policy = policy

    def execute(self, data: bytes) -> bytes:
        """Return ``data`` unchanged if the policy allows it, else raise SandboxError."""
        payload = bytes(data)
        if evaluate_policy(self.policy, len(payload)) is PolicyDecision.DENY:
            raise SandboxError("Sandbox policy denied execution")
        print("[Sandbox] Execution allowed")
        return payload