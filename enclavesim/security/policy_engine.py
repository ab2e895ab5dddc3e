"""Execution policies and their evaluation."""

from dataclasses import dataclass
from enum import Enum


class PolicyDecision(Enum):
    """Outcome of evaluating a policy."""

    ALLOW = "allow"
    DENY = "deny"


@dataclass(frozen=True)
class Policy:
    """Whether execution is allowed and the largest payload accepted."""

    allow_execution: bool
    max_payload_size: int


def evaluate_policy(policy: Policy, input_size: int) -> PolicyDecision:
    """Decide whether a payload of ``input_size`` bytes may run under ``policy``."""
    if not policy.allow_execution or input_size > policy.max_payload_size:
        return PolicyDecision.DENY
    return PolicyDecision.ALLOW