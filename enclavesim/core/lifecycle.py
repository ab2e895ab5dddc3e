"""Lifecycle states of an enclave."""

from enum import Enum


class LifecycleState(Enum):
    """The stages an enclave passes through."""

    CREATED = "created"
    RUNNING = "running"
    SUSPENDED = "suspended"
    STOPPED = "stopped"