"""Simulated secure-enclave runtime with sealing, signing, attestation and sandboxing."""

__version__ = "0.1.0"