"""Attestation reports: a measurement of enclave state."""

import hashlib
import hmac
from dataclasses import dataclass


@dataclass(frozen=True)
class AttestationReport:
    """The SHA-256 measurement of an enclave's state and the enclave's id."""

    measurement_hash: bytes
    enclave_id: int


def generate_attestation(enclave_state: bytes, enclave_id: int) -> AttestationReport:
    """Measure ``enclave_state`` and return a report for ``enclave_id``."""
    return AttestationReport(
        measurement_hash=hashlib.sha256(enclave_state).digest(),
        enclave_id=enclave_id,
    )


def verify_attestation(report: AttestationReport, expected: bytes) -> bool:
    """Return whether the report's measurement equals ``expected``."""
    return hmac.compare_digest(report.measurement_hash, bytes(expected))