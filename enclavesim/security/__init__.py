"""Attestation reports, isolation checks, policy evaluation and the sandbox."""