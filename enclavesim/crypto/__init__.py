"""Fixed key pairs, secure random bytes, sealing and hash-based signing."""