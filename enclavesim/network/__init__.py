"""Session envelope, per-peer secure channels and message routing."""