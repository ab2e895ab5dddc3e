"""Enclave runtime, lifecycle states and a FIFO task scheduler."""