# enclavesim

A small, self-contained simulation of a secure enclave. It models the pieces
such a system is built from — a lifecycle-managed runtime, data sealing,
hash-based signing, attestation reports, isolation checks, a policy-driven
sandbox and per-peer secure channels — using SHA-256 from the standard
library. It has no third-party dependencies.

It is a teaching and experimentation tool. The "encryption" places the
plaintext after a digest, and the runtime's key pair is fixed; nothing here
protects real secrets.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

| Command              | What it does                                                             |
|----------------------|--------------------------------------------------------------------------|
| `enclavesim`         | Starts a runtime, executes a sample task, prints the output bytes, stops |
| `enclavesim-debug`   | Interactive prompt with `help`, `status` and `exit`                      |
| `enclavesim-inspect` | Prints the contents of `configs/default.toml`                            |
| `enclavesim-keygen`  | Prints a random 32-byte public and private key as hex byte lists         |

`enclavesim-debug` reads commands from standard input until `exit` or the end
of input; any other word is answered with `Unknown command: ...`.

`enclavesim-inspect` looks for `configs/default.toml` relative to the current
directory. If the file cannot be read it reports the error on standard error
and still finishes with exit status 0.

## Library use

Running a task through the enclave runtime:

```python
from enclavesim.core.runtime import EnclaveRuntime, EnclaveError

runtime = EnclaveRuntime()
runtime.init()
output = runtime.execute(b"hello secure enclave task")
runtime.shutdown()

try:
    runtime.execute(b"too late")
except EnclaveError as exc:
    print(exc)  # Enclave not running
```

The output is the sealed input (a 32-byte digest followed by the data)
followed by a 32-byte signature over it. `EnclaveRuntime.state` holds a
`LifecycleState` (`CREATED`, `RUNNING`, `SUSPENDED`, `STOPPED`).

Sealing and signing directly:

```python
from enclavesim.crypto.sealing import seal, unseal, UnsealError
from enclavesim.crypto.signing import sign, verify

sealed = seal(b"payload", b"secret")
assert unseal(sealed, b"secret") == b"payload"

signature = sign(b"important", b"secret")
assert verify(b"important", signature, b"secret")
```

`unseal` raises `UnsealError` (a `ValueError`) when the data is shorter than
32 bytes or the digest does not match.

`enclavesim.crypto.keys.generate_keypair()` returns the fixed `KeyPair` the
runtime uses, and `enclavesim.crypto.rng.secure_random_bytes(n)` returns `n`
bytes from the `secrets` module.

Policies and the sandbox:

```python
from enclavesim.security.policy_engine import Policy, PolicyDecision, evaluate_policy
from enclavesim.security.sandbox import Sandbox, SandboxError

policy = Policy(allow_execution=True, max_payload_size=100)
assert evaluate_policy(policy, 50) is PolicyDecision.ALLOW

assert Sandbox(policy).execute(b"\x01\x02\x03") == b"\x01\x02\x03"
```

`Sandbox.execute` returns the payload unchanged when allowed and raises
`SandboxError` (a `PermissionError`) when the policy denies it.

Secure channels and routing:

```python
from enclavesim.network.secure_channel import SecureChannel
from enclavesim.network.message_router import MessageRouter

channel = SecureChannel(1)
assert channel.receive(channel.send(b"hello")) == b"hello"

router = MessageRouter()
router.register_peer(7)
router.route(7, b"ping")            # wrapped message
assert router.route(8, b"ping") is None  # unknown peer
```

`receive` only strips the 32-byte digest; it does not check it, and returns
empty bytes when there is no payload.

Attestation and isolation:

```python
from enclavesim.security.attestation import generate_attestation, verify_attestation
from enclavesim.security.isolation import IsolationContext, enforce_isolation

report = generate_attestation(b"enclave_state", 1)
assert verify_attestation(report, report.measurement_hash)

assert enforce_isolation(IsolationContext(process_id=1, memory_region_id=1, privilege_level=0))
```

Contexts with a privilege level above 1 are refused.

Utilities:

```python
from enclavesim.core.scheduler import Scheduler
from enclavesim.utils.config import Config
from enclavesim.utils.logger import LogLevel, log

scheduler = Scheduler()
scheduler.submit(b"\x01\x02\x03")
assert scheduler.next() == b"\x01\x02\x03"
assert scheduler.next() is None

config = Config({"mode": "debug"})
config["retries"] = 3          # stored as the string "3"

log(LogLevel.WARN, "disk almost full")   # [WARN] disk almost full
```

`log` writes `ERROR` messages to standard error and the others to standard
output.

## What it does not do

- There is no real isolation, encryption or hardware enclave: sealing and the
  channel envelope keep the data in plain view, and isolation is a check on a
  number.
- The runtime does not draw tasks from the `Scheduler`; the two are separate.
- `enclavesim-inspect` only prints the configuration file; nothing in the
  package parses it or loads it into a `Config`.

## Package layout

- `enclavesim.core` — `EnclaveRuntime`, `LifecycleState`, `Scheduler`
- `enclavesim.crypto` — keys, random bytes, sealing, signing
- `enclavesim.network` — encryption layer, `SecureChannel`, `MessageRouter`
- `enclavesim.security` — attestation, isolation, policy engine, sandbox
- `enclavesim.utils` — `Config` mapping and a levelled `log` function
- `enclavesim.tools` — the debug prompt, config inspector and key generator
- `enclavesim.cli` — the `enclavesim` command