"""Isolation rules for execution contexts."""

from dataclasses import dataclass

_MAX_PRIVILEGE_LEVEL = 1


@dataclass(frozen=True)
class IsolationContext:
    """A process, its memory region and its privilege level."""

    process_id: int
    memory_region_id: int
    privilege_level: int


def enforce_isolation(ctx: IsolationContext) -> bool:
    """Return whether ``ctx`` may be isolated; elevated privilege is refused."""
    if ctx.privilege_level > _MAX_PRIVILEGE_LEVEL:
        print("[Isolation] Denied elevated privilege context")
        return False
    print(f"[Isolation] Context isolated successfully: {ctx!r}")
    return True