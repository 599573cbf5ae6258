"""
config.py — Protocol constants and parameter bundles.
"""

from __future__ import annotations
from dataclasses import astuple, dataclass
from typing import Tuple

# Miller-Rabin rounds used when validating a prime pair
MILLER_RABIN_ROUNDS = 10

FIELD_ORDER: Tuple[str, ...] = (
    "p",
    "q",
    "k_signer",
    "k_checker",
    "k_receiver",
    "x",
    "y",
)
FIELD_COUNT = len(FIELD_ORDER)

RECOVERY_ROLES: Tuple[str, ...] = ("signer", "checker", "receiver")


@dataclass(frozen=True)
class ProtocolParams:
    """Everything one protocol session needs: the shared primes, the three
    role keys and the operand pair handed to Sign."""
    p: int
    q: int
    k_signer: int
    k_checker: int
    k_receiver: int
    x: int
    y: int

    def key_for(self, role: str) -> int:
        if role not in RECOVERY_ROLES:
            raise ValueError(f"Unknown role '{role}'; expected one of {', '.join(RECOVERY_ROLES)}")
        return getattr(self, f"k_{role}")

    def to_line(self) -> str:
        """Render as the comma-separated input file line."""
        return ",".join(str(v) for v in astuple(self))


DEMO_PARAMS = ProtocolParams(
    p=683,
    q=811,
    k_signer=3,
    k_checker=13,
    k_receiver=5,
    x=7,
    y=11,
)
