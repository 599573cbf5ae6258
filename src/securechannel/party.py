"""
party.py — SecureChannel key holder and protocol operations.

A ``Party`` holds a prime pair ``(P, Q)`` and a private key ``K``. From these
it derives the shared modulus ``N = P*Q`` and the public verification
parameter ``H = -(K^2)^-1 mod N``.

Protocol roles (all Parties share the same prime pair):
  Signer    sign(x, y) -> (S1, S2)
  Checker   check_sign(x, (S1, S2), H_signer) -> bool
  Receiver  recover_message(x, (S1, S2), K_signer) -> y, or 0 on key mismatch

Identities behind the construction (all mod N):
  S1 = (x/y + y) / 2
  S2 = K (x/y - y) / 2
  S1^2 + H S2^2 = S1^2 - (S2/K)^2 = x
  S1 + S2/K     = x/y
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

from .config import MILLER_RABIN_ROUNDS
from .errors import ParameterError, SecureChannelError
from .modular import is_coprime, mod_inverse, mod_n
from .primality import RandomSource, is_probably_prime

logger = logging.getLogger(__name__)

__all__ = [
    "Signature",
    "Party",
    "PartySetupResult",
    "create_party",
]


class Signature(NamedTuple):
    """Signature pair, each component normalized into ``[0, N)``."""
    s1: int
    s2: int


class Party:
    """Validated, immutable protocol key holder."""

    __slots__ = ("_p", "_q", "_k", "_n", "_h")

    def __init__(
        self,
        p: int,
        q: int,
        k: int,
        rounds: int = MILLER_RABIN_ROUNDS,
        rng: Optional[RandomSource] = None,
    ):
        """Construct and validate a Party.

        Args:
            p: First prime of the shared modulus.
            q: Second prime of the shared modulus.
            k: Private key, coprime to ``p*q``.
            rounds: Miller-Rabin rounds used to test ``p`` and ``q``.
            rng: Randomness capability handed to the primality tester.

        Raises:
            ParameterError: If any parameter invariant is violated.
        """
        self._p = p
        self._q = q
        self._k = k
        self._n = p * q
        self._check_params(rounds, rng)
        # k is coprime to n here, so the inverse exists
        self._h = mod_n(-mod_inverse(k * k, self._n), self._n)
        logger.debug("Party ready: N=%d H=%d", self._n, self._h)

    def _check_params(self, rounds: int, rng: Optional[RandomSource]) -> None:
        if not is_coprime(self._p, self._q):
            raise ParameterError("P,Q not coprime", f"P={self._p}, Q={self._q}")
        if not is_coprime(self._n, self._k):
            raise ParameterError("N,K not coprime", f"N={self._n}")
        if not is_probably_prime(self._p, rounds, rng):
            raise ParameterError("P not prime", f"P={self._p}")
        if not is_probably_prime(self._q, rounds, rng):
            raise ParameterError("Q not prime", f"Q={self._q}")
        if self._n % 2 == 0:
            raise ParameterError("P,Q must be odd", "2 must be invertible modulo N")

    @property
    def p(self) -> int:
        return self._p

    @property
    def q(self) -> int:
        return self._q

    @property
    def n(self) -> int:
        """Shared modulus ``P*Q``."""
        return self._n

    def public_param(self) -> int:
        """Return ``H``, the public verification parameter in ``[0, N)``."""
        return self._h

    def sign(self, x: int, y: int) -> Signature:
        """Sign the operand pair ``(x, y)`` with this Party's private key.

        Raises:
            ParameterError: If ``x`` or ``y`` shares a factor with ``N``.
        """
        n = self._n
        if not is_coprime(x, n):
            raise ParameterError("x,N not coprime", f"x={x}")
        if not is_coprime(y, n):
            raise ParameterError("y,N not coprime", f"y={y}")

        y_inv = mod_inverse(y, n)
        two_inv = mod_inverse(2, n)
        s1 = mod_n(two_inv * (x * y_inv + y), n)
        s2 = mod_n(two_inv * self._k * (x * y_inv - y), n)
        return Signature(s1, s2)

    def check_sign(self, x: int, signature: Signature, h: int) -> bool:
        """Verify ``signature`` over ``x`` against the signer's public ``h``."""
        s1, s2 = signature
        check = mod_n(s1 * s1 + h * s2 * s2, self._n)
        return mod_n(x, self._n) == check

    def recover_message(self, x: int, signature: Signature, k: int) -> int:
        """Recover the secret operand from ``signature`` using key ``k``.

        Only this Party's modulus is used; ``k`` must be the signer's key.

        Returns:
            int: The signed ``y`` reduced mod ``N`` when ``k`` matches the
            signer's key, otherwise 0.

        Raises:
            NotInvertibleError: If ``k`` or the intermediate ``S1 + S2/k``
                is not invertible modulo ``N``.
        """
        n = self._n
        s1, s2 = signature
        k_inv = mod_inverse(k, n)
        k2_inv = mod_inverse(k * k, n)
        check = mod_n(s1 * s1 - s2 * s2 * k2_inv, n)

        if check != mod_n(x, n):
            return 0

        tmp = s1 + s2 * k_inv
        return mod_n(x * mod_inverse(tmp, n), n)

    def __repr__(self) -> str:
        return f"Party(N={self._n}, H={self._h})"


@dataclass
class PartySetupResult:
    """Outcome of :func:`create_party`: either a Party or the error that stopped it."""
    success: bool
    party: Optional[Party] = None
    error: Optional[SecureChannelError] = None

    def __repr__(self) -> str:
        status = "SUCCESS" if self.success else "FAILED"
        detail = self.party if self.success else self.error
        return f"PartySetupResult({status}, {detail!r})"


def create_party(
    p: int,
    q: int,
    k: int,
    rounds: int = MILLER_RABIN_ROUNDS,
    rng: Optional[RandomSource] = None,
) -> PartySetupResult:
    """Construct a Party, reporting validation failures as a result value."""
    try:
        party = Party(p, q, k, rounds=rounds, rng=rng)
    except SecureChannelError as err:
        logger.debug("Party setup failed: %s", err)
        return PartySetupResult(success=False, error=err)
    return PartySetupResult(success=True, party=party)
