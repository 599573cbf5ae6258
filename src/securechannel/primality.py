"""
primality.py — Miller-Rabin probabilistic primality test.

Randomness is supplied by the caller as any object exposing ``getrandbits(k)``
(``secrets.SystemRandom`` and ``random.Random`` both qualify). When none is
given a fresh ``secrets.SystemRandom`` is created for the call.
"""

from __future__ import annotations
import logging
import secrets
from typing import Optional, Protocol

from .config import MILLER_RABIN_ROUNDS

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Randomness capability consumed by the primality tester."""
    def getrandbits(self, k: int) -> int: ...


def draw_witness(n: int, rng: RandomSource) -> int:
    """Draw a witness ``a`` with ``2 <= a < n - 2`` by rejection sampling."""
    bits = n.bit_length()
    while True:
        a = rng.getrandbits(bits)
        if 2 <= a < n - 2:
            return a


def is_probably_prime(
    n: int,
    rounds: int = MILLER_RABIN_ROUNDS,
    rng: Optional[RandomSource] = None,
) -> bool:
    """Return True if ``n`` passes ``rounds`` Miller-Rabin rounds.

    A composite survives all rounds with probability at most ``4**-rounds``.
    Never raises for integer input.

    Args:
        n: Candidate to test.
        rounds: Number of independent witnesses to try.
        rng: Randomness capability; defaults to ``secrets.SystemRandom()``.

    Returns:
        bool: False if ``n`` is certainly composite, True if probably prime.
    """
    if n == 2 or n == 3:
        return True
    if n < 2 or n % 2 == 0:
        return False

    if rng is None:
        rng = secrets.SystemRandom()

    # n - 1 = 2^s * t with t odd
    t = n - 1
    s = 0
    while t % 2 == 0:
        t //= 2
        s += 1

    for _ in range(rounds):
        a = draw_witness(n, rng)
        x = pow(a, t, n)
        if x == 1 or x == n - 1:
            continue

        for _ in range(s - 1):
            x = pow(x, 2, n)
            if x == 1:
                logger.debug("n=%d composite: nontrivial square root of 1 (witness %d)", n, a)
                return False
            if x == n - 1:
                break

        if x != n - 1:
            logger.debug("n=%d composite: witness %d", n, a)
            return False

    return True
