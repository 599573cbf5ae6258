"""
modular.py — Modular arithmetic helpers for the SecureChannel protocol.

All residues handed out by this module lie in ``[0, n)``. Python's ``%`` and
``//`` use floor semantics, which keeps ``b == (b // a) * a + b % a`` true for
negative operands and therefore keeps Bézout coefficients exact.
"""

from __future__ import annotations
from typing import List, Tuple

from .errors import NotInvertibleError


def mod_n(value: int, n: int) -> int:
    """Return ``value`` reduced into ``[0, n)`` for a positive modulus ``n``."""
    return value % n


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g`` and ``abs(g) == gcd(a, b)``.

    Unrolled form of the recursion ``egcd(a, b) -> egcd(b % a, a)`` with base
    case ``egcd(0, b) == (b, 0, 1)``; the quotients are replayed in reverse to
    back-substitute the coefficients, so the result is identical to the
    recursive definition without its depth limit on large moduli.

    For non-negative inputs ``g`` is the non-negative gcd. Negative inputs can
    yield a negative ``g``; callers that only care about coprimality should use
    :func:`is_coprime`.
    """
    quotients: List[int] = []
    while a != 0:
        quotients.append(b // a)
        a, b = b % a, a

    x, y = 0, 1
    for q in reversed(quotients):
        x, y = y - q * x, x
    return b, x, y


def is_coprime(a: int, b: int) -> bool:
    g, _, _ = extended_gcd(a, b)
    return abs(g) == 1


def mod_inverse(a: int, n: int) -> int:
    """Return ``a^-1 mod n`` in ``[0, n)``.

    Raises:
        NotInvertibleError: If ``a`` shares a factor with ``n``.
    """
    g, x, _ = extended_gcd(mod_n(a, n), n)
    if g != 1:
        raise NotInvertibleError(a, n, g)
    return mod_n(x, n)
