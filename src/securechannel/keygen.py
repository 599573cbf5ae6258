"""
keygen.py — Fresh SecureChannel parameters.

Prime pairs come from an RSA key generated by the ``cryptography`` library,
whose private numbers expose two distinct odd primes of ``bits // 2`` bits
each. Keys and operands are drawn with ``secrets``.
"""

from __future__ import annotations
import secrets
from typing import Tuple

from cryptography.hazmat.primitives.asymmetric import rsa

from .config import ProtocolParams
from .modular import is_coprime

# Smallest RSA modulus the cryptography backend will generate
MIN_MODULUS_BITS = 1024


def generate_prime_pair(bits: int = 2048) -> Tuple[int, int]:
    """Return two distinct odd primes whose product has ``bits`` bits."""
    if bits < MIN_MODULUS_BITS:
        raise ValueError(f"bits must be at least {MIN_MODULUS_BITS}, got {bits}")
    sk = rsa.generate_private_key(public_exponent=65537, key_size=bits)
    numbers = sk.private_numbers()
    return numbers.p, numbers.q


def generate_unit(n: int) -> int:
    """Draw a value in ``[2, n)`` that is coprime to ``n``."""
    while True:
        value = secrets.randbelow(n)
        if value >= 2 and is_coprime(value, n):
            return value


def generate_params(bits: int = 2048) -> ProtocolParams:
    """Generate a complete parameter set with three distinct role keys."""
    p, q = generate_prime_pair(bits)
    n = p * q

    keys = []
    while len(keys) < 3:
        k = generate_unit(n)
        if k not in keys:
            keys.append(k)

    return ProtocolParams(
        p=p,
        q=q,
        k_signer=keys[0],
        k_checker=keys[1],
        k_receiver=keys[2],
        x=generate_unit(n),
        y=generate_unit(n),
    )
