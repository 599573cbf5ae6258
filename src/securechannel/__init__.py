"""SecureChannel public API.

Three-party signing over a shared composite modulus: a Signer signs an
operand pair, a Checker verifies with the Signer's public parameter, and a
Receiver recovers the secret operand with the Signer's key.

Example:
    from securechannel import Party

    signer = Party(683, 811, 3)
    checker = Party(683, 811, 13)
    sig = signer.sign(7, 11)
    assert checker.check_sign(7, sig, signer.public_param())
"""

from .config import DEMO_PARAMS, MILLER_RABIN_ROUNDS, ProtocolParams
from .errors import (
    SecureChannelError,
    ParameterError,
    NotInvertibleError,
    InputFormatError,
)
from .modular import extended_gcd, is_coprime, mod_inverse, mod_n
from .primality import is_probably_prime
from .party import Party, PartySetupResult, Signature, create_party
from .transcript import Transcript, load_params, parse_params, run_session


__version__ = "1.0.0"
__all__ = [
    "Party",
    "PartySetupResult",
    "Signature",
    "create_party",
    "extended_gcd",
    "is_coprime",
    "mod_inverse",
    "mod_n",
    "is_probably_prime",
    "ProtocolParams",
    "DEMO_PARAMS",
    "MILLER_RABIN_ROUNDS",
    "Transcript",
    "load_params",
    "parse_params",
    "run_session",
    "SecureChannelError",
    "ParameterError",
    "NotInvertibleError",
    "InputFormatError",
]
