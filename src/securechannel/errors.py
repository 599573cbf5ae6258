"""
errors.py — SecureChannel Error Taxonomy

Standardized error codes and messages for parameter validation, modular
inversion and input handling.
"""

from typing import Optional

__all__ = [
    "SecureChannelError",
    "ParameterError",
    "NotInvertibleError",
    "InputFormatError",
]

class SecureChannelError(Exception):
    """Base class for all SecureChannel errors."""
    def __init__(
        self,
        code: str,
        message: str,
        context: Optional[str] = None,
    ):
        self.code = code
        self.message = message
        self.context = context

        full_msg = f"[{code}] {message}"
        if context:
            full_msg += f" Context: {context}"

        super().__init__(full_msg)

# Parameter Errors (E1xx)
class ParameterError(SecureChannelError):
    """A prime pair, key or operand violates a protocol precondition."""
    def __init__(self, detail: str, context: Optional[str] = None):
        self.detail = detail
        super().__init__("SECURECHANNEL_E100", detail, context)

# Arithmetic Errors (E2xx)
class NotInvertibleError(SecureChannelError):
    def __init__(self, value: int, modulus: int, gcd: Optional[int] = None):
        self.value = value
        self.modulus = modulus
        self.gcd = gcd
        context = f"gcd={gcd}" if gcd is not None else None
        super().__init__(
            "SECURECHANNEL_E200",
            f"{value} has no inverse modulo {modulus}",
            context,
        )

# Input Errors (E3xx)
class InputFormatError(SecureChannelError):
    def __init__(self, message: str, context: Optional[str] = None):
        super().__init__("SECURECHANNEL_E300", message, context)
