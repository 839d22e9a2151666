"""
Error types
===========
Every failure the toolkit raises derives from CipherError.

ArgumentError and KeyLengthError are user-input errors and also subclass
ValueError, so callers catching the builtin keep working.
InternalCipherFault wraps failures inside the AES engine and subclasses
RuntimeError.
"""

VALID_KEY_SIZES_HELP = (
    "\nHere are the valid key lengths:"
    "\n16 bytes = AES-128"
    "\n24 bytes = AES-192"
    "\n32 bytes = AES-256"
)


class CipherError(Exception):
    """Base class for all textcrypt errors."""


class ArgumentError(CipherError, ValueError):
    """Invalid mode, key, IV, or malformed Base64 / hex text."""


class KeyLengthError(CipherError, ValueError):
    """AES key is not 16, 24, or 32 bytes long."""

    def __init__(self, message: str = ""):
        super().__init__(message + VALID_KEY_SIZES_HELP)


class InternalCipherFault(CipherError, RuntimeError):
    """The block-cipher engine failed (bad padding, corrupt ciphertext, ...)."""
