"""
Text Codec: plaintext / Base64 / hex
====================================
Stateless conversions between raw text and its Base64 or hexadecimal
rendering. Every cipher tier uses these through CipherConfig.

Text is always handled as UTF-8 bytes:

    base64_encode("hi")   -> "aGk="
    hex_encode("hello")   -> "68656c6c6f"
    hex_encode("é")       -> "c3a9"      (two bytes, two groups)

Decoders are strict. Anything that is not well-formed raises
ArgumentError instead of being silently repaired.
"""

import base64
import binascii
import logging
import string

from .errors import ArgumentError

logger = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def _to_text(raw: bytes, what: str) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ArgumentError(f"Decoded {what} is not valid UTF-8 text.") from exc


def base64_encode(text: str) -> str:
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def base64_decode(encoded: str) -> str:
    """Decode standard, padded Base64. Raises ArgumentError on bad input."""
    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ArgumentError(f"Invalid Base64 input: {exc}") from exc
    return _to_text(raw, "Base64")


def hex_encode(text: str) -> str:
    return text.encode("utf-8").hex()


def hex_decode(encoded: str) -> str:
    """
    Decode two-digit hex groups back to text.

    Raises ArgumentError for odd-length input or any group that is not
    exactly two hexadecimal digits.
    """
    if len(encoded) % 2 != 0:
        raise ArgumentError("Hexadecimal string length must be even.")

    raw = bytearray()
    for i in range(0, len(encoded), 2):
        group = encoded[i:i + 2]
        # int() alone would accept "+f" or " f"
        if not all(c in _HEX_DIGITS for c in group):
            raise ArgumentError(f"Invalid hexadecimal character: {group}")
        raw.append(int(group, 16))
    return _to_text(bytes(raw), "hex")


_ENCODERS = {
    0: lambda text: text,
    1: base64_encode,
    2: hex_encode,
}

_DECODERS = {
    0: lambda text: text,
    1: base64_decode,
    2: hex_decode,
}


def encode(text: str, mode: int) -> str:
    """Render text for the given output mode (0 plaintext, 1 base64, 2 hex)."""
    try:
        encoder = _ENCODERS[mode]
    except (KeyError, TypeError):
        raise ArgumentError("Invalid mode selected!") from None
    return encoder(text)


def decode(text: str, mode: int) -> str:
    """Read text given in the input mode (0 plaintext, 1 base64, 2 hex)."""
    try:
        decoder = _DECODERS[mode]
    except (KeyError, TypeError):
        raise ArgumentError("Invalid mode selected!") from None
    logger.debug(f"decode: mode={mode} in={len(text)} chars")
    return decoder(text)
