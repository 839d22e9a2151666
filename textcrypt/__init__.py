"""
textcrypt — Teaching-grade text encryption toolkit
==================================================
Three interchangeable cipher tiers behind one encrypt / decrypt contract,
with a shared input / output mode layer (plaintext, Base64, hex).

Tiers:
    1  CLASSICAL    — Caesar rotation cipher
    2  LEGACY       — Vigenère running-key cipher
    3  SYMMETRIC    — AES-CBC + PKCS#7, Base64 on the wire

Modes:
    0  plaintext    1  base64    2  hex

Not a general-purpose cryptographic library: no authenticated encryption,
no key derivation, no streaming.
"""

__version__ = "1.0.0"

from .errors                  import ArgumentError, CipherError, InternalCipherFault, KeyLengthError
from .config                  import CipherConfig, Mode, TextCipher, INVALID_MODE, parse_mode, mode_to_string
from .codec                   import base64_encode, base64_decode, hex_encode, hex_decode
from .tiers.tier1_caesar      import CaesarCipher
from .tiers.tier2_vigenere    import VigenereCipher
from .tiers.tier3_aes         import AESCipher

__all__ = [
    "CaesarCipher",
    "VigenereCipher",
    "AESCipher",
    "CipherConfig",
    "Mode",
    "TextCipher",
    "INVALID_MODE",
    "parse_mode",
    "mode_to_string",
    "base64_encode",
    "base64_decode",
    "hex_encode",
    "hex_decode",
    "CipherError",
    "ArgumentError",
    "KeyLengthError",
    "InternalCipherFault",
]
