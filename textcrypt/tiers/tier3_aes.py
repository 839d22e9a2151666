"""
Tier 3 — SYMMETRIC: AES-CBC with PKCS#7 padding
================================================
AES block cipher in Cipher-Block-Chaining mode.

Key size: 128, 192 or 256 bits (16 / 24 / 32 bytes)
IV:       128 bits (16 bytes), fixed per instance
Padding:  PKCS#7 to the 128-bit block size

Wire format: Base64(ciphertext)

Ciphertext is binary, so it is always Base64-framed, whatever modes
the CipherConfig holds:

    encrypt:  decode_input(text) -> AES-CBC -> Base64      (output_mode ignored)
    decrypt:  Base64 -> AES-CBC -> encode_output(text)     (input_mode ignored)

This is teaching-grade CBC: no authentication tag, and the IV is reused
for every message under the same instance. Do not use it to protect real data.

Dependencies: cryptography >= 41.0
"""

import base64
import binascii
import logging
import os

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from ..config import CipherConfig, DEFAULT_INPUT_MODE, DEFAULT_OUTPUT_MODE
from ..errors import ArgumentError, InternalCipherFault, KeyLengthError

logger = logging.getLogger(__name__)


class AESCipher:
    """AES-CBC encryption of text, Base64 on the wire."""

    VALID_KEY_LENGTHS = (128, 192, 256)   # bits
    DEFAULT_KEY_LENGTH = 128
    IV_SIZE = 16                          # bytes
    BLOCK_SIZE = 128                      # bits

    def __init__(self, key: bytes = None, iv: bytes = None,
                 input_mode=DEFAULT_INPUT_MODE,
                 output_mode=DEFAULT_OUTPUT_MODE):
        """
        Pass a 16/24/32-byte key and a 16-byte IV, or omit either to
        generate it (key defaults to AES-128).
        Store both: the same pair is needed to decrypt.
        """
        self.config = CipherConfig(input_mode, output_mode)
        if key is None:
            key = self.generate_key(self.DEFAULT_KEY_LENGTH)
        if iv is None:
            iv = self.generate_iv()
        self.set_key(key)
        self.set_iv(iv)
        logger.debug(f"AESCipher AES-{len(self._key) * 8}-CBC | {self.config}")

    @classmethod
    def from_text(cls, key_text: str, iv_text: str,
                  input_mode=DEFAULT_INPUT_MODE,
                  output_mode=DEFAULT_OUTPUT_MODE) -> "AESCipher":
        """Build from typed strings: their UTF-8 bytes are used verbatim."""
        if not isinstance(key_text, str) or not isinstance(iv_text, str):
            raise ArgumentError("Key and IV text must be strings.")
        return cls(key_text.encode("utf-8"), iv_text.encode("utf-8"),
                   input_mode, output_mode)

    # ── key material ─────────────────────────────────────────────────────────

    @classmethod
    def is_valid_key_length(cls, bits: int) -> bool:
        return bits in cls.VALID_KEY_LENGTHS

    @classmethod
    def generate_key(cls, bits: int = DEFAULT_KEY_LENGTH) -> bytes:
        if isinstance(bits, bool) or not cls.is_valid_key_length(bits):
            raise KeyLengthError(f"Invalid AES key length: {bits}")
        return os.urandom(bits // 8)

    @classmethod
    def generate_iv(cls) -> bytes:
        return os.urandom(cls.IV_SIZE)

    @property
    def key(self) -> bytes:
        return self._key

    @property
    def iv(self) -> bytes:
        return self._iv

    def set_key(self, key: bytes):
        if not isinstance(key, (bytes, bytearray)):
            raise ArgumentError(f"AES key must be bytes, got {type(key).__name__}.")
        if not self.is_valid_key_length(len(key) * 8):
            raise KeyLengthError(f"Invalid AES key length: {len(key) * 8}")
        self._key = bytes(key)

    def set_iv(self, iv: bytes):
        if not isinstance(iv, (bytes, bytearray)):
            raise ArgumentError(f"IV must be bytes, got {type(iv).__name__}.")
        if len(iv) != self.IV_SIZE:
            raise ArgumentError(
                f"Invalid IV length: {len(iv)}. IV must be {self.IV_SIZE} bytes long."
            )
        self._iv = bytes(iv)

    # ── encryption ───────────────────────────────────────────────────────────

    def _cipher(self) -> Cipher:
        return Cipher(algorithms.AES(self._key), modes.CBC(self._iv))

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt text read per input mode.
        Returns: Base64(ciphertext), regardless of output mode.
        """
        data = self.config.decode_input(plaintext).encode("utf-8")
        try:
            padder = padding.PKCS7(self.BLOCK_SIZE).padder()
            padded = padder.update(data) + padder.finalize()
            encryptor = self._cipher().encryptor()
            ct = encryptor.update(padded) + encryptor.finalize()
        except ValueError as exc:
            logger.error(f"AES encryption failed: {exc}")
            raise InternalCipherFault("Encryption failed") from exc
        logger.debug(f"Encrypt: pt={len(data)}B ct={len(ct)}B")
        return base64.b64encode(ct).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        """
        Decrypt Base64(ciphertext), regardless of input mode.
        Returns the recovered text rendered per output mode.
        """
        try:
            ct = base64.b64decode(ciphertext, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ArgumentError(f"Invalid Base64 ciphertext: {exc}") from exc

        try:
            decryptor = self._cipher().decryptor()
            padded = decryptor.update(ct) + decryptor.finalize()
            unpadder = padding.PKCS7(self.BLOCK_SIZE).unpadder()
            text = (unpadder.update(padded) + unpadder.finalize()).decode("utf-8")
        except ValueError as exc:
            # wrong key / IV, truncated ciphertext, bad padding, non-UTF-8 result
            logger.error(f"AES decryption failed: {exc}")
            raise InternalCipherFault("Decryption failed") from exc
        logger.debug(f"Decrypt: ct={len(ct)}B pt={len(text)} chars")
        return self.config.encode_output(text)

    def __eq__(self, other):
        if not isinstance(other, AESCipher):
            return NotImplemented
        return (self.config == other.config
                and self._key == other._key
                and self._iv == other._iv)

    def __str__(self):
        return (f"AES:\n{self.config}\n"
                f"Secret Key: {list(self._key)}\nIV: {list(self._iv)}")

    def __repr__(self):
        return (f"AESCipher(AES-{len(self._key) * 8}-CBC, "
                f"input_mode={self.config.input_mode.name}, "
                f"output_mode={self.config.output_mode.name})")
