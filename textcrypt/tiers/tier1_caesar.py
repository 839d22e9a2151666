"""
Tier 1 — CLASSICAL: Caesar Rotation Cipher
===========================================
Fixed-shift substitution over the Latin alphabet.

Each ASCII letter is moved `rotations` places along A-Z (or a-z), wrapping
at the end. Digits, punctuation, whitespace and non-ASCII characters pass
through untouched. Any signed rotation is accepted and normalized into
[0, 26) at use time, so -1, 25 and 51 all behave the same.

Decryption is encryption with the complementary rotation (26 - r) mod 26.
The complement is computed per call and never stored on the instance.

Role in the stack: Historical baseline. Also the single-character engine
reused by Tier 2 (Vigenère).
"""

import logging

from ..config import CipherConfig, DEFAULT_INPUT_MODE, DEFAULT_OUTPUT_MODE
from ..errors import ArgumentError

logger = logging.getLogger(__name__)

ALPHABET_SIZE = 26


def normalize_rotation(rotations: int) -> int:
    return rotations % ALPHABET_SIZE


def encrypt_char(ch: str, rotation: int) -> str:
    """Shift one character forward by `rotation`; non-letters are returned as-is."""
    if "A" <= ch <= "Z":
        base = ord("A")
    elif "a" <= ch <= "z":
        base = ord("a")
    else:
        return ch
    return chr((ord(ch) - base + rotation) % ALPHABET_SIZE + base)


def decrypt_char(ch: str, rotation: int) -> str:
    return encrypt_char(ch, (ALPHABET_SIZE - normalize_rotation(rotation)) % ALPHABET_SIZE)


def _rotate(text: str, rotation: int) -> str:
    rotation = normalize_rotation(rotation)
    return "".join(encrypt_char(ch, rotation) for ch in text)


class CaesarCipher:
    """Caesar cipher with configurable input / output modes."""

    DEFAULT_ROTATIONS = 13

    def __init__(self, rotations: int = DEFAULT_ROTATIONS,
                 input_mode=DEFAULT_INPUT_MODE,
                 output_mode=DEFAULT_OUTPUT_MODE):
        self.config = CipherConfig(input_mode, output_mode)
        self.rotations = rotations
        logger.debug(f"CaesarCipher rotations={rotations} | {self.config}")

    @property
    def rotations(self) -> int:
        return self._rotations

    @rotations.setter
    def rotations(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ArgumentError(f"Rotations must be an integer, got {value!r}.")
        self._rotations = value

    def set_all(self, input_mode, output_mode, rotations: int) -> bool:
        """
        Replace modes and rotation together.
        Returns False, leaving everything unchanged, if any value is invalid.
        """
        if isinstance(rotations, bool) or not isinstance(rotations, int):
            return False
        if not self.config.set_all(input_mode, output_mode):
            return False
        self._rotations = rotations
        return True

    def encrypt(self, plaintext: str) -> str:
        """Decode per input mode, rotate letters, encode per output mode."""
        text = self.config.decode_input(plaintext)
        return self.config.encode_output(_rotate(text, self._rotations))

    def decrypt(self, ciphertext: str) -> str:
        text = self.config.decode_input(ciphertext)
        complement = ALPHABET_SIZE - normalize_rotation(self._rotations)
        return self.config.encode_output(_rotate(text, complement))

    def __eq__(self, other):
        if not isinstance(other, CaesarCipher):
            return NotImplemented
        return self.config == other.config and self._rotations == other._rotations

    def __str__(self):
        return f"Caesar Cipher:\n{self.config}\nShift: {self._rotations}"

    def __repr__(self):
        return (f"CaesarCipher(rotations={self._rotations}, "
                f"input_mode={self.config.input_mode.name}, "
                f"output_mode={self.config.output_mode.name})")
