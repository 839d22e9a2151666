"""
Tier 2 — LEGACY: Vigenère Polyalphabetic Cipher
================================================
Running-key cipher: the keyword is repeated across the text and each
letter is shifted by the matching key letter (a/A = 0 ... z/Z = 25).

Only letters consume key positions. For key "key":

    text:  H  e  l  l  o  ,     W  o  r  l  d
    key:   k  e  y  k  e  -  -  y  k  e  y  k

Positions marked "-" carry no shift and pass through unchanged. The
case of the text letter decides the output case. The case of the key
letter does not matter.

The effective key is rebuilt on every call as a local list. The stored
keyword never changes during encrypt / decrypt.

Historical note: Blaise de Vigenère, 1553. Called "le chiffre
indéchiffrable" for 300 years.
"""

import logging
import re
from typing import List, Optional

from ..config import CipherConfig, DEFAULT_INPUT_MODE, DEFAULT_OUTPUT_MODE
from ..errors import ArgumentError
from .tier1_caesar import decrypt_char, encrypt_char

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"[a-zA-Z]+")


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def rotation_for(key_char: str) -> int:
    if key_char.islower():
        return ord(key_char) - ord("a")
    return ord(key_char) - ord("A")


class VigenereCipher:
    """Vigenère cipher with configurable input / output modes."""

    DEFAULT_KEY = "password"

    def __init__(self, key: str = DEFAULT_KEY,
                 input_mode=DEFAULT_INPUT_MODE,
                 output_mode=DEFAULT_OUTPUT_MODE):
        self.config = CipherConfig(input_mode, output_mode)
        self.key = key
        logger.debug(f"VigenereCipher key_len={len(key)} | {self.config}")

    @property
    def key(self) -> str:
        return self._key

    @key.setter
    def key(self, value: str):
        if not isinstance(value, str) or not _KEY_PATTERN.fullmatch(value):
            raise ArgumentError("Key must only contain alphabetical characters!")
        self._key = value

    def _build_keystream(self, text: str) -> List[Optional[str]]:
        """
        One entry per character of `text`: the key letter to shift by,
        or None for a non-letter that passes through.
        """
        stream = []
        idx = 0
        for ch in text:
            if _is_letter(ch):
                stream.append(self._key[idx % len(self._key)])
                idx += 1
            else:
                stream.append(None)
        return stream

    def _apply(self, text: str, shift) -> str:
        keystream = self._build_keystream(text)
        result = []
        for ch, key_char in zip(text, keystream):
            if key_char is None:
                result.append(ch)
            else:
                result.append(shift(ch, rotation_for(key_char)))
        return "".join(result)

    def encrypt(self, plaintext: str) -> str:
        """Encrypt plaintext string. Non-alpha characters pass through."""
        text = self.config.decode_input(plaintext)
        return self.config.encode_output(self._apply(text, encrypt_char))

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt ciphertext string."""
        text = self.config.decode_input(ciphertext)
        return self.config.encode_output(self._apply(text, decrypt_char))

    def __eq__(self, other):
        if not isinstance(other, VigenereCipher):
            return NotImplemented
        return self.config == other.config and self._key == other._key

    def __str__(self):
        return f"Vigenere Cipher:\n{self.config}\nKey: {self._key}"

    def __repr__(self):
        return (f"VigenereCipher(key={self._key!r}, "
                f"input_mode={self.config.input_mode.name}, "
                f"output_mode={self.config.output_mode.name})")
