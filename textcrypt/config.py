"""
Input / Output Mode Configuration
=================================
Every cipher tier reads its input and renders its output in one of three
modes:

    0  PLAINTEXT  text is used as-is
    1  BASE64     text is standard, padded Base64 of UTF-8 bytes
    2  HEX        text is lowercase hex of UTF-8 bytes

A CipherConfig holds the (input_mode, output_mode) pair and is composed
into each cipher. Mode values are validated at the boundary. An invalid
value is rejected, never coerced.
"""

import enum
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from . import codec
from .errors import ArgumentError

INVALID_MODE = -1

INVALID_MODES_MESSAGE = (
    "Invalid input or output mode selected! Please make sure you select "
    "a valid mode (0 = plaintext, 1 = base64, 2 = hex)"
)


class Mode(enum.IntEnum):
    PLAINTEXT = 0
    BASE64 = 1
    HEX = 2


DEFAULT_INPUT_MODE = Mode.PLAINTEXT
DEFAULT_OUTPUT_MODE = Mode.PLAINTEXT

_VALID_MODES = frozenset(m.value for m in Mode)


def is_valid_mode(mode) -> bool:
    # bool is an int subclass; True must not pass for BASE64
    if isinstance(mode, bool) or not isinstance(mode, int):
        return False
    return mode in _VALID_MODES


def parse_mode(name: str) -> int:
    """Map "plaintext" / "base64" / "hex" (any case) to 0 / 1 / 2, else -1."""
    if not isinstance(name, str):
        return INVALID_MODE
    try:
        return int(Mode[name.strip().upper()])
    except KeyError:
        return INVALID_MODE


def mode_to_string(mode) -> str:
    if not is_valid_mode(mode):
        return "Invalid Mode"
    return Mode(mode).name.lower()


@runtime_checkable
class TextCipher(Protocol):
    """Anything that turns text into ciphertext and back."""

    def encrypt(self, plaintext: str) -> str: ...

    def decrypt(self, ciphertext: str) -> str: ...


@dataclass(eq=True)
class CipherConfig:
    """Validated (input_mode, output_mode) pair shared by every cipher."""

    input_mode: Mode = DEFAULT_INPUT_MODE
    output_mode: Mode = DEFAULT_OUTPUT_MODE

    def __post_init__(self):
        if not (is_valid_mode(self.input_mode) and is_valid_mode(self.output_mode)):
            raise ArgumentError(INVALID_MODES_MESSAGE)
        self.input_mode = Mode(self.input_mode)
        self.output_mode = Mode(self.output_mode)

    def set_input_mode(self, mode) -> bool:
        if not is_valid_mode(mode):
            return False
        self.input_mode = Mode(mode)
        return True

    def set_output_mode(self, mode) -> bool:
        if not is_valid_mode(mode):
            return False
        self.output_mode = Mode(mode)
        return True

    def set_all(self, input_mode, output_mode) -> bool:
        """Set both modes, or neither if either one is invalid."""
        if not (is_valid_mode(input_mode) and is_valid_mode(output_mode)):
            return False
        self.input_mode = Mode(input_mode)
        self.output_mode = Mode(output_mode)
        return True

    def decode_input(self, text: str) -> str:
        return codec.decode(text, self.input_mode)

    def encode_output(self, text: str) -> str:
        return codec.encode(text, self.output_mode)

    def __str__(self):
        return (f"Mode: {mode_to_string(self.input_mode)} -> "
                f"{mode_to_string(self.output_mode)}")
