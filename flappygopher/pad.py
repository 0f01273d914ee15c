"""Controller button bits and decoding of the pad's button word."""

from __future__ import annotations

import enum
from dataclasses import dataclass, fields

PORT_0 = 0x00
SLOT_0 = 0x00

PAD_STATE_DISCONN = 0x00
PAD_STATE_FINDPAD = 0x01
PAD_STATE_FINDCTP1 = 0x02
PAD_STATE_EXECCMD = 0x05
PAD_STATE_STABLE = 0x06
PAD_STATE_ERROR = 0x07

_ALL_RELEASED = 0xFFFF


class Button(enum.IntFlag):
    """Bits of the pad's button word; a cleared bit means pressed."""

    SELECT = 0x0001
    L3 = 0x0002
    R3 = 0x0004
    START = 0x0008
    UP = 0x0010
    RIGHT = 0x0020
    DOWN = 0x0040
    LEFT = 0x0080
    L2 = 0x0100
    R2 = 0x0200
    L1 = 0x0400
    R1 = 0x0800
    TRIANGLE = 0x1000
    CIRCLE = 0x2000
    CROSS = 0x4000
    SQUARE = 0x8000


@dataclass(frozen=True)
class PadState:
    """Which buttons are held down in one reading of the pad."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    l1: bool = False
    l2: bool = False
    r1: bool = False
    r2: bool = False
    triangle: bool = False
    circle: bool = False
    cross: bool = False
    square: bool = False
    select: bool = False
    start: bool = False


_FIELD_BUTTONS = {f.name: Button[f.name.upper()] for f in fields(PadState)}


def decode_buttons(btns: int) -> PadState:
    """Turn a raw active-low button word into a PadState."""
    if not isinstance(btns, int) or isinstance(btns, bool):
        raise TypeError(f"button word must be an int, got {type(btns).__name__}")
    if not 0 <= btns <= _ALL_RELEASED:
        raise ValueError(f"button word must fit in 16 bits, got {btns}")
    return PadState(**{name: not btns & bit for name, bit in _FIELD_BUTTONS.items()})


def encode_buttons(state: PadState) -> int:
    """Build the active-low button word that decodes to the given state."""
    word = _ALL_RELEASED
    for name, bit in _FIELD_BUTTONS.items():
        if getattr(state, name):
            word &= ~bit
    return word