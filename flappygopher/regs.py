"""Graphics Synthesizer register packing and the renderer's constants."""

from __future__ import annotations

GS_RENDER_QUEUE_PER_POOLSIZE = 1024 * 256
GS_RENDER_QUEUE_OS_POOLSIZE = 1024 * 1024
GS_PSM_CT32 = 0x00
GS_PSM_CT24 = 0x01
GS_PSMZ_16S = 0x0A
GS_FILTER_NEAREST = 0x00
GS_FILTER_LINEAR = 0x01
GSKIT_ALLOC_SYSBUFFER = 0x00
GSKIT_ALLOC_USERBUFFER = 0x01
GSKIT_FTYPE_FNT = 0x00
GSKIT_FTYPE_BMP_DAT = 0x01
GSKIT_FTYPE_PNG_DAT = 0x02
GS_BLEND_FRONT2BACK = 0x12
GS_BLEND_BACK2FRONT = 0x01

_BYTE_MAX = 0xFF
_HALF_MAX = 0xFFFF


def _check(name: str, value: int, limit: int) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= limit:
        raise ValueError(f"{name} must be between 0 and {limit}, got {value}")
    return value


def gs_setreg_rgbaq(r: int, g: int, b: int, a: int, q: int) -> int:
    """Pack a colour and Q value into a 64-bit RGBAQ register value."""
    for name, value in (("r", r), ("g", g), ("b", b), ("a", a), ("q", q)):
        _check(name, value, _BYTE_MAX)
    return r | (g << 8) | (b << 16) | (a << 24) | (q << 32)


def gs_setreg_alpha(a: int, b: int, c: int, d: int, fix: int) -> int:
    """Pack alpha blending selectors and the fixed alpha into a register value."""
    for name, value in (("a", a), ("b", b), ("c", c), ("d", d)):
        _check(name, value, _BYTE_MAX)
    _check("fix", fix, _HALF_MAX)
    return a | (b << 2) | (c << 4) | (d << 6) | (fix << 32)


def unpack_rgbaq(value: int) -> tuple[int, int, int, int, int]:
    """Split an RGBAQ register value back into its (r, g, b, a, q) bytes."""
    _check("value", value, (1 << 40) - 1)
    return tuple((value >> shift) & _BYTE_MAX for shift in (0, 8, 16, 24, 32))  # type: ignore[return-value]