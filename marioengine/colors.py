"""Packing and unpacking of 8, 16, 24 and 32 bit colour values."""

from __future__ import annotations

__all__ = [
    "make8",
    "make16",
    "make24",
    "make32",
    "split_rgba",
    "split_rgb24",
    "split_rgb16",
    "split_rgb8",
    "invert_pixel",
    "tint_pixel",
]

BIT_MASK_2 = 0x03
BIT_MASK_3 = 0x07
BIT_MASK_5 = 0x1F
BIT_MASK_6 = 0x3F
BIT_MASK_8 = 0xFF

# (shift, mask) per component for each packed layout
_RGBA = ((24, BIT_MASK_8), (16, BIT_MASK_8), (8, BIT_MASK_8), (0, BIT_MASK_8))
_RGB24 = ((16, BIT_MASK_8), (8, BIT_MASK_8), (0, BIT_MASK_8))
_RGB16 = ((11, BIT_MASK_5), (5, BIT_MASK_6), (0, BIT_MASK_5))
_RGB8 = ((5, BIT_MASK_3), (3, BIT_MASK_2), (0, BIT_MASK_3))


def _pack(layout: tuple[tuple[int, int], ...], values: tuple[int, ...]) -> int:
    return sum((value & mask) << shift for (shift, mask), value in zip(layout, values))


def _unpack(layout: tuple[tuple[int, int], ...], color: int) -> tuple[int, ...]:
    return tuple((color >> shift) & mask for shift, mask in layout)


def make8(r: int, g: int, b: int) -> int:
    """Pack a 3-3-2 colour (red 3 bits, green 2 bits, blue 3 bits)."""
    return _pack(_RGB8, (r, g, b))


def make16(r: int, g: int, b: int) -> int:
    """Pack a 5-6-5 colour."""
    return _pack(_RGB16, (r, g, b))


def make24(r: int, g: int, b: int) -> int:
    """Pack an 8-8-8 colour with red in the high byte."""
    return _pack(_RGB24, (r, g, b))


def make32(r: int, g: int, b: int, alpha: int = 0) -> int:
    """Pack an RGBA colour with red in the highest byte and alpha in the lowest."""
    return _pack(_RGBA, (r, g, b, alpha))


def split_rgba(color: int) -> tuple[int, int, int, int]:
    """Unpack a colour made by make32 into (r, g, b, alpha)."""
    r, g, b, a = _unpack(_RGBA, color)
    return r, g, b, a


def split_rgb24(color: int) -> tuple[int, int, int]:
    """Unpack a colour made by make24 into (r, g, b)."""
    r, g, b = _unpack(_RGB24, color)
    return r, g, b


def split_rgb16(color: int) -> tuple[int, int, int]:
    """Unpack a colour made by make16 into (r, g, b)."""
    r, g, b = _unpack(_RGB16, color)
    return r, g, b


def split_rgb8(color: int) -> tuple[int, int, int]:
    """Unpack a colour made by make8 into (r, g, b)."""
    r, g, b = _unpack(_RGB8, color)
    return r, g, b


def invert_pixel(rgba: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    """Invert the colour channels of a pixel, keeping its alpha."""
    r, g, b, a = rgba
    return 255 - r, 255 - g, 255 - b, a


def _tint_channel(value: int, f: float) -> int:
    return max(0, min(BIT_MASK_8, int(value * f)))


def tint_pixel(rgba: tuple[int, int, int, int], f: float) -> tuple[int, int, int, int]:
    """Scale the colour channels of a pixel by f, keeping its alpha.

    Results are truncated toward zero and clamped to the byte range.
    """
    r, g, b, a = rgba
    return _tint_channel(r, f), _tint_channel(g, f), _tint_channel(b, f), a