"""Detection of images whose alpha channel is not constant.

Each scan takes the very first element of the buffer as the reference and
reports whether any alpha value in the complete rows of the image differs
from it. Trailing data that does not make up a whole row is not scanned.
"""

from __future__ import annotations

import struct
from collections.abc import Callable, Sequence
from typing import Optional

__all__ = [
    "has_non_constant_alpha_rgba8",
    "has_non_constant_alpha_la8",
    "has_non_constant_alpha_rgba16",
    "has_non_constant_alpha_la16",
    "has_non_constant_alpha_rgba_f32",
    "has_non_constant_alpha_luma_alpha_f32",
]

_F32 = struct.Struct("<f")
_U32 = struct.Struct("<I")


def _f32_bits(value: float) -> int:
    return _U32.unpack(_F32.pack(value))[0]


def _has_non_constant_alpha(
    store: Sequence,
    width: int,
    alpha_index: int,
    channels: int,
    key: Optional[Callable[[object], int]] = None,
) -> bool:
    if len(store) == 0:
        return False
    if width <= 0:
        raise ValueError(f"width must be positive, got {width}")
    row_len = width * channels
    n = len(store) - len(store) % row_len
    alphas = store[alpha_index:n:channels]
    if key is None:
        first = store[0]
        return any(alpha != first for alpha in alphas)
    first = key(store[0])
    return any(key(alpha) != first for alpha in alphas)


def has_non_constant_alpha_rgba8(store: Sequence[int], width: int) -> bool:
    """Return True if an 8-bit RGBA image has a varying alpha channel."""
    return _has_non_constant_alpha(store, width, 3, 4)


def has_non_constant_alpha_la8(store: Sequence[int], width: int) -> bool:
    """Return True if an 8-bit luma+alpha image has a varying alpha channel."""
    return _has_non_constant_alpha(store, width, 1, 2)


def has_non_constant_alpha_rgba16(store: Sequence[int], width: int) -> bool:
    """Return True if a 16-bit RGBA image has a varying alpha channel."""
    return _has_non_constant_alpha(store, width, 3, 4)


def has_non_constant_alpha_la16(store: Sequence[int], width: int) -> bool:
    """Return True if a 16-bit luma+alpha image has a varying alpha channel."""
    return _has_non_constant_alpha(store, width, 1, 2)


def has_non_constant_alpha_rgba_f32(store: Sequence[float], width: int) -> bool:
    """Return True if a float RGBA image has a varying alpha channel.

    Values are compared by their single precision bit patterns.
    """
    return _has_non_constant_alpha(store, width, 3, 4, _f32_bits)


def has_non_constant_alpha_luma_alpha_f32(store: Sequence[float], width: int) -> bool:
    """Return True if a float luma+alpha image has a varying alpha channel.

    Values are compared by their single precision bit patterns.
    """
    return _has_non_constant_alpha(store, width, 1, 2, _f32_bits)