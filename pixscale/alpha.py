"""Alpha premultiplication and un-premultiplication for interleaved pixel data.

Scaling must be done on images whose alpha is *associated* (premultiplied).
These helpers convert interleaved RGBA and luma+alpha buffers between
straight and associated alpha.

In-place functions accept any mutable sequence of numbers (``list``,
``bytearray`` or ``array.array``) and mutate it. Functions named
``premultiplied_*`` leave the source untouched and return a new list.
Elements that do not make up a whole pixel at the end of a buffer are
ignored: the in-place functions leave them as they are, and the copying
functions set them to zero.
"""

from __future__ import annotations

import struct
from array import array
from collections.abc import Callable, Iterable, MutableSequence, Sequence

__all__ = [
    "premultiply_rgba8",
    "premultiplied_rgba8",
    "unpremultiply_rgba8",
    "premultiply_la8",
    "premultiplied_la8",
    "unpremultiply_la8",
    "premultiply_rgba16",
    "premultiplied_rgba16",
    "premultiply_la16",
    "premultiplied_la16",
    "unpremultiply_la16",
    "unpremultiply_rgba16",
    "premultiply_rgba_f32",
    "premultiply_luma_alpha_f32",
    "premultiplied_luma_alpha_f32",
    "premultiplied_rgba_f32",
    "unpremultiply_rgba_f32",
    "unpremultiply_luma_alpha_f32",
]

_F32 = struct.Struct("<f")


def _f32(value: float) -> float:
    """Round a float to single precision."""
    return _F32.unpack(_F32.pack(value))[0]


def _div_by_255(v: int) -> int:
    return min((((v + 0x80) >> 8) + v + 0x80) >> 8, 255)


def _div_by_2pn_m1(v: int, n: int) -> int:
    """Compute ``round(v / (2**n - 1))`` truncated to 16 bits."""
    v += 1 << (n - 1)
    return (((v >> n) + v) >> n) & 0xFFFF


def _make_unpremultiplication_table() -> list[int]:
    # Rows overlap by one entry; later rows overwrite the last entry of
    # the previous one, exactly as the lookup indexing expects.
    table = [0] * 65536
    for alpha in range(256):
        base = alpha * 255
        for pixel in range(256):
            if alpha == 0:
                table[base + pixel] = 0
            else:
                table[base + pixel] = min((pixel * 255 + alpha // 2) // alpha, 255)
    return table


_UNPREMULTIPLICATION_TABLE = _make_unpremultiplication_table()


def _whole_len(data: Sequence, channels: int) -> int:
    return len(data) - len(data) % channels


def _assign(data: MutableSequence, start: int, stop: int, step: int, values: Iterable) -> None:
    """Assign ``values`` to an extended slice, matching the container type."""
    if isinstance(data, array):
        data[start:stop:step] = array(data.typecode, values)
    else:
        data[start:stop:step] = list(values)


def _map_colors(
    data: MutableSequence,
    channels: int,
    color_count: int,
    transform: Callable[[object, object], object],
) -> None:
    """Replace each color channel with ``transform(value, alpha)``."""
    n = _whole_len(data, channels)
    alphas = data[color_count:n:channels]
    for c in range(color_count):
        _assign(
            data,
            c,
            n,
            channels,
            (transform(v, a) for v, a in zip(data[c:n:channels], alphas)),
        )


def _copy_whole_pixels(source: Sequence, channels: int, zero) -> list:
    n = _whole_len(source, channels)
    return list(source[:n]) + [zero] * (len(source) - n)


def _check_bit_depth(bit_depth: int) -> None:
    if not 0 < bit_depth <= 16:
        raise ValueError(f"bit depth must be in 1..16, got {bit_depth}")


# ---------------------------------------------------------------- 8 bit


def _premultiply8(data: MutableSequence[int], channels: int) -> None:
    n = _whole_len(data, channels)
    alpha_index = channels - 1
    alphas = data[alpha_index:n:channels]
    _map_colors(data, channels, alpha_index, lambda v, a: _div_by_255(v * a))
    _assign(data, alpha_index, n, channels, (_div_by_255(255 * a) for a in alphas))


def _unpremultiply8(data: MutableSequence[int], channels: int) -> None:
    table = _UNPREMULTIPLICATION_TABLE
    _map_colors(data, channels, channels - 1, lambda v, a: table[a * 255 + v])


def premultiply_rgba8(data: MutableSequence[int]) -> None:
    """Associate alpha of 8-bit RGBA data in place."""
    _premultiply8(data, 4)


def premultiplied_rgba8(source: Sequence[int]) -> list[int]:
    """Return a copy of 8-bit RGBA data with associated alpha."""
    target = _copy_whole_pixels(source, 4, 0)
    _premultiply8(target, 4)
    return target


def unpremultiply_rgba8(data: MutableSequence[int]) -> None:
    """Un-associate alpha of 8-bit RGBA data in place."""
    _unpremultiply8(data, 4)


def premultiply_la8(data: MutableSequence[int]) -> None:
    """Associate alpha of 8-bit luma+alpha data in place."""
    _premultiply8(data, 2)


def premultiplied_la8(source: Sequence[int]) -> list[int]:
    """Return a copy of 8-bit luma+alpha data with associated alpha."""
    target = _copy_whole_pixels(source, 2, 0)
    _premultiply8(target, 2)
    return target


def unpremultiply_la8(data: MutableSequence[int]) -> None:
    """Un-associate alpha of 8-bit luma+alpha data in place."""
    _unpremultiply8(data, 2)


# ---------------------------------------------------------- up to 16 bit


def _premultiply16(data: MutableSequence[int], channels: int, bit_depth: int) -> None:
    _check_bit_depth(bit_depth)
    max_colors = (1 << bit_depth) - 1
    n = _whole_len(data, channels)
    alpha_index = channels - 1
    alphas = data[alpha_index:n:channels]
    _map_colors(
        data, channels, alpha_index, lambda v, a: _div_by_2pn_m1(v * a, bit_depth)
    )
    _assign(
        data,
        alpha_index,
        n,
        channels,
        (_div_by_2pn_m1(max_colors * a, bit_depth) for a in alphas),
    )


def _unpremultiply16(data: MutableSequence[int], channels: int, bit_depth: int) -> None:
    _check_bit_depth(bit_depth)
    max_colors = float((1 << bit_depth) - 1)

    def restore(v: int, a: int) -> int:
        if a == 0:
            return v
        recip = _f32(max_colors / a)
        return max(0, min(int(_f32(v * recip)), 0xFFFF))

    _map_colors(data, channels, channels - 1, restore)


def premultiply_rgba16(data: MutableSequence[int], bit_depth: int) -> None:
    """Associate alpha of RGBA data of the given bit depth (1..16) in place."""
    _premultiply16(data, 4, bit_depth)


def premultiplied_rgba16(source: Sequence[int], bit_depth: int) -> list[int]:
    """Return a copy of RGBA data of the given bit depth with associated alpha."""
    _check_bit_depth(bit_depth)
    target = _copy_whole_pixels(source, 4, 0)
    _premultiply16(target, 4, bit_depth)
    return target


def premultiply_la16(data: MutableSequence[int], bit_depth: int) -> None:
    """Associate alpha of luma+alpha data of the given bit depth in place."""
    _premultiply16(data, 2, bit_depth)


def premultiplied_la16(source: Sequence[int], bit_depth: int) -> list[int]:
    """Return a copy of luma+alpha data of the given bit depth with associated alpha."""
    _check_bit_depth(bit_depth)
    target = _copy_whole_pixels(source, 2, 0)
    _premultiply16(target, 2, bit_depth)
    return target


def unpremultiply_la16(data: MutableSequence[int], bit_depth: int) -> None:
    """Un-associate alpha of luma+alpha data of the given bit depth in place."""
    _unpremultiply16(data, 2, bit_depth)


def unpremultiply_rgba16(data: MutableSequence[int], bit_depth: int) -> None:
    """Un-associate alpha of RGBA data of the given bit depth in place."""
    _unpremultiply16(data, 4, bit_depth)


# --------------------------------------------------------- floating point


def _premultiply_float(data: MutableSequence[float], channels: int) -> None:
    _map_colors(data, channels, channels - 1, lambda v, a: v * a)


def _unpremultiply_float(data: MutableSequence[float], channels: int) -> None:
    _map_colors(
        data, channels, channels - 1, lambda v, a: v * (1.0 / a) if a != 0 else v
    )


def premultiply_rgba_f32(data: MutableSequence[float]) -> None:
    """Associate alpha of floating point RGBA data in place."""
    _premultiply_float(data, 4)


def premultiply_luma_alpha_f32(data: MutableSequence[float]) -> None:
    """Associate alpha of floating point luma+alpha data in place."""
    _premultiply_float(data, 2)


def premultiplied_luma_alpha_f32(source: Sequence[float]) -> list[float]:
    """Return a copy of floating point luma+alpha data with associated alpha."""
    target = _copy_whole_pixels(source, 2, 0.0)
    _premultiply_float(target, 2)
    return target


def premultiplied_rgba_f32(source: Sequence[float]) -> list[float]:
    """Return a copy of floating point RGBA data with associated alpha."""
    target = _copy_whole_pixels(source, 4, 0.0)
    _premultiply_float(target, 4)
    return target


def unpremultiply_rgba_f32(data: MutableSequence[float]) -> None:
    """Un-associate alpha of floating point RGBA data in place."""
    _unpremultiply_float(data, 4)


def unpremultiply_luma_alpha_f32(data: MutableSequence[float]) -> None:
    """Un-associate alpha of floating point luma+alpha data in place."""
    _unpremultiply_float(data, 2)