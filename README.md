# pixscale

Pure Python building blocks for image scaling. Pixel data is held in flat
sequences of channel values. These can be interleaved RGBA or luma with
alpha (LA). Channel values can be 8-bit, integers of 1 to 16 bits, or
floating point.

## Modules

### `pixscale.alpha`: associating alpha

Image scaling should work on premultiplied ("associated") alpha. The
functions in this module convert between straight alpha and associated
alpha.

- **8-bit, in place:**
  - `premultiply_rgba8(data)`
  - `unpremultiply_rgba8(data)`
  - `premultiply_la8(data)`
  - `unpremultiply_la8(data)`
- **8-bit, copying:**
  - `premultiplied_rgba8(source)`
  - `premultiplied_la8(source)`
- **1 to 16 bits, in place:**
  - `premultiply_rgba16(data, bit_depth)`
  - `unpremultiply_rgba16(data, bit_depth)`
  - `premultiply_la16(data, bit_depth)`
  - `unpremultiply_la16(data, bit_depth)`
- **1 to 16 bits, copying:**
  - `premultiplied_rgba16(source, bit_depth)`
  - `premultiplied_la16(source, bit_depth)`
- **Floating point, in place:**
  - `premultiply_rgba_f32(data)`
  - `unpremultiply_rgba_f32(data)`
  - `premultiply_luma_alpha_f32(data)`
  - `unpremultiply_luma_alpha_f32(data)`
- **Floating point, copying:**
  - `premultiplied_rgba_f32(source)`
  - `premultiplied_luma_alpha_f32(source)`

How these functions behave:

- The in-place functions mutate a `list`, `bytearray` or `array.array`.
- The copying functions leave their source alone and return a new `list`.
- Elements that do not form a whole pixel at the end of a buffer are
  ignored. The in-place functions leave them unchanged. The copying
  functions write them as zero.
- A `bit_depth` outside 1..16 raises `ValueError`.
- Pixels whose alpha is zero keep their colour values unchanged in the
  16-bit and floating-point un-premultiply functions. The 8-bit
  un-premultiply functions set them to zero.

### `pixscale.alpha_check`: detecting a varying alpha channel

These functions report whether any alpha value in the image differs from the
first element of the buffer. Use them to skip premultiplication for images
whose alpha is constant.

- `has_non_constant_alpha_rgba8(store, width)`
- `has_non_constant_alpha_la8(store, width)`
- `has_non_constant_alpha_rgba16(store, width)`
- `has_non_constant_alpha_la16(store, width)`
- `has_non_constant_alpha_rgba_f32(store, width)`
- `has_non_constant_alpha_luma_alpha_f32(store, width)`

How these functions behave:

- Only complete rows of `width` pixels are scanned.
- An empty buffer gives `False`.
- A non-positive `width` on a non-empty buffer raises `ValueError`.
- The float variants compare single-precision bit patterns.

### `pixscale.filter_weights`: weight tables

- `FilterBounds(start, size)` gives the first source index and the number of
  taps for one output sample.
- `FilterWeights` holds these fields:
  - `weights`, with one row of `aligned_size` per output sample
  - `bounds`
  - `kernel_size`
  - `aligned_size`
  - `distinct_elements`
  - `coeffs_size`
- `FilterWeights.numerical_approximation_i16(alignment=0, precision=PRECISION)`
  returns a new `FilterWeights` with integer coefficients:
  - Each weight is scaled by `2**precision`.
  - It is then rounded half away from zero and clamped to the signed 16-bit
    range.
  - A non-zero `alignment` pads each row with zeros up to a multiple of
    `alignment`.
- The module constants are `PRECISION` (15) and `ROUNDING_CONST`
  (`1 << 14`).

### `pixscale.compute_weights`: generating weights

- `ResamplingFilter` describes a kernel. Its fields are:
  - `kernel`
  - `min_kernel_size`
  - `is_resizable_kernel`
  - `is_area_filter`
  - an optional `window`
- `ResamplingWindow` describes the window. Its fields are `window`,
  `window_size`, `blur` and `taper`.
- `generate_weights(resampling_filter, in_size, out_size)` computes the
  weights for resizing one axis from `in_size` samples to `out_size`
  samples:
  - When downscaling, resizable kernels are widened by the scale factor.
  - Each row is normalised to sum to one, unless its raw sum is zero.
  - Area filters that upscale get two-tap area weights.
  - A non-positive size raises `ValueError`.

### `pixscale.color_group`: per-pixel accumulators

`ColorGroup(components, r, g, b, a)` holds up to four channel values. Only
the first `components` of them (1..4) take part in arithmetic. The rest are
carried through unchanged.

- `ColorGroup.dup(components, value)` fills every channel with `value`.
- `ColorGroup.load(store, components, offset=0)` reads consecutive values
  from `store`. It raises `IndexError` if there are too few.
- `to_list()` returns the active channels.
- `mul_add(other, weight)` returns `self + other * weight`.
- Supported operators are `+`, `-`, `*`, `>>`, `+=`, `-=` and `>>=`.
  - They work with scalars or with another group that has the same number of
    components. Mismatched groups raise `ValueError`.
  - When you multiply two four-component groups, the alpha channel is scaled
    by the other group's blue value.

## Example

```python
from pixscale.alpha import premultiply_rgba8, unpremultiply_rgba8
from pixscale.alpha_check import has_non_constant_alpha_rgba8
from pixscale.compute_weights import ResamplingFilter, generate_weights

pixels = [200, 100, 50, 128, 10, 20, 30, 255]  # two RGBA pixels
if has_non_constant_alpha_rgba8(pixels, width=2):
    premultiply_rgba8(pixels)
    # ... scale ...
    unpremultiply_rgba8(pixels)

triangle = ResamplingFilter(kernel=lambda x: max(0.0, 1.0 - x), min_kernel_size=1.0)
weights = generate_weights(triangle, in_size=8, out_size=4)
fixed = weights.numerical_approximation_i16()
```

## What it does not do

This package does not resize whole images. It has no function that takes an
image buffer and produces a scaled one, and no row or column convolution
passes. It does not read or write image files, and it offers no
command-line tool. It supplies the alpha handling, alpha scanning, weight
generation and accumulator pieces that such a resizer is built from.

## Installing and testing

```
pip install .
pip install ".[test]"
pytest
```