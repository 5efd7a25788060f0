"""Generation of one-dimensional resampling weights."""

from __future__ import annotations

import math
from collections.abc import Callable
from dataclasses import dataclass

from pixscale.filter_weights import FilterBounds, FilterWeights

__all__ = ["ResamplingWindow", "ResamplingFilter", "generate_weights"]


@dataclass(frozen=True)
class ResamplingWindow:
    """A window applied on top of a resampling kernel."""

    window: Callable[[float], float]
    window_size: float
    blur: float
    taper: float


@dataclass(frozen=True)
class ResamplingFilter:
    """A resampling kernel and the parameters that shape its support."""

    kernel: Callable[[float], float]
    min_kernel_size: float
    is_resizable_kernel: bool = True
    is_area_filter: bool = False
    window: ResamplingWindow | None = None


def _windowed_weight(
    dx: float,
    window: ResamplingWindow,
    kernel: Callable[[float], float],
    blur_scale: float,
    filter_scale: float,
) -> float:
    x = abs(dx)
    if window.blur > 0:
        x *= blur_scale
    x = 0.0 if x <= window.taper else (x - window.taper) / (1.0 - window.taper)
    x_scaled = x * filter_scale
    win = window.window(x_scaled * window.window_size) if x < window.window_size else 0.0
    return win * kernel(x_scaled)


def _convolution_weights(
    resampling_filter: ResamplingFilter, in_size: int, out_size: int, scale: float
) -> FilterWeights:
    cutoff = max(scale, 1.0) if resampling_filter.is_resizable_kernel else 1.0
    base_size = max(0, math.floor(resampling_filter.min_kernel_size * 2.0 * cutoff + 0.5))
    kernel_size = base_size
    filter_radius = base_size / 2.0
    filter_scale = 1.0 / cutoff
    kernel = resampling_filter.kernel
    window = resampling_filter.window
    if window is None:
        blur_scale = 1.0
    else:
        blur_scale = 1.0 / window.blur if window.blur > 0 else 0.0

    weights = [0.0] * (kernel_size * out_size)
    bounds: list[FilterBounds] = []

    for i in range(out_size):
        center_x = min((i + 0.5) * scale, float(in_size))
        start = int(max(math.floor(center_x - filter_radius), 0.0))
        end = int(min(math.ceil(center_x + filter_radius), in_size, start + kernel_size))
        center = center_x - 0.5

        local: list[float] = []
        for k in range(start, end):
            dx = k - center
            if window is None:
                local.append(kernel(abs(dx) * filter_scale))
            else:
                local.append(_windowed_weight(dx, window, kernel, blur_scale, filter_scale))

        size = end - start
        bounds.append(FilterBounds(start, size))

        total = sum(local)
        if total != 0:
            recip = 1.0 / total
            position = i * kernel_size
            weights[position : position + size] = [w * recip for w in local]

    return FilterWeights(
        weights=weights,
        bounds=bounds,
        kernel_size=kernel_size,
        aligned_size=kernel_size,
        distinct_elements=out_size,
        coeffs_size=int(filter_radius),
    )


def _area_weights(in_size: int, out_size: int, scale: float) -> FilterWeights:
    # Up-scaling with an area filter follows the INTER_AREA approach.
    inv_scale = 1.0 / scale
    kernel_size = 2
    weights = [0.0] * (kernel_size * out_size)
    bounds: list[FilterBounds] = []

    for i in range(out_size):
        sx = math.floor(i * scale)
        fx = (i + 1) - (sx + 1) * inv_scale
        dx = abs(0.0 if fx <= 0 else fx - math.floor(fx))
        local = [1.0 - dx, dx]

        start = int(max(sx, 0))
        end = int(min(math.ceil(sx + kernel_size), in_size, start + kernel_size))
        size = end - start

        total = local[0] + (local[1] if size > 1 else 0.0)
        bounds.append(FilterBounds(start, size))

        position = i * kernel_size
        if total != 0:
            recip = 1.0 / total
            weights[position : position + size] = [w * recip for w in local[:size]]
        else:
            weights[position] = 1.0

    return FilterWeights(
        weights=weights,
        bounds=bounds,
        kernel_size=kernel_size,
        aligned_size=kernel_size,
        distinct_elements=out_size,
        coeffs_size=1,
    )


def generate_weights(
    resampling_filter: ResamplingFilter, in_size: int, out_size: int
) -> FilterWeights:
    """Compute normalized weights for resampling ``in_size`` samples to ``out_size``."""
    if in_size <= 0:
        raise ValueError(f"input size must be positive, got {in_size}")
    if out_size <= 0:
        raise ValueError(f"output size must be positive, got {out_size}")
    scale = in_size / out_size
    if resampling_filter.is_area_filter and scale < 1.0:
        return _area_weights(in_size, out_size, scale)
    return _convolution_weights(resampling_filter, in_size, out_size, scale)