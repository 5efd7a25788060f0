"""Filter weight tables and their fixed point approximation."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

__all__ = ["PRECISION", "ROUNDING_CONST", "FilterBounds", "FilterWeights"]

PRECISION = 15
ROUNDING_CONST = 1 << (PRECISION - 1)

_I16_MIN = -(1 << 15)
_I16_MAX = (1 << 15) - 1


def _to_i16(value: float) -> int:
    """Round half away from zero and saturate to the signed 16-bit range."""
    if math.isnan(value):
        return 0
    if math.isinf(value):
        return _I16_MAX if value > 0 else _I16_MIN
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    rounded = whole if value >= 0 else -whole
    return max(_I16_MIN, min(rounded, _I16_MAX))


@dataclass(frozen=True, order=True)
class FilterBounds:
    """The first source index and the number of taps of one output sample."""

    start: int
    size: int


@dataclass
class FilterWeights:
    """Convolution weights, one row of ``aligned_size`` per output sample."""

    weights: list
    bounds: list[FilterBounds] = field(default_factory=list)
    kernel_size: int = 0
    aligned_size: int = 0
    distinct_elements: int = 0
    coeffs_size: int = 0

    def numerical_approximation_i16(
        self, alignment: int = 0, precision: int = PRECISION
    ) -> FilterWeights:
        """Return the weights scaled by ``2**precision`` as rounded 16-bit integers.

        Each row is padded with zeros up to a multiple of ``alignment``
        when it is non-zero.
        """
        if self.kernel_size <= 0:
            raise ValueError("kernel size must be positive")
        if alignment:
            align = -(-self.kernel_size // alignment) * alignment
        else:
            align = self.kernel_size
        scale = float(1 << precision)

        output: list[int] = []
        rows = min(len(self.weights) // self.kernel_size, self.distinct_elements)
        for row in range(rows):
            chunk = self.weights[row * self.kernel_size : (row + 1) * self.kernel_size]
            quantized = [_to_i16(weight * scale) for weight in chunk[:align]]
            output.extend(quantized + [0] * (align - len(quantized)))
        output.extend([0] * (self.distinct_elements * align - len(output)))

        return FilterWeights(
            weights=output,
            bounds=list(self.bounds),
            kernel_size=self.kernel_size,
            aligned_size=align,
            distinct_elements=self.distinct_elements,
            coeffs_size=self.coeffs_size,
        )