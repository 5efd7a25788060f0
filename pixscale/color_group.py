"""A small fixed-width group of color channel values used by convolution."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

__all__ = ["ColorGroup"]

_CHANNEL_NAMES = ("r", "g", "b", "a")


def _check_components(components: int) -> None:
    if not 1 <= components <= 4:
        raise ValueError(f"components must be in 1..4, got {components}")


@dataclass
class ColorGroup:
    """Up to four channel values, of which the first ``components`` are active.

    Arithmetic touches only the active channels; the inactive ones are
    carried through unchanged.
    """

    components: int
    r: Any = 0
    g: Any = 0
    b: Any = 0
    a: Any = 0

    def __post_init__(self) -> None:
        _check_components(self.components)

    @classmethod
    def dup(cls, components: int, value: Any) -> ColorGroup:
        """Return a group with every channel set to ``value``."""
        return cls(components, value, value, value, value)

    @classmethod
    def load(cls, store: Sequence, components: int, offset: int = 0) -> ColorGroup:
        """Read ``components`` consecutive values from ``store`` at ``offset``."""
        _check_components(components)
        values = list(store[offset : offset + components])
        if len(values) < components:
            raise IndexError(
                f"need {components} values at offset {offset}, "
                f"store holds {len(store)}"
            )
        return cls(components, *values)

    def to_list(self) -> list:
        """Return the active channel values in order."""
        return [getattr(self, name) for name in _CHANNEL_NAMES[: self.components]]

    def _channels(self) -> list:
        return [self.r, self.g, self.b, self.a]

    def _check_same(self, other: ColorGroup) -> None:
        if other.components != self.components:
            raise ValueError(
                f"cannot combine groups of {self.components} "
                f"and {other.components} components"
            )

    def _apply(self, values: Sequence, op: Callable[[Any, Any], Any]) -> list:
        current = self._channels()
        n = self.components
        return [op(x, y) for x, y in zip(current[:n], values[:n])] + current[n:]

    def _operands(self, other: Any) -> list:
        if isinstance(other, ColorGroup):
            self._check_same(other)
            return other._channels()
        return [other] * 4

    def _combine(self, other: Any, op: Callable[[Any, Any], Any]) -> ColorGroup:
        return ColorGroup(self.components, *self._apply(self._operands(other), op))

    def _update(self, values: list) -> None:
        self.r, self.g, self.b, self.a = values

    def mul_add(self, other: ColorGroup, weight: Any) -> ColorGroup:
        """Return ``self + other * weight`` over the active channels."""
        self._check_same(other)
        return ColorGroup(
            self.components,
            *self._apply(other._channels(), lambda acc, v: acc + v * weight),
        )

    def __add__(self, other: Any) -> ColorGroup:
        return self._combine(other, lambda x, y: x + y)

    def __sub__(self, other: Any) -> ColorGroup:
        return self._combine(other, lambda x, y: x - y)

    def __mul__(self, other: Any) -> ColorGroup:
        """Multiply by a scalar or channel-wise by another group.

        With another four-component group the alpha channel is scaled by
        that group's blue value.
        """
        if isinstance(other, ColorGroup) and self.components == 4:
            self._check_same(other)
            factors = [other.r, other.g, other.b, other.b]
            return ColorGroup(4, *self._apply(factors, lambda x, y: x * y))
        return self._combine(other, lambda x, y: x * y)

    def __rshift__(self, other: Any) -> ColorGroup:
        return ColorGroup(
            self.components, *self._apply([other] * 4, lambda x, y: x >> y)
        )

    def __iadd__(self, other: ColorGroup) -> ColorGroup:
        self._check_same(other)
        self._update(self._apply(other._channels(), lambda x, y: x + y))
        return self

    def __isub__(self, other: ColorGroup) -> ColorGroup:
        self._check_same(other)
        self._update(self._apply(other._channels(), lambda x, y: x - y))
        return self

    def __irshift__(self, other: Any) -> ColorGroup:
        self._update(self._apply([other] * 4, lambda x, y: x >> y))
        return self