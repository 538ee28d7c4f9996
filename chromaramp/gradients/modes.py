"""
Enumerations controlling gradient evaluation.

The interpolation mode is kept as two independent fields. A packed integer
form is provided for formats that store both in one flag word: the function
kind in the low nibble, the colorspace in the next one.
"""
from __future__ import annotations
from enum import Enum, IntEnum
from typing import NamedTuple, Union

from ..types.color_types import ColorSpace, as_color_space


class InterpolationFunction(IntEnum):
    DISCRETE = 0x00
    LINEAR = 0x01
    CUBIC = 0x02


class Spread(str, Enum):
    """How query positions outside [0, 1] map back into the gradient."""
    PAD = "pad"
    REPEAT = "repeat"
    REFLECT = "reflect"


class NormalizeMode(str, Enum):
    """How ``set_stops`` brings arbitrary positions into [0, 1]."""
    NORMALIZE = "normalize"
    TRUNCATE = "truncate"


FUNCTION_MASK = 0x0F
COLORSPACE_MASK = 0xF0

_COLORSPACE_FLAGS = {
    ColorSpace.RGB: 0x00,
    ColorSpace.HSV: 0x10,
    ColorSpace.HSL: 0x20,
    ColorSpace.CMYK: 0x30,
}
_FLAG_COLORSPACES = {v: k for k, v in _COLORSPACE_FLAGS.items()}


class InterpolationMode(NamedTuple):
    function: InterpolationFunction = InterpolationFunction.LINEAR
    colorspace: ColorSpace = ColorSpace.RGB

    @classmethod
    def create(
        cls,
        function: Union[InterpolationFunction, str, int] = InterpolationFunction.LINEAR,
        colorspace: Union[ColorSpace, str] = ColorSpace.RGB,
    ) -> InterpolationMode:
        """Build a mode from enum members or their names."""
        return cls(as_interpolation_function(function), as_color_space(colorspace))

    def to_flags(self) -> int:
        return int(self.function) | _COLORSPACE_FLAGS[self.colorspace]

    @classmethod
    def from_flags(cls, flags: int) -> InterpolationMode:
        """Decode a packed flag word; unknown nibbles fall back to linear / RGB."""
        try:
            function = InterpolationFunction(flags & FUNCTION_MASK)
        except ValueError:
            function = InterpolationFunction.LINEAR
        colorspace = _FLAG_COLORSPACES.get(flags & COLORSPACE_MASK, ColorSpace.RGB)
        return cls(function, colorspace)


def as_interpolation_function(function: Union[InterpolationFunction, str, int]) -> InterpolationFunction:
    if isinstance(function, InterpolationFunction):
        return function
    if isinstance(function, str):
        try:
            return InterpolationFunction[function.upper()]
        except KeyError:
            raise ValueError(f"Unknown interpolation function: {function!r}") from None
    return InterpolationFunction(function)


def as_spread(spread: Union[Spread, str]) -> Spread:
    try:
        return Spread(spread.lower() if isinstance(spread, str) else spread)
    except ValueError:
        raise ValueError(f"Unknown spread: {spread!r}") from None


def as_normalize_mode(mode: Union[NormalizeMode, str]) -> NormalizeMode:
    try:
        return NormalizeMode(mode.lower() if isinstance(mode, str) else mode)
    except ValueError:
        raise ValueError(f"Unknown normalize mode: {mode!r}") from None
