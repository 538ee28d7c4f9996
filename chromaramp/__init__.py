"""Chromaramp: weighted multi-stop color gradients."""

from .colors import Color, TRANSPARENT, BLACK, WHITE
from .types import ColorSpace, FormatType
from .gradients import (
    Gradient,
    Stop,
    StopStore,
    InterpolationFunction,
    InterpolationMode,
    NormalizeMode,
    Spread,
)
from .blending import blend2, blend4, blend_color2, blend_color4
from .conversions import convert, np_convert

__version__ = "1.0.0"

__all__ = [
    # colors
    "Color",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
    "ColorSpace",
    "FormatType",
    # gradients
    "Gradient",
    "Stop",
    "StopStore",
    "InterpolationFunction",
    "InterpolationMode",
    "NormalizeMode",
    "Spread",
    # primitives
    "blend2",
    "blend4",
    "blend_color2",
    "blend_color4",
    "convert",
    "np_convert",
    "__version__",
]
