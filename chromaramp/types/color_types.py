from __future__ import annotations
from enum import Enum
from typing import Tuple, Union

Scalar = Union[int, float]
ScalarVector = Tuple[Scalar, ...]


class ColorSpace(str, Enum):
    """Component spaces in which blending arithmetic can be carried out."""
    RGB = "rgb"
    HSV = "hsv"
    HSL = "hsl"
    CMYK = "cmyk"


HUE_SPACES = {ColorSpace.HSV, ColorSpace.HSL}

_CHANNELS = {
    ColorSpace.RGB: 3,
    ColorSpace.HSV: 3,
    ColorSpace.HSL: 3,
    ColorSpace.CMYK: 4,
}


def as_color_space(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Coerce a colorspace name or enum member to ColorSpace.

    Raises:
        ValueError: for unknown names
    """
    if isinstance(space, ColorSpace):
        return space
    try:
        return ColorSpace(str(space).lower())
    except ValueError:
        raise ValueError(f"Unknown color space: {space!r}") from None


def is_hue_space(color_space: Union[ColorSpace, str]) -> bool:
    """
    Check if the given color space is a hue-based space (HSV or HSL).

    Args:
        color_space: Color space enum member or name
    Returns:
        True if hue-based, False otherwise
    """
    return as_color_space(color_space) in HUE_SPACES


def channel_count(color_space: Union[ColorSpace, str]) -> int:
    """Number of color channels of a space, alpha excluded."""
    return _CHANNELS[as_color_space(color_space)]
