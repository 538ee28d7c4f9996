"""
Chromaramp Color Space Conversions
==================================

Scalar and vectorized (numpy) conversions between unit RGB and the HSV,
HSL and CMYK spaces used for blending.

Conventions
-----------
- RGB, saturation, value, lightness and CMYK channels are unit floats.
- Hue is in degrees, [0, 360).
- Achromatic colors report hue 0.0 and saturation 0.0.

Examples
--------
>>> from chromaramp.conversions import unit_rgb_to_hsv, hsv_to_unit_rgb
>>> h, s, v = unit_rgb_to_hsv(1.0, 0.5, 0.0)
>>> r, g, b = hsv_to_unit_rgb(h, s, v)
"""

from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk
from .to_rgb import (
    hsv_to_unit_rgb,
    hsl_to_unit_rgb,
    cmyk_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hsl_to_unit_rgb,
    np_cmyk_to_unit_rgb,
)
from .wrapper import convert, np_convert

from ..types.format_type import FormatType
from ..types.color_types import ColorSpace

__all__ = [
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'unit_rgb_to_cmyk',
    'np_unit_rgb_to_cmyk',
    'hsv_to_unit_rgb',
    'hsl_to_unit_rgb',
    'cmyk_to_unit_rgb',
    'np_hsv_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'np_cmyk_to_unit_rgb',
    'convert',
    'np_convert',
    'FormatType',
    'ColorSpace',
]
