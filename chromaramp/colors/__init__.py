"""
Chromaramp Color Values
=======================

Immutable RGBA colors stored as unit floats. Conversions into HSV, HSL and
CMYK happen on demand, so the same color can be blended in any space.

>>> from chromaramp.colors import Color
>>> orange = Color.from_rgb(255, 128, 0)
>>> orange.to_hex()
'#ff8000'
>>> Color.from_hex("#336699").to_rgb()
(51, 102, 153)
"""

from .color import Color, TRANSPARENT, BLACK, WHITE

__all__ = [
    "Color",
    "TRANSPARENT",
    "BLACK",
    "WHITE",
]
