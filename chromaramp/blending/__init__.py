"""
Blend primitives: scalar linear/Catmull-Rom interpolation, cyclic hue
interpolation and colorspace-aware color blending.
"""

from .scalar import blend2, blend4
from .hue import hue_lerp, shortest_delta, unwrap_hues, wrap_hue
from .color import blend_color2, blend_color4

__all__ = [
    "blend2",
    "blend4",
    "hue_lerp",
    "shortest_delta",
    "unwrap_hues",
    "wrap_hue",
    "blend_color2",
    "blend_color4",
]
