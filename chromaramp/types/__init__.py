from .format_type import FormatType, max_non_hue, HUE_360
from .color_types import ColorSpace, HUE_SPACES, as_color_space, Scalar, ScalarVector, is_hue_space, channel_count

__all__ = [
    "FormatType",
    "max_non_hue",
    "HUE_360",
    "ColorSpace",
    "HUE_SPACES",
    "as_color_space",
    "Scalar",
    "ScalarVector",
    "is_hue_space",
    "channel_count",
]
