import numpy as np
from typing import Callable, Dict, Tuple, Union

from ..types.format_type import FormatType, max_non_hue, default_format_dtypes
from ..types.color_types import ColorSpace, as_color_space, is_hue_space

from .to_rgb import (
    hsv_to_unit_rgb, hsl_to_unit_rgb, cmyk_to_unit_rgb,
    np_hsv_to_unit_rgb, np_hsl_to_unit_rgb, np_cmyk_to_unit_rgb,
)
from .to_hsv import unit_rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hsl import unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_cmyk import unit_rgb_to_cmyk, np_unit_rgb_to_cmyk

# Every conversion goes through unit RGB
FROM_RGB: Dict[ColorSpace, Callable[..., Tuple[float, ...]]] = {
    ColorSpace.HSV: unit_rgb_to_hsv,
    ColorSpace.HSL: unit_rgb_to_hsl,
    ColorSpace.CMYK: unit_rgb_to_cmyk,
}

TO_RGB: Dict[ColorSpace, Callable[..., Tuple[float, float, float]]] = {
    ColorSpace.HSV: hsv_to_unit_rgb,
    ColorSpace.HSL: hsl_to_unit_rgb,
    ColorSpace.CMYK: cmyk_to_unit_rgb,
}

NP_FROM_RGB: Dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_unit_rgb_to_hsv,
    ColorSpace.HSL: np_unit_rgb_to_hsl,
    ColorSpace.CMYK: np_unit_rgb_to_cmyk,
}

NP_TO_RGB: Dict[ColorSpace, Callable[..., np.ndarray]] = {
    ColorSpace.HSV: np_hsv_to_unit_rgb,
    ColorSpace.HSL: np_hsl_to_unit_rgb,
    ColorSpace.CMYK: np_cmyk_to_unit_rgb,
}


def convert(
    color: Tuple[float, ...],
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
) -> Tuple[float, ...]:
    """
    Convert one color between spaces.

    Components are unit floats except hue, which is in degrees. Alpha is
    not part of the tuple.
    """
    fs, ts = as_color_space(from_space), as_color_space(to_space)
    if fs == ts:
        return tuple(float(c) for c in color)
    rgb = tuple(color) if fs == ColorSpace.RGB else TO_RGB[fs](*color)
    if ts == ColorSpace.RGB:
        return tuple(float(c) for c in rgb)
    return tuple(float(c) for c in FROM_RGB[ts](*rgb))


def scale(color: np.ndarray, space: ColorSpace, fmt: FormatType) -> np.ndarray:
    """Scale unit channels (hue excepted) to the requested format."""
    maxval = max_non_hue[fmt]
    scaled = np.array(color, dtype=float) * maxval
    if is_hue_space(space):
        scaled[..., 0] = color[..., 0]
    if fmt == FormatType.INT:
        return np.round(scaled).astype(default_format_dtypes[fmt])
    return scaled


def np_convert(
    color: np.ndarray,
    from_space: Union[ColorSpace, str],
    to_space: Union[ColorSpace, str],
    output_type: Union[FormatType, str] = FormatType.FLOAT,
) -> np.ndarray:
    """
    Vectorized conversion of an (..., channels [+ alpha]) unit-float array.

    A trailing alpha channel is detected from the channel count, carried
    through unchanged and scaled with the other non-hue channels.
    """
    fs, ts = as_color_space(from_space), as_color_space(to_space)
    color = np.asarray(color, dtype=float)
    n_in = 4 if fs == ColorSpace.CMYK else 3

    if color.shape[-1] == n_in + 1:
        base, alpha = color[..., :n_in], color[..., n_in:]
    elif color.shape[-1] == n_in:
        base, alpha = color, None
    else:
        raise ValueError(
            f"{fs.value} expects last dimension of {n_in} or {n_in + 1}, got shape {color.shape}"
        )

    if fs == ts:
        converted = base
    else:
        rgb = base if fs == ColorSpace.RGB else NP_TO_RGB[fs](*np.moveaxis(base, -1, 0))
        converted = rgb if ts == ColorSpace.RGB else NP_FROM_RGB[ts](*np.moveaxis(rgb, -1, 0))

    if alpha is not None:
        converted = np.concatenate([converted, alpha], axis=-1)
    return scale(converted, ts, FormatType(output_type))
