import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
# No dependencies


def unit_rgb_to_cmyk(r: float, g: float, b: float) -> Tuple[float, float, float, float]:
    """Convert unit RGB to naive (profile-free) CMYK, all channels in [0, 1]."""
    k = 1.0 - max(r, g, b)
    if k >= 1.0:
        return 0.0, 0.0, 0.0, 1.0
    scale = 1.0 - k
    return (1.0 - r - k) / scale, (1.0 - g - k) / scale, (1.0 - b - k) / scale, k


def np_unit_rgb_to_cmyk(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert unit RGB to CMYK, output shape (..., 4)."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    rgb = np.stack([np.broadcast_to(c, out_shape) for c in (r, g, b)], axis=-1)

    k = 1.0 - rgb.max(axis=-1)
    scale = (1.0 - k)[..., None]
    safe = np.where(scale > 0, scale, 1.0)
    cmy = np.where(scale > 0, (1.0 - rgb - k[..., None]) / safe, 0.0)

    return np.concatenate([cmy, k[..., None]], axis=-1)
