import numpy as np
from numpy import ndarray as NDArray
from typing import Tuple
# No dependencies


def hsv_to_unit_rgb(h: float, s: float, v: float) -> Tuple[float, float, float]:
    """
    Convert HSV (h in degrees, s and v in [0, 1]) to unit RGB.

    Hue outside [0, 360) is wrapped.
    """
    def channel(n: int) -> float:
        k = (n + h / 60.0) % 6
        return v - v * s * max(0.0, min(k, 4.0 - k, 1.0))

    return channel(5), channel(3), channel(1)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to unit RGB, output shape (..., 3)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    v = np.asarray(v, dtype=float)

    def channel(n: int) -> NDArray:
        k = (n + h / 60.0) % 6
        return v - v * s * np.clip(np.minimum(k, 4.0 - k), 0.0, 1.0)

    return np.stack([channel(5), channel(3), channel(1)], axis=-1)


def hsl_to_unit_rgb(h: float, s: float, l: float) -> Tuple[float, float, float]:
    """
    Convert HSL (h in degrees, s and l in [0, 1]) to unit RGB.

    Hue outside [0, 360) is wrapped.
    """
    a = s * min(l, 1.0 - l)

    def channel(n: int) -> float:
        k = (n + h / 30.0) % 12
        return l - a * max(-1.0, min(k - 3.0, 9.0 - k, 1.0))

    return channel(0), channel(8), channel(4)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to unit RGB, output shape (..., 3)."""
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)
    a = s * np.minimum(l, 1.0 - l)

    def channel(n: int) -> NDArray:
        k = (n + h / 30.0) % 12
        return l - a * np.clip(np.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return np.stack([channel(0), channel(8), channel(4)], axis=-1)


def cmyk_to_unit_rgb(c: float, m: float, y: float, k: float) -> Tuple[float, float, float]:
    """Convert naive CMYK (all channels in [0, 1]) to unit RGB."""
    return (1.0 - c) * (1.0 - k), (1.0 - m) * (1.0 - k), (1.0 - y) * (1.0 - k)


def np_cmyk_to_unit_rgb(c: NDArray, m: NDArray, y: NDArray, k: NDArray) -> NDArray:
    """Vectorized: Convert CMYK to unit RGB, output shape (..., 3)."""
    k = np.asarray(k, dtype=float)
    return np.stack(
        [(1.0 - np.asarray(x, dtype=float)) * (1.0 - k) for x in (c, m, y)],
        axis=-1,
    )
