"""
Hue helpers for cyclic interpolation.

Hues are in degrees. Interpolation always follows the shorter arc; an
exact 180° tie goes in the decreasing direction.
"""
from ..types.format_type import HUE_360


def shortest_delta(h0: float, h1: float) -> float:
    """Signed angular distance from ``h0`` to ``h1`` in [-180, 180)."""
    return (h1 - h0 + HUE_360 / 2) % HUE_360 - HUE_360 / 2


def wrap_hue(h: float) -> float:
    """Wrap a hue into [0, 360)."""
    h = h % HUE_360
    # -1e-17 % 360 rounds to 360.0
    return 0.0 if h >= HUE_360 else h


def hue_lerp(h0: float, h1: float, t: float) -> float:
    """Interpolate along the shorter arc from ``h0`` to ``h1``."""
    return wrap_hue(h0 + shortest_delta(h0, h1) * t)


def unwrap_hues(*hues: float) -> tuple:
    """
    Unroll a sequence of hues so consecutive entries differ by at most 180°.

    The first hue is kept as is; the result is suitable for feeding into a
    non-cyclic interpolator and wrapping back afterwards.
    """
    if not hues:
        return ()
    out = [hues[0]]
    for h in hues[1:]:
        out.append(out[-1] + shortest_delta(out[-1], h))
    return tuple(out)
