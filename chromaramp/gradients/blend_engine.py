"""
Color evaluation at a position already resolved into [0, 1].

The query is bracketed by the nearest stops (``lower`` < pos <= ``upper``)
and the relative position ``t`` inside that interval is blended with one of
three functions:

- DISCRETE: hard step at ``lower.weight``
- LINEAR: two-piece linear easing so the color midpoint sits at
  ``t == lower.weight``, then a colorspace blend
- CUBIC: Catmull-Rom over the bracketing stops, their outer neighbours and
  the weighted interval midpoint, continuous across stop boundaries
"""
from __future__ import annotations

from boundednumbers.functions import clamp

from ..blending.color import blend_color2, blend_color4
from ..blending.scalar import blend2, blend4
from ..colors.color import Color, TRANSPARENT
from ..types.color_types import ColorSpace
from ..utils.fuzzy import fuzzy_equal
from .modes import InterpolationFunction, InterpolationMode
from .stop import Stop
from .stop_store import StopStore

# Keeps weighted splits away from the interval ends (division by w or 1 - w)
WEIGHT_EPSILON = 1e-6


def effective_weight(weight: float) -> float:
    return float(clamp(weight, WEIGHT_EPSILON, 1.0 - WEIGHT_EPSILON))


def discrete_blend(lower: Stop, upper: Stop, t: float) -> Color:
    return lower.color if t < lower.weight else upper.color


def skew(t: float, weight: float) -> float:
    """Remap ``t`` so that ``t == weight`` lands on 0.5."""
    w = effective_weight(weight)
    if t > w:
        return blend2(0.5, 1.0, (t - w) / (1.0 - w))
    return blend2(0.0, 0.5, t / w)


def linear_blend(lower: Stop, upper: Stop, t: float, space: ColorSpace) -> Color:
    return blend_color2(lower.color, upper.color, skew(t, lower.weight), space)


def cubic_blend(a: Stop, b: Stop, c: Stop, d: Stop, t: float, space: ColorSpace) -> Color:
    """
    Smooth blend across the interval ``b`` -> ``c``.

    ``a`` and ``d`` are the neighbouring stops (or ``b`` / ``c`` themselves at
    the ends of the ramp). The interval is split at the weighted midpoint
    ``pm``; each half is a Catmull-Rom segment whose control colors are the
    midpoint blends with the neighbours, and whose parameter is warped by the
    same spline evaluated over the control positions.
    """
    cb, cc = b.color, c.color
    ca = blend_color2(a.color, cb, 0.5, space)
    cd = blend_color2(d.color, cc, 0.5, space)
    cm = blend_color2(cb, cc, 0.5, space)

    w = effective_weight(b.weight)
    pb, pc = b.position, c.position
    pa = blend2(a.position, pb, a.weight)
    pd = blend2(d.position, pc, c.weight)
    pm = blend2(pb, pc, w)

    if t > w:
        t = (t - w) / (1.0 - w)
        t = blend4(pb, pm, pc, pd, t)
        t = float(clamp((t - pm) / (pc - pm), 0.0, 1.0))
        return blend_color4(cb, cm, cc, cd, t, space)

    t = t / w
    t = blend4(pa, pb, pm, pc, t)
    t = float(clamp((t - pb) / (pm - pb), 0.0, 1.0))
    return blend_color4(ca, cb, cm, cc, t, space)


def evaluate(store: StopStore, pos: float, mode: InterpolationMode) -> Color:
    """
    Color of ``store`` at ``pos`` (already inside [0, 1]).

    Never raises: an empty store gives transparent, a single stop gives its
    color, and positions outside the stored range take the nearest end stop.
    """
    if not len(store):
        return TRANSPARENT
    if len(store) == 1:
        return store[0].color

    il, iu = store.bracket(pos)
    if iu == len(store):
        return store[-1].color

    upper = store[iu]
    if iu == 0 or fuzzy_equal(pos, upper.position):
        return upper.color

    lower = store[il]
    t = (pos - lower.position) / (upper.position - lower.position)
    if fuzzy_equal(pos, lower.position):
        return lower.color

    function = mode.function
    if function == InterpolationFunction.DISCRETE:
        return discrete_blend(lower, upper, t)
    if function == InterpolationFunction.CUBIC:
        prev = store[il - 1] if il >= 1 else lower
        nxt = store[iu + 1] if iu + 1 < len(store) else upper
        return cubic_blend(prev, lower, upper, nxt, t, mode.colorspace)
    return linear_blend(lower, upper, t, mode.colorspace)
