"""
Color interpolation in a selectable colorspace.

Colors are converted into the blend space, interpolated channel by channel
(alpha included) and converted back. Hue channels follow the shorter arc.
A color with zero saturation has no meaningful hue, so it borrows the hue
of the color it is blended with.
"""
from __future__ import annotations
from typing import List, Sequence, Union

from boundednumbers.functions import clamp

from ..colors.color import Color
from ..types.color_types import ColorSpace, as_color_space, is_hue_space
from .hue import hue_lerp, shortest_delta, unwrap_hues, wrap_hue
from .scalar import blend2, blend4

ACHROMATIC_TOLERANCE = 1e-9


def _is_achromatic(components: Sequence[float]) -> bool:
    return components[1] <= ACHROMATIC_TOLERANCE


def _borrow_hue(target: List[float], source: Sequence[float]) -> None:
    if _is_achromatic(target) and not _is_achromatic(source):
        target[0] = source[0]


def _finish(space: ColorSpace, components: Sequence[float]) -> Color:
    if is_hue_space(space):
        head = [wrap_hue(components[0])]
        tail = components[1:]
    else:
        head = []
        tail = components
    return Color.from_components(space, head + [float(clamp(c, 0.0, 1.0)) for c in tail])


def blend_color2(a: Color, b: Color, t: float, space: Union[ColorSpace, str] = ColorSpace.RGB) -> Color:
    """Blend two colors at ``t`` (0 gives ``a``, 1 gives ``b``) in ``space``."""
    space = as_color_space(space)
    if space == ColorSpace.RGB:
        return Color(*(blend2(x, y, t) for x, y in zip(a.rgba, b.rgba)))

    ca = list(a.components(space))
    cb = list(b.components(space))
    if not is_hue_space(space):
        return _finish(space, [blend2(x, y, t) for x, y in zip(ca, cb)])

    ca0 = list(ca)
    _borrow_hue(ca, cb)
    _borrow_hue(cb, ca0)
    out = [hue_lerp(ca[0], cb[0], t)]
    out.extend(blend2(x, y, t) for x, y in zip(ca[1:], cb[1:]))
    return _finish(space, out)


def blend_color4(
    a: Color,
    b: Color,
    c: Color,
    d: Color,
    t: float,
    space: Union[ColorSpace, str] = ColorSpace.RGB,
) -> Color:
    """
    Catmull-Rom blend from ``b`` (t=0) to ``c`` (t=1) in ``space``.

    ``a`` and ``d`` shape the tangents. Overshooting channels are clamped.
    """
    space = as_color_space(space)
    comps = [list(col.components(space)) for col in (a, b, c, d)]

    if is_hue_space(space):
        # b and c borrow from each other, the outer points from their neighbour
        flags = [_is_achromatic(col) for col in comps]
        pb = list(comps[1])
        _borrow_hue(comps[1], comps[2])
        _borrow_hue(comps[2], pb)
        if flags[0]:
            comps[0][0] = comps[1][0]
        if flags[3]:
            comps[3][0] = comps[2][0]
        hb, hc, hd = unwrap_hues(comps[1][0], comps[2][0], comps[3][0])
        ha = hb + shortest_delta(hb, comps[0][0])
        out = [blend4(ha, hb, hc, hd, t)]
        start = 1
    else:
        out = []
        start = 0

    n = len(comps[0])
    out.extend(
        blend4(comps[0][i], comps[1][i], comps[2][i], comps[3][i], t)
        for i in range(start, n)
    )
    return _finish(space, out)
