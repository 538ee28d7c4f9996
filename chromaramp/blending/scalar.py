"""Scalar interpolation primitives."""


def blend2(a: float, b: float, t: float) -> float:
    """Linear interpolation; exact at ``t == 0`` and ``t == 1``."""
    return (1.0 - t) * a + t * b


def blend4(a: float, b: float, c: float, d: float, t: float) -> float:
    """
    Uniform Catmull-Rom interpolation between ``b`` (t=0) and ``c`` (t=1).

    ``a`` and ``d`` are the outer control points that shape the tangents at
    ``b`` and ``c``.
    """
    t2 = t * t
    t3 = t2 * t
    return 0.5 * (
        2.0 * b
        + (c - a) * t
        + (2.0 * a - 5.0 * b + 4.0 * c - d) * t2
        + (3.0 * b - a - 3.0 * c + d) * t3
    )
