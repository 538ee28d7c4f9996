"""
Tolerance based float comparison for stop positions.

Used when matching a query position against stored stops during blending.
Keyed removal deliberately uses exact equality instead.
"""
import math

REL_TOL = 1e-12
ABS_TOL = 1e-12


def fuzzy_equal(a: float, b: float, rel_tol: float = REL_TOL, abs_tol: float = ABS_TOL) -> bool:
    """True if ``a`` and ``b`` are equal within a relative or absolute tolerance."""
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
