from .default import value_or_default
from .fuzzy import fuzzy_equal, REL_TOL, ABS_TOL

__all__ = [
    "value_or_default",
    "fuzzy_equal",
    "REL_TOL",
    "ABS_TOL",
]
