"""
Gradient evaluation
===================

The implementation is split across submodules for readability and easier
testing:

- ``stop`` / ``stop_store``: weighted stops and their ordered, immutable store
- ``modes``: interpolation function, colorspace, spread and normalize enums
- ``spread``: folding query positions into [0, 1]
- ``blend_engine``: discrete, weighted linear and cubic evaluation
- ``gradient``: the public ``Gradient`` value type
"""

from .stop import Stop, DEFAULT_WEIGHT
from .stop_store import StopStore
from .modes import (
    InterpolationFunction,
    InterpolationMode,
    NormalizeMode,
    Spread,
    FUNCTION_MASK,
    COLORSPACE_MASK,
)
from .spread import resolve
from .blend_engine import evaluate, WEIGHT_EPSILON
from .gradient import Gradient, GradientData

__all__ = [
    "Stop",
    "DEFAULT_WEIGHT",
    "StopStore",
    "InterpolationFunction",
    "InterpolationMode",
    "NormalizeMode",
    "Spread",
    "FUNCTION_MASK",
    "COLORSPACE_MASK",
    "resolve",
    "evaluate",
    "WEIGHT_EPSILON",
    "Gradient",
    "GradientData",
]
