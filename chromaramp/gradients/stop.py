from __future__ import annotations
import math
from dataclasses import dataclass, replace

from ..colors.color import Color

DEFAULT_WEIGHT = 0.5


@dataclass(frozen=True)
class Stop:
    """
    One anchor of a gradient ramp.

    Attributes:
        position: location along the gradient axis; stores keep it in [0, 1]
        color: color at this position
        weight: where, inside the interval up to the next stop, the blend
            reaches its midpoint (0.5 is symmetric)
    """
    position: float
    color: Color
    weight: float = DEFAULT_WEIGHT

    def __post_init__(self) -> None:
        if not isinstance(self.color, Color):
            raise TypeError(f"Stop color must be a Color, got {type(self.color).__name__}")
        object.__setattr__(self, 'position', float(self.position))
        object.__setattr__(self, 'weight', float(self.weight))
        if not (0.0 <= self.weight <= 1.0):
            raise ValueError(f"Stop weight must be in [0, 1], got {self.weight}")

    @property
    def is_finite(self) -> bool:
        return math.isfinite(self.position)

    def with_position(self, position: float) -> Stop:
        return replace(self, position=position)
