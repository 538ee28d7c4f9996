from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping, Optional, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.color import Color, BLACK, WHITE
from ..conversions import np_convert
from ..types.color_types import ColorSpace, as_color_space
from ..types.format_type import FormatType
from ..utils.default import value_or_default
from .blend_engine import evaluate
from .modes import (
    InterpolationFunction,
    InterpolationMode,
    NormalizeMode,
    Spread,
    as_interpolation_function,
    as_spread,
)
from .spread import resolve
from .stop import DEFAULT_WEIGHT, Stop
from .stop_store import StopStore


@dataclass(frozen=True)
class GradientData:
    """Shared, never-mutated state behind one or more Gradient handles."""
    stops: StopStore
    mode: InterpolationMode
    spread: Spread


class Gradient:
    """
    A color ramp defined by weighted stops on [0, 1].

    Gradients behave as values. Copies share their underlying data until one
    of them is modified; every mutator swaps in freshly built data for its
    own handle only, so other copies keep seeing the previous state.

    Evaluation never fails: ``at`` returns a color for any float, including
    positions far outside [0, 1], and transparent for a gradient without stops.

    Examples:
        >>> g = Gradient()                     # black -> white, linear RGB, pad
        >>> g.at(0.5).to_rgb()
        (128, 128, 128)
        >>> g.set_spread("reflect")
        >>> g.at(1.75) == g.at(0.25)
        True
    """
    __slots__ = ('_d',)

    def __init__(
        self,
        stops: Optional[Iterable[Stop]] = None,
        mode: Optional[InterpolationMode] = None,
        spread: Union[Spread, str] = Spread.PAD,
        normalize: Union[NormalizeMode, str] = NormalizeMode.NORMALIZE,
    ) -> None:
        """
        Args:
            stops: stops to install with ``set_stops``; ``None`` gives the
                default black (0.0) to white (1.0) ramp
            mode: interpolation function and colorspace, linear RGB by default
            spread: edge policy for positions outside [0, 1]
            normalize: how ``stops`` are brought into [0, 1]
        """
        if stops is None:
            stops = (Stop(0.0, BLACK), Stop(1.0, WHITE))
            normalize = NormalizeMode.NORMALIZE
        self._d = GradientData(
            stops=StopStore.from_stops(stops, normalize, stacklevel=3),
            mode=value_or_default(mode, InterpolationMode()),
            spread=as_spread(spread),
        )

    @classmethod
    def from_colors(
        cls,
        *colors: Color,
        mode: Optional[InterpolationMode] = None,
        spread: Union[Spread, str] = Spread.PAD,
        weight: float = DEFAULT_WEIGHT,
    ) -> Gradient:
        """Evenly spaced stops, one per color, all with the same weight."""
        n = len(colors)
        positions = np.linspace(0.0, 1.0, n) if n > 1 else [0.0] * n
        stops = [Stop(float(p), c, weight) for p, c in zip(positions, colors)]
        return cls(stops, mode=mode, spread=spread)

    # ------------------ COPY-ON-WRITE ------------------
    def copy(self) -> Gradient:
        clone = type(self).__new__(type(self))
        clone._d = self._d
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo) -> Gradient:
        # Shared data is immutable, so a deep copy can share it as well
        return self.copy()

    def shares_data_with(self, other: Gradient) -> bool:
        """True while both handles still point at the same underlying data."""
        return self._d is other._d

    def _update(self, **changes) -> None:
        self._d = replace(self._d, **changes)

    # ------------------ STOPS ------------------
    def stops(self) -> Mapping[float, Stop]:
        """Read-only ``{position: Stop}`` snapshot in ascending order."""
        return self._d.stops.stops()

    @property
    def stop_store(self) -> StopStore:
        return self._d.stops

    def set_stops(
        self,
        stops: Iterable[Stop],
        normalize: Union[NormalizeMode, str] = NormalizeMode.NORMALIZE,
    ) -> None:
        """Replace every stop; see :meth:`StopStore.from_stops` for the rules."""
        self._update(stops=StopStore.from_stops(stops, normalize, stacklevel=3))

    def insert_stop(
        self,
        stop: Union[Stop, float],
        color: Optional[Color] = None,
        weight: float = DEFAULT_WEIGHT,
    ) -> bool:
        """
        Insert or overwrite a stop strictly inside (0, 1).

        Accepts either a Stop or ``(position, color[, weight])``. Returns
        False, leaving the gradient untouched, for positions on or outside
        the boundaries.
        """
        if not isinstance(stop, Stop):
            if color is None:
                raise TypeError("insert_stop needs a Stop or a position and a color")
            stop = Stop(stop, color, weight)
        ok, store = self._d.stops.insert(stop)
        if ok:
            self._update(stops=store)
        return ok

    def remove_stop(self, position: float) -> bool:
        """Remove the stop at exactly ``position``; False if there is none."""
        ok, store = self._d.stops.remove(position)
        if ok:
            self._update(stops=store)
        return ok

    # ------------------ MODES ------------------
    @property
    def interpolation_mode(self) -> InterpolationMode:
        return self._d.mode

    def set_interpolation_mode(
        self,
        mode: Union[InterpolationMode, InterpolationFunction, str, None] = None,
        colorspace: Union[ColorSpace, str, None] = None,
    ) -> None:
        """
        Change the interpolation function and/or colorspace.

        ``mode`` may be a full InterpolationMode, or just a function kind, in
        which case the current colorspace is kept unless ``colorspace`` is
        given too.
        """
        current = self._d.mode
        if isinstance(mode, InterpolationMode):
            new = mode
        else:
            function = current.function if mode is None else as_interpolation_function(mode)
            new = InterpolationMode(function, current.colorspace)
        if colorspace is not None:
            new = new._replace(colorspace=as_color_space(colorspace))
        self._update(mode=new)

    @property
    def spread(self) -> Spread:
        return self._d.spread

    def set_spread(self, spread: Union[Spread, str]) -> None:
        self._update(spread=as_spread(spread))

    # ------------------ SAMPLING ------------------
    def at(self, pos: float) -> Color:
        """Color at ``pos``; any float is accepted."""
        d = self._d
        return evaluate(d.stops, resolve(pos, d.spread), d.mode)

    def render(self, size: int) -> List[Color]:
        """
        ``size`` colors sampled evenly over [0, 1], both ends included.

        ``render(0)`` is empty and ``render(1)`` samples only 0.0.

        Raises:
            ValueError: if ``size`` is negative
        """
        size = int(size)
        if size < 0:
            raise ValueError(f"render size must be non-negative, got {size}")
        if size <= 1:
            return [self.at(0.0)] * size
        k = 1.0 / (size - 1)
        return [self.at(i * k) for i in range(size)]

    def render_array(
        self,
        size: int,
        space: Union[ColorSpace, str] = ColorSpace.RGB,
        format_type: Union[FormatType, str] = FormatType.FLOAT,
    ) -> NDArray:
        """
        :meth:`render` as an array of shape ``(size, channels + 1)``.

        Channels are those of ``space`` followed by alpha, scaled to
        ``format_type`` (hue stays in degrees).
        """
        space = as_color_space(space)
        rgba = np.array([c.rgba for c in self.render(size)], dtype=float).reshape(-1, 4)
        return np_convert(rgba, ColorSpace.RGB, space, FormatType(format_type))

    # ------------------ VALUE PROTOCOL ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Gradient):
            return NotImplemented
        return self._d is other._d or self._d == other._d

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        d = self._d
        return (
            f"Gradient(stops={len(d.stops)}, function={d.mode.function.name}, "
            f"colorspace={d.mode.colorspace.value}, spread={d.spread.value})"
        )
