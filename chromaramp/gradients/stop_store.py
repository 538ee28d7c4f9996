"""
Ordered, immutable storage of gradient stops keyed by position.

A store never changes after construction. ``insert`` and ``remove`` return
a new store together with a success flag, which lets gradients share one
store between copies without any risk of observing each other's edits.
"""
from __future__ import annotations
import logging
import math
import warnings
from bisect import bisect_left
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple, Union

from boundednumbers.functions import clamp

from .modes import NormalizeMode, as_normalize_mode
from .stop import Stop

log = logging.getLogger(__name__)


class StopStore:
    __slots__ = ('_positions', '_stops')

    def __init__(self, stops: Optional[Mapping[float, Stop]] = None) -> None:
        """
        Build a store from an already normalized ``{position: Stop}`` mapping.

        Prefer :meth:`from_stops`, which applies the normalization policy.
        """
        ordered = sorted((stops or {}).items())
        self._positions: Tuple[float, ...] = tuple(p for p, _ in ordered)
        self._stops: Tuple[Stop, ...] = tuple(s for _, s in ordered)

    @classmethod
    def from_stops(
        cls,
        stops: Iterable[Stop],
        normalize_mode: Union[NormalizeMode, str] = NormalizeMode.NORMALIZE,
        *,
        stacklevel: int = 2,
    ) -> StopStore:
        """
        Build a store from arbitrary stops.

        - no stops: empty store
        - one stop: kept, moved to position 0.0
        - NORMALIZE: stops at non-finite positions are dropped, the rest are
          remapped affinely so the extremes land on 0.0 and 1.0
        - TRUNCATE: stops outside [0, 1] are dropped, and the surviving
          extremes are duplicated at 0.0 and 1.0 when missing

        Duplicate positions keep the last stop given. ``stacklevel`` selects
        the frame blamed by the degenerate-normalization warning, counted
        as for ``warnings.warn`` from the caller of this method.

        Raises:
            TypeError: if an item is not a Stop
            ValueError: for an unknown normalize mode
        """
        normalize_mode = as_normalize_mode(normalize_mode)
        stops = list(stops)
        for stop in stops:
            if not isinstance(stop, Stop):
                raise TypeError(f"Expected Stop instances, got {type(stop).__name__}")

        if normalize_mode == NormalizeMode.NORMALIZE:
            finite = [stop for stop in stops if stop.is_finite]
            if len(finite) < len(stops):
                log.debug("Normalization dropped %d stops at non-finite positions",
                          len(stops) - len(finite))
            stops = finite

        if not stops:
            return cls()
        if len(stops) == 1:
            return cls({0.0: stops[0].with_position(0.0)})

        if normalize_mode == NormalizeMode.NORMALIZE:
            store = cls._normalized(stops, stacklevel)
        else:
            store = cls._truncated(stops)
        log.debug("Built stop store with %d stops (%s)", len(store), normalize_mode.value)
        return store

    @classmethod
    def _normalized(cls, stops: list, stacklevel: int) -> StopStore:
        lo = min(stop.position for stop in stops)
        hi = max(stop.position for stop in stops)
        if hi == lo:
            warnings.warn(
                f"All {len(stops)} stops share position {lo}; keeping the last one at 0.0",
                RuntimeWarning,
                stacklevel=stacklevel + 1,
            )
            return cls({0.0: stops[-1].with_position(0.0)})

        # Halve everything when the span overflows, e.g. -1e308 .. 1e308
        half = not math.isfinite(hi - lo)
        origin, span = (lo / 2, hi / 2 - lo / 2) if half else (lo, hi - lo)
        mapped: Dict[float, Stop] = {}
        for stop in stops:
            if stop.position == lo:
                position = 0.0
            elif stop.position == hi:
                position = 1.0
            else:
                p = stop.position / 2 if half else stop.position
                position = float(clamp((p - origin) / span, 0.0, 1.0))
            mapped[position] = stop.with_position(position)
        return cls(mapped)

    @classmethod
    def _truncated(cls, stops: list) -> StopStore:
        kept: Dict[float, Stop] = {}
        for stop in stops:
            if 0.0 <= stop.position <= 1.0:
                kept[stop.position] = stop
        dropped = sum(1 for stop in stops if not 0.0 <= stop.position <= 1.0)
        if dropped:
            log.debug("Truncation dropped %d stops outside [0, 1]", dropped)
        if not kept:
            return cls()

        first = kept[min(kept)]
        last = kept[max(kept)]
        if first.position > 0.0:
            kept[0.0] = first.with_position(0.0)
        if last.position < 1.0:
            kept[1.0] = last.with_position(1.0)
        return cls(kept)

    # ------------------ EDITS ------------------
    def insert(self, stop: Stop) -> Tuple[bool, StopStore]:
        """
        Insert or overwrite an interior stop.

        Only positions strictly inside (0, 1) are accepted; boundary stops
        come from :meth:`from_stops`. On failure the same store is returned.
        """
        if not isinstance(stop, Stop):
            raise TypeError(f"Expected a Stop, got {type(stop).__name__}")
        if not (0.0 < stop.position < 1.0):
            log.debug("Rejected stop insert at position %r", stop.position)
            return False, self
        mapping = dict(zip(self._positions, self._stops))
        mapping[stop.position] = stop
        return True, StopStore(mapping)

    def remove(self, position: float) -> Tuple[bool, StopStore]:
        """Remove the stop at exactly ``position``; no tolerance is applied."""
        if position not in self._positions:
            log.debug("No stop to remove at position %r", position)
            return False, self
        mapping = dict(zip(self._positions, self._stops))
        del mapping[position]
        return True, StopStore(mapping)

    # ------------------ QUERIES ------------------
    def stops(self) -> Mapping[float, Stop]:
        """Read-only ``{position: Stop}`` snapshot in ascending order."""
        return MappingProxyType(dict(zip(self._positions, self._stops)))

    @property
    def positions(self) -> Tuple[float, ...]:
        return self._positions

    def lower_bound(self, position: float) -> int:
        """Index of the first stop at or after ``position`` (``len`` if none)."""
        return bisect_left(self._positions, position)

    def bracket(self, position: float) -> Tuple[int, int]:
        """
        Indices ``(lower, upper)`` of the stops around ``position``.

        ``upper`` is the first stop at or after ``position``; ``lower`` is the
        one before it. Either index may fall outside the store (-1 or ``len``)
        when ``position`` lies beyond the stored range.
        """
        upper = self.lower_bound(position)
        return upper - 1, upper

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[Stop]:
        return iter(self._stops)

    def __getitem__(self, index: int) -> Stop:
        return self._stops[index]

    def __contains__(self, position: object) -> bool:
        return position in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopStore):
            return NotImplemented
        return self._stops == other._stops

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        inner = ", ".join(f"{s.position:g}: {s.color!r}" for s in self._stops)
        return f"StopStore({{{inner}}})"
