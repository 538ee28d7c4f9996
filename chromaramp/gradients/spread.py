"""
Mapping of arbitrary query positions into the [0, 1] gradient domain.

- PAD: clamp to the nearest end
- REPEAT: sawtooth, period 1
- REFLECT: triangle wave, period 2

Non-finite positions never escape: NaN resolves to 0.0 under every spread,
infinities clamp under PAD and resolve to 0.0 otherwise.
"""
import math
from typing import Union

from boundednumbers.functions import clamp

from .modes import Spread, as_spread


def pad(pos: float) -> float:
    return float(clamp(pos, 0.0, 1.0))


def repeat(pos: float) -> float:
    pos = math.fmod(pos, 1.0)
    if pos < 0.0:
        pos += 1.0
    return pos


def reflect(pos: float) -> float:
    pos = abs(math.fmod(pos, 2.0))
    if pos > 1.0:
        pos = 2.0 - pos
    return pos


_RESOLVERS = {
    Spread.PAD: pad,
    Spread.REPEAT: repeat,
    Spread.REFLECT: reflect,
}


def resolve(pos: float, spread: Union[Spread, str] = Spread.PAD) -> float:
    """Map ``pos`` into [0, 1] according to ``spread``."""
    spread = as_spread(spread)
    pos = float(pos)
    if math.isnan(pos):
        return 0.0
    if math.isinf(pos) and spread != Spread.PAD:
        return 0.0
    return _RESOLVERS[spread](pos)
