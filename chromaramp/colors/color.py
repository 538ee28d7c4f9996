from __future__ import annotations
import math
from typing import Iterator, Sequence, Tuple, Union

from ..conversions import convert
from ..types.color_types import ColorSpace, Scalar, as_color_space, channel_count


def _unit(value: Scalar) -> float:
    value = float(value)
    if math.isnan(value):
        return 0.0
    return max(0.0, min(value, 1.0))


class Color:
    """
    Immutable RGBA color stored as unit floats.

    Storage is colorspace independent; use :meth:`components` to view the
    color in another space and :meth:`from_components` to build one back.
    Channel values are clamped to [0, 1] on construction.
    """
    __slots__ = ('_rgba', '_is_frozen')

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: Scalar = 1.0) -> None:
        self._rgba = (_unit(red), _unit(green), _unit(blue), _unit(alpha))
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, alpha: int = 255) -> Color:
        """Build from 8-bit channels."""
        return cls(red / 255.0, green / 255.0, blue / 255.0, alpha / 255.0)

    @classmethod
    def from_hsv(cls, hue: float, saturation: float, value: float, alpha: float = 1.0) -> Color:
        return cls.from_components(ColorSpace.HSV, (hue, saturation, value, alpha))

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float, alpha: float = 1.0) -> Color:
        return cls.from_components(ColorSpace.HSL, (hue, saturation, lightness, alpha))

    @classmethod
    def from_cmyk(cls, cyan: float, magenta: float, yellow: float, black: float,
                  alpha: float = 1.0) -> Color:
        return cls.from_components(ColorSpace.CMYK, (cyan, magenta, yellow, black, alpha))

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """
        Parse ``#rrggbb`` or ``#rrggbbaa`` (leading ``#`` optional).

        Raises:
            ValueError: if the text is not a 6 or 8 digit hex color
        """
        digits = text.strip().lstrip('#')
        if len(digits) not in (6, 8):
            raise ValueError(f"Expected 6 or 8 hex digits, got {text!r}")
        try:
            channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
        except ValueError:
            raise ValueError(f"Invalid hex color: {text!r}") from None
        return cls.from_rgb(*channels)

    @classmethod
    def from_components(cls, space: Union[ColorSpace, str], components: Sequence[Scalar]) -> Color:
        """
        Build a color from components in ``space`` followed by alpha.

        Hue is in degrees and may lie outside [0, 360); the other channels
        are unit floats.
        """
        space = as_color_space(space)
        n = channel_count(space)
        if len(components) != n + 1:
            raise ValueError(
                f"{space.value} expects {n} channels plus alpha, got {len(components)} values"
            )
        red, green, blue = convert(tuple(components[:n]), space, ColorSpace.RGB)
        return cls(red, green, blue, components[n])

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def red(self) -> float:
        return self._rgba[0]

    @property
    def green(self) -> float:
        return self._rgba[1]

    @property
    def blue(self) -> float:
        return self._rgba[2]

    @property
    def alpha(self) -> float:
        return self._rgba[3]

    @property
    def rgba(self) -> Tuple[float, float, float, float]:
        return self._rgba

    @property
    def is_transparent(self) -> bool:
        return self._rgba[3] == 0.0

    def components(self, space: Union[ColorSpace, str]) -> Tuple[float, ...]:
        """Channels of this color in ``space``, followed by alpha."""
        return convert(self._rgba[:3], ColorSpace.RGB, space) + (self._rgba[3],)

    def to_rgba(self) -> Tuple[int, int, int, int]:
        """8-bit channels, rounded half up."""
        return tuple(int(math.floor(c * 255.0 + 0.5)) for c in self._rgba)  # type: ignore[return-value]

    def to_rgb(self) -> Tuple[int, int, int]:
        return self.to_rgba()[:3]  # type: ignore[return-value]

    def to_hex(self, with_alpha: bool = False) -> str:
        channels = self.to_rgba() if with_alpha else self.to_rgb()
        return '#' + ''.join(f"{c:02x}" for c in channels)

    def is_close(self, other: Color, tol: float = 1e-6) -> bool:
        """Channel-wise comparison with absolute tolerance ``tol``."""
        return all(abs(a - b) <= tol for a, b in zip(self._rgba, other.rgba))

    # ------------------ VALUE PROTOCOL ------------------
    def __iter__(self) -> Iterator[float]:
        return iter(self._rgba)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._rgba == other._rgba

    def __hash__(self) -> int:
        return hash(self._rgba)

    def __repr__(self) -> str:
        r, g, b, a = self._rgba
        return f"Color({r:.6g}, {g:.6g}, {b:.6g}, {a:.6g})"


TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
