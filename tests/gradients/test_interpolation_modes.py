import pytest

from chromaramp import ColorSpace, InterpolationFunction, InterpolationMode, Spread
from chromaramp.gradients import COLORSPACE_MASK, FUNCTION_MASK
from chromaramp.gradients.modes import as_interpolation_function, as_spread


@pytest.mark.parametrize("function", list(InterpolationFunction))
@pytest.mark.parametrize("colorspace", list(ColorSpace))
def test_flags_round_trip(function, colorspace):
    mode = InterpolationMode(function, colorspace)
    flags = mode.to_flags()
    assert flags & FUNCTION_MASK == int(function)
    assert InterpolationMode.from_flags(flags) == mode


def test_known_flag_values():
    assert InterpolationMode().to_flags() == 0x01
    assert InterpolationMode(InterpolationFunction.CUBIC, ColorSpace.HSL).to_flags() == 0x22
    assert InterpolationMode(InterpolationFunction.DISCRETE, ColorSpace.CMYK).to_flags() == 0x30
    assert COLORSPACE_MASK & 0x30 == 0x30


def test_unknown_flags_fall_back():
    assert InterpolationMode.from_flags(0x0F) == InterpolationMode(InterpolationFunction.LINEAR, ColorSpace.RGB)
    assert InterpolationMode.from_flags(0x72) == InterpolationMode(InterpolationFunction.CUBIC, ColorSpace.RGB)


def test_create_from_names():
    mode = InterpolationMode.create("cubic", "HSV")
    assert mode == InterpolationMode(InterpolationFunction.CUBIC, ColorSpace.HSV)
    assert InterpolationMode.create() == InterpolationMode()
    assert InterpolationMode.create(0) == InterpolationMode(InterpolationFunction.DISCRETE)


def test_bad_names():
    with pytest.raises(ValueError):
        as_interpolation_function("smooth")
    with pytest.raises(ValueError):
        InterpolationMode.create("linear", "lab")
    with pytest.raises(ValueError):
        as_spread("wrap")


def test_spread_names():
    assert as_spread("REFLECT") == Spread.REFLECT
    assert as_spread(Spread.PAD) == Spread.PAD
