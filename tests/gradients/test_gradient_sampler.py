"""
Tests for the public Gradient value type: construction, sampling, spreads,
mutators and copy-on-write sharing.
"""
import copy
import math

import numpy as np
import pytest

from chromaramp import (
    Gradient,
    Stop,
    Color,
    BLACK,
    WHITE,
    TRANSPARENT,
    ColorSpace,
    FormatType,
    InterpolationFunction,
    InterpolationMode,
    NormalizeMode,
    Spread,
)

RED = Color(1.0, 0.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)


class TestDefaultGradient:
    def test_defaults(self):
        g = Gradient()
        assert g.interpolation_mode == InterpolationMode(InterpolationFunction.LINEAR, ColorSpace.RGB)
        assert g.spread == Spread.PAD
        assert dict(g.stops()) == {0.0: Stop(0.0, BLACK), 1.0: Stop(1.0, WHITE)}

    def test_black_to_white_pad(self):
        g = Gradient()
        assert g.at(0.0) == BLACK
        assert g.at(1.0) == WHITE
        assert g.at(0.5).to_rgb() in {(127, 127, 127), (128, 128, 128)}
        assert g.at(-1.0) == BLACK
        assert g.at(2.0) == WHITE

    def test_repeat(self):
        g = Gradient(spread=Spread.REPEAT)
        assert g.at(1.5) == g.at(0.5)
        assert g.at(-0.5) == g.at(0.5)

    def test_reflect(self):
        g = Gradient(spread="reflect")
        assert g.at(1.5) == g.at(0.5)
        assert g.at(2.0) == g.at(0.0)
        assert g.at(-0.25) == g.at(0.25)


class TestNeverFails:
    @pytest.mark.parametrize("spread", list(Spread))
    @pytest.mark.parametrize("function", list(InterpolationFunction))
    def test_any_position(self, spread, function):
        g = Gradient(
            [Stop(0.0, RED, 0.0), Stop(0.4, BLUE, 1.0), Stop(1.0, WHITE)],
            mode=InterpolationMode(function, ColorSpace.HSL),
            spread=spread,
        )
        for pos in (-1e308, -3.7, -1e-300, 0.0, 5e-324, 0.4, 1 - 1e-16, 1.0, 1 + 1e-16, 42.0,
                    1e308, math.inf, -math.inf, math.nan):
            assert isinstance(g.at(pos), Color)

    def test_single_stop(self):
        g = Gradient([Stop(0.8, RED)])
        assert list(g.stops()) == [0.0]
        for pos in (-5.0, 0.0, 0.3, 1.0, 9.0):
            assert g.at(pos) == RED

    def test_empty(self):
        g = Gradient([])
        for pos in (-5.0, 0.0, 0.3, 1.0):
            assert g.at(pos) == TRANSPARENT
        assert g.render(3) == [TRANSPARENT] * 3


class TestRender:
    def test_sizes(self):
        g = Gradient()
        assert g.render(0) == []
        assert g.render(1) == [g.at(0.0)]
        assert len(g.render(2)) == 2
        assert len(g.render(257)) == 257

    def test_endpoints_and_spacing(self):
        g = Gradient()
        colors = g.render(5)
        assert colors[0] == BLACK
        assert colors[-1] == WHITE
        assert [c.red for c in colors] == pytest.approx([0.0, 0.25, 0.5, 0.75, 1.0])

    def test_repeatable(self):
        g = Gradient([Stop(0.0, RED), Stop(1.0, BLUE)], mode=InterpolationMode(InterpolationFunction.CUBIC))
        assert g.render(16) == g.render(16)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Gradient().render(-1)

    def test_render_array(self):
        g = Gradient()
        arr = g.render_array(3, format_type=FormatType.INT)
        assert arr.shape == (3, 4)
        assert arr.tolist() == [[0, 0, 0, 255], [128, 128, 128, 255], [255, 255, 255, 255]]

        hsv = Gradient.from_colors(RED, BLUE).render_array(2, space="hsv")
        assert np.allclose(hsv, [[0.0, 1.0, 1.0, 1.0], [240.0, 1.0, 1.0, 1.0]])

        assert Gradient().render_array(0).shape == (0, 4)
        assert Gradient().render_array(4, space=ColorSpace.CMYK).shape == (4, 5)


class TestConstruction:
    def test_explicit_stops_normalized(self):
        g = Gradient([Stop(2.0, RED), Stop(4.0, BLUE), Stop(3.0, WHITE)])
        assert list(g.stops()) == [0.0, 0.5, 1.0]
        assert g.at(0.5) == WHITE

    def test_extreme_positions_stay_defined(self):
        g = Gradient([Stop(-1e308, BLACK), Stop(0.0, RED), Stop(1e308, WHITE)])
        assert list(g.stops()) == [0.0, 0.5, 1.0]
        assert g.at(1.0) == WHITE
        assert g.at(0.5) == RED
        assert not g.at(0.7).is_transparent

    def test_non_finite_stops_dropped(self):
        g = Gradient([Stop(math.inf, WHITE), Stop(1.0, RED), Stop(3.0, BLUE)])
        assert list(g.stops()) == [0.0, 1.0]
        assert g.at(0.0) == RED

    def test_normalize_mode_any_case(self):
        g = Gradient([Stop(0.5, RED), Stop(2.0, BLUE)], normalize="TRUNCATE")
        assert list(g.stops()) == [0.0, 0.5, 1.0]
        g.set_stops([Stop(0.5, RED), Stop(2.0, BLUE)], "Normalize")
        assert list(g.stops()) == [0.0, 1.0]

    def test_degenerate_warning_points_at_caller(self):
        with pytest.warns(RuntimeWarning) as record:
            g = Gradient([Stop(0.3, RED), Stop(0.3, BLUE)])
        assert record[0].filename == __file__
        with pytest.warns(RuntimeWarning) as record:
            g.set_stops([Stop(2.0, RED), Stop(2.0, BLUE)])
        assert record[0].filename == __file__

    def test_explicit_stops_truncated(self):
        g = Gradient([Stop(0.2, RED), Stop(0.6, BLUE), Stop(3.0, WHITE)], normalize=NormalizeMode.TRUNCATE)
        assert list(g.stops()) == [0.0, 0.2, 0.6, 1.0]
        assert g.at(0.1).is_close(RED)
        assert g.at(0.9).is_close(BLUE)

    def test_from_colors(self):
        g = Gradient.from_colors(RED, WHITE, BLUE)
        assert list(g.stops()) == [0.0, 0.5, 1.0]
        assert g.at(0.5) == WHITE
        assert len(Gradient.from_colors().stops()) == 0

    def test_repr(self):
        assert repr(Gradient()) == "Gradient(stops=2, function=LINEAR, colorspace=rgb, spread=pad)"


class TestMutators:
    def test_insert_stop(self):
        g = Gradient()
        assert not g.insert_stop(Stop(0.0, RED))
        assert not g.insert_stop(Stop(1.0, RED))
        assert not g.insert_stop(1.5, RED)
        assert g.insert_stop(Stop(0.5, RED))
        assert g.stops()[0.5].color == RED
        assert g.at(0.5) == RED

    def test_insert_stop_by_position(self):
        g = Gradient()
        assert g.insert_stop(0.25, BLUE, 0.1)
        assert g.stops()[0.25] == Stop(0.25, BLUE, 0.1)
        with pytest.raises(TypeError):
            g.insert_stop(0.3)

    def test_remove_stop(self):
        g = Gradient()
        g.insert_stop(0.5, RED)
        assert not g.remove_stop(0.4)
        assert g.remove_stop(0.5)
        assert not g.remove_stop(0.5)
        assert list(g.stops()) == [0.0, 1.0]

    def test_remove_boundary_keeps_evaluating(self):
        g = Gradient()
        g.insert_stop(0.5, RED)
        assert g.remove_stop(0.0)
        assert g.at(0.0) == RED
        assert g.at(0.25) == RED

    def test_set_stops(self):
        g = Gradient()
        g.set_stops([Stop(-1.0, RED), Stop(1.0, BLUE)])
        assert list(g.stops()) == [0.0, 1.0]
        g.set_stops([Stop(0.5, RED)], "truncate")
        assert list(g.stops()) == [0.0]
        g.set_stops([])
        assert g.at(0.5) == TRANSPARENT

    def test_set_interpolation_mode(self):
        g = Gradient()
        g.set_interpolation_mode(InterpolationFunction.CUBIC)
        assert g.interpolation_mode == InterpolationMode(InterpolationFunction.CUBIC, ColorSpace.RGB)
        g.set_interpolation_mode(colorspace="hsv")
        assert g.interpolation_mode == InterpolationMode(InterpolationFunction.CUBIC, ColorSpace.HSV)
        g.set_interpolation_mode("discrete", ColorSpace.CMYK)
        assert g.interpolation_mode == InterpolationMode(InterpolationFunction.DISCRETE, ColorSpace.CMYK)
        g.set_interpolation_mode(InterpolationMode())
        assert g.interpolation_mode == InterpolationMode()

    def test_set_spread(self):
        g = Gradient()
        g.set_spread(Spread.REPEAT)
        assert g.spread == Spread.REPEAT
        with pytest.raises(ValueError):
            g.set_spread("bounce")


class TestCopyOnWrite:
    def test_copies_share_until_mutation(self):
        a = Gradient()
        b = copy.copy(a)
        assert b.shares_data_with(a)
        assert b == a

        assert b.insert_stop(0.5, RED)
        assert not b.shares_data_with(a)
        assert 0.5 not in a.stops()
        assert 0.5 in b.stops()
        assert a != b

    def test_failed_mutation_keeps_sharing(self):
        a = Gradient()
        b = a.copy()
        assert not b.insert_stop(1.0, RED)
        assert not b.remove_stop(0.3)
        assert b.shares_data_with(a)

    def test_mode_and_spread_changes_are_private(self):
        a = Gradient()
        b = copy.deepcopy(a)
        b.set_spread("reflect")
        b.set_interpolation_mode(InterpolationFunction.DISCRETE)
        assert a.spread == Spread.PAD
        assert a.interpolation_mode.function == InterpolationFunction.LINEAR

    def test_snapshot_does_not_follow_later_edits(self):
        g = Gradient()
        snapshot = g.stops()
        g.insert_stop(0.5, RED)
        assert list(snapshot) == [0.0, 1.0]

    def test_equal_values_compare_equal(self):
        assert Gradient() == Gradient()
        assert Gradient() != Gradient(spread="repeat")
