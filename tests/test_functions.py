"""Tests for real functions and staircase quantization."""

import numpy
import pytest

from paracurve import functions


class TestRealFunctions:

    def test_linear_equation(self):
        f = functions.LinearEquation(slope=2, y_intercept=3)
        assert f.evaluate(5) == 13
        assert f(5) == 13

    def test_quadratic(self):
        assert functions.Quadratic(1, -2, 3).evaluate(2) == 3

    def test_cubic(self):
        assert functions.Cubic(1, 0, -1, 2).evaluate(2) == 8

    def test_parabola(self):
        assert functions.Parabola().evaluate(-3) == 9

    def test_sine_wave_uses_turns(self):
        wave = functions.SineWave(amplitude=2, frequency=1, phase=0)
        assert wave(0.25) == pytest.approx(2)
        assert wave(0.75) == pytest.approx(-2)
        assert wave(0.5) == pytest.approx(0, abs=1e-12)

    def test_sine_wave_phase_is_an_offset(self):
        wave = functions.SineWave(amplitude=2, frequency=2, phase=0.5)
        assert wave(0) == pytest.approx(1)
        assert wave(0.125) == pytest.approx(3)

    def test_functions_are_immutable_records(self):
        f = functions.LinearEquation(1, 2)
        with pytest.raises(AttributeError):
            f.slope = 3
        assert f == functions.LinearEquation(1, 2)

    def test_abstract_contract(self):
        with pytest.raises(TypeError):
            functions.RealFunction()


class TestStaircase:

    def test_floor(self):
        assert functions.staircase_floor(0.37, 4) == 0.25
        assert functions.staircase_floor(-0.1, 4) == -0.25

    def test_ceiling(self):
        assert functions.staircase_ceiling(0.37, 4) == 0.5

    def test_round_nearest(self):
        assert functions.staircase_round(0.4, 4) == 0.5
        assert functions.staircase_round(0.3, 4) == 0.25

    def test_round_halves_away_from_zero(self):
        assert functions.staircase_round(0.125, 4) == 0.25
        assert functions.staircase_round(-0.125, 4) == -0.25

    def test_steps_scale_arrays(self):
        out = functions.steps_scale(numpy.array([0.1, 0.6, 0.99]), 2, 'floor')
        numpy.testing.assert_array_equal(out, [0, 0.5, 0.5])

    def test_zero_steps_is_nan(self):
        assert numpy.isnan(functions.staircase_floor(0.37, 0))

    def test_unknown_rounding_mode(self):
        with pytest.raises(ValueError):
            functions.steps_scale(0.5, 2, 'truncate')
