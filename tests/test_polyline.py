"""Tests for polyline geometry and resampling."""

import numpy
import pytest

from paracurve.catalog import angular, parametric
from paracurve.curve import sampling
from paracurve.polyline import geometry, interpolate
from paracurve.polyline.polyline import Polyline

SQUARE = Polyline([[0, 0], [2, 0], [2, 2], [0, 2]], closed=True)


class TestPolylineType:

    def test_points_are_float_arrays(self):
        polyline = Polyline([[0, 1], [2, 3]])
        assert polyline.points.dtype == float
        assert not polyline.closed
        assert polyline.dimension == 2

    def test_input_is_copied(self):
        points = numpy.zeros((3, 3))
        polyline = Polyline(points, True)
        points[0, 0] = 1
        assert polyline.points[0, 0] == 0

    def test_empty_point_list(self):
        polyline = Polyline([])
        assert polyline.points.shape == (0, 0)
        assert polyline.dimension == 0

    def test_empty_points_keep_their_dimension(self):
        assert Polyline(numpy.empty((0, 3))).dimension == 3


class TestGeometry:

    def test_cumulative_distances(self):
        distances = geometry.cumulative_distances([[0, 0], [3, 4], [3, 9]], unit=False)
        numpy.testing.assert_allclose(distances, [0, 5, 10])
        numpy.testing.assert_allclose(geometry.cumulative_distances([[0, 0], [3, 4], [3, 9]]), [0, 0.5, 1])

    def test_length_open_and_closed(self):
        assert geometry.length(SQUARE.points) == pytest.approx(6)
        assert geometry.length(SQUARE) == pytest.approx(8)

    def test_length_3d(self):
        helix = sampling.to_polyline_3d(angular.Helix(1, 0), 1000)
        assert geometry.length(helix) == pytest.approx(2 * numpy.pi, rel=1e-5)

    def test_filter_dup_points(self):
        out = geometry.filter_dup_points([[0, 0], [0, 0], [1, 1], [1, 1 + 1e-12], [2, 0]])
        numpy.testing.assert_array_equal(out, [[0, 0], [1, 1], [2, 0]])

    def test_area(self):
        assert geometry.area(SQUARE) == pytest.approx(4)

    def test_contains_point(self):
        assert geometry.contains_point(SQUARE, (1, 1))
        assert not geometry.contains_point(SQUARE, (3, 1))
        assert not geometry.contains_point(SQUARE, (1, -0.5))

    def test_contains_point_sampled_circle(self):
        circle = sampling.to_polyline_2d(angular.Circle((0, 0), 1), 64)
        assert geometry.contains_point(circle, (0.5, 0.5))
        assert not geometry.contains_point(circle, (0.8, 0.8))

    def test_polyline_and_point_array_agree(self):
        circle = sampling.to_polyline_2d(angular.Circle((0, 0), 1), 32)
        assert geometry.area(circle) == pytest.approx(geometry.area(circle.points))
        numpy.testing.assert_array_equal(geometry.cumulative_distances(circle), geometry.cumulative_distances(circle.points))


class TestInterpolate:

    def test_linear_resample(self):
        resampled = interpolate.linear_resample_polyline([[0, 0], [1, 0], [1, 3]], 5)
        numpy.testing.assert_allclose(resampled.points, [[0, 0], [1, 0], [1, 1], [1, 2], [1, 3]])
        assert not resampled.closed

    def test_linear_resample_keeps_closedness(self):
        resampled = interpolate.linear_resample_polyline(SQUARE, 7)
        assert resampled.closed
        assert len(resampled.points) == 7

    def test_linear_resample_3d(self):
        resampled = interpolate.linear_resample_polyline([[0, 0, 0], [0, 0, 2]], 3)
        numpy.testing.assert_allclose(resampled.points, [[0, 0, 0], [0, 0, 1], [0, 0, 2]])

    def test_spline_resample_circle(self):
        circle = sampling.to_polyline_2d(angular.Circle((0, 0), 10), 50)
        resampled, tck = interpolate.spline_resample_polyline(circle, 200, smoothing=0.01)
        assert resampled.closed
        assert len(resampled.points) == 200
        radii = numpy.linalg.norm(resampled.points, axis=1)
        numpy.testing.assert_allclose(radii, 10, rtol=1e-2)
        t, c, k = tck
        assert k == 3
        assert c.shape[1] == 2

    def test_spline_interpolating_fit(self):
        points = sampling.sample(parametric.LineSegment((0, 0), (3, 3)), 6)
        tck = interpolate.fit_spline(points, smoothing=0)
        numpy.testing.assert_allclose(interpolate.spline_interpolate(tck, 4), [[0, 0], [1, 1], [2, 2], [3, 3]], atol=1e-9)
        derivative = interpolate.spline_evaluate(tck, [1.0], derivative=1)
        numpy.testing.assert_allclose(derivative, [[2**-0.5, 2**-0.5]], atol=1e-9)

    def test_spline_needs_two_points(self):
        with pytest.raises(ValueError):
            interpolate.fit_spline([[1, 1], [1, 1]])
