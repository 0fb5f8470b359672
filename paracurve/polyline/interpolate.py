import logging

import numpy
from scipy import interpolate

from . import geometry
from .polyline import Polyline

logger = logging.getLogger(__name__)

def linear_resample_polyline(points, num_points):
    """Resample a piecewise linear curve to contain a given number of
    equally-spaced points, using linear interpolation.

    Parameters:
    points: Polyline, or array of n points in m dimensions; shape=(n,m)
    num_points: number of output points.

    Returns a resampled Polyline with num_points points (closed if the input
    was a closed Polyline)."""
    closed = getattr(points, 'closed', False)
    points = geometry.filter_dup_points(points)
    distances = geometry.cumulative_distances(points, unit=True)
    sample_positions = numpy.linspace(0, 1, num_points)
    resampled = [numpy.interp(sample_positions, distances, coords) for coords in points.T]
    return Polyline(numpy.transpose(resampled), closed)


def spline_resample_polyline(points, num_points, smoothing=None):
    """Resample a piecewise linear curve to contain a given number of
    equally-spaced points, using spline interpolation with automatically calculated
    smoothing.

    Parameters:
    points: Polyline, or array of n points in m dimensions; shape=(n,m)
    num_points: number of output points.
    smoothing: see fit_spline()

    Returns a resampled Polyline of num_points points, and the spline
    parameters (t,c,k) used for the resampling"""
    closed = getattr(points, 'closed', False)
    tck = fit_spline(points, smoothing)
    points_out = spline_interpolate(tck, num_points)
    return Polyline(points_out, closed), tck


def fit_spline(points, smoothing=None, order=None):
    """Fit a parametric smoothing spline to a given polyline.

    Parameters:
    points: Polyline, or array of n points in m dimensions; shape=(n,m)
    smoothing: smoothing factor: 0 requires perfect interpolation of the
        input points, at the cost of potentially high noise. Very large values
        will result in a low-order polynomial fit to the points. If None, an
        appropriate value based on the scale of the points will be selected.
    order: The desired order of the spline. If None, will be 1 if there are
        three or fewer input points, and otherwise 3.

    Returns a spline tuple (t,c,k) consisting of:
        t: the knots of the spline curve
        c: array of shape (n_coefficients, m) of b-spline coefficients
        k: the order of the spline.
    """
    points = geometry.filter_dup_points(points)
    l = len(points)
    if l < 2:
        raise ValueError('At least two distinct points are required to fit a spline.')
    if order is None:
        k = 1 if l < 4 else 3
    else:
        k = order
    # choose input parameter values for the curve as the distances along the polyline:
    # this gives something close to the "natural parameterization" of the curve.
    distances = geometry.cumulative_distances(points, unit=False)

    if smoothing is None:
        smoothing = l * distances[-1] / 600.

    logger.debug('Fitting order-%d spline to %d points (smoothing %g)', k, l, smoothing)
    ((t, c, k), u), fp, ier, msg = interpolate.splprep(points.T, u=distances, s=smoothing, k=k, full_output=True)
    if ier > 3:
        raise RuntimeError(msg)
    c = numpy.transpose(c)
    return t, c, k


def spline_interpolate(tck, num_points, derivative=0):
    """Return num_points equally spaced along the given spline.

    If derivative=0, then the points themselves will be given; if derivative>0
    then the derivatives at those points will be returned."""
    t, c, k = tck
    # t[-1] gives the maximum parameter value for the parametric curve
    output_positions = numpy.linspace(0, t[-1], num_points)
    return spline_evaluate(tck, output_positions, derivative)


def spline_evaluate(tck, positions, derivative=0):
    """Evaluate a parametric spline (or its derivative) at the given parameter values.

    Returns array of shape (len(positions), m)."""
    t, c, k = tck
    return numpy.transpose(interpolate.splev(positions, (t, list(numpy.transpose(c)), k), der=derivative))
