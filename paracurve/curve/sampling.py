import logging

import numpy

from ..polyline import interpolate
from ..polyline.polyline import Polyline

logger = logging.getLogger(__name__)

# number of points used when a caller does not specify one
DEFAULT_NUM_POINTS = 100
# dense samples per output point when resampling by arc length
DEFAULT_OVERSAMPLE = 10

def parameter_space(num_points):
    """Return num_points evenly spaced parameter values covering [0, 1],
    including both endpoints. One point gives [0]; zero points gives an empty
    array."""
    if num_points < 0:
        raise ValueError('Number of points must be non-negative, not {}.'.format(num_points))
    return numpy.linspace(0, 1, num_points)

def iter_samples(curve, num_points=None):
    """Lazily yield the points of a curve at num_points evenly spaced
    parameter values in [0, 1]. Each call starts a fresh iteration.

    A negative num_points raises ValueError here, not when iteration begins.
    """
    if num_points is None:
        num_points = DEFAULT_NUM_POINTS
    return _iter_evaluate(curve, parameter_space(num_points))

def _iter_evaluate(curve, parameters):
    for t in parameters:
        yield curve.evaluate(float(t))

def sample(curve, num_points=None):
    """Evaluate a curve at num_points evenly spaced parameter values.

    Parameters:
        curve: any Curve (planar, spatial, angular, or polar).
        num_points: number of samples, or None to use DEFAULT_NUM_POINTS.

    Returns: array of shape (num_points, d), where d is the dimension of the
        curve. The first and last points are exactly curve.evaluate(0.0) and
        curve.evaluate(1.0).
    """
    if num_points is None:
        num_points = DEFAULT_NUM_POINTS
    parameters = parameter_space(num_points)
    logger.debug('Sampling %r at %d points', curve, num_points)
    points = numpy.empty((len(parameters), curve.dimension), dtype=float)
    for i, t in enumerate(parameters):
        points[i] = curve.evaluate(float(t))
    return points


def to_polyline(curve, num_points=None):
    """Sample a curve into a Polyline that records whether the curve is closed."""
    return Polyline(sample(curve, num_points), curve.is_closed())

def to_polyline_2d(curve, num_points=None):
    _check_dimension(curve, 2)
    return to_polyline(curve, num_points)

def to_polyline_3d(curve, num_points=None):
    _check_dimension(curve, 3)
    return to_polyline(curve, num_points)

def _check_dimension(curve, dimension):
    if curve.dimension != dimension:
        raise ValueError('Expected a {}D curve, got a {}D curve.'.format(dimension, curve.dimension))

def sample_by_arc_length(curve, num_points=None, oversample=DEFAULT_OVERSAMPLE):
    """Sample a curve at num_points positions equally spaced along its length
    (rather than in parameter value), approximated by linear interpolation
    along a dense sampling of oversample*num_points points.

    Returns: a Polyline with the curve's closedness.
    """
    if num_points is None:
        num_points = DEFAULT_NUM_POINTS
    dense = to_polyline(curve, max(2, num_points * oversample))
    return interpolate.linear_resample_polyline(dense, num_points)
