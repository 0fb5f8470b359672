"""Quadratic and cubic Bezier curves in closed form.

The functions below only use scalar multiplication, addition, and subtraction
of the control values, so they work equally for plain numbers, 2D or 3D
points given as numpy arrays, or any other type supporting that arithmetic.
The parameter t is not restricted to [0, 1]: values outside that interval
extrapolate the curve.
"""

import collections

import numpy
from scipy import special

from . import base


def quadratic_bezier(a, b, c, t):
    s = 1 - t
    return a * s**2 + b * (2 * s * t) + c * t**2

def quadratic_bezier_derivative(a, b, c, t):
    return (b - a) * (2 * (1 - t)) + (c - b) * (2 * t)

def quadratic_bezier_second_derivative(a, b, c, t=None):
    """Second derivative of a quadratic Bezier: constant along the curve, so
    t is accepted only for symmetry with the other functions."""
    return (a - b * 2 + c) * 2

def cubic_bezier(a, b, c, d, t):
    s = 1 - t
    return a * s**3 + b * (3 * s**2 * t) + c * (3 * s * t**2) + d * t**3

def cubic_bezier_derivative(a, b, c, d, t):
    s = 1 - t
    return (b - a) * (3 * s**2) + (c - b) * (6 * s * t) + (d - c) * (3 * t**2)

def cubic_bezier_second_derivative(a, b, c, d, t):
    return (a - b * 2 + c) * (6 * (1 - t)) + (b - c * 2 + d) * (6 * t)

def bezier_points(control_points, parameters, derivative=0):
    """Evaluate a Bezier curve of arbitrary degree (or one of its derivatives)
    at many parameter values at once, via the Bernstein basis.

    Parameters:
        control_points: array of shape (k+1, d) for a degree-k curve in d
            dimensions, or shape (k+1,) for a scalar-valued curve.
        parameters: array of shape (n,) of parameter values.
        derivative: order of the derivative to evaluate. The derivative of a
            degree-k Bezier is itself a degree k-1 Bezier whose control
            points are k times the differences of the originals.

    Returns: array of shape (n, d) (or (n,) for scalar control values).
    """
    control_points = numpy.asarray(control_points, dtype=float)
    parameters = numpy.asarray(parameters, dtype=float)
    for _ in range(derivative):
        degree = len(control_points) - 1
        if degree == 0:
            return numpy.zeros(parameters.shape + control_points.shape[1:])
        control_points = degree * numpy.diff(control_points, axis=0)
    degree = len(control_points) - 1
    i = numpy.arange(degree + 1)
    t = parameters[:, numpy.newaxis]
    # basis has shape (n, k+1): row j holds the Bernstein weights at parameters[j]
    basis = special.comb(degree, i) * t**i * (1 - t)**(degree - i)
    return basis @ control_points

def _control_dimension(point):
    # scalar control values make a one-dimensional curve
    return len(point) if numpy.ndim(point) else 1


class QuadraticBezierCurve(collections.namedtuple('QuadraticBezierCurve', ('a', 'b', 'c')), base.Curve):
    __slots__ = ()

    @property
    def dimension(self):
        return _control_dimension(self.a)

    def _controls(self):
        return [numpy.asarray(p, dtype=float) for p in self]

    def evaluate(self, t):
        return quadratic_bezier(*self._controls(), t)

    def derivative(self, t):
        return quadratic_bezier_derivative(*self._controls(), t)


class CubicBezierCurve(collections.namedtuple('CubicBezierCurve', ('a', 'b', 'c', 'd')), base.Curve):
    __slots__ = ()

    @property
    def dimension(self):
        return _control_dimension(self.a)

    def _controls(self):
        return [numpy.asarray(p, dtype=float) for p in self]

    def evaluate(self, t):
        return cubic_bezier(*self._controls(), t)

    def derivative(self, t):
        return cubic_bezier_derivative(*self._controls(), t)

    def second_derivative(self, t):
        return cubic_bezier_second_derivative(*self._controls(), t)
