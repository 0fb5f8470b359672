"""Evaluation contracts shared by every parametric curve.

A curve maps a parameter t in [0, 1] to a point (a numpy array of shape (2,)
or (3,)). Curves that are naturally expressed in terms of an angle implement
evaluate_angle() instead, and t is interpreted as a fraction of a full turn.
Polar curves go one step further and implement only get_radius(); their
Cartesian points are always derived by polar-to-Cartesian conversion.

Which method a concrete curve implements:
    PlanarCurve / SpatialCurve: evaluate(t)
    AngularCurve2D / AngularCurve3D: evaluate_angle(angle)
    PolarCurve: get_radius(angle)

Closedness is a declared property of each curve (is_closed(), False unless
overridden), not something inferred from the geometry.
"""

import abc
import collections

import numpy

from .. import angle as _angle

class Curve(abc.ABC):
    __slots__ = ()
    dimension = None

    @abc.abstractmethod
    def evaluate(self, t):
        """Return the point on the curve at parameter t."""

    def is_closed(self):
        return False

    def __call__(self, t):
        return self.evaluate(t)


class PlanarCurve(Curve):
    __slots__ = ()
    dimension = 2


class SpatialCurve(Curve):
    __slots__ = ()
    dimension = 3


class _AngularEvaluation(abc.ABC):
    """Derive the scalar-parameter evaluate() from evaluate_angle(), with t
    taken as a number of turns."""
    __slots__ = ()

    def evaluate(self, t):
        return self.evaluate_angle(_angle.Angle.from_turns(t))

    @abc.abstractmethod
    def evaluate_angle(self, angle):
        """Return the point on the curve at the given Angle."""


class AngularCurve2D(_AngularEvaluation, PlanarCurve):
    __slots__ = ()


class AngularCurve3D(_AngularEvaluation, SpatialCurve):
    __slots__ = ()


class PolarCoordinate(collections.namedtuple('PolarCoordinate', ('radius', 'angle'))):
    __slots__ = ()

    def to_cartesian(self):
        return polar_to_cartesian(self.radius, self.angle)


def polar_to_cartesian(radius, angle):
    """Convert a radius and Angle to a 2D point: (cos(angle), sin(angle)) * radius."""
    with numpy.errstate(invalid='ignore'):
        return numpy.array([_angle.cos(angle), _angle.sin(angle)]) * radius


_DERIVED_POLAR_METHODS = ('evaluate', 'evaluate_angle', 'evaluate_polar')

def _derived_polar_method(name):
    # resolved through the MRO, so a mixin ahead of PolarCurve counts as an override
    if name == 'evaluate':
        return _AngularEvaluation.evaluate
    return getattr(PolarCurve, name)

class PolarCurve(AngularCurve2D):
    """A planar curve defined by its radius as a function of angle.

    Subclasses implement get_radius() only. The polar and Cartesian forms are
    derived from it and may not be redefined: doing so raises TypeError when
    the subclass is created.

    Radii are computed with floating-point division and invalid-operation
    warnings silenced, so formulas that are undefined at some angle (e.g. a
    secant where the cosine vanishes) yield inf or NaN rather than an error.
    """
    __slots__ = ()

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        overridden = [name for name in _DERIVED_POLAR_METHODS
            if getattr(cls, name) is not _derived_polar_method(name)]
        if overridden:
            raise TypeError('Polar curve {} may not override {}: implement get_radius() instead.'.format(
                cls.__name__, ', '.join(overridden)))

    @abc.abstractmethod
    def get_radius(self, angle):
        """Return the radius of the curve at the given Angle."""

    def evaluate_polar(self, angle):
        with numpy.errstate(divide='ignore', invalid='ignore'):
            radius = self.get_radius(angle)
        return PolarCoordinate(radius, angle)

    def evaluate_angle(self, angle):
        return self.evaluate_polar(angle).to_cartesian()
