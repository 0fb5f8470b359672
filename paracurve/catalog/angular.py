"""Named curves parameterized by angle.

Each curve is an immutable record of its parameters, and evaluate_angle()
gives its closed-form position. Evaluating with a plain number t treats t as
a fraction of a full turn.
"""

import collections

import numpy

from ..curve import base

def _trig(angle, multiple=1):
    theta = angle.radians * multiple
    return numpy.cos(theta), numpy.sin(theta)


class Circle(collections.namedtuple('Circle', ('center', 'radius')), base.AngularCurve2D):
    __slots__ = ()

    def evaluate_angle(self, angle):
        c, s = _trig(angle)
        return numpy.asarray(self.center, dtype=float) + numpy.array([c, s]) * self.radius

    def is_closed(self):
        return True


class Ellipse(collections.namedtuple('Ellipse', ('center', 'semi_major', 'semi_minor')), base.AngularCurve2D):
    """Axis-aligned ellipse with its major axis along x."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        c, s = _trig(angle)
        return numpy.asarray(self.center, dtype=float) + numpy.array([self.semi_major * c, self.semi_minor * s])

    def is_closed(self):
        return True


class Epitrochoid(collections.namedtuple('Epitrochoid', ('fixed_radius', 'rolling_radius', 'distance')), base.AngularCurve2D):
    """Path of a point at 'distance' from the center of a circle rolling around
    the outside of a fixed circle."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        R, r, d = self
        c, s = _trig(angle)
        with numpy.errstate(divide='ignore', invalid='ignore'):
            c2, s2 = _trig(angle, numpy.float64(R + r) / r)
            return numpy.array([(R + r) * c - d * c2, (R + r) * s - d * s2])


class Hypotrochoid(collections.namedtuple('Hypotrochoid', ('fixed_radius', 'rolling_radius', 'distance')), base.AngularCurve2D):
    """Path of a point at 'distance' from the center of a circle rolling around
    the inside of a fixed circle (the spirograph curve)."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        R, r, d = self
        c, s = _trig(angle)
        with numpy.errstate(divide='ignore', invalid='ignore'):
            c2, s2 = _trig(angle, numpy.float64(R - r) / r)
            return numpy.array([(R - r) * c + d * c2, (R - r) * s - d * s2])


class Epicycloid(collections.namedtuple('Epicycloid', ('fixed_radius', 'rolling_radius')), base.AngularCurve2D):
    """Epitrochoid traced by a point on the rim of the rolling circle."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        return Epitrochoid(self.fixed_radius, self.rolling_radius, self.rolling_radius).evaluate_angle(angle)


class Hypocycloid(collections.namedtuple('Hypocycloid', ('fixed_radius', 'rolling_radius')), base.AngularCurve2D):
    """Hypotrochoid traced by a point on the rim of the rolling circle."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        return Hypotrochoid(self.fixed_radius, self.rolling_radius, self.rolling_radius).evaluate_angle(angle)


class ButterflyCurve(collections.namedtuple('ButterflyCurve', ('scale',)), base.AngularCurve2D):
    """Temple H. Fay's butterfly curve. The full figure needs twelve turns;
    a single turn traces one wing pair, so the curve is not closed over t in [0, 1]."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        t = angle.radians
        r = numpy.exp(numpy.cos(t)) - 2 * numpy.cos(4 * t) - numpy.sin(t / 12)**5
        return numpy.array([numpy.sin(t) * r, numpy.cos(t) * r]) * self.scale


class Lissajous(collections.namedtuple('Lissajous', ('frequency_x', 'frequency_y', 'phase', 'amplitude_x', 'amplitude_y')), base.AngularCurve2D):
    """Lissajous figure: (A sin(a t + phase), B sin(b t)). The phase is an Angle.

    Tagged open, even though integer frequencies make it loop."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        x = self.amplitude_x * numpy.sin(self.frequency_x * angle.radians + self.phase.radians)
        y = self.amplitude_y * numpy.sin(self.frequency_y * angle.radians)
        return numpy.array([x, y])


class Helix(collections.namedtuple('Helix', ('radius', 'pitch')), base.AngularCurve3D):
    """Circular helix about the z axis, rising 'pitch' per full turn."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        c, s = _trig(angle)
        return numpy.array([self.radius * c, self.radius * s, self.pitch * angle.turns])


class TorusKnot(collections.namedtuple('TorusKnot', ('p', 'q', 'major_radius', 'minor_radius')), base.AngularCurve3D):
    """(p, q) torus knot: winds p times around the torus's axis of rotational
    symmetry and q times around its tube."""
    __slots__ = ()

    def evaluate_angle(self, angle):
        cp, sp = _trig(angle, self.p)
        cq, sq = _trig(angle, self.q)
        r = self.major_radius + self.minor_radius * cq
        return numpy.array([r * cp, r * sp, -self.minor_radius * sq])

    def is_closed(self):
        return True


class TrefoilKnot(collections.namedtuple('TrefoilKnot', ('scale',)), base.AngularCurve3D):
    __slots__ = ()

    def evaluate_angle(self, angle):
        t = angle.radians
        x = numpy.sin(t) + 2 * numpy.sin(2 * t)
        y = numpy.cos(t) - 2 * numpy.cos(2 * t)
        z = -numpy.sin(3 * t)
        return numpy.array([x, y, z]) * self.scale

    def is_closed(self):
        return True


class FigureEightKnot(collections.namedtuple('FigureEightKnot', ('scale',)), base.AngularCurve3D):
    __slots__ = ()

    def evaluate_angle(self, angle):
        t = angle.radians
        r = 2 + numpy.cos(2 * t)
        return numpy.array([r * numpy.cos(3 * t), r * numpy.sin(3 * t), numpy.sin(4 * t)]) * self.scale

    def is_closed(self):
        return True
