"""Named curves defined by radius as a function of angle.

Each curve supplies only get_radius(); Cartesian positions come from
base.PolarCurve. Several of these formulas are undefined at particular angles
(secants where the cosine vanishes, square roots or fractional powers of
negative numbers): there the radius is inf or NaN, and so is the point.
"""

import collections

import numpy

from .. import angle as _angle
from ..curve import base


class Cardioid(collections.namedtuple('Cardioid', ('a',)), base.PolarCurve):
    """r = 2a(1 - cos theta): cusp at the origin, pointing along +x."""
    __slots__ = ()

    def get_radius(self, angle):
        return 2 * self.a * (1 - _angle.cos(angle))

    def is_closed(self):
        return True


class Limacon(collections.namedtuple('Limacon', ('a', 'b')), base.PolarCurve):
    """r = b + a cos theta. With a == b this is a cardioid; with b < a it has an inner loop."""
    __slots__ = ()

    def get_radius(self, angle):
        return self.b + self.a * _angle.cos(angle)

    def is_closed(self):
        return True


class Rose(collections.namedtuple('Rose', ('a', 'k')), base.PolarCurve):
    """r = a cos(k*theta)."""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * _angle.cos(angle * self.k)

    def is_closed(self):
        return True


class ArchimedeanSpiral(collections.namedtuple('ArchimedeanSpiral', ('a', 'b')), base.PolarCurve):
    """r = a + b*theta"""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a + self.b * angle.radians


class LogarithmicSpiral(collections.namedtuple('LogarithmicSpiral', ('a', 'b')), base.PolarCurve):
    """r = a e^(b*theta)"""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * numpy.exp(self.b * angle.radians)


class FermatSpiral(collections.namedtuple('FermatSpiral', ('a',)), base.PolarCurve):
    """r = a sqrt(theta) (one branch; negative angles give NaN)."""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * numpy.sqrt(numpy.float64(angle.radians))


class SinusoidalSpiral(collections.namedtuple('SinusoidalSpiral', ('a', 'n')), base.PolarCurve):
    """r^n = a^n cos(n*theta), i.e. r = a cos(n*theta)^(1/n). n = 1 is a circle, n = 2 a
    lemniscate of Bernoulli, n = 1/2 a cardioid, n = -1 a line."""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * numpy.power(_angle.cos(angle * self.n), numpy.float64(1) / self.n)


class ConicSection(collections.namedtuple('ConicSection', ('semi_latus_rectum', 'eccentricity')), base.PolarCurve):
    """r = l / (1 + e cos theta), with one focus at the origin: a circle for e == 0,
    an ellipse for e < 1, a parabola for e == 1 and a hyperbola for e > 1."""
    __slots__ = ()

    def get_radius(self, angle):
        return self.semi_latus_rectum / (1 + self.eccentricity * _angle.cos(angle))

    def is_closed(self):
        return self.eccentricity < 1


class LemniscateOfBernoulli(collections.namedtuple('LemniscateOfBernoulli', ('a',)), base.PolarCurve):
    """r^2 = a^2 cos 2*theta. Only the lobes where cos 2*theta >= 0 are real; elsewhere
    the radius is NaN."""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * numpy.sqrt(_angle.cos(angle * 2))


class TrisectrixOfMaclaurin(collections.namedtuple('TrisectrixOfMaclaurin', ('a',)), base.PolarCurve):
    """r = (a/2)(4 cos theta - sec theta)"""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a / 2 * (4 * _angle.cos(angle) - _angle.sec(angle))


class ConchoidOfDeSluze(collections.namedtuple('ConchoidOfDeSluze', ('a',)), base.PolarCurve):
    """r = sec theta + a cos theta"""
    __slots__ = ()

    def get_radius(self, angle):
        return _angle.sec(angle) + self.a * _angle.cos(angle)


class TschirnhausenCubic(collections.namedtuple('TschirnhausenCubic', ('a',)), base.PolarCurve):
    """r = a sec^3(theta/3)"""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * _angle.sec(angle / 3)**3


class CycloidOfCeva(collections.namedtuple('CycloidOfCeva', ('a',)), base.PolarCurve):
    """r = a(1 + 2 cos 2*theta)"""
    __slots__ = ()

    def get_radius(self, angle):
        return self.a * (1 + 2 * _angle.cos(angle * 2))

    def is_closed(self):
        return True
