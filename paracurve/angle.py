import collections

import numpy

TAU = 2 * numpy.pi

class Angle(collections.namedtuple('Angle', ('radians',))):
    """Immutable angle, stored in radians.

    Construct with Angle.from_radians(), Angle.from_turns() (one turn is a
    full revolution) or Angle.from_degrees(), and read back any unit via the
    radians, turns, or degrees attributes. Angles add and subtract with one
    another and scale by plain numbers.
    """
    __slots__ = ()
    # keep numpy scalars from treating an Angle as a length-1 sequence
    __array_ufunc__ = None

    @classmethod
    def from_radians(cls, radians):
        return cls(radians)

    @classmethod
    def from_turns(cls, turns):
        return cls(turns * TAU)

    @classmethod
    def from_degrees(cls, degrees):
        return cls(degrees * numpy.pi / 180)

    @property
    def turns(self):
        return self.radians / TAU

    @property
    def degrees(self):
        return self.radians * 180 / numpy.pi

    def __add__(self, other):
        return Angle(self.radians + other.radians)

    def __sub__(self, other):
        return Angle(self.radians - other.radians)

    def __mul__(self, scale):
        return Angle(self.radians * scale)

    __rmul__ = __mul__

    def __truediv__(self, scale):
        return Angle(self.radians / scale)

    def __neg__(self):
        return Angle(-self.radians)

    # compare as angles, not as the underlying one-element tuple
    def __eq__(self, other):
        return isinstance(other, Angle) and self.radians == other.radians

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((Angle, self.radians))

    def __repr__(self):
        return 'Angle(radians={!r})'.format(self.radians)


def sin(angle):
    return numpy.sin(angle.radians)

def cos(angle):
    return numpy.cos(angle.radians)

def tan(angle):
    return numpy.tan(angle.radians)

def sec(angle):
    """Secant of an angle. Where the cosine is zero the result is +/-inf
    (or extremely large, as the cosine is rarely exactly zero in floating point)."""
    with numpy.errstate(divide='ignore'):
        return numpy.float64(1) / numpy.cos(angle.radians)

def lerp(a, b, t):
    """Linearly interpolate between a and b. Values of t outside [0, 1]
    extrapolate. Works for scalars and arrays alike."""
    return a + (b - a) * t
