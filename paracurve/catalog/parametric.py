"""Named curves parameterized directly by t in [0, 1]."""

import collections

import numpy

from .. import angle as _angle
from ..curve import base

class LineSegment(collections.namedtuple('LineSegment', ('start', 'end')), base.Curve):
    """Straight segment from start to end, in 2 or 3 dimensions."""
    __slots__ = ()

    @property
    def dimension(self):
        return len(self.start)

    def evaluate(self, t):
        return _angle.lerp(numpy.asarray(self.start, dtype=float), numpy.asarray(self.end, dtype=float), t)


class FunctionGraph(collections.namedtuple('FunctionGraph', ('function', 'x_start', 'x_end')), base.PlanarCurve):
    """Graph (x, f(x)) of a RealFunction over x in [x_start, x_end]."""
    __slots__ = ()

    def evaluate(self, t):
        x = _angle.lerp(self.x_start, self.x_end, t)
        return numpy.array([x, self.function(x)], dtype=float)
