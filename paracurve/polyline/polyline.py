import collections

import numpy

class Polyline(collections.namedtuple('Polyline', ('points', 'closed'))):
    """Ordered points sampled from a curve, plus whether the curve is closed.

    Points are stored as a read-only float array of shape (n, d). Closedness
    is carried as metadata only: the final point is never dropped or forced to
    coincide with the first. An empty point list with no shape gives a
    (0, 0) array, of dimension 0."""
    __slots__ = ()

    def __new__(cls, points, closed=False):
        points = numpy.array(points, dtype=float)
        if points.size == 0 and points.ndim < 2:
            # no points and no way to tell their dimension
            points = points.reshape(0, 0)
        points.flags.writeable = False
        return super().__new__(cls, points, bool(closed))

    @property
    def dimension(self):
        return self.points.shape[1]
