import numpy

def _points(polyline):
    # accept a Polyline or any (n, m) array-like of points
    return numpy.asarray(getattr(polyline, 'points', polyline), dtype=float)

def cumulative_distances(points, unit=True):
    """Return cumulative distances along a polyline.

    Parameters:
    points: Polyline, or array of shape (n,m) consisting of n points in m dimensions
    unit: if True, return distances divided by total length of the curve,
          if False, return actual arc lengths."""
    points = _points(points)
    distances = numpy.concatenate([[0], numpy.add.accumulate(numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)))])
    if unit:
        distances /= distances[-1]
    return distances

def length(points):
    """Return the total length of a polyline. For a closed Polyline, the
    segment from the last point back to the first is included."""
    closed = getattr(points, 'closed', False)
    points = _points(points)
    if closed and len(points) > 1:
        points = numpy.concatenate([points, points[:1]])
    return numpy.sqrt(((points[:-1] - points[1:])**2).sum(axis=1)).sum()

def filter_dup_points(points):
    """Return a polyline with no duplicate or near-duplicate consecutive points."""
    points = _points(points)
    points_out = [points[0]]
    for point in points[1:]:
        if not numpy.allclose(point, points_out[-1]):
            points_out.append(point)
    return numpy.array(points_out)

def area(points):
    """Return the unsigned area enclosed by a 2D polyline, treated as a
    polygon whether or not it is marked closed (shoelace formula)."""
    points = _points(points)
    xs = points[:,0]
    ys = points[:,1]
    y_forward = numpy.roll(ys, -1, axis=0)
    y_backward = numpy.roll(ys, 1, axis=0)
    return numpy.absolute(numpy.sum(xs * (y_backward - y_forward)) / 2.0)

def contains_point(points, point):
    """Return True if the 2D point lies inside the polygon described by a
    polyline, by the even-odd rule. Whether to repeat the first vertex at the
    end does not matter.

    Algorithm from https://wrf.ecse.rpi.edu/Research/Short_Notes/pnpoly.html"""
    points = _points(points)
    testx, testy = point
    xi, yi = points[:,0], points[:,1]
    xj, yj = numpy.roll(xi, 1), numpy.roll(yi, 1)
    straddles = (yi > testy) != (yj > testy)
    with numpy.errstate(divide='ignore', invalid='ignore'):
        crossing_x = (xj - xi) * (testy - yi) / (yj - yi) + xi
    crossings = straddles & (testx < crossing_x)
    return bool(crossings.sum() % 2)
