'''
# paracurve

Closed-form parametric curves, sampled into polylines.

Every curve maps a parameter t in [0, 1] to a 2D or 3D point (a numpy array).
Curves defined by angle interpret t as a fraction of a full turn; polar curves
are defined by their radius alone. Any curve can be sampled into a Polyline
that records whether the curve is closed.

 - angle: the Angle type (radians / turns / degrees), trigonometric helpers, and lerp.
 - functions: real-valued functions of one variable (polynomials, sine wave) and staircase quantization.
 - log: logging setup for applications using paracurve.

Curve
-----
 - curve.base: the evaluation contracts (Curve, PlanarCurve, SpatialCurve, AngularCurve2D/3D, PolarCurve).
 - curve.sampling: sample curves at evenly spaced parameters and convert them to polylines.
 - curve.bezier: quadratic and cubic Bezier curves and their derivatives, for scalars or points.

Catalog
-------
 - catalog.angular: circles, ellipses, trochoids, Lissajous figures, helices, and knots.
 - catalog.polar: cardioids, roses, spirals, conic sections, and other polar curves.
 - catalog.parametric: line segments and graphs of real functions.

Polyline
--------
 - polyline.polyline: the Polyline type.
 - polyline.geometry: lengths, enclosed areas, and point containment for polylines.
 - polyline.interpolate: resample polylines linearly or through smoothing splines (using scipy.interpolate).
'''

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
