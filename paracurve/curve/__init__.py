'''
Curve
-----
 - curve.base: the evaluation contracts (Curve, PlanarCurve, SpatialCurve, AngularCurve2D/3D, PolarCurve).
 - curve.sampling: sample curves at evenly spaced parameters and convert them to polylines.
 - curve.bezier: quadratic and cubic Bezier curves and their derivatives, for scalars or points.
'''
