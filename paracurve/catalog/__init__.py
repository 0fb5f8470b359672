'''
Catalog
-------
Named curve families. Each is an immutable record of its parameters that
implements one of the contracts in curve.base.
 - catalog.angular: circles, ellipses, trochoids, Lissajous figures, helices, and knots.
 - catalog.polar: cardioids, roses, spirals, conic sections, and other polar curves.
 - catalog.parametric: line segments and graphs of real functions.
'''
