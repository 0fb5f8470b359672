'''
Polyline
--------
Functions for computations over curves approximated as series of points.
 - polyline.polyline: the Polyline type.
 - polyline.geometry: lengths, enclosed areas, and point containment for polylines.
 - polyline.interpolate: resample polylines linearly or through smoothing splines (using scipy.interpolate).
'''
