"""
geomcore — variable-dimensionality coordinate model.

Value layer shared by geometry objects: coordinate variants for XY, XYZ,
XYM, XYZM and extended shapes, the coordinate sequence contract with its
factories, ordering, equality comparers and the coordinate list builder.
"""

__version__ = "0.3.0"
