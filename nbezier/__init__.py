"""
Bézier curve algebra

This package evaluates, differentiates, degree-elevates and subdivides Bézier
curves of fixed order (linear through sextic and beyond) and of runtime
order, in any number of dimensions, and chains curves that share endpoints.

Example:
    >>> from nbezier import Point, curve_class
    >>> Cubic2d = curve_class(3, 2)
    >>> curve = Cubic2d(Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1))
    >>> curve.interpolate(0.5)
    Point(0.5, 0.5)
    >>> left, right = curve.split(0.5)
"""

from .algebra import Point, Vector, coordinates, rebuild, lerp, isclose, in_unit_interval
from .binomial import BinomialCache, CoefficientOverflowError, DEFAULT_CACHE, coefficients
from .bezier import (
    BezierPoly,
    poly_class,
    Constant,
    Linear,
    Quadratic,
    Cubic,
    Quartic,
    Quintic,
    Sextic
)
from .dynamic import DynamicBezier
from .composite import BezierCurve, curve_class, bezier_curve
from .chain import BezierChain
from .de_casteljau import (
    de_casteljau_table,
    de_casteljau_split,
    split_matrices,
    subdivide
)
from .matrices import bernstein_row, derivative_matrix, elevation_matrix
from . import constants

__all__ = [
    # Algebra
    'Point',
    'Vector',
    'coordinates',
    'rebuild',
    'lerp',
    'isclose',
    'in_unit_interval',

    # Binomial cache
    'BinomialCache',
    'CoefficientOverflowError',
    'DEFAULT_CACHE',
    'coefficients',

    # Fixed-order polynomials
    'BezierPoly',
    'poly_class',
    'Constant',
    'Linear',
    'Quadratic',
    'Cubic',
    'Quartic',
    'Quintic',
    'Sextic',

    # Dynamic-order and composite curves
    'DynamicBezier',
    'BezierCurve',
    'curve_class',
    'bezier_curve',

    # Chains
    'BezierChain',

    # De Casteljau functions
    'de_casteljau_table',
    'de_casteljau_split',
    'split_matrices',
    'subdivide',

    # Matrix functions
    'bernstein_row',
    'derivative_matrix',
    'elevation_matrix',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
