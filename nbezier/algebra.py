"""
Point/vector algebra shared by every curve type.

A curve only needs its control points to support addition, subtraction,
scaling by a float and a zero element. Plain floats and numpy arrays already
do; ``Point`` and ``Vector`` add the affine distinction between locations
and displacements on top of a fixed-length coordinate array.

Coordinates are always reachable through an index-based accessor
(``p[i]``, ``p[i] = v``), which is what the per-axis algorithms use.
"""

from numbers import Real

import numpy as np

from .constants import AXIS_NAMES, DEFAULT_TOLERANCE


def is_scalar(value) -> bool:
    """True for Python/numpy real numbers and 0-d arrays."""
    if isinstance(value, Real):
        return True
    return isinstance(value, np.ndarray) and value.ndim == 0


def in_unit_interval(t) -> bool:
    """True when t (or every element of an array of t) lies in [0, 1]; nan never does."""
    t = np.asarray(t, dtype=float)
    return bool(np.all((t >= 0.0) & (t <= 1.0)))


def _axis_property(index):
    name = AXIS_NAMES[index]

    def getter(self):
        if index >= len(self._coords):
            raise AttributeError(f"{type(self).__name__} of dimension {len(self._coords)} has no '{name}' axis")
        return float(self._coords[index])

    def setter(self, value):
        if index >= len(self._coords):
            raise AttributeError(f"{type(self).__name__} of dimension {len(self._coords)} has no '{name}' axis")
        self._coords[index] = value

    return property(getter, setter, doc=f"Coordinate along the '{name}' axis.")


class _Coordinates:
    """Fixed-length float coordinates with an index-based accessor."""

    __slots__ = ("_coords",)

    def __init__(self, *coords):
        # Point(1, 2) and Point([1, 2]) are equivalent
        if len(coords) == 1 and not is_scalar(coords[0]):
            coords = coords[0]
        arr = np.array(coords, dtype=float).reshape(-1)
        if arr.size == 0:
            raise ValueError(f"{type(self).__name__} needs at least one coordinate")
        self._coords = arr

    @classmethod
    def zero(cls, dimension):
        """Additive identity of the given dimension."""
        if dimension < 1:
            raise ValueError(f"dimension must be >= 1, got {dimension}")
        return cls(np.zeros(dimension))

    @classmethod
    def _wrap(cls, arr):
        obj = cls.__new__(cls)
        obj._coords = arr
        return obj

    @property
    def dimension(self):
        return len(self._coords)

    def __len__(self):
        return len(self._coords)

    def __getitem__(self, index):
        return float(self._coords[index])

    def __setitem__(self, index, value):
        self._coords[index] = value

    def __iter__(self):
        return (float(c) for c in self._coords)

    def __array__(self, dtype=None, copy=None):
        return np.array(self._coords, dtype=dtype)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self._coords, other._coords)

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(float(c)) for c in self._coords)})"

    x = _axis_property(0)
    y = _axis_property(1)
    z = _axis_property(2)
    w = _axis_property(3)

    def to_tuple(self):
        return tuple(float(c) for c in self._coords)

    def copy(self):
        return self._wrap(self._coords.copy())

    def _other_coords(self, other):
        if len(other._coords) != len(self._coords):
            raise ValueError(
                f"dimension mismatch: {type(self).__name__}{len(self._coords)} "
                f"and {type(other).__name__}{len(other._coords)}")
        return other._coords

    def __mul__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        return self._wrap(self._coords * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar):
        if not is_scalar(scalar):
            return NotImplemented
        return self._wrap(self._coords / scalar)


class Vector(_Coordinates):
    """Displacement between two points."""

    __slots__ = ()

    def __add__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._wrap(self._coords + self._other_coords(other))

    def __sub__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector._wrap(self._coords - self._other_coords(other))

    def __neg__(self):
        return Vector._wrap(-self._coords)

    def length(self):
        return float(np.linalg.norm(self._coords))

    def normalize(self):
        length = self.length()
        if length == 0.0:
            raise ValueError("cannot normalize a zero-length vector")
        return self / length

    def perp(self):
        """The 2D vector rotated by +90 degrees."""
        if len(self._coords) != 2:
            raise ValueError(f"perp() is defined for 2D vectors only, got dimension {len(self._coords)}")
        return Vector(-self._coords[1], self._coords[0])

    def to_point(self):
        return Point._wrap(self._coords.copy())


class Point(_Coordinates):
    """
    Location in D-dimensional space.

    Besides Point +/- Vector -> Point and Point - Point -> Vector, points
    can be scaled and summed so that affine combinations (Bernstein sums,
    lerps) can be written directly.
    """

    __slots__ = ()

    def __add__(self, other):
        if not isinstance(other, (Point, Vector)):
            return NotImplemented
        return Point._wrap(self._coords + self._other_coords(other))

    def __sub__(self, other):
        if isinstance(other, Point):
            return Vector._wrap(self._coords - self._other_coords(other))
        if isinstance(other, Vector):
            return Point._wrap(self._coords - self._other_coords(other))
        return NotImplemented

    def to_vector(self):
        return Vector._wrap(self._coords.copy())


def coordinates(value) -> np.ndarray:
    """
    Coordinates of a scalar, Point, Vector, sequence or array as a new 1-D
    float array. A scalar has a single coordinate.
    """
    if isinstance(value, _Coordinates):
        return value._coords.copy()
    if is_scalar(value):
        return np.array([value], dtype=float)
    return np.array(value, dtype=float).reshape(-1)


def rebuild(template, coords, as_vector=False):
    """
    Build a value of the same kind as `template` from a coordinate row.

    Scalars stay scalars, points and vectors keep their class (with
    `as_vector` a Point template yields a Vector, for slopes), anything
    else comes back as a numpy array.
    """
    coords = np.asarray(coords, dtype=float)
    if is_scalar(template):
        return float(coords.reshape(-1)[0])
    if isinstance(template, Point):
        return Vector(coords) if as_vector else Point(coords)
    if isinstance(template, Vector):
        return Vector(coords)
    return coords.copy()


def lerp(a, b, t):
    """Linear interpolation a + (b - a) * t for any algebra type."""
    return a + (b - a) * t


def isclose(a, b, tol=DEFAULT_TOLERANCE) -> bool:
    """Coordinate-wise absolute comparison of two points, vectors or scalars."""
    ca, cb = coordinates(a), coordinates(b)
    if ca.shape != cb.shape:
        return False
    return bool(np.allclose(ca, cb, rtol=0.0, atol=tol))
