"""
Multi-dimensional Bézier curves composed of one scalar polynomial per axis.
"""

import logging
from functools import lru_cache
from typing import Optional, Tuple

import numpy as np

from .algebra import Point, Vector, coordinates, in_unit_interval
from .bezier import BezierPoly, order_name, poly_class

logger = logging.getLogger(__name__)


class BezierCurve:
    """
    Curve of order ``ORDER`` over ``DIMENSION``-dimensional points.

    Axis i of every result (point, slope, elevated or split curve) comes
    from the axis i polynomial alone.
    """

    __slots__ = ("_axes",)

    ORDER: Optional[int] = None
    DIMENSION: Optional[int] = None

    def __init__(self, *points):
        """
        Args:
            points: Exactly ORDER + 1 points (Point, sequence or array) with
                DIMENSION coordinates each

        Raises:
            ValueError: wrong number of points or of coordinates
        """
        if self.ORDER is None or self.DIMENSION is None:
            raise TypeError("BezierCurve has no order; use curve_class(order, dimension)")
        if len(points) != self.ORDER + 1:
            raise ValueError(
                f"{type(self).__name__} needs {self.ORDER + 1} points, got {len(points)}")
        rows = [coordinates(p) for p in points]
        for i, row in enumerate(rows):
            if len(row) != self.DIMENSION:
                raise ValueError(
                    f"{type(self).__name__} point {i} has {len(row)} coordinates, expected {self.DIMENSION}")
        P = np.array(rows)
        poly = poly_class(self.ORDER)
        self._axes = tuple(poly._from_array(P[:, i]) for i in range(self.DIMENSION))

    @classmethod
    def from_points(cls, points) -> Optional["BezierCurve"]:
        """Build from a sequence of points; None on any count or dimension mismatch."""
        points = tuple(points)
        if cls.ORDER is None or len(points) != cls.ORDER + 1:
            return None
        if any(len(coordinates(p)) != cls.DIMENSION for p in points):
            return None
        return cls(*points)

    @classmethod
    def from_axes(cls, *axes: BezierPoly) -> "BezierCurve":
        """Recombine DIMENSION scalar polynomials of order ORDER."""
        if len(axes) != cls.DIMENSION:
            raise ValueError(f"{cls.__name__} needs {cls.DIMENSION} axis curves, got {len(axes)}")
        poly = poly_class(cls.ORDER)
        for axis in axes:
            if type(axis) is not poly:
                raise ValueError(f"{cls.__name__} axis curves must be {poly.__name__}, got {type(axis).__name__}")
        obj = cls.__new__(cls)
        obj._axes = tuple(axes)
        return obj

    @classmethod
    def order_static(cls) -> int:
        return cls.ORDER

    def order(self) -> int:
        return self.ORDER

    @property
    def dimension(self) -> int:
        return self.DIMENSION

    @property
    def axes(self) -> Tuple[BezierPoly, ...]:
        return self._axes

    def _control_matrix(self):
        return np.column_stack([axis._values for axis in self._axes])

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(Point(row) for row in self._control_matrix())

    @property
    def start(self) -> Point:
        return Point([axis.start for axis in self._axes])

    @property
    def end(self) -> Point:
        return Point([axis.end for axis in self._axes])

    def _combine(self, values, cls):
        if np.ndim(values[0]) == 0:
            return cls(values)
        return np.column_stack(values)

    def interpolate(self, t) -> Optional[Point]:
        if not in_unit_interval(t):
            return None
        return self.interpolate_unbounded(t)

    def interpolate_unbounded(self, t):
        """Point at t (no range check); an array of t gives an (m, D) array."""
        return self._combine([axis.interpolate_unbounded(t) for axis in self._axes], Point)

    def slope(self, t) -> Optional[Vector]:
        if not in_unit_interval(t):
            return None
        return self.slope_unbounded(t)

    def slope_unbounded(self, t):
        return self._combine([axis.slope_unbounded(t) for axis in self._axes], Vector)

    def elevate(self) -> "BezierCurve":
        return curve_class(self.ORDER + 1, self.DIMENSION).from_axes(
            *(axis.elevate() for axis in self._axes))

    def split(self, t):
        """(left, right) at t in [0, 1], None if t is out of range."""
        if not in_unit_interval(t) or np.ndim(t) != 0:
            return None
        return self.split_unbounded(t)

    def split_unbounded(self, t):
        halves = [axis.split_unbounded(t) for axis in self._axes]
        cls = type(self)
        return (cls.from_axes(*(left for left, _ in halves)),
                cls.from_axes(*(right for _, right in halves)))

    def sample(self, count: int) -> np.ndarray:
        """(count, D) points at evenly spaced parameters over [0, 1]."""
        return np.column_stack([axis.sample(count) for axis in self._axes])

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._axes == other._axes

    __hash__ = None

    def __repr__(self):
        pts = ", ".join(repr(p.to_tuple()) for p in self.points)
        return f"{type(self).__name__}({pts})"


@lru_cache(maxsize=None)
def curve_class(order: int, dimension: int) -> type:
    """
    The BezierCurve subclass for an (order, dimension) pair, created on first use.
    """
    if order < 0:
        raise ValueError(f"order must be >= 0, got {order}")
    if dimension < 1:
        raise ValueError(f"dimension must be >= 1, got {dimension}")
    name = f"{order_name(order, default=f'Order{order}Curve')}{dimension}d"
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "ORDER": order,
        "DIMENSION": dimension,
    }
    logger.debug("created composite curve class %s", name)
    return type(name, (BezierCurve,), namespace)


def bezier_curve(points) -> BezierCurve:
    """
    Build a composite curve, taking the order from the number of points and
    the dimension from the first point.
    """
    points = tuple(points)
    if not points:
        raise ValueError("a curve needs at least one point")
    return curve_class(len(points) - 1, len(coordinates(points[0])))(*points)
