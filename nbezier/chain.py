"""
Chains of endpoint-sharing Bézier curves stored as one flat point sequence.

A chain of order N over points P_0 .. P_{kN} holds k curves; curve i uses
P_{iN} .. P_{iN+N}, so the end point of curve i is the very same slot as the
start point of curve i+1. Points past the last complete curve are ignored.
"""

import warnings

import numpy as np

from .algebra import coordinates
from .dynamic import DynamicBezier


class BezierChain:
    """
    View of a point container as consecutive curves of one order.

    Args:
        curve_type: A fixed-order curve class (BezierPoly or BezierCurve
            subclass) or DynamicBezier
        points: Mutable point container, a new list when omitted
        order: Curve order; required for DynamicBezier, taken from the class
            otherwise
        cache: BinomialCache handed to every DynamicBezier the chain builds,
            the process-wide one by default

    The chain keeps no derived state: edits to `points` show up in the next
    `get` or iteration.
    """

    def __init__(self, curve_type, points=None, order=None, cache=None):
        static_order = getattr(curve_type, "ORDER", None)
        if static_order is not None:
            if order is not None and order != static_order:
                raise ValueError(f"{curve_type.__name__} has order {static_order}, got order={order}")
            order = static_order
        elif isinstance(curve_type, type) and issubclass(curve_type, DynamicBezier):
            if order is None:
                raise ValueError("a DynamicBezier chain needs an explicit order")
        else:
            raise ValueError(f"{curve_type!r} is not a fixed-order curve class or DynamicBezier")
        if order < 1:
            raise ValueError(f"chain order must be >= 1, got {order}")

        if points is None:
            points = []
        self._curve_type = curve_type
        self._order = order
        self._points = points
        self._cache = cache

        remainder = (len(points) - 1) % order if len(points) else 0
        if remainder:
            warnings.warn(f"{remainder} trailing point(s) do not form a complete order {order} curve "
                          f"and are ignored")

    @classmethod
    def from_curves(cls, curve_type, curves, order=None, cache=None):
        """Chain the given curves; each must start where the previous one ends."""
        chain = cls(curve_type, [], order, cache)
        for curve in curves:
            chain.append_curve(curve)
        return chain

    @property
    def order(self) -> int:
        return self._order

    @property
    def curve_type(self):
        return self._curve_type

    @property
    def cache(self):
        """Cache for DynamicBezier curves, None for the process-wide default."""
        return self._cache

    @property
    def points(self):
        """The wrapped container (not a copy)."""
        return self._points

    def unwrap(self):
        return self._points

    def curve_count(self) -> int:
        n = len(self._points)
        if n == 0:
            return 0
        return (n - 1) // self._order

    def __len__(self):
        return self.curve_count()

    def _build(self, i):
        # Points of the wrong shape raise from the curve constructor
        start = i * self._order
        pts = self._points[start:start + self._order + 1]
        if issubclass(self._curve_type, DynamicBezier):
            return self._curve_type(pts, self._cache)
        return self._curve_type(*pts)

    def get(self, i):
        """
        Curve i, or None if i is not in [0, curve_count()).

        Raises:
            ValueError: the points of curve i do not fit the curve type
        """
        if not 0 <= i < self.curve_count():
            return None
        return self._build(i)

    def __getitem__(self, i):
        count = self.curve_count()
        if i < 0:
            i += count
        if not 0 <= i < count:
            raise IndexError(f"curve index out of range for a chain of {count} curves")
        return self._build(i)

    def iter(self):
        """Curves from first to last."""
        for i in range(self.curve_count()):
            yield self._build(i)

    def __iter__(self):
        return self.iter()

    def iter_reversed(self):
        """Curves from last to first; trailing points are skipped as in forward order."""
        for i in range(self.curve_count() - 1, -1, -1):
            yield self._build(i)

    def __reversed__(self):
        return self.iter_reversed()

    def append_curve(self, curve):
        """
        Extend the chain by a curve of the chain's order.

        The first curve contributes all its points; later ones must start at
        the chain's current last point and contribute the rest.

        Raises:
            ValueError: order mismatch, or the curve does not start at the
                chain's last point
        """
        if curve.order() != self._order:
            raise ValueError(f"cannot append an order {curve.order()} curve to an order {self._order} chain")
        pts = list(curve.points)
        if len(self._points) == 0:
            self._points.extend(pts)
            return
        if self.curve_count() * self._order + 1 != len(self._points):
            raise ValueError("cannot append to a chain with trailing points")
        if not np.array_equal(coordinates(self._points[-1]), coordinates(pts[0])):
            raise ValueError("curve does not start at the chain's last point")
        self._points.extend(pts[1:])

    def __repr__(self):
        return (f"BezierChain({getattr(self._curve_type, '__name__', self._curve_type)}, "
                f"order={self._order}, curves={self.curve_count()})")
