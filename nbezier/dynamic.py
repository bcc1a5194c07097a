"""
Bézier curves whose order is only known at runtime.

``DynamicBezier`` wraps a caller-supplied container of control points
(scalars, ``Point``s or coordinate arrays) and derives its order from the
container length on every call, so edits to the container are picked up
immediately. Bernstein weights come from a ``BinomialCache``.
"""

import numpy as np

from .algebra import coordinates, in_unit_interval, is_scalar, rebuild
from .binomial import DEFAULT_CACHE, BinomialCache
from .de_casteljau import de_casteljau_split
from .matrices import bernstein_row, derivative_matrix, elevation_matrix

_EMPTY_MESSAGE = "DynamicBezier needs at least one control point"


class DynamicBezier:
    """
    Arbitrary-order Bézier curve over a mutable point container.

    Args:
        points: Control points; the curve order is len(points) - 1
        cache: Binomial coefficient cache, the process-wide one by default

    Raises:
        ValueError: empty container, here or when a later call finds the
            container emptied
        CoefficientOverflowError: order above cache.max_supported
    """

    __slots__ = ("_points", "_cache")

    def __init__(self, points, cache: BinomialCache = None):
        if cache is None:
            cache = DEFAULT_CACHE
        if len(points) == 0:
            raise ValueError(_EMPTY_MESSAGE)
        # Validates the order and warms the cache
        cache.coefficients(len(points) - 1)
        self._points = points
        self._cache = cache

    @classmethod
    def from_points(cls, points, cache: BinomialCache = None):
        """Build from a container; None when it is empty."""
        if len(points) == 0:
            return None
        return cls(points, cache)

    def order(self) -> int:
        return len(self._points) - 1

    @property
    def points(self):
        """The wrapped container (not a copy)."""
        return self._points

    @property
    def cache(self) -> BinomialCache:
        return self._cache

    @property
    def start(self):
        return self._points[0]

    @property
    def end(self):
        return self._points[-1]

    def unwrap(self):
        return self._points

    def _control_matrix(self):
        if len(self._points) == 0:
            raise ValueError(_EMPTY_MESSAGE)
        return np.array([coordinates(p) for p in self._points])

    def _result(self, out, t, as_vector=False):
        template = self._points[0]
        if np.ndim(t) == 0:
            return rebuild(template, out, as_vector=as_vector)
        # Scalar curves sampled at many t give a flat array
        if is_scalar(template):
            return out[:, 0]
        return out

    def interpolate(self, t):
        """Point at t in [0, 1]; None if t is outside that range."""
        if not in_unit_interval(t):
            return None
        return self.interpolate_unbounded(t)

    def interpolate_unbounded(self, t):
        P = self._control_matrix()
        N = P.shape[0] - 1
        out = bernstein_row(N, t, self._cache.coefficients(N)) @ P
        return self._result(out, t)

    def slope(self, t):
        """Derivative at t in [0, 1]; None if t is outside that range."""
        if not in_unit_interval(t):
            return None
        return self.slope_unbounded(t)

    def slope_unbounded(self, t):
        P = self._control_matrix()
        N = P.shape[0] - 1
        if N == 0:
            out = np.zeros(np.shape(t) + (P.shape[1],))
        else:
            out = bernstein_row(N - 1, t, self._cache.coefficients(N - 1)) @ (derivative_matrix(N) @ P)
        return self._result(out, t, as_vector=True)

    def _rebuilt(self, P):
        template = self._points[0]
        return [rebuild(template, row) for row in P]

    def elevate(self) -> "DynamicBezier":
        """Order N+1 curve over a new list, same cache."""
        P = self._control_matrix()
        return DynamicBezier(self._rebuilt(elevation_matrix(P.shape[0] - 1) @ P), self._cache)

    def split(self, t):
        """(left, right) at t in [0, 1], None if t is out of range."""
        if not in_unit_interval(t) or np.ndim(t) != 0:
            return None
        return self.split_unbounded(t)

    def split_unbounded(self, t):
        left, right = de_casteljau_split(self._control_matrix(), t)
        return (DynamicBezier(self._rebuilt(left), self._cache),
                DynamicBezier(self._rebuilt(right), self._cache))

    def sample(self, count: int) -> np.ndarray:
        return self.interpolate_unbounded(np.linspace(0.0, 1.0, count))

    def __eq__(self, other):
        if not isinstance(other, DynamicBezier):
            return NotImplemented
        return np.array_equal(self._control_matrix(), other._control_matrix())

    __hash__ = None

    def __repr__(self):
        return f"DynamicBezier(order={self.order()}, points={list(self._points)!r})"
