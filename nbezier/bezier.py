"""
Fixed-order one-dimensional Bézier polynomials.

Every order has its own class, created once by ``poly_class(order)``, whose
Bernstein weights C(N, k) are class constants. Named classes exist for the
orders 1 through 6; higher orders are produced on demand (elevating a
``Sextic`` yields an order 7 polynomial).
"""

import logging
from functools import lru_cache
from typing import Optional, Tuple, Union

import numpy as np

from .algebra import in_unit_interval, is_scalar
from .de_casteljau import de_casteljau_split
from .matrices import bernstein_row, binomial_weights, derivative_matrix, elevation_matrix

logger = logging.getLogger(__name__)

_ORDER_NAMES = {
    0: "Constant",
    1: "Linear",
    2: "Quadratic",
    3: "Cubic",
    4: "Quartic",
    5: "Quintic",
    6: "Sextic",
}


def order_name(order, default=None):
    """Conventional name of an order ("Cubic" for 3), or `default`."""
    return _ORDER_NAMES.get(order, default)


class BezierPoly:
    """
    Scalar Bézier polynomial of the class-level order ``ORDER``.

    Control values are stored as an (N+1,) float array; the first and last
    are the anchors, the ones in between the controls.
    """

    __slots__ = ("_values",)

    ORDER: Optional[int] = None
    WEIGHTS: Tuple[int, ...] = ()
    SLOPE_WEIGHTS: Tuple[int, ...] = ()

    def __init__(self, *points):
        """
        Args:
            points: Exactly ORDER + 1 scalar control values

        Raises:
            ValueError: wrong number of control values or a non-scalar value
        """
        if self.ORDER is None:
            raise TypeError("BezierPoly has no order; use poly_class(order) or one of the named classes")
        if len(points) != self.ORDER + 1:
            raise ValueError(
                f"{type(self).__name__} needs {self.ORDER + 1} control values, got {len(points)}")
        if not all(is_scalar(p) for p in points):
            raise ValueError(f"{type(self).__name__} control values must be scalars")
        self._values = np.array(points, dtype=float)

    @classmethod
    def from_points(cls, points) -> Optional["BezierPoly"]:
        """Build from a sequence of control values; None if its length is not ORDER + 1."""
        points = tuple(points)
        if cls.ORDER is None or len(points) != cls.ORDER + 1:
            return None
        if not all(is_scalar(p) for p in points):
            return None
        return cls(*points)

    @classmethod
    def _from_array(cls, values):
        obj = cls.__new__(cls)
        obj._values = np.array(values, dtype=float)
        return obj

    @classmethod
    def order_static(cls) -> int:
        return cls.ORDER

    def order(self) -> int:
        return self.ORDER

    @property
    def points(self) -> Tuple[float, ...]:
        return tuple(float(v) for v in self._values)

    @property
    def start(self) -> float:
        return float(self._values[0])

    @property
    def end(self) -> float:
        return float(self._values[-1])

    @property
    def ctrl(self) -> Tuple[float, ...]:
        """Interior control values."""
        return tuple(float(v) for v in self._values[1:-1])

    def interpolate(self, t) -> Union[float, np.ndarray, None]:
        """Curve value at t in [0, 1]; None if t is outside that range."""
        if not in_unit_interval(t):
            return None
        return self.interpolate_unbounded(t)

    def interpolate_unbounded(self, t) -> Union[float, np.ndarray]:
        """
        Sum_k C(N,k) * (1-t)^(N-k) * t^k * P_k, without a range check.

        A scalar t gives a float, an array of t gives an array.
        """
        out = bernstein_row(self.ORDER, t, self.WEIGHTS) @ self._values
        return float(out) if np.ndim(out) == 0 else out

    def slope(self, t) -> Union[float, np.ndarray, None]:
        """Derivative at t in [0, 1]; None if t is outside that range."""
        if not in_unit_interval(t):
            return None
        return self.slope_unbounded(t)

    def slope_unbounded(self, t) -> Union[float, np.ndarray]:
        N = self.ORDER
        if N == 0:
            return 0.0 if np.ndim(t) == 0 else np.zeros(np.shape(t))
        # Sum_k C(N-1,k) * (1-t)^(N-1-k) * t^k * N * (P_{k+1} - P_k)
        out = bernstein_row(N - 1, t, self.SLOPE_WEIGHTS) @ (derivative_matrix(N) @ self._values)
        return float(out) if np.ndim(out) == 0 else out

    def derivative(self) -> "BezierPoly":
        """The order N-1 polynomial whose values are this polynomial's slope."""
        N = self.ORDER
        if N == 0:
            return poly_class(0)(0.0)
        return poly_class(N - 1)._from_array(derivative_matrix(N) @ self._values)

    def elevate(self) -> "BezierPoly":
        """Same polynomial expressed with one more control value."""
        N = self.ORDER
        return poly_class(N + 1)._from_array(elevation_matrix(N) @ self._values)

    def split(self, t):
        """
        Subdivide at t in [0, 1].

        Returns:
            (left, right) polynomials of the same order, or None if t is out
            of range
        """
        if not in_unit_interval(t) or np.ndim(t) != 0:
            return None
        return self.split_unbounded(t)

    def split_unbounded(self, t):
        left, right = de_casteljau_split(self._values[:, None], t)
        cls = type(self)
        return cls._from_array(left[:, 0]), cls._from_array(right[:, 0])

    def sample(self, count: int) -> np.ndarray:
        """Values at `count` evenly spaced parameters over [0, 1]."""
        return np.atleast_1d(self.interpolate_unbounded(np.linspace(0.0, 1.0, count)))

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join(repr(float(v)) for v in self._values)})"


@lru_cache(maxsize=None)
def poly_class(order: int) -> type:
    """
    The BezierPoly subclass of the given order, created on first use.

    Raises:
        ValueError: negative order
    """
    if order < 0:
        raise ValueError(f"order must be >= 0, got {order}")
    name = order_name(order, default=f"BezierPoly{order}")
    namespace = {
        "__slots__": (),
        "__module__": __name__,
        "__qualname__": name,
        "ORDER": order,
        "WEIGHTS": binomial_weights(order),
        "SLOPE_WEIGHTS": binomial_weights(order - 1) if order > 0 else (),
    }
    logger.debug("created fixed-order polynomial class %s (order %d)", name, order)
    return type(name, (BezierPoly,), namespace)


Constant = poly_class(0)
Linear = poly_class(1)
Quadratic = poly_class(2)
Cubic = poly_class(3)
Quartic = poly_class(4)
Quintic = poly_class(5)
Sextic = poly_class(6)
