"""
Binomial coefficient cache backing the dynamic-order curves.

Rows of Pascal's triangle are built lazily up to the highest order requested
so far. The table is an immutable tuple of immutable rows: growing it builds
a new table under a lock and publishes it with a single assignment, so
readers never lock and never see a half-written row.
"""

import logging
import threading
from typing import Tuple

from .constants import COEFFICIENT_LIMIT, MAX_DYNAMIC_ORDER

logger = logging.getLogger(__name__)


class CoefficientOverflowError(OverflowError):
    """Requested curve order has binomial coefficients beyond the supported width."""


class BinomialCache:
    """
    Process-wide (or per-context) table of binomial coefficients.

    Args:
        max_supported: Highest order the cache agrees to build. Orders above
            it raise CoefficientOverflowError. Defaults to the largest order
            whose coefficients fit an unsigned 64-bit integer.
    """

    def __init__(self, max_supported: int = MAX_DYNAMIC_ORDER):
        if max_supported < 0:
            raise ValueError(f"max_supported must be >= 0, got {max_supported}")
        self._max_supported = max_supported
        self._rows: Tuple[Tuple[int, ...], ...] = ()
        self._lock = threading.Lock()

    @property
    def max_supported(self) -> int:
        return self._max_supported

    @property
    def max_order(self) -> int:
        """Highest order already built, -1 for an empty cache."""
        return len(self._rows) - 1

    def coefficients(self, order: int) -> Tuple[int, ...]:
        """
        Binomial coefficients [C(order, 0), ..., C(order, order)].

        Raises:
            ValueError: order is negative
            CoefficientOverflowError: order is above max_supported
        """
        rows = self._rows
        if order < len(rows) and order >= 0:
            return rows[order]
        self._check_order(order)
        return self._grow(order)[order]

    def _check_order(self, order):
        if order < 0:
            raise ValueError(f"Bézier order must be >= 0, got {order}")
        if order > self._max_supported:
            raise CoefficientOverflowError(
                f"Bézier order {order} exceeds the supported maximum {self._max_supported}; "
                f"its binomial coefficients overflow 64 bits. Decrease the curve order.")

    def _grow(self, order):
        with self._lock:
            rows = self._rows
            if order < len(rows):
                # Another thread extended the table while we waited
                return rows

            new_rows = list(rows)
            prev = new_rows[-1] if new_rows else None
            for n in range(len(new_rows), order + 1):
                if prev is None:
                    row = (1,)
                else:
                    row = (1,) + tuple(prev[k - 1] + prev[k] for k in range(1, n)) + (1,)
                if max(row) > COEFFICIENT_LIMIT:
                    raise CoefficientOverflowError(
                        f"binomial coefficients of order {n} overflow 64 bits")
                new_rows.append(row)
                prev = row

            published = tuple(new_rows)
            self._rows = published
            logger.debug("binomial cache grown to order %d", order)
            return published

    def __repr__(self):
        return f"BinomialCache(max_order={self.max_order}, max_supported={self._max_supported})"


DEFAULT_CACHE = BinomialCache()


def coefficients(order: int) -> Tuple[int, ...]:
    """Binomial coefficients of `order` from the process-wide cache."""
    return DEFAULT_CACHE.coefficients(order)
