"""
Bernstein basis and control-point transformation matrices.

Curves keep their control points as an (N+1, D) coordinate matrix, so
differentiation and degree elevation are a single matrix product:

    derivative control points = D_N @ P      (N, N+1)
    elevated control points   = E_N @ P      (N+2, N+1)

Matrices are memoized per order and returned read-only.
"""

import numpy as np
from typing import Dict, Tuple, Optional, Sequence, Union
from functools import lru_cache
from scipy.special import comb


# Memoized matrices, keyed by (kind, order)
_MATRIX_CACHE: Dict[Tuple[str, int], np.ndarray] = {}


def _cached(kind: str, order: int, build) -> np.ndarray:
    key = (kind, order)
    matrix = _MATRIX_CACHE.get(key)
    if matrix is None:
        matrix = build(order)
        matrix.setflags(write=False)
        # setdefault keeps the first published matrix when threads race
        matrix = _MATRIX_CACHE.setdefault(key, matrix)
    return matrix


@lru_cache(maxsize=128)
def binomial_weights(order: int) -> Tuple[int, ...]:
    """Exact C(order, k) for k = 0..order."""
    return tuple(int(comb(order, k, exact=True)) for k in range(order + 1))


def bernstein_row(order: int, t: Union[float, np.ndarray],
                  weights: Optional[Sequence[int]] = None) -> np.ndarray:
    """
    Bernstein basis values B_{k,N}(t) = C(N,k) * t^k * (1-t)^(N-k).

    Args:
        order: Polynomial order N
        t: Parameter value or array of values (no range check)
        weights: Binomial weights C(N, k); computed when omitted

    Returns:
        (N+1,) row for a scalar t, (len(t), N+1) matrix for an array
    """
    if weights is None:
        weights = binomial_weights(order)
    t = np.asarray(t, dtype=float)
    k = np.arange(order + 1)
    w = np.asarray(weights, dtype=float)
    return w * np.power.outer(t, k) * np.power.outer(1.0 - t, order - k)


def _build_derivative(order):
    # [D]_i,j = N * { -1 if j=i, 1 if j=i+1, 0 otherwise }
    D = np.zeros((order, order + 1))
    for i in range(order):
        D[i, i] = -order
        D[i, i + 1] = order
    return D


def derivative_matrix(order: int) -> np.ndarray:
    """
    Hodograph matrix of an order N curve.

    Returns:
        (N, N+1) matrix mapping control points to the control points of the
        order N-1 derivative curve
    """
    if order < 0:
        raise ValueError(f"order must be >= 0, got {order}")
    return _cached("derivative", order, _build_derivative)


def _build_elevation(order):
    N = order
    E = np.zeros((N + 2, N + 1))

    # Q_0 = P_0, Q_{N+1} = P_N
    E[0, 0] = 1.0
    E[N + 1, N] = 1.0

    # Q_j = (j/(N+1)) * P_{j-1} + ((N+1-j)/(N+1)) * P_j
    for j in range(1, N + 1):
        E[j, j - 1] = j / (N + 1)
        E[j, j] = (N + 1 - j) / (N + 1)
    return E


def elevation_matrix(order: int) -> np.ndarray:
    """
    Degree elevation matrix, order N -> N+1.

    Returns:
        (N+2, N+1) matrix
    """
    if order < 0:
        raise ValueError(f"order must be >= 0, got {order}")
    return _cached("elevation", order, _build_elevation)


def clear_matrix_cache():
    """Forget memoized matrices."""
    _MATRIX_CACHE.clear()


def get_cache_info() -> dict:
    return {
        'cached_matrices': len(_MATRIX_CACHE),
        'cache_keys': list(_MATRIX_CACHE.keys())
    }
