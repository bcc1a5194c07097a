"""
De Casteljau subdivision for Bézier curves.
"""

import numpy as np


def de_casteljau_table(P, t):
    """
    Triangular table of repeated linear interpolation.

    Row 0 interpolates adjacent control points of P at t, each following row
    interpolates adjacent entries of the previous one, the last row holds a
    single entry: the curve point at t.

    Args:
        P: (N+1, dim) control points
        t: Split parameter (not range checked)

    Returns:
        list of N arrays with shapes (N, dim), (N-1, dim), ..., (1, dim)
    """
    W = np.asarray(P, dtype=float)
    rows = []
    for _ in range(W.shape[0] - 1):
        W = W[:-1] + (W[1:] - W[:-1]) * t
        rows.append(W)
    return rows


def de_casteljau_split(P, t):
    """
    Split control points P at t.

    Left child: first original point, then the first entry of every row.
    Right child: last entry of every row in reverse order, then the last
    original point.

    Returns:
        (left, right), both with the shape of P
    """
    P = np.asarray(P, dtype=float)
    rows = de_casteljau_table(P, t)
    left = [P[0]] + [row[0] for row in rows]
    right = [row[-1] for row in reversed(rows)] + [P[-1]]
    return np.array(left), np.array(right)


def split_matrices(N, tau):
    """
    Subdivision matrices S_left and S_right of an order N curve, such that
    S_left @ P and S_right @ P are the control points of the two halves.
    """
    return de_casteljau_split(np.eye(N + 1), tau)


def subdivide(curve, n_seg):
    """
    Cut a curve into `n_seg` pieces of equal parameter length.

    Works for any curve with `split_unbounded`; the pieces share their
    joining endpoints and can be fed to BezierChain.from_curves.
    """
    if n_seg < 1:
        raise ValueError("n_seg must be >= 1")

    pieces = []
    remainder = curve
    for k in range(n_seg, 1, -1):
        left, remainder = remainder.split_unbounded(1.0 / k)
        pieces.append(left)
    pieces.append(remainder)
    return pieces
