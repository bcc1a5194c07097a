#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Basic usage of the curve algebra: evaluation, slope, split and chains.
"""

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots
import sys
import os

# Put the repository root on the path so the package imports without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from nbezier import Point, BezierChain, DynamicBezier, curve_class, subdivide


Cubic2d = curve_class(3, 2)


def split_example():
    """Split a cubic at t=0.3 and draw both halves with their control polygons"""
    print("=== Cubic split example ===")

    curve = Cubic2d(
        Point(-0.5, -0.5),
        Point(0.5, -0.5),
        Point(-0.5, 0.5),
        Point(0.5, 0.5),
    )
    left, right = curve.split(0.3)
    print(f"split point: {left.end}")

    fig = go.Figure()
    for name, part, color in (("left", left, 'blue'), ("right", right, 'green')):
        pts = part.sample(31)
        ctrl = np.array([p.to_tuple() for p in part.points])
        fig.add_trace(go.Scatter(
            x=pts[:, 0], y=pts[:, 1],
            mode='lines', name=f'{name} half',
            line=dict(color=color, width=3)
        ))
        fig.add_trace(go.Scatter(
            x=ctrl[:, 0], y=ctrl[:, 1],
            mode='markers+lines', name=f'{name} control polygon',
            line=dict(color=color, dash='dash'),
            marker=dict(size=9)
        ))

    fig.update_layout(
        title="Cubic split at t=0.3",
        xaxis_title="X",
        yaxis_title="Y",
        width=600,
        height=600
    )
    fig.show()


def slope_example():
    """Curve components next to their slopes"""
    print("\n=== Slope example ===")

    curve = DynamicBezier([
        Point(0, 0),
        Point(1, 2),
        Point(3, 2),
        Point(4, 0),
        Point(5, 2),
    ])
    print(f"curve order: {curve.order()}")

    t = np.linspace(0, 1, 100)
    points = curve.interpolate(t)
    slopes = curve.slope(t)

    fig = make_subplots(
        rows=1, cols=3,
        subplot_titles=('curve (x-y)', 'dx/dt', 'dy/dt')
    )
    fig.add_trace(go.Scatter(
        x=points[:, 0], y=points[:, 1],
        mode='lines', name='curve',
        line=dict(color='blue', width=3)
    ), row=1, col=1)
    fig.add_trace(go.Scatter(
        x=t, y=slopes[:, 0],
        mode='lines', name='dx/dt',
        line=dict(color='green', width=2)
    ), row=1, col=2)
    fig.add_trace(go.Scatter(
        x=t, y=slopes[:, 1],
        mode='lines', name='dy/dt',
        line=dict(color='red', width=2)
    ), row=1, col=3)

    fig.update_xaxes(title_text="X", row=1, col=1)
    fig.update_yaxes(title_text="Y", row=1, col=1)
    fig.update_xaxes(title_text="t", row=1, col=2)
    fig.update_xaxes(title_text="t", row=1, col=3)
    fig.update_layout(title="Dynamic-order curve and its slope", height=450)
    fig.show()


def chain_example():
    """Cut a curve into a chain and move one shared endpoint"""
    print("\n=== Chain example ===")

    curve = Cubic2d(Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1))
    chain = BezierChain.from_curves(Cubic2d, subdivide(curve, 3))
    print(f"{chain.curve_count()} curves over {len(chain.points)} points")

    # Moving a shared endpoint reshapes both neighbouring curves
    chain.points[3] = chain.points[3] + (Point(0.2, 0.0) - Point(0.0, 0.0))

    fig = go.Figure()
    for i, segment in enumerate(chain):
        pts = segment.sample(31)
        fig.add_trace(go.Scatter(
            x=pts[:, 0], y=pts[:, 1],
            mode='lines', name=f'curve {i}',
            line=dict(width=3)
        ))
    anchors = np.array([p.to_tuple() for p in chain.points[::chain.order]])
    fig.add_trace(go.Scatter(
        x=anchors[:, 0], y=anchors[:, 1],
        mode='markers', name='anchors',
        marker=dict(color='red', size=10)
    ))
    fig.update_layout(title="Curve chain", width=600, height=600)
    fig.show()


if __name__ == "__main__":
    split_example()
    slope_example()
    chain_example()
