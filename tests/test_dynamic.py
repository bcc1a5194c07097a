import math

import numpy as np
import pytest

from nbezier.algebra import Point, Vector
from nbezier.bezier import Cubic, poly_class
from nbezier.binomial import BinomialCache, CoefficientOverflowError
from nbezier.constants import MAX_DYNAMIC_ORDER
from nbezier.dynamic import DynamicBezier

TOL = 1e-9


def random_values(count, seed=0):
    return list(np.random.default_rng(seed).uniform(-1.0, 1.0, count))


class TestDynamicScalar:

    def test_matches_fixed_order(self):
        values = [0.0, 2.0, -1.0, 1.0]
        dyn = DynamicBezier(values)
        fixed = Cubic(*values)
        assert dyn.order() == 3
        for t in np.linspace(0, 1, 11):
            assert dyn.interpolate(t) == pytest.approx(fixed.interpolate(t), abs=1e-12)
            assert dyn.slope(t) == pytest.approx(fixed.slope(t), abs=1e-12)

    @pytest.mark.parametrize("order", [1, 2, 5, 10, 20, 40, MAX_DYNAMIC_ORDER])
    def test_endpoints_exact(self, order):
        values = random_values(order + 1, seed=order)
        dyn = DynamicBezier(values)
        assert dyn.interpolate(0.0) == values[0]
        assert dyn.interpolate(1.0) == values[-1]

    def test_bounds(self):
        dyn = DynamicBezier([0.0, 1.0, 0.0])
        for t in (-0.01, 1.01, math.nan):
            assert dyn.interpolate(t) is None
            assert dyn.slope(t) is None
            assert dyn.split(t) is None
        assert dyn.interpolate_unbounded(2.0) == pytest.approx(-4.0)

    def test_vectorised(self):
        dyn = DynamicBezier(random_values(6, seed=1))
        ts = np.linspace(0, 1, 7)
        out = dyn.interpolate(ts)
        assert out.shape == (7,)
        np.testing.assert_allclose(out, [dyn.interpolate(t) for t in ts], atol=1e-12)
        assert dyn.sample(4).shape == (4,)

    def test_order_zero(self):
        dyn = DynamicBezier([3.5])
        assert dyn.order() == 0
        assert dyn.interpolate(0.3) == 3.5
        assert dyn.slope(0.3) == 0.0
        e = dyn.elevate()
        assert e.points == [3.5, 3.5]

    def test_construction_limits(self):
        with pytest.raises(ValueError):
            DynamicBezier([])
        assert DynamicBezier.from_points([]) is None
        assert DynamicBezier.from_points([1.0, 2.0]).order() == 1
        with pytest.raises(CoefficientOverflowError):
            DynamicBezier([0.0] * (MAX_DYNAMIC_ORDER + 2))

    def test_injected_cache(self):
        cache = BinomialCache()
        dyn = DynamicBezier(random_values(8), cache=cache)
        assert dyn.cache is cache
        assert cache.max_order == 7
        dyn.slope(0.5)
        assert cache.max_order == 7
        small = BinomialCache(max_supported=3)
        with pytest.raises(CoefficientOverflowError):
            DynamicBezier(random_values(5), cache=small)

    def test_container_is_shared(self):
        values = [0.0, 1.0]
        dyn = DynamicBezier(values)
        assert dyn.unwrap() is values
        assert dyn.interpolate(0.5) == pytest.approx(0.5)
        values.append(0.0)
        assert dyn.order() == 2
        assert dyn.interpolate(0.5) == pytest.approx(0.5)
        assert dyn.interpolate(1.0) == 0.0
        values[1] = 2.0
        assert dyn.interpolate(0.5) == pytest.approx(1.0)

    def test_emptied_container(self):
        values = [0.0, 1.0]
        dyn = DynamicBezier(values)
        values.clear()
        for call in (lambda: dyn.interpolate(0.5), lambda: dyn.slope(0.5),
                     dyn.elevate, lambda: dyn.split(0.5)):
            with pytest.raises(ValueError, match="at least one control point") as excinfo:
                call()
            assert not isinstance(excinfo.value, OverflowError)


class TestDynamicElevateSplit:

    @pytest.mark.parametrize("order", [1, 3, 6, 9, 15])
    def test_elevation_invariance(self, order):
        values = random_values(order + 1, seed=order)
        dyn = DynamicBezier(values)
        e = dyn.elevate()
        assert e.order() == order + 1
        assert values == dyn.points
        assert e.points is not values
        ts = np.linspace(0, 1, 17)
        np.testing.assert_allclose(e.interpolate(ts), dyn.interpolate(ts), atol=TOL)
        np.testing.assert_allclose(e.slope(ts), dyn.slope(ts), atol=1e-8)

    def test_elevation_matches_fixed(self):
        values = random_values(4, seed=2)
        e_dyn = DynamicBezier(values).elevate()
        e_fix = Cubic(*values).elevate()
        np.testing.assert_allclose(e_dyn.points, e_fix.points, atol=1e-14)

    def test_elevation_past_limit(self):
        dyn = DynamicBezier(random_values(4), cache=BinomialCache(max_supported=3))
        with pytest.raises(CoefficientOverflowError):
            dyn.elevate()

    @pytest.mark.parametrize("order", [1, 4, 8])
    @pytest.mark.parametrize("t", [0.2, 0.5, 0.9])
    def test_split_reproduction(self, order, t):
        dyn = DynamicBezier(random_values(order + 1, seed=10 + order))
        left, right = dyn.split(t)
        assert left.order() == order and right.order() == order
        assert left.end == right.start
        for s in np.linspace(0, t, 9):
            assert left.interpolate(s / t) == pytest.approx(dyn.interpolate(s), abs=TOL)
        for s in np.linspace(t, 1, 9):
            assert right.interpolate((s - t) / (1 - t)) == pytest.approx(dyn.interpolate(s), abs=TOL)

    def test_split_matches_fixed(self):
        values = random_values(6, seed=3)
        fixed = poly_class(5)(*values)
        for a, b in zip(DynamicBezier(values).split(0.35), fixed.split(0.35)):
            np.testing.assert_allclose(a.points, b.points, atol=1e-14)


class TestDynamicPoints:

    def test_point_results(self):
        pts = [Point(0, 0), Point(0, 1), Point(1, 0), Point(1, 1)]
        dyn = DynamicBezier(pts)
        p = dyn.interpolate(0.5)
        assert isinstance(p, Point)
        assert p == Point(0.5, 0.5)
        assert dyn.interpolate(0.0) == Point(0, 0)
        assert dyn.interpolate(1.0) == Point(1, 1)
        v = dyn.slope(0.5)
        assert isinstance(v, Vector)
        # x' = 3(1-t)^2*0 + 6t(1-t)*1 + 3t^2*0 = 1.5, y' = 3*0.25 - 6*0.25 + 3*0.25 = 0
        assert v[0] == pytest.approx(1.5)
        assert v[1] == pytest.approx(0.0)
        assert dyn.interpolate(np.linspace(0, 1, 5)).shape == (5, 2)

    def test_point_elevate_split_keep_kind(self):
        pts = [Point(0, 0, 0), Point(1, 2, 3), Point(2, 0, 1)]
        dyn = DynamicBezier(pts)
        e = dyn.elevate()
        assert all(isinstance(p, Point) for p in e.points)
        left, right = dyn.split(0.5)
        assert all(isinstance(p, Point) for p in left.points + right.points)
        assert left.end == right.start

    def test_order_zero_point_slope(self):
        dyn = DynamicBezier([Point(1, 2)])
        assert dyn.slope(0.5) == Vector(0, 0)

    def test_array_points(self):
        pts = np.array([[0.0, 0.0], [1.0, 1.0]])
        dyn = DynamicBezier(pts)
        out = dyn.interpolate(0.25)
        assert isinstance(out, np.ndarray)
        np.testing.assert_allclose(out, [0.25, 0.25])

    def test_mutating_a_point(self):
        pts = [Point(0, 0), Point(2, 2)]
        dyn = DynamicBezier(pts)
        pts[1][0] = 4
        assert dyn.interpolate(0.5) == Point(2, 1)
