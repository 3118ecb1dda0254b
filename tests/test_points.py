import math

import pytest

from cg2d import config
from cg2d.geom import EPS, Pt, grid_key, unique_points
from cg2d.points import DISTRIBUTIONS, gen_points, normalize_dist, normalize_seed

R = config.COORD_RANGE


@pytest.mark.parametrize("dist", DISTRIBUTIONS)
@pytest.mark.parametrize("seed", [0, 1, 42, 123456789])
def test_deterministic(dist, seed):
    assert gen_points(500, seed, dist) == gen_points(500, seed, dist)


def test_different_seeds_differ():
    assert gen_points(50, 1) != gen_points(50, 2)


def test_default_seed_is_n():
    assert gen_points(300) == gen_points(300, 300)


@pytest.mark.parametrize("n", [0, -5])
def test_empty(n):
    assert gen_points(n, 1) == []


@pytest.mark.parametrize("dist", ["hexagon", "", None, 3, "CIRCLE "])
def test_unknown_dist_falls_back(dist):
    expected = "circle" if dist == "CIRCLE " else "square"
    assert gen_points(100, 9, dist) == gen_points(100, 9, expected)


def test_normalize_dist():
    assert normalize_dist(" Gaussian ") == "gaussian"
    assert normalize_dist("triangle") == "square"
    assert normalize_dist(None) == "square"


@pytest.mark.parametrize("raw, expected", [
    (None, 10), ("abc", 10), ("", 10), (float("nan"), 10),
    (5, 5), ("17", 17), (3.0, 3), (-2, -2),
])
def test_normalize_seed(raw, expected):
    assert normalize_seed(raw, 10) == expected


def test_square_range():
    for p in gen_points(2000, 5, "square"):
        assert -R <= p.x < R and -R <= p.y < R


def test_circle_inside_disk():
    for p in gen_points(2000, 5, "circle"):
        assert math.hypot(p.x, p.y) <= R * (1 + 1e-12)


def test_annulus_ring():
    r0 = config.ANNULUS_INNER * R
    for p in gen_points(2000, 5, "annulus"):
        r = math.hypot(p.x, p.y)
        assert r0 * (1 - 1e-12) <= r <= R * (1 + 1e-12)


def test_circle_is_area_uniform():
    # при рівномірності за площею в r < R/2 потрапляє ~1/4 точок, а не 1/2
    pts = gen_points(20000, 3, "circle")
    inner = sum(1 for p in pts if math.hypot(p.x, p.y) < R / 2)
    assert 0.22 < inner / len(pts) < 0.28


def test_gaussian_spread():
    pts = gen_points(20000, 11, "gaussian")
    mean_x = sum(p.x for p in pts) / len(pts)
    var_x = sum((p.x - mean_x) ** 2 for p in pts) / len(pts)
    sigma = config.GAUSS_SIGMA
    assert abs(mean_x) < 0.05 * sigma
    assert 0.9 < math.sqrt(var_x) / sigma < 1.1


def test_clusters_round_robin():
    pts = gen_points(3000, 4, "clusters")
    for i, p in enumerate(pts[:300]):
        cx, cy = config.CLUSTER_CENTERS[i % 3]
        # 6 сигм від свого центру
        assert math.hypot(p.x - cx, p.y - cy) < 6 * config.CLUSTER_SIGMA * math.sqrt(2)


@pytest.mark.parametrize("dist", DISTRIBUTIONS)
def test_dedup_idempotent(dist):
    pts = gen_points(3000, 77, dist)
    assert unique_points(pts) == pts
    assert len({grid_key(p) for p in pts}) == len(pts)


def test_unique_points_keeps_first_occurrence():
    pts = unique_points([(1, 1), (2, 2), (1 + EPS / 10, 1), (2, 2)])
    assert pts == [Pt(1.0, 1.0), Pt(2.0, 2.0)]


@pytest.mark.parametrize("raw, seed", [("abc", 50), (42.0, 42), ("7", 7), (None, 50)])
def test_gen_points_normalizes_seed(raw, seed):
    assert gen_points(50, raw) == gen_points(50, seed)
