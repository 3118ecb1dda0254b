from __future__ import annotations
from math import cos, log, pi, sin, sqrt
from typing import Callable, List, Optional

from . import config
from .geom import Pt, unique_points
from .rng import SplitMix64

DISTRIBUTIONS = ("square", "circle", "annulus", "gaussian", "clusters")


def normalize_dist(dist) -> str:
    """Невідомий / не-рядковий тег -> 'square' (без помилки)."""
    if not isinstance(dist, str):
        return "square"
    d = dist.strip().lower()
    return d if d in DISTRIBUTIONS else "square"


def normalize_seed(seed, n: int) -> int:
    """
    Сід з довільного вводу (int, float, рядок).
    Відсутній або нечисловий -> n.
    """
    if seed is None or isinstance(seed, bool):
        return n
    if isinstance(seed, int):
        return seed
    try:
        v = float(seed)
    except (TypeError, ValueError):
        return n
    if v != v or v in (float("inf"), float("-inf")):
        return n
    return int(v)


def _gauss(rnd: Callable[[], float]) -> float:
    # Box-Muller, лише косинусна гілка
    u1 = max(config.BOX_MULLER_FLOOR, rnd())
    u2 = rnd()
    return sqrt(-2.0 * log(u1)) * cos(2.0 * pi * u2)


def gen_points(n: int, seed: Optional[int] = None, dist: str = "square") -> List[Pt]:
    """
    n детермінованих точок для (seed, dist), вже без дублікатів.
    Сід нормалізується: відсутній або нечисловий -> n. Порядок викликів rng фіксований: x, потім y.
    """
    seed = normalize_seed(seed, n)
    rnd = SplitMix64(seed)
    R = config.COORD_RANGE
    dist = normalize_dist(dist)
    pts: List[Pt] = []

    if dist == "circle":
        for _ in range(n):
            t = 2.0 * pi * rnd()
            r = sqrt(rnd()) * R
            pts.append(Pt(r * cos(t), r * sin(t)))
    elif dist == "annulus":
        r0 = config.ANNULUS_INNER * R
        r1 = R
        for _ in range(n):
            t = 2.0 * pi * rnd()
            # r^2 рівномірний між r0^2 і r1^2 -> рівномірно за площею
            r = sqrt(r0*r0 + (r1*r1 - r0*r0) * rnd())
            pts.append(Pt(r * cos(t), r * sin(t)))
    elif dist == "gaussian":
        s = config.GAUSS_SIGMA
        for _ in range(n):
            x = _gauss(rnd) * s
            y = _gauss(rnd) * s
            pts.append(Pt(x, y))
    elif dist == "clusters":
        centers = config.CLUSTER_CENTERS
        s = config.CLUSTER_SIGMA
        for i in range(n):
            cx, cy = centers[i % len(centers)]
            x = cx + _gauss(rnd) * s
            y = cy + _gauss(rnd) * s
            pts.append(Pt(x, y))
    else:
        for _ in range(n):
            x = (rnd() * 2 - 1) * R
            y = (rnd() * 2 - 1) * R
            pts.append(Pt(x, y))

    return unique_points(pts)
