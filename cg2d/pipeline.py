from __future__ import annotations
import logging
from math import floor
from time import perf_counter
from typing import Any, Dict, Iterable, List, Mapping, Optional

from . import config
from .geom import Pt, bbox_area, perimeter, polygon_area, unique_points
from .hull import graham_hull, jarvis_hull
from .points import gen_points, normalize_dist, normalize_seed
from .steps import graham_with_steps, jarvis_with_steps

logger = logging.getLogger(__name__)


def _pts_out(hull: List[Pt]) -> List[Dict[str, float]]:
    return [{"x": p.x, "y": p.y} for p in hull]


def compute_hulls(points: List[Pt]) -> Dict[str, Dict[str, Any]]:
    """
    Обидва алгоритми на одному наборі + час кожного (мс).
    Повертає {"jarvis": {size, points, ms}, "graham": {...}}.
    """
    t0 = perf_counter()
    jarvis = jarvis_hull(points)
    t1 = perf_counter()
    graham = graham_hull(points)
    t2 = perf_counter()
    j_ms = (t1 - t0) * 1000.0
    g_ms = (t2 - t1) * 1000.0
    logger.debug("hulls on %d pts: jarvis %d in %.2f ms, graham %d in %.2f ms",
                 len(points), len(jarvis), j_ms, len(graham), g_ms)
    return {
        "jarvis": {"size": len(jarvis), "points": _pts_out(jarvis), "ms": j_ms},
        "graham": {"size": len(graham), "points": _pts_out(graham), "ms": g_ms},
    }


def compute_hulls_with_steps(points: List[Pt], cap: Optional[int] = None) -> Dict[str, Dict[str, Any]]:
    """Teach Mode для обох алгоритмів. Ядро нічого не обрізає; cap обрізає на боці викликача."""
    j_hull, j_trace = jarvis_with_steps(points)
    g_hull, g_trace = graham_with_steps(points)
    return {
        "jarvis": {"size": len(j_hull), "steps": j_trace.to_list(cap)},
        "graham": {"size": len(g_hull), "steps": g_trace.to_list(cap)},
    }


def normalize_request(
    request: Mapping[str, Any],
    default_n: int = config.DEFAULT_POINTS,
    max_n: int = config.MAX_POINTS,
) -> Dict[str, Any]:
    """{n, seed, dist} з довільного вводу -> нормалізовані значення; n у [1, max_n]."""
    try:
        n = int(float(request.get("n") or default_n))
    except (TypeError, ValueError):
        n = default_n
    n = max(1, min(max_n, n))
    seed = normalize_seed(request.get("seed"), n)
    dist = normalize_dist(request.get("dist") or "square")
    return {"n": n, "seed": seed, "dist": dist}


def run_job(request: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Межа «повідомлення -> результат» для воркера: запит {n, seed, dist},
    відповідь: структурований результат або {"error": ...}, ніколи не частковий.
    Сам пакет нічого не запускає в потоках; хост вирішує, де це виконати.
    """
    try:
        req = normalize_request(request)
        pts = gen_points(req["n"], req["seed"], req["dist"])
        out = compute_hulls(pts)
    except Exception as e:
        logger.warning("job %r failed: %s", dict(request), e)
        return {"error": str(e)}
    out.update(req)
    return out


def run_steps_job(request: Mapping[str, Any], cap: int = config.STEP_CAP) -> Dict[str, Any]:
    """
    Те саме для Teach Mode: n за замовчуванням STEP_POINTS_DEFAULT, не більше
    STEP_POINTS_MAX; кроки обрізаються до cap (розмір відповіді).
    """
    try:
        req = normalize_request(request, config.STEP_POINTS_DEFAULT, config.STEP_POINTS_MAX)
        pts = gen_points(req["n"], req["seed"], req["dist"])
        out = compute_hulls_with_steps(pts, cap=cap)
    except Exception as e:
        logger.warning("steps job %r failed: %s", dict(request), e)
        return {"error": str(e)}
    out.update(req)
    return out


def analyze(
    min_n: int = config.ANALYZE_MIN,
    max_n: int = config.ANALYZE_MAX,
    mult: float = config.ANALYZE_MULT,
    seed: Optional[int] = None,
    dist: str = "square",
) -> List[Dict[str, Any]]:
    """
    Свіп продуктивності: n = min_n, далі max(n+1, floor(n*mult)) поки n <= max_n.
    Сід для кожного розміру: seed_base + n (seed_base за замовчуванням = min_n).
    """
    seed_base = min_n if seed is None else seed
    dist = normalize_dist(dist)
    series: List[Dict[str, Any]] = []
    n = min_n
    while n <= max_n:
        r = compute_hulls(gen_points(n, seed_base + n, dist))
        series.append({
            "n": n,
            "jarvis_ms": r["jarvis"]["ms"],
            "graham_ms": r["graham"]["ms"],
            "jarvis_size": r["jarvis"]["size"],
            "graham_size": r["graham"]["size"],
        })
        logger.debug("analyze %s n=%d: jarvis %.2f ms, graham %.2f ms",
                     dist, n, r["jarvis"]["ms"], r["graham"]["ms"])
        n = max(n + 1, floor(n * mult))
    return series


def compare_hulls(points: List[Pt], jarvis: List[Pt], graham: List[Pt]) -> Dict[str, Any]:
    """
    Зведення по двох оболонках: розміри, площі, периметри, bbox,
    коефіцієнт опуклості (max площа / площа bbox) і перевірка збігу.
    """
    area_j = polygon_area(jarvis)
    area_g = polygon_area(graham)
    bbox = bbox_area(points) if points else 0.0
    bbox = bbox or 1.0
    same_size = len(jarvis) == len(graham)
    area_close = abs(area_j - area_g) <= max(1e-6, 1e-5 * max(area_j, area_g))
    return {
        "total_points": len(points),
        "jarvis_size": len(jarvis),
        "graham_size": len(graham),
        "jarvis_area": area_j,
        "graham_area": area_g,
        "jarvis_perimeter": perimeter(jarvis),
        "graham_perimeter": perimeter(graham),
        "bbox_area": bbox,
        "convexity": max(area_j, area_g) / bbox,
        "same_size": same_size,
        "area_close": area_close,
        "ok": same_size and area_close,
    }


def reference_hull(points: Iterable, backend: str = "scipy") -> List[Pt]:
    """
    Еталонна оболонка зовнішньою бібліотекою (для перехресної перевірки).
    backend='scipy': Qhull через scipy.spatial.ConvexHull, порядок проти годинникової.
    """
    pts = unique_points(points)
    if backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import ConvexHull
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy', але SciPy не встановлено. "
                "Встанови scipy або використай jarvis_hull / graham_hull."
            ) from e

        if len(pts) < 3:
            raise ValueError("Need at least 3 points")
        arr = np.array([(p.x, p.y) for p in pts], dtype=float)
        hull = ConvexHull(arr)
        return [pts[int(i)] for i in hull.vertices]

    raise ValueError(f"Невідомий backend: {backend}")
