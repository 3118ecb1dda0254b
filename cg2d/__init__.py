"""
cg2d — мінімальна бібліотека для 2D опуклих оболонок (Py 3.10+).
Зараз: детерміновані точки (5 розподілів), Jarvis March + Monotone Chain,
Teach Mode (траса кроків) і свіп продуктивності.
"""

__version__ = "0.1.0"

from cg2d.geom import Pt, EPS, cross, unique_points, polygon_area, perimeter
from cg2d.rng import SplitMix64, make_rng
from cg2d.points import DISTRIBUTIONS, gen_points, normalize_dist
from cg2d.hull import jarvis_hull, graham_hull, validate_hull
from cg2d.steps import Step, StepTrace, jarvis_with_steps, graham_with_steps
from cg2d.pipeline import compute_hulls, compute_hulls_with_steps, run_job, run_steps_job, analyze

__all__ = [
    "Pt", "EPS", "cross", "unique_points", "polygon_area", "perimeter",
    "SplitMix64", "make_rng",
    "DISTRIBUTIONS", "gen_points", "normalize_dist",
    "jarvis_hull", "graham_hull", "validate_hull",
    "Step", "StepTrace", "jarvis_with_steps", "graham_with_steps",
    "compute_hulls", "compute_hulls_with_steps", "run_job", "run_steps_job", "analyze",
    "__version__",
]
