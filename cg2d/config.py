"""
Типові параметри cg2d в одному місці.
Імпортуй звідси замість магічних чисел в алгоритмах і демках.
"""
from __future__ import annotations

# ---- генерація точок ----
COORD_RANGE: float = 1e6          # півширина квадрата / радіус диска
ANNULUS_INNER: float = 0.6        # r0 = 0.6 * R
GAUSS_SIGMA: float = COORD_RANGE / 3
CLUSTER_SIGMA: float = COORD_RANGE / 12
CLUSTER_CENTERS = (
    (-0.5 * COORD_RANGE, -0.2 * COORD_RANGE),
    (0.6 * COORD_RANGE, 0.4 * COORD_RANGE),
    (-0.1 * COORD_RANGE, 0.7 * COORD_RANGE),
)
BOX_MULLER_FLOOR: float = 1e-12   # u1 > 0, щоб log не вибухнув

# ---- межі запитів (для хостів: CLI, воркери, сервери) ----
DEFAULT_POINTS: int = 1000
MAX_POINTS: int = 1_000_000
STEP_POINTS_DEFAULT: int = 5000
STEP_POINTS_MAX: int = 200_000
STEP_CAP: int = 600               # скільки кроків віддавати назовні

# ---- свіп продуктивності ----
ANALYZE_MIN: int = 1000
ANALYZE_MAX: int = 100_000
ANALYZE_MULT: float = 2
