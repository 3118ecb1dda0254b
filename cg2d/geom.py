from __future__ import annotations
from dataclasses import dataclass
from math import hypot
from typing import Iterable, List, Sequence, Tuple

EPS = 1e-9  # спільний епс: дедуп, tie-break у Jarvis, порівняння координат

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    def __iter__(self):
        yield self.x; yield self.y

def cmp(a: float, b: float, eps: float = EPS) -> int:
    """-1 / 0 / 1 з допуском eps (0, якщо |a-b| < eps)."""
    if abs(a - b) < eps:
        return 0
    return -1 if a < b else 1

def cross(o: Pt, a: Pt, b: Pt) -> float:
    """Векторний добуток (a-o) x (b-o): >0 лівий поворот, <0 правий, 0 колінеарні."""
    return (a.x - o.x) * (b.y - o.y) - (a.y - o.y) * (b.x - o.x)

def dist2(p: Pt, q: Pt) -> float:
    dx = p.x - q.x
    dy = p.y - q.y
    return dx*dx + dy*dy

def grid_key(p: Pt, eps: float = EPS) -> Tuple[int, int]:
    """Ключ комірки сітки ширини eps, однаковий для дедупу в генераторі й у Graham."""
    return (int(round(p.x / eps)), int(round(p.y / eps)))

def as_points(points: Iterable) -> List[Pt]:
    """Pt або пари (x, y) -> список Pt."""
    out: List[Pt] = []
    for p in points:
        if not isinstance(p, Pt):
            x, y = p
            p = Pt(float(x), float(y))
        out.append(p)
    return out

def unique_points(points: Iterable, eps: float = EPS) -> List[Pt]:
    """
    Дедуплікація квантуванням на сітку eps.
    Залишає першу точку з кожної комірки, порядок першої появи зберігається.
    Приймає Pt або пари (x, y).
    """
    seen: dict[Tuple[int, int], Pt] = {}
    for p in as_points(points):
        key = grid_key(p, eps)
        if key not in seen:
            seen[key] = p
    return list(seen.values())

def sort_xy(points: Iterable[Pt]) -> List[Pt]:
    return sorted(points, key=lambda p: (p.x, p.y))

# ---------- метрики оболонки ----------
def bounds(points: Iterable[Pt]) -> Tuple[float, float, float, float]:
    """(min_x, min_y, max_x, max_y)."""
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("empty set") from None
    min_x = max_x = first.x
    min_y = max_y = first.y
    for p in it:
        if p.x < min_x: min_x = p.x
        if p.x > max_x: max_x = p.x
        if p.y < min_y: min_y = p.y
        if p.y > max_y: max_y = p.y
    return min_x, min_y, max_x, max_y

def bbox_area(points: Iterable[Pt]) -> float:
    min_x, min_y, max_x, max_y = bounds(points)
    return (max_x - min_x) * (max_y - min_y)

def polygon_area(poly: Sequence[Pt]) -> float:
    """Площа за формулою шнурка (без знаку)."""
    n = len(poly)
    if n < 3:
        return 0.0
    a = 0.0
    for i in range(n):
        p = poly[i]
        q = poly[(i + 1) % n]
        a += p.x*q.y - p.y*q.x
    return abs(a) / 2.0

def perimeter(poly: Sequence[Pt]) -> float:
    n = len(poly)
    if n < 2:
        return 0.0
    s = 0.0
    for i in range(n):
        p = poly[i]
        q = poly[(i + 1) % n]
        s += hypot(p.x - q.x, p.y - q.y)
    return s

def same_cycle(a: Sequence[Pt], b: Sequence[Pt]) -> bool:
    """Чи однакові два многокутники з точністю до циклічного зсуву."""
    if len(a) != len(b):
        return False
    if not a:
        return True
    try:
        shift = list(b).index(a[0])
    except ValueError:
        return False
    n = len(a)
    return all(a[i] == b[(i + shift) % n] for i in range(n))
