from __future__ import annotations
from typing import Dict, Iterable, List, Tuple

from .geom import EPS, Pt, as_points, cmp, cross, dist2, grid_key, sort_xy, unique_points

# trace: будь-що з методом emit(type, note=..., **payload), або None.
# Ядро лише повідомляє трасу про рішення, але ніколи не читає з неї.

NOTE_START = "Start at leftmost (tie: lowest Y)"
NOTE_COLLINEAR = "All points collinear: keep the two extremes"
NOTE_PUSH = {"lower": "Push to lower stack", "upper": "Push to upper stack"}
NOTE_POP = "Right turn / collinear inward → pop"
NOTE_FINISH = "Concatenate lower + upper (drop duplicate endpoints)"


# ---------------- Gift Wrapping (Jarvis March), O(n*h) ----------------
def _leftmost(pts: List[Pt]) -> int:
    """Найлівіша точка; при рівних x (з допуском) найнижча."""
    left = 0
    for i in range(1, len(pts)):
        p, q = pts[i], pts[left]
        if p.x < q.x or (cmp(p.x, q.x) == 0 and p.y < q.y):
            left = i
    return left


def _jarvis(points: Iterable, trace=None) -> List[Pt]:
    # та сама сітка, що й у Graham: повтор точки зламав би умову p == left
    pts = unique_points(points)
    n = len(pts)
    if n <= 1:
        if trace is not None and pts:
            trace.emit("start", at=pts[0], note=NOTE_START)
        return pts

    left = _leftmost(pts)
    if trace is not None:
        trace.emit("start", at=pts[left], note=NOTE_START)

    hull: List[Pt] = []
    p = left
    # не більше n вершин, захист від зациклення на патологічному вводі
    for _ in range(n):
        hull.append(pts[p])
        q = (p + 1) % n
        for r in range(n):
            if r == p or r == q:
                continue
            c = cross(pts[p], pts[q], pts[r])
            # r правіше за (p -> q), або колінеарна, але далі
            if c < -EPS or (abs(c) < EPS and dist2(pts[p], pts[r]) > dist2(pts[p], pts[q])):
                q = r
        if trace is not None:
            trace.emit("edge", src=pts[p], dst=pts[q], note=f"Select edge {len(hull) - 1}")
        p = q
        if p == left:
            break

    if len(hull) > 2:
        return hull

    # усі точки на одній прямій: лише два крайні кінці
    srt = sort_xy(pts)
    ends = [srt[0], srt[-1]]
    if trace is not None:
        trace.emit("collinear", note=NOTE_COLLINEAR)
        trace.emit("edge", src=ends[0], dst=ends[1], note="Select edge 0")
    return ends


def jarvis_hull(points: Iterable) -> List[Pt]:
    """
    Gift Wrapping. Оболонка проти годинникової стрілки від найлівішої точки.
    Колінеарні проміжні точки не потрапляють у результат.
    """
    return _jarvis(points)


# ---------------- Monotone Chain (Andrew / Graham), O(n log n) ----------------
def _chain(ps: Iterable[Pt], which: str, trace=None) -> List[Pt]:
    """Один ланцюг: push, потім поки не лівий поворот, викидаємо середню."""
    chain: List[Pt] = []
    for p in ps:
        if trace is not None:
            trace.emit("push", which=which, point=p, note=NOTE_PUSH[which])
        chain.append(p)
        while len(chain) >= 3 and cross(chain[-3], chain[-2], chain[-1]) <= 0:
            if trace is not None:
                trace.emit("pop", which=which, point=chain[-2], note=NOTE_POP)
            del chain[-2]
    return chain


def _graham(points: Iterable, trace=None) -> List[Pt]:
    # генератор вже дедуплікує, але алгоритм має бути коректним на будь-якому вводі
    ps = sort_xy(unique_points(points))
    if len(ps) <= 1:
        if trace is not None:
            for p in ps:
                trace.emit("push", which="lower", point=p, note=NOTE_PUSH["lower"])
            trace.emit("finish", note=NOTE_FINISH)
        return ps

    lower = _chain(ps, "lower", trace)
    upper = _chain(reversed(ps), "upper", trace)
    if trace is not None:
        trace.emit("finish", note=NOTE_FINISH)
    # останні точки ланцюгів дублюють початки одне одного
    return lower[:-1] + upper[:-1]


def graham_hull(points: Iterable) -> List[Pt]:
    """Monotone Chain. Колінеарні точки (cross <= 0) викидаються."""
    return _graham(points)


# ---------------- Діагностика ----------------
def validate_hull(points: Iterable, hull: List[Pt], eps: float = EPS) -> Dict[str, object]:
    """
    Перевірка оболонки щодо вхідного набору:
      - немає дублікатів вершин (за сіткою eps);
      - кожна трійка сусідніх вершин робить строго лівий поворот;
      - жодна вхідна точка не лежить строго праворуч від ребра.
    Допуск для «праворуч» масштабується з квадратом розміру координат.
    Повертає словник із діагностикою (порожні списки = все ок).
    """
    pts = as_points(points)
    h = as_points(hull)
    n = len(h)

    seen: set[Tuple[int, int]] = set()
    duplicates: List[Tuple[int, int]] = []
    for v in h:
        k = grid_key(v, eps)
        if k in seen:
            duplicates.append(k)
        seen.add(k)

    non_convex: List[int] = []
    if n >= 3:
        for i in range(n):
            if cross(h[i - 1], h[i], h[(i + 1) % n]) <= 0:
                non_convex.append(i)

    outside: List[Pt] = []
    if n >= 2:
        scale = max([1.0] + [max(abs(p.x), abs(p.y)) for p in pts])
        tol = eps * scale * scale
        edges = [(h[i], h[(i + 1) % n]) for i in range(n)] if n >= 3 else [(h[0], h[1]), (h[1], h[0])]
        for p in pts:
            for a, b in edges:
                if cross(a, b, p) < -tol:
                    outside.append(p)
                    break

    return {
        "vertices": n,
        "duplicates": duplicates,
        "non_convex": non_convex,
        "outside": outside,
    }
