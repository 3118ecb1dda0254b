from cg2d.geom import unique_points, polygon_area, perimeter
from cg2d.hull import jarvis_hull, graham_hull, validate_hull

if __name__ == "__main__":
    # квадрат + внутрішні точки + точка на ребрі
    raw = [
        (0, 0), (1, 0), (1, 1), (0, 1),
        (0.5, 0.5), (0.2, 0.8), (0.8, 0.2), (0.5, 0.0),
    ]
    pts = unique_points(raw)

    for name, fn in (("Jarvis", jarvis_hull), ("Graham", graham_hull)):
        hull = fn(pts)
        print(f"{name}:", [(p.x, p.y) for p in hull])
        print("  area:", polygon_area(hull), "perimeter:", perimeter(hull))
        print("  VALIDATION:", validate_hull(pts, hull))
