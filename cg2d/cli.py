# cg2d/cli.py
# Приклади:
#   echo 10000 | python -m cg2d
#   echo 10000 | python -m cg2d --dist circle --seed 42
#   echo 50 | python -m cg2d --steps --cap 20
from __future__ import annotations
import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from . import config
from .geom import Pt
from .hull import graham_hull, jarvis_hull
from .points import DISTRIBUTIONS, gen_points, normalize_seed
from .steps import graham_with_steps, jarvis_with_steps


def fmt(p: Pt) -> str:
    return f"({p.x:.6f},{p.y:.6f})"


def read_count(lines: Iterable[str]) -> Optional[int]:
    """Перше ціле число з потоку рядків (решта ігнорується)."""
    for line in lines:
        try:
            return int(line.strip())
        except ValueError:
            continue
    return None


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="cg2d",
        description="Опукла оболонка N детермінованих точок (Jarvis + Graham). N читається зі stdin.",
    )
    ap.add_argument("--dist", default="square",
                    help=f"розподіл: {', '.join(DISTRIBUTIONS)} (інше -> square)")
    ap.add_argument("--seed", default=None, help="сід (за замовчуванням = N)")
    ap.add_argument("--steps", action="store_true", help="надрукувати кроки Teach Mode")
    ap.add_argument("--cap", type=int, default=config.STEP_CAP, help="максимум кроків на алгоритм")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def _print_steps(name: str, steps: List[dict], out: TextIO) -> None:
    out.write(f"{name} steps: {len(steps)}\n")
    for i, s in enumerate(steps):
        parts = [s["type"]]
        if "which" in s:
            parts.append(f"[{s['which']}]")
        parts += [f"{k}=({v['x']:.6f},{v['y']:.6f})" for k, v in s.items() if isinstance(v, dict)]
        out.write(f"  {i}: {' '.join(parts)}: {s['note']}\n")


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None,
         stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    n = read_count(stdin)
    if n is None:
        stderr.write("Please provide an integer N on stdin\n")
        return 1

    seed = normalize_seed(args.seed, n)
    pts = gen_points(n, seed, args.dist)
    j = jarvis_hull(pts)
    g = graham_hull(pts)

    stdout.write(f"Jarvis: {len(j)} " + " ".join(fmt(p) for p in j) + "\n")
    stdout.write(f"Graham: {len(g)} " + " ".join(fmt(p) for p in g) + "\n")

    if args.steps:
        _, jt = jarvis_with_steps(pts)
        _, gt = graham_with_steps(pts)
        _print_steps("Jarvis", jt.to_list(args.cap), stdout)
        _print_steps("Graham", gt.to_list(args.cap), stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
