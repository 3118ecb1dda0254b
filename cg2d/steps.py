"""
Teach Mode: ті самі алгоритми, що й у hull.py, але з трасою рішень.
Траса: окремий акумулятор, який явно передається в ядро алгоритму;
оболонка на виході ідентична звичайному варіанту.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from .geom import Pt
from .hull import _graham, _jarvis


def _pt(p: Optional[Pt]) -> Optional[Dict[str, float]]:
    return None if p is None else {"x": p.x, "y": p.y}


@dataclass(frozen=True)
class Step:
    """
    Один перехід стану алгоритму.
    type: start | edge | collinear (Jarvis), push | pop | finish (Graham).
    which: 'lower' / 'upper' для ланцюгів Graham.
    """
    type: str
    note: str = ""
    at: Optional[Pt] = None
    src: Optional[Pt] = None
    dst: Optional[Pt] = None
    point: Optional[Pt] = None
    which: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type}
        for key, value in (("at", self.at), ("from", self.src), ("to", self.dst), ("point", self.point)):
            if value is not None:
                out[key] = _pt(value)
        if self.which is not None:
            out["which"] = self.which
        out["note"] = self.note
        return out


@dataclass
class StepTrace:
    steps: List[Step] = field(default_factory=list)

    def emit(self, type: str, note: str = "", **payload) -> None:
        self.steps.append(Step(type=type, note=note, **payload))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[Step]:
        return iter(self.steps)

    def to_list(self, cap: Optional[int] = None) -> List[Dict[str, Any]]:
        """Кроки як словники; cap обрізає (розмір відповіді обмежує викликач)."""
        steps = self.steps if cap is None else self.steps[:max(0, cap)]
        return [s.to_dict() for s in steps]


def jarvis_with_steps(points: Iterable) -> Tuple[List[Pt], StepTrace]:
    trace = StepTrace()
    hull = _jarvis(points, trace)
    return hull, trace


def graham_with_steps(points: Iterable) -> Tuple[List[Pt], StepTrace]:
    trace = StepTrace()
    hull = _graham(points, trace)
    return hull, trace
