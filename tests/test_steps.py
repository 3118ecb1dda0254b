import pytest

from cg2d.geom import Pt
from cg2d.hull import graham_hull, jarvis_hull
from cg2d.points import DISTRIBUTIONS, gen_points
from cg2d.steps import Step, StepTrace, graham_with_steps, jarvis_with_steps

SQUARE_PLUS = [Pt(0, 0), Pt(1, 0), Pt(1, 1), Pt(0, 1), Pt(0.5, 0.5)]


@pytest.mark.parametrize("dist", DISTRIBUTIONS)
@pytest.mark.parametrize("n", [0, 1, 2, 3, 50, 1000])
def test_traced_hull_equals_plain(dist, n):
    pts = gen_points(n, 31, dist)
    assert jarvis_with_steps(pts)[0] == jarvis_hull(pts)
    assert graham_with_steps(pts)[0] == graham_hull(pts)


def test_collinear_traced_equals_plain():
    pts = [Pt(0, 0), Pt(1, 1), Pt(2, 2)]
    assert jarvis_with_steps(pts)[0] == jarvis_hull(pts) == [Pt(0, 0), Pt(2, 2)]
    assert graham_with_steps(pts)[0] == graham_hull(pts) == [Pt(0, 0), Pt(2, 2)]


def test_jarvis_steps_square():
    hull, trace = jarvis_with_steps(SQUARE_PLUS)
    steps = list(trace)
    assert [s.type for s in steps] == ["start", "edge", "edge", "edge", "edge"]
    assert steps[0].at == Pt(0, 0)
    assert [(s.src, s.dst) for s in steps[1:]] == [
        (Pt(0, 0), Pt(1, 0)),
        (Pt(1, 0), Pt(1, 1)),
        (Pt(1, 1), Pt(0, 1)),
        (Pt(0, 1), Pt(0, 0)),
    ]
    assert steps[1].note == "Select edge 0"
    assert steps[-1].note == "Select edge 3"


def test_jarvis_edges_follow_hull():
    pts = gen_points(400, 8, "annulus")
    hull, trace = jarvis_with_steps(pts)
    edges = [(s.src, s.dst) for s in trace if s.type == "edge"]
    assert edges == [(hull[i], hull[(i + 1) % len(hull)]) for i in range(len(hull))]


def test_jarvis_collinear_steps():
    _, trace = jarvis_with_steps([Pt(0, 0), Pt(1, 1), Pt(2, 2)])
    types = [s.type for s in trace]
    assert types[0] == "start"
    assert types[-2:] == ["collinear", "edge"]
    last = list(trace)[-1]
    assert (last.src, last.dst) == (Pt(0, 0), Pt(2, 2))


def test_jarvis_degenerate_steps():
    assert len(jarvis_with_steps([])[1]) == 0
    _, trace = jarvis_with_steps([Pt(1, 2)])
    assert [s.type for s in trace] == ["start"]


def test_graham_steps_square():
    _, trace = graham_with_steps(SQUARE_PLUS)
    steps = list(trace)
    assert len(steps) == 15
    assert steps[-1].type == "finish"
    lower = [s for s in steps if s.which == "lower"]
    upper = [s for s in steps if s.which == "upper"]
    assert sum(s.type == "push" for s in lower) == 5
    assert sum(s.type == "push" for s in upper) == 5
    assert [s.point for s in lower if s.type == "pop"] == [Pt(0, 1), Pt(0.5, 0.5)]
    assert [s.point for s in upper if s.type == "pop"] == [Pt(1, 0), Pt(0.5, 0.5)]
    # спочатку весь нижній ланцюг, потім верхній
    first_upper = steps.index(upper[0])
    assert all(s.which == "lower" for s in steps[:first_upper])


def test_graham_push_pop_balance():
    pts = gen_points(500, 12, "gaussian")
    hull, trace = graham_with_steps(pts)
    pushes = sum(s.type == "push" for s in trace)
    pops = sum(s.type == "pop" for s in trace)
    # кожна точка входить в обидва ланцюги; 2 кінці дублюються
    assert pushes == 2 * len(pts)
    assert pushes - pops == len(hull) + 2


def test_graham_degenerate_steps():
    assert [s.type for s in graham_with_steps([])[1]] == ["finish"]
    assert [s.type for s in graham_with_steps([Pt(1, 1)])[1]] == ["push", "finish"]


def test_tracing_is_repeatable():
    pts = gen_points(200, 4, "clusters")
    assert list(graham_with_steps(pts)[1]) == list(graham_with_steps(pts)[1])
    assert list(jarvis_with_steps(pts)[1]) == list(jarvis_with_steps(pts)[1])


def test_step_to_dict():
    s = Step(type="edge", note="Select edge 0", src=Pt(0, 0), dst=Pt(1, 2))
    assert s.to_dict() == {
        "type": "edge",
        "from": {"x": 0, "y": 0},
        "to": {"x": 1, "y": 2},
        "note": "Select edge 0",
    }
    p = Step(type="pop", note="x", point=Pt(1, 1), which="upper").to_dict()
    assert p["which"] == "upper" and p["point"] == {"x": 1, "y": 1}


def test_trace_cap():
    trace = StepTrace()
    for i in range(10):
        trace.emit("push", which="lower", point=Pt(i, 0), note="Push to lower stack")
    assert len(trace.to_list()) == 10
    assert len(trace.to_list(cap=3)) == 3
    assert trace.to_list(cap=0) == []
