# path: tests/test_segments.py
import math

import pytest

from simple_beam.domain.beam import BeamSpec, Units
from simple_beam.domain.loads import AngledLoad, PointLoad, UDLLoad, UVLLoad
from simple_beam.domain.supports import PinRoller
from simple_beam.engine.analysis import analyze
from simple_beam.engine.equilibrium import solve_reactions
from simple_beam.engine.normalize import normalize_inputs
from simple_beam.engine.segments import moment_at, shear_at

M_KN = Units("m", "kN")


def _overhang_case():
    beam = BeamSpec(12.0, M_KN)
    support = PinRoller(pin_x=1.0, roller_x=11.0)
    loads = [
        PointLoad(label="P1", x=0.0, P=15.0),
        UDLLoad(label="W1", a=2.0, b=6.0, w=4.0),
        UVLLoad(label="V1", a=5.0, b=12.0, w1=0.0, w2=6.0),
        AngledLoad(label="A1", x=8.0, P=10.0, theta_deg=60.0),
    ]
    return beam, support, loads


def test_moment_is_continuous_without_applied_couples():
    res = analyze(*_overhang_case())
    assert res.is_valid
    segs = res.moment_segments
    for left, right in zip(segs, segs[1:]):
        assert left.value_b == pytest.approx(right.value_a, abs=1e-7)

    # extremos libres: M = 0 y V = 0
    assert segs[0].value_a == pytest.approx(0.0, abs=1e-7)
    assert segs[-1].value_b == pytest.approx(0.0, abs=1e-7)
    assert res.shear_segments[-1].value_b == pytest.approx(0.0, abs=1e-7)


def test_shear_jumps_only_at_concentrated_forces():
    res = analyze(*_overhang_case())
    jumps = {}
    for left, right in zip(res.shear_segments, res.shear_segments[1:]):
        jumps[right.a] = right.value_a - left.value_b

    assert jumps[2.0] == pytest.approx(0.0, abs=1e-7)
    assert jumps[5.0] == pytest.approx(0.0, abs=1e-7)
    assert jumps[6.0] == pytest.approx(0.0, abs=1e-7)
    assert jumps[8.0] == pytest.approx(-10.0 * math.sin(math.radians(60.0)))
    assert jumps[1.0] == pytest.approx(res.vertical_reaction("pin").R)
    assert jumps[11.0] == pytest.approx(res.vertical_reaction("roller").R)


def test_moment_coefficients_integrate_shear():
    res = analyze(*_overhang_case())
    degree_up = {"const": "linear", "linear": "quadratic", "quadratic": "cubic"}
    for vs, ms in zip(res.shear_segments, res.moment_segments):
        assert (vs.a, vs.b) == (ms.a, ms.b)
        assert ms.kind == degree_up[vs.kind]
        assert len(ms.coeffs) == len(vs.coeffs) + 1
        for k, c in enumerate(vs.coeffs):
            assert ms.coeffs[k + 1] == pytest.approx(c / (k + 1))


def test_segment_kinds_follow_active_loads():
    res = analyze(*_overhang_case())
    kinds = {(s.a, s.b): s.kind for s in res.shear_segments}
    assert kinds[(0.0, 1.0)] == "const"
    assert kinds[(2.0, 5.0)] == "linear"
    assert kinds[(5.0, 6.0)] == "quadratic"     # UDL + UVL superpuestas
    assert kinds[(6.0, 8.0)] == "quadratic"


def test_overlapping_udl_and_uvl_are_superposed():
    res = analyze(
        BeamSpec(10.0, M_KN),
        PinRoller(pin_x=0.0, roller_x=10.0),
        [
            UDLLoad(label="W1", a=0.0, b=10.0, w=2.0),
            UVLLoad(label="V1", a=0.0, b=10.0, w1=0.0, w2=4.0),
        ],
    )
    (seg,) = res.shear_segments
    assert seg.kind == "quadratic"
    assert seg.coeffs[1] == pytest.approx(-2.0)
    assert seg.coeffs[2] == pytest.approx(-0.2)
    assert res.vertical_reaction("roller").R == pytest.approx(70.0 / 3.0)
    assert seg.value_b == pytest.approx(-70.0 / 3.0)


def test_triangular_load_exact_moment_extremum():
    L, w0 = 9.0, 6.0
    res = analyze(
        BeamSpec(L, M_KN),
        PinRoller(pin_x=0.0, roller_x=L),
        [UVLLoad(label="V1", a=0.0, b=L, w1=0.0, w2=w0)],
    )
    assert res.vertical_reaction("pin").R == pytest.approx(9.0)
    assert res.vertical_reaction("roller").R == pytest.approx(18.0)
    assert res.extrema.Mmax == pytest.approx(w0 * L * L / (9.0 * math.sqrt(3.0)), rel=1e-9)
    assert res.extrema.Mmax_pos == pytest.approx(L / math.sqrt(3.0), rel=1e-9)


def test_shear_vertex_inside_quadratic_segment():
    # w(x) cambia de signo en x=5 => V tiene extremo interior
    res = analyze(
        BeamSpec(10.0, M_KN),
        PinRoller(pin_x=0.0, roller_x=10.0),
        [UVLLoad(label="V1", a=0.0, b=10.0, w1=-5.0, w2=5.0)],
    )
    V5 = res.shear_segments[0].evaluate(5.0)
    assert res.extrema.Vmax == pytest.approx(V5)
    assert res.extrema.Vmax_pos == pytest.approx(5.0)


def test_point_evaluators_match_segments():
    beam, support, loads = _overhang_case()
    case = normalize_inputs(beam, support, loads)
    reactions = solve_reactions(case)

    res = analyze(beam, support, loads)
    for vs, ms in zip(res.shear_segments, res.moment_segments):
        xm = 0.5 * (vs.a + vs.b)
        # resultado en kN / kN·m, evaluadores en N / N·m
        assert shear_at(xm, case, reactions) / 1e3 == pytest.approx(vs.evaluate(xm), abs=1e-7)
        assert moment_at(xm, case, reactions) / 1e3 == pytest.approx(ms.evaluate(xm), abs=1e-7)
