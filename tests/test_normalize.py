# path: tests/test_normalize.py
import logging

import pytest

from simple_beam.domain.beam import BeamSpec, Units
from simple_beam.domain.loads import MomentLoad, PointLoad, UDLLoad, UVLLoad
from simple_beam.domain.supports import PinRoller
from simple_beam.engine.analysis import analyze
from simple_beam.engine.normalize import normalize_inputs

M_KN = Units("m", "kN")
SUPPORT = PinRoller(pin_x=0.0, roller_x=10.0)


def test_loads_converted_to_base_units():
    case = normalize_inputs(
        BeamSpec(10.0, M_KN),
        SUPPORT,
        [
            PointLoad(label="P1", x=2.0, P=3.0),
            UDLLoad(label="W1", a=1.0, b=4.0, w=2.0),
            MomentLoad(label="M1", x=5.0, M=7.0),
        ],
    )
    assert case.length == pytest.approx(10.0)
    assert case.point[0].P == pytest.approx(3000.0)
    assert case.udl[0].w == pytest.approx(2000.0)
    assert case.moment[0].M == pytest.approx(7000.0)
    assert case.notes == []


def test_reversed_uvl_keeps_physical_load():
    case = normalize_inputs(
        BeamSpec(10.0, M_KN), SUPPORT,
        [UVLLoad(label="V1", a=10.0, b=0.0, w1=5.0, w2=0.0)],
    )
    (uvl,) = case.uvl
    assert (uvl.a, uvl.b) == (0.0, 10.0)
    assert uvl.w1 == pytest.approx(0.0)
    assert uvl.w2 == pytest.approx(5000.0)
    assert any("invertido" in n for n in case.notes)


def test_reversed_span_gives_same_analysis():
    beam = BeamSpec(10.0, M_KN)
    fwd = analyze(beam, SUPPORT, [UDLLoad(label="W1", a=2.0, b=7.0, w=3.0)])
    rev = analyze(beam, SUPPORT, [UDLLoad(label="W1", a=7.0, b=2.0, w=3.0)])
    assert rev.vertical_reaction("pin").R == pytest.approx(fwd.vertical_reaction("pin").R)
    assert rev.extrema.Mmax == pytest.approx(fwd.extrema.Mmax)
    assert rev.events == fwd.events


def test_span_clipped_to_beam():
    case = normalize_inputs(
        BeamSpec(10.0, M_KN), SUPPORT,
        [UVLLoad(label="V1", a=5.0, b=15.0, w1=0.0, w2=10.0)],
    )
    (uvl,) = case.uvl
    assert uvl.b == pytest.approx(10.0)
    assert uvl.w2 == pytest.approx(5000.0)
    assert any("recortada" in n for n in case.notes)


def test_loads_outside_beam_are_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger="simple_beam"):
        res = analyze(
            BeamSpec(10.0, M_KN), SUPPORT,
            [
                PointLoad(label="P1", x=12.0, P=3.0),
                UDLLoad(label="W1", a=11.0, b=14.0, w=2.0),
                PointLoad(label="P2", x=5.0, P=4.0),
            ],
        )
    assert res.is_valid
    assert res.events == [0.0, 5.0, 10.0]
    assert len(res.notes) == 2
    assert "P1" in caplog.text


def test_missing_labels_are_numbered():
    case = normalize_inputs(
        BeamSpec(10.0, M_KN), SUPPORT,
        [
            PointLoad(label="P1", x=1.0, P=1.0),
            PointLoad(label="", x=2.0, P=1.0),
            PointLoad(label="  ", x=3.0, P=1.0),
            UDLLoad(label="", a=1.0, b=2.0, w=1.0),
            MomentLoad(label="", x=4.0, M=1.0),
        ],
    )
    assert [p.label for p in case.point] == ["P1", "P2", "P3"]
    assert case.udl[0].label == "W1"
    assert case.moment[0].label == "M1"
