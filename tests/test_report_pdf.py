# path: tests/test_report_pdf.py
import os
import tempfile
from datetime import datetime

from simple_beam.domain.beam import BeamSpec, Units
from simple_beam.domain.loads import AngledLoad, MomentLoad, PointLoad, UDLLoad, UVLLoad
from simple_beam.domain.supports import Fixed, PinRoller
from simple_beam.engine.analysis import analyze
from simple_beam.services.report_pdf import (
    ReportHeader, describe_load, export_analysis_pdf, extrema_rows, reaction_rows,
)

UNITS = Units("m", "kN")
LOADS = [
    PointLoad(label="P1", x=2.0, P=10.0),
    AngledLoad(label="A1", x=4.0, P=5.0, theta_deg=45.0),
    UDLLoad(label="W1", a=0.0, b=3.0, w=2.0),
    UVLLoad(label="V1", a=3.0, b=6.0, w1=1.0, w2=4.0),
    MomentLoad(label="M1", x=5.0, M=3.0),
]


def test_export_analysis_pdf_creates_file():
    beam = BeamSpec(6.0, UNITS)
    support = PinRoller(pin_x=0.0, roller_x=6.0)
    res = analyze(beam, support, LOADS)
    assert res.is_valid

    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "analisis.pdf")
        header = ReportHeader(titulo="Test", fecha=datetime.now())
        export_analysis_pdf(out, beam, support, LOADS, res, header=header, imagenes={"v": "no_existe.png"})
        assert os.path.exists(out)
        assert os.path.getsize(out) > 0


def test_export_invalid_result():
    beam = BeamSpec(6.0, UNITS)
    support = PinRoller(pin_x=3.0, roller_x=3.0)
    res = analyze(beam, support, LOADS)
    with tempfile.TemporaryDirectory() as td:
        out = os.path.join(td, "invalido.pdf")
        export_analysis_pdf(out, beam, support, [], res)
        assert os.path.getsize(out) > 0


def test_table_rows():
    res = analyze(BeamSpec(10.0, UNITS), Fixed(side="left"), [PointLoad(label="P1", x=10.0, P=20.0)])
    rows = reaction_rows(res, "m", "kN")
    assert rows[0] == ["Apoyo", "Tipo", "x", "Valor"]
    assert rows[1] == ["fixed", "Vertical (R)", "0 m", "20 kN"]
    assert rows[2] == ["fixed", "Momento (M)", "0 m", "-200 kN·m"]

    ext = extrema_rows(res, "m", "kN")
    assert ext[4] == ["M mín", "-200 kN·m", "0 m"]

    assert describe_load(LOADS[2], "m", "kN") == ("W1", "Uniforme", "[0, 3] m; w=2 kN/m")
