# path: tests/test_renderer_vm.py
import os
import tempfile

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from simple_beam.domain.beam import BeamSpec, Units
from simple_beam.domain.loads import UDLLoad
from simple_beam.domain.results import AnalysisResult
from simple_beam.domain.supports import PinRoller
from simple_beam.engine.analysis import analyze
from simple_beam.view.renderer_vm import render_moment, render_shear


def _result():
    return analyze(
        BeamSpec(30.0, Units("m", "kN")),
        PinRoller(pin_x=0.0, roller_x=30.0),
        [UDLLoad(label="W1", a=0.0, b=30.0, w=10.0)],
    )


def test_render_diagrams_to_png():
    res = _result()
    with tempfile.TemporaryDirectory() as td:
        fig, (ax_v, ax_m) = plt.subplots(2, 1)
        render_shear(ax_v, res, "kN", "m")
        render_moment(ax_m, res, "kN", "m")

        assert ax_v.get_xlim() == (0.0, 30.0)
        texts = [t.get_text() for t in ax_m.texts]
        assert any("1125" in t for t in texts)

        out = os.path.join(td, "vm.png")
        fig.savefig(out)
        plt.close(fig)
        assert os.path.getsize(out) > 0


def test_render_invalid_result():
    fig, ax = plt.subplots()
    render_moment(ax, AnalysisResult.invalid("error"))
    assert "sin resultado" in ax.get_title()
    plt.close(fig)
