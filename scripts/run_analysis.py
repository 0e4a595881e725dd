# path: scripts/run_analysis.py
import os
import sys
import traceback

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from simple_beam.services.logging_setup import setup_logging
logger = setup_logging()

def _excepthook(exctype, value, tb):
    msg = "".join(traceback.format_exception(exctype, value, tb))
    logger.error("Excepción no capturada:\n%s", msg)
    sys.__excepthook__(exctype, value, tb)

sys.excepthook = _excepthook

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from simple_beam.domain.beam import BeamSpec, UNIT_SYSTEMS
from simple_beam.domain.loads import PointLoad
from simple_beam.domain.supports import PinRoller
from simple_beam.engine.analysis import analyze
from simple_beam.services.report_pdf import export_analysis_pdf
from simple_beam.view.renderer_vm import render_moment, render_shear


def main(out_dir: str = "out"):
    units = UNIT_SYSTEMS["m, kN"]
    beam = BeamSpec(length=30.0, units=units)
    support = PinRoller(pin_x=0.0, roller_x=30.0)
    loads = [
        PointLoad(label="P1", x=6.0, P=10.0),   # down+
        PointLoad(label="P2", x=20.0, P=50.0),
    ]

    res = analyze(beam, support, loads)
    if not res.is_valid:
        print("Error:", res.error)
        return

    for r in res.reactions:
        print(r)
    e = res.extrema
    print(f"Vmax = {e.Vmax:g} {units.force} (x={e.Vmax_pos:g})  Vmin = {e.Vmin:g} (x={e.Vmin_pos:g})")
    print(f"Mmax = {e.Mmax:g} {units.force}·{units.length} (x={e.Mmax_pos:g})  Mmin = {e.Mmin:g} (x={e.Mmin_pos:g})")

    os.makedirs(out_dir, exist_ok=True)
    imgs = {}
    for key, render in (("v", render_shear), ("m", render_moment)):
        fig, ax = plt.subplots(figsize=(8, 3))
        render(ax, res, units.force, units.length)
        path = os.path.join(out_dir, f"{key}.png")
        fig.savefig(path, dpi=120, bbox_inches="tight")
        plt.close(fig)
        imgs[key] = path

    pdf = os.path.join(out_dir, "analisis.pdf")
    export_analysis_pdf(pdf, beam, support, loads, res, imagenes=imgs)
    print("PDF:", pdf)


if __name__ == "__main__":
    main()
