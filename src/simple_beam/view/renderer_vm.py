from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from simple_beam.domain.results import AnalysisResult
from simple_beam.engine.sampling import sample_moment, sample_shear
from simple_beam.view.style import RenderStyle


# -------------------------
# Helpers formato
# -------------------------
def _fmt_plain(v: float, decimals: int = 2) -> str:
    """Formato fijo (sin notación científica) y recorte de ceros."""
    s = f"{float(v):.{decimals}f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _clamp(v: float, lo: float, hi: float) -> float:
    return float(min(max(v, lo), hi))


def _annotate_extrema(ax, points, unit: str, style: RenderStyle):
    """
    Marca máximo y mínimo globales (ya calculados por el motor).
    points: [(kind, x, y), ...] con kind "max"/"min".
    """
    x_min, x_max = ax.get_xlim()
    y_min, y_max = ax.get_ylim()
    mx = style.label_margin * max(1e-12, float(x_max - x_min))
    my = style.label_margin * max(1e-12, float(y_max - y_min))

    seen = set()
    for kind, xi, yi in points:
        key = (round(float(xi), 9), round(float(yi), 9))
        if key in seen:
            continue
        seen.add(key)

        ax.scatter([xi], [yi], s=style.marker_size, zorder=6)
        if kind == "max":
            ty, va = yi + my, "bottom"
        else:
            ty, va = yi - my, "top"

        tx = _clamp(xi, x_min + mx, x_max - mx)
        ty = _clamp(ty, y_min + my, y_max - my)
        ax.text(tx, ty, f"{_fmt_plain(yi, 3)} {unit}", ha="center", va=va,
                fontsize=style.font_size, zorder=7)


def _render(ax, pts: np.ndarray, result: AnalysisResult, style: RenderStyle,
            y_zoom: float, xlim: Optional[Tuple[float, float]]):
    ax.clear()
    x = pts[:, 0]
    y = pts[:, 1]

    ax.plot(x, y, linewidth=style.curve_lw)
    ax.fill_between(x, y, 0.0, alpha=style.fill_alpha)
    ax.axhline(0.0, linewidth=style.axis_lw)

    if xlim is None:
        x0 = float(result.events[0]) if result.events else 0.0
        x1 = float(result.events[-1]) if result.events else 1.0
        ax.set_xlim(x0, x1)
    else:
        ax.set_xlim(xlim[0], xlim[1])

    ymax = float(np.max(np.abs(y))) if len(y) else 1.0
    ymax = ymax if ymax > 0.0 else 1.0
    ax.set_ylim(-ymax * y_zoom * style.y_pad, ymax * y_zoom * style.y_pad)
    ax.grid(True, alpha=0.25)


def render_shear(
    ax,
    result: AnalysisResult,
    force_unit: str = "",
    length_unit: str = "",
    style: RenderStyle = RenderStyle(),
    y_zoom: float = 1.0,
    xlim: Optional[Tuple[float, float]] = None,
):
    if not result.is_valid:
        ax.clear()
        ax.set_title("Diagrama de Corte V(x) (sin resultado)")
        return

    pts = sample_shear(result, keep_jumps=True)
    _render(ax, pts, result, style, y_zoom, xlim)

    e = result.extrema
    _annotate_extrema(ax, [("max", e.Vmax_pos, e.Vmax), ("min", e.Vmin_pos, e.Vmin)], force_unit, style)

    ax.set_ylabel(f"V [{force_unit}]" if force_unit else "V")
    ax.set_title("Diagrama de Corte V(x)")


def render_moment(
    ax,
    result: AnalysisResult,
    force_unit: str = "",
    length_unit: str = "",
    style: RenderStyle = RenderStyle(),
    y_zoom: float = 1.0,
    xlim: Optional[Tuple[float, float]] = None,
):
    if not result.is_valid:
        ax.clear()
        ax.set_title("Diagrama de Momento Flector M(x) (sin resultado)")
        return

    pts = sample_moment(result, keep_jumps=True)
    _render(ax, pts, result, style, y_zoom, xlim)

    e = result.extrema
    unit = f"{force_unit}·{length_unit}" if force_unit and length_unit else ""
    _annotate_extrema(ax, [("max", e.Mmax_pos, e.Mmax), ("min", e.Mmin_pos, e.Mmin)], unit, style)

    ax.set_ylabel(f"M [{unit}]" if unit else "M")
    ax.set_xlabel(f"x [{length_unit}]" if length_unit else "x")
    ax.set_title("Diagrama de Momento Flector M(x)")
