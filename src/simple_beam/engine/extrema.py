from __future__ import annotations

from typing import List, Sequence

import numpy as np

from simple_beam.domain.cases import NormalizedCase
from simple_beam.domain.results import DiagramSegment, Extrema, Reaction
from simple_beam.engine.segments import moment_at
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings


class _Tracker:
    """Máximo/mínimo corriente con su posición (gana la primera aparición)."""

    def __init__(self):
        self.vmax = -np.inf
        self.vmax_pos = 0.0
        self.vmin = np.inf
        self.vmin_pos = 0.0

    def offer(self, value: float, x: float) -> None:
        if value > self.vmax:
            self.vmax, self.vmax_pos = float(value), float(x)
        if value < self.vmin:
            self.vmin, self.vmin_pos = float(value), float(x)


def _interior_roots(coeffs: Sequence[float], length: float, tol: float) -> List[float]:
    """Raíces reales de sum(c_k t^k) con 0 < t < length."""
    c = np.trim_zeros(np.asarray(coeffs, dtype=float), "b")
    if c.size < 2:
        return []
    roots = np.polynomial.polynomial.polyroots(c)
    out: List[float] = []
    for r in np.atleast_1d(roots):
        if abs(r.imag) > 1e-12 * max(1.0, abs(r.real)):
            continue
        t = float(r.real)
        if tol < t < length - tol:
            out.append(t)
    return out


def find_extrema(
    shear_segments: Sequence[DiagramSegment],
    moment_segments: Sequence[DiagramSegment],
    case: NormalizedCase,
    reactions: Sequence[Reaction],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> Extrema:
    """
    Extremos globales de V y M:
      - valores en bordes de cada tramo
      - M en los puntos de corte nulo interiores:
          tramo lineal con cambio de signo: x* = a - V_a/pendiente
          tramo cuadrático: raíces exactas de V(x) = 0
      - V en el vértice interior de un tramo cuadrático (w(x) = 0)
    """
    if not shear_segments:
        return Extrema()

    tol = settings.position_tol * max(1.0, float(case.length))
    V = _Tracker()
    M = _Tracker()

    for s in shear_segments:
        V.offer(s.value_a, s.a)
        V.offer(s.value_b, s.b)

    for s in moment_segments:
        M.offer(s.value_a, s.a)
        M.offer(s.value_b, s.b)

    for s in shear_segments:
        length = float(s.b) - float(s.a)

        if s.kind == "linear" and s.value_a * s.value_b < 0.0:
            slope = s.coeffs[1]
            x_star = s.a - s.value_a / slope
            M.offer(moment_at(x_star, case, reactions, settings), x_star)

        elif s.kind == "quadratic":
            for t in _interior_roots(s.coeffs, length, tol):
                x_star = s.a + t
                M.offer(moment_at(x_star, case, reactions, settings), x_star)

            c1, c2 = s.coeffs[1], s.coeffs[2]
            if c2 != 0.0:
                t = -c1 / (2.0 * c2)
                if tol < t < length - tol:
                    V.offer(s.evaluate(s.a + t), s.a + t)

    return Extrema(
        Vmax=V.vmax, Vmax_pos=V.vmax_pos,
        Vmin=V.vmin, Vmin_pos=V.vmin_pos,
        Mmax=M.vmax, Mmax_pos=M.vmax_pos,
        Mmin=M.vmin, Mmin_pos=M.vmin_pos,
    )
