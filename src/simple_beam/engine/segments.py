from __future__ import annotations

from typing import List, Sequence, Tuple

import numpy as np

from simple_beam.domain.cases import NormalizedCase
from simple_beam.domain.results import (
    DiagramSegment, MomentReaction, Reaction, VerticalReaction,
)
from simple_beam.engine.resultants import span_resultant
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings


# -------------------------
# Evaluación puntual por acumulación directa
# -------------------------
def shear_at(
    x: float,
    case: NormalizedCase,
    reactions: Sequence[Reaction],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> float:
    """
    V(x+) = Σ reacciones en o a la izquierda de x
            - Σ puntuales/inclinadas en o a la izquierda de x
            - Σ distribuidas acumuladas en [0, x]
    """
    x = float(x)
    tol = settings.position_tol * max(1.0, float(case.length))
    V = 0.0

    for r in reactions:
        if isinstance(r, VerticalReaction) and r.x <= x + tol:
            V += r.R

    for pl in case.point:
        if pl.x <= x + tol:
            V -= float(pl.P)

    for al in case.angled:
        if al.x <= x + tol:
            V -= al.Py

    for dl in list(case.udl) + list(case.uvl):
        R, _ = span_resultant(dl, about=x, upto=x)
        V -= R

    return V


def moment_at(
    x: float,
    case: NormalizedCase,
    reactions: Sequence[Reaction],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> float:
    """
    M(x+) por equilibrio del tramo [0, x]:
      + R*(x - xr) de reacciones verticales a la izquierda
      + momentos de reacción en o a la izquierda de x
      - P*(x - xp) de puntuales/inclinadas a la izquierda
      - R_dist*(x - x_resultante) de la porción de distribuidas en [0, x]
      + momentos aplicados en o a la izquierda de x
    """
    x = float(x)
    tol = settings.position_tol * max(1.0, float(case.length))
    M = 0.0

    for r in reactions:
        if isinstance(r, VerticalReaction) and r.x < x:
            M += r.R * (x - r.x)
        elif isinstance(r, MomentReaction) and r.x <= x + tol:
            M += r.M

    for pl in case.point:
        if pl.x < x:
            M -= float(pl.P) * (x - float(pl.x))

    for al in case.angled:
        if al.x < x:
            M -= al.Py * (x - float(al.x))

    for dl in list(case.udl) + list(case.uvl):
        # span_resultant devuelve R*(x_res - x) = -R*(x - x_res)
        _, M_about = span_resultant(dl, about=x, upto=x)
        M += M_about

    for ml in case.moment:
        if ml.x <= x + tol:
            M += float(ml.M)

    return M


# -------------------------
# Tramos de V(x)
# -------------------------
def _distributed_rate(
    case: NormalizedCase, a: float, b: float, tol: float,
) -> Tuple[str, float, float]:
    """
    Superpone todas las distribuidas activas en [a, b]:
      w(x) = w_a + slope*(x - a)
    Devuelve (kind, w_a, slope). kind: const / linear (sólo UDL) / quadratic (alguna UVL).
    """
    kind = "const"
    w_a = 0.0
    slope = 0.0

    for dl in case.udl:
        if dl.a < b - tol and dl.b > a + tol:
            w_a += float(dl.w)
            if kind == "const":
                kind = "linear"

    for dl in case.uvl:
        if dl.a < b - tol and dl.b > a + tol:
            w1 = dl.intensity_at(a)
            w2 = dl.intensity_at(b)
            w_a += w1
            slope += (w2 - w1) / (b - a)
            kind = "quadratic"

    return kind, w_a, slope


def build_shear_segments(
    case: NormalizedCase,
    reactions: Sequence[Reaction],
    events: Sequence[float],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> List[DiagramSegment]:
    tol = settings.position_tol * max(1.0, float(case.length))
    segments: List[DiagramSegment] = []

    for i in range(len(events) - 1):
        a = float(events[i])
        b = float(events[i + 1])

        V_a = shear_at(a, case, reactions, settings)
        kind, w_a, slope = _distributed_rate(case, a, b, tol)

        if kind == "quadratic":
            coeffs: Tuple[float, ...] = (V_a, -w_a, -slope / 2.0)
        elif kind == "linear":
            coeffs = (V_a, -w_a)
        else:
            coeffs = (V_a,)

        V_b = float(np.polynomial.polynomial.polyval(b - a, coeffs))
        segments.append(DiagramSegment(a=a, b=b, kind=kind, coeffs=coeffs, value_a=V_a, value_b=V_b))

    return segments


# -------------------------
# Tramos de M(x) = ∫V(x)
# -------------------------
_MOMENT_KIND = {"const": "linear", "linear": "quadratic", "quadratic": "cubic"}


def build_moment_segments(
    shear_segments: Sequence[DiagramSegment],
    case: NormalizedCase,
    reactions: Sequence[Reaction],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> List[DiagramSegment]:
    """
    M_a se calcula por equilibrio en cada tramo (no se arrastra del anterior);
    el resto de coeficientes es la primitiva del tramo de corte:
      [s0, s1, s2] -> [M_a, s0, s1/2, s2/3]
    """
    segments: List[DiagramSegment] = []

    for vs in shear_segments:
        a = float(vs.a)
        b = float(vs.b)
        M_a = moment_at(a, case, reactions, settings)

        coeffs = (M_a,) + tuple(float(c) / (k + 1) for k, c in enumerate(vs.coeffs))
        M_b = float(np.polynomial.polynomial.polyval(b - a, coeffs))
        segments.append(DiagramSegment(
            a=a, b=b, kind=_MOMENT_KIND[vs.kind], coeffs=coeffs, value_a=M_a, value_b=M_b,
        ))

    return segments
