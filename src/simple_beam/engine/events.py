from __future__ import annotations

from typing import List

from simple_beam.domain.cases import NormalizedCase
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings


def generate_events(
    case: NormalizedCase,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> List[float]:
    """
    Posiciones (ordenadas, sin duplicados) donde cambia la ley de V(x)/M(x):
    extremos de la viga, apoyos y bordes de cada carga.
    """
    L = float(case.length)
    xs = [0.0, L]
    xs += [float(x) for x in case.support.positions(L)]
    xs += [float(p.x) for p in case.point]
    xs += [float(p.x) for p in case.angled]
    xs += [float(m.x) for m in case.moment]
    for d in list(case.udl) + list(case.uvl):
        xs += [float(d.a), float(d.b)]

    tol = settings.position_tol * max(1.0, L)
    out: List[float] = []
    for x in sorted(set(xs)):
        if out and x - out[-1] <= tol:
            continue
        out.append(x)
    return out
