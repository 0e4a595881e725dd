from __future__ import annotations

from typing import List, Mapping, Sequence

import numpy as np

from simple_beam.domain.results import AnalysisResult, DiagramSegment
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings


def sample_segments(
    segments: Sequence[DiagramSegment],
    divisions: Mapping[str, int],
    *,
    dedupe_rel_tol: float = 1e-6,
    keep_jumps: bool = False,
) -> np.ndarray:
    """
    Puntos (x, f(x)) listos para graficar, evaluando los coeficientes de cada tramo.
    - divisions[kind] subdivisiones por tramo (divisiones + 1 puntos)
    - x consecutivos casi iguales se colapsan (queda el primero);
      con keep_jumps=True se conservan si el valor salta (discontinuidad)
    Devuelve array (n, 2).
    """
    if not segments:
        return np.empty((0, 2), dtype=float)

    span = float(segments[-1].b) - float(segments[0].a)
    eps = dedupe_rel_tol * max(1.0, abs(span))

    xs_out: List[float] = []
    ys_out: List[float] = []

    for seg in segments:
        n = max(1, int(divisions.get(seg.kind, 2)))
        xs = np.linspace(float(seg.a), float(seg.b), n + 1, dtype=float)
        ys = np.asarray(seg.evaluate(xs), dtype=float)

        for x, y in zip(xs.tolist(), ys.tolist()):
            if xs_out and abs(x - xs_out[-1]) <= eps:
                if not keep_jumps:
                    continue
                y_scale = max(1.0, abs(y), abs(ys_out[-1]))
                if abs(y - ys_out[-1]) <= 1e-9 * y_scale:
                    continue
            xs_out.append(x)
            ys_out.append(y)

    return np.column_stack([np.asarray(xs_out, dtype=float), np.asarray(ys_out, dtype=float)])


def sample_shear(
    result: AnalysisResult,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
    *,
    keep_jumps: bool = False,
) -> np.ndarray:
    return sample_segments(
        result.shear_segments,
        settings.shear_divisions,
        dedupe_rel_tol=settings.dedupe_rel_tol,
        keep_jumps=keep_jumps,
    )


def sample_moment(
    result: AnalysisResult,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
    *,
    keep_jumps: bool = False,
) -> np.ndarray:
    return sample_segments(
        result.moment_segments,
        settings.moment_divisions,
        dedupe_rel_tol=settings.dedupe_rel_tol,
        keep_jumps=keep_jumps,
    )
