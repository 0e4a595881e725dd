from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from simple_beam.domain.beam import BASE_UNITS, BeamSpec, Units
from simple_beam.domain.cases import NormalizedCase
from simple_beam.domain.labels import label_index, next_free_index, prefix_for
from simple_beam.domain.loads import (
    AngledLoad, Load, MomentLoad, PointLoad, UDLLoad, UVLLoad,
)
from simple_beam.domain.supports import PinRoller, SupportSpec
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from simple_beam.engine.units import (
    convert_force, convert_intensity, convert_length, convert_moment,
)

logger = logging.getLogger(__name__)


def _clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def loads_to_base(loads: Iterable[Load], units: Units) -> List[Load]:
    out: List[Load] = []

    def _x(v: float) -> float:
        return convert_length(v, units.length, BASE_UNITS.length)

    def _f(v: float) -> float:
        return convert_force(v, units.force, BASE_UNITS.force)

    def _w(v: float) -> float:
        return convert_intensity(v, units, BASE_UNITS)

    for ld in loads:
        if isinstance(ld, PointLoad):
            out.append(replace(ld, x=_x(ld.x), P=_f(ld.P)))
        elif isinstance(ld, AngledLoad):
            out.append(replace(ld, x=_x(ld.x), P=_f(ld.P)))
        elif isinstance(ld, UDLLoad):
            out.append(replace(ld, a=_x(ld.a), b=_x(ld.b), w=_w(ld.w)))
        elif isinstance(ld, UVLLoad):
            out.append(replace(ld, a=_x(ld.a), b=_x(ld.b), w1=_w(ld.w1), w2=_w(ld.w2)))
        elif isinstance(ld, MomentLoad):
            out.append(replace(ld, x=_x(ld.x), M=convert_moment(ld.M, units, BASE_UNITS)))
        else:
            raise TypeError(f"Tipo de carga no soportado: {type(ld).__name__}")
    return out


def support_to_base(support: SupportSpec, units: Units) -> SupportSpec:
    if isinstance(support, PinRoller):
        return PinRoller(
            pin_x=convert_length(support.pin_x, units.length, BASE_UNITS.length),
            roller_x=convert_length(support.roller_x, units.length, BASE_UNITS.length),
        )
    return support


def _auto_labels(loads: List[Load]) -> List[Load]:
    """Etiqueta P1, W2, ... las cargas sin label (primer índice libre por prefijo)."""
    used: Dict[str, set] = {}
    for ld in loads:
        pfx = prefix_for(ld)
        k = label_index(ld.label, pfx)
        if k is not None:
            used.setdefault(pfx, set()).add(k)

    out: List[Load] = []
    for ld in loads:
        if (ld.label or "").strip():
            out.append(replace(ld, label=ld.label.strip()))
            continue
        pfx = prefix_for(ld)
        taken = used.setdefault(pfx, set())
        k = next_free_index(taken)
        taken.add(k)
        out.append(replace(ld, label=f"{pfx}{k}"))
    return out


def _clip_span(ld, L: float, notes: List[str], tol: float) -> Optional[Load]:
    """
    Ordena (a < b) y recorta el tramo a [0, L].
    En UVL las intensidades acompañan al reordenamiento y se reevalúan en los cortes.
    """
    a = float(ld.a)
    b = float(ld.b)
    if b < a:
        notes.append(f'Tramo invertido (label="{ld.label}"): [{a:g},{b:g}] se reordenó.')
        if isinstance(ld, UVLLoad):
            ld = replace(ld, a=b, b=a, w1=ld.w2, w2=ld.w1)
        else:
            ld = replace(ld, a=b, b=a)
        a, b = b, a

    ac = _clamp(a, 0.0, L)
    bc = _clamp(b, 0.0, L)
    if bc <= ac + tol:
        notes.append(f'Distribuida fuera de la viga o de largo nulo (label="{ld.label}", [{a:g},{b:g}] m): se ignoró.')
        return None

    if abs(ac - a) > tol or abs(bc - b) > tol:
        notes.append(f'Distribuida recortada (label="{ld.label}") de [{a:g},{b:g}] m a [{ac:g},{bc:g}] m.')
        if isinstance(ld, UVLLoad):
            ld = replace(ld, a=ac, b=bc, w1=ld.intensity_at(ac), w2=ld.intensity_at(bc))
        else:
            ld = replace(ld, a=ac, b=bc)
    return ld


def normalize_inputs(
    beam: BeamSpec,
    support: SupportSpec,
    loads: Iterable[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> NormalizedCase:
    """
    Convierte viga, apoyos y cargas a unidades base (m, N) y agrupa por tipo.
    No valida apoyos (ver validate_supports).
    """
    units = beam.units
    L = convert_length(beam.length, units.length, BASE_UNITS.length)
    tol = settings.position_tol * max(1.0, L)
    notes: List[str] = []

    base_loads = _auto_labels(loads_to_base(list(loads), units))

    point: List[PointLoad] = []
    angled: List[AngledLoad] = []
    udl: List[UDLLoad] = []
    uvl: List[UVLLoad] = []
    moment: List[MomentLoad] = []

    for ld in base_loads:
        if isinstance(ld, (UDLLoad, UVLLoad)):
            clipped = _clip_span(ld, L, notes, tol)
            if clipped is None:
                continue
            (udl if isinstance(clipped, UDLLoad) else uvl).append(clipped)
            continue

        # puntuales / inclinadas / momentos: fuera de [0, L] se ignoran
        x = float(ld.x)
        if x < -tol or x > L + tol:
            notes.append(f'Carga fuera de la viga (label="{ld.label}", x={x:g} m): se ignoró.')
            continue
        ld = replace(ld, x=_clamp(x, 0.0, L))
        if isinstance(ld, PointLoad):
            point.append(ld)
        elif isinstance(ld, AngledLoad):
            angled.append(ld)
        else:
            moment.append(ld)

    for n in notes:
        logger.warning(n)

    return NormalizedCase(
        length=L,
        support=support_to_base(support, units),
        point=point,
        angled=angled,
        udl=udl,
        uvl=uvl,
        moment=moment,
        notes=notes,
    )
