from __future__ import annotations

from dataclasses import replace
from typing import Dict, List

from simple_beam.domain.beam import BASE_UNITS, BeamSpec, Units
from simple_beam.domain.results import (
    AnalysisResult, DiagramSegment, Extrema,
    HorizontalReaction, MomentReaction, Reaction, VerticalReaction,
)

# Factor a unidad base (m, N)
LENGTH_FACTORS: Dict[str, float] = {
    "m": 1.0,
    "mm": 0.001,
    "ft": 0.3048,
}

FORCE_FACTORS: Dict[str, float] = {
    "N": 1.0,
    "kN": 1000.0,
    "kips": 4448.22,
}


def _length_factor(unit: str) -> float:
    # unidad desconocida => factor 1 (sin conversión)
    return LENGTH_FACTORS.get(unit, 1.0)


def _force_factor(unit: str) -> float:
    return FORCE_FACTORS.get(unit, 1.0)


def convert_length(value: float, from_unit: str, to_unit: str) -> float:
    return float(value) * _length_factor(from_unit) / _length_factor(to_unit)


def convert_force(value: float, from_unit: str, to_unit: str) -> float:
    return float(value) * _force_factor(from_unit) / _force_factor(to_unit)


def convert_intensity(value: float, from_units: Units, to_units: Units) -> float:
    """Fuerza/longitud."""
    f = convert_force(value, from_units.force, to_units.force)
    return f / convert_length(1.0, from_units.length, to_units.length)


def convert_moment(value: float, from_units: Units, to_units: Units) -> float:
    """Fuerza·longitud."""
    f = convert_force(value, from_units.force, to_units.force)
    return f * convert_length(1.0, from_units.length, to_units.length)


def beam_to_base(beam: BeamSpec) -> BeamSpec:
    return BeamSpec(
        length=convert_length(beam.length, beam.units.length, BASE_UNITS.length),
        units=BASE_UNITS,
    )


def beam_from_base(beam: BeamSpec, units: Units) -> BeamSpec:
    return BeamSpec(
        length=convert_length(beam.length, beam.units.length, units.length),
        units=units,
    )


# -------------------------
# Resultados base -> unidades de usuario
# -------------------------
def _reaction_to_display(r: Reaction, units: Units) -> Reaction:
    if isinstance(r, VerticalReaction):
        return VerticalReaction(
            at=r.at,
            x=convert_length(r.x, BASE_UNITS.length, units.length),
            R=convert_force(r.R, BASE_UNITS.force, units.force),
        )
    if isinstance(r, MomentReaction):
        return MomentReaction(
            at=r.at,
            x=convert_length(r.x, BASE_UNITS.length, units.length),
            M=convert_moment(r.M, BASE_UNITS, units),
        )
    return HorizontalReaction(at=r.at, H=convert_force(r.H, BASE_UNITS.force, units.force))


def _segment_to_display(seg: DiagramSegment, units: Units, *, value_scale: float) -> DiagramSegment:
    """
    value_scale: factor base -> usuario del valor (V o M).
    Coeficiente c_k (en dx^k) escala con Lf^k, Lf = metros por unidad de usuario.
    """
    lf = _length_factor(units.length) / _length_factor(BASE_UNITS.length)
    coeffs = tuple(float(c) * value_scale * lf ** k for k, c in enumerate(seg.coeffs))
    return DiagramSegment(
        a=convert_length(seg.a, BASE_UNITS.length, units.length),
        b=convert_length(seg.b, BASE_UNITS.length, units.length),
        kind=seg.kind,
        coeffs=coeffs,
        value_a=float(seg.value_a) * value_scale,
        value_b=float(seg.value_b) * value_scale,
    )


def result_to_display(result: AnalysisResult, units: Units) -> AnalysisResult:
    if not result.is_valid:
        return result

    v_scale = convert_force(1.0, BASE_UNITS.force, units.force)
    m_scale = convert_moment(1.0, BASE_UNITS, units)

    def _x(v: float) -> float:
        return convert_length(v, BASE_UNITS.length, units.length)

    e = result.extrema
    extrema = Extrema(
        Vmax=e.Vmax * v_scale, Vmax_pos=_x(e.Vmax_pos),
        Vmin=e.Vmin * v_scale, Vmin_pos=_x(e.Vmin_pos),
        Mmax=e.Mmax * m_scale, Mmax_pos=_x(e.Mmax_pos),
        Mmin=e.Mmin * m_scale, Mmin_pos=_x(e.Mmin_pos),
    )

    reactions: List[Reaction] = [_reaction_to_display(r, units) for r in result.reactions]

    return replace(
        result,
        reactions=reactions,
        events=[_x(x) for x in result.events],
        shear_segments=[_segment_to_display(s, units, value_scale=v_scale) for s in result.shear_segments],
        moment_segments=[_segment_to_display(s, units, value_scale=m_scale) for s in result.moment_segments],
        extrema=extrema,
    )
