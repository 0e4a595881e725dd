from __future__ import annotations

import logging
from typing import Iterable

from simple_beam.domain.beam import BeamSpec
from simple_beam.domain.errors import AnalysisError, InvalidBeamError, InvalidSupportError
from simple_beam.domain.loads import Load
from simple_beam.domain.results import AnalysisResult
from simple_beam.domain.supports import PinRoller, SupportSpec
from simple_beam.engine.equilibrium import solve_reactions
from simple_beam.engine.events import generate_events
from simple_beam.engine.extrema import find_extrema
from simple_beam.engine.normalize import normalize_inputs
from simple_beam.engine.segments import build_moment_segments, build_shear_segments
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings
from simple_beam.engine.units import result_to_display
from simple_beam.engine.validate import validate_supports

logger = logging.getLogger(__name__)


def _support_error_message(support: SupportSpec, length: float) -> str:
    if isinstance(support, PinRoller):
        return (
            "Configuración de apoyos inválida: se requiere 0 <= pin_x, roller_x <= L y pin_x != roller_x "
            f"(pin_x={support.pin_x:g}, roller_x={support.roller_x:g}, L={length:g})."
        )
    return f"Configuración de apoyos inválida: {support!r}."


def analyze(
    beam: BeamSpec,
    support: SupportSpec,
    loads: Iterable[Load],
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> AnalysisResult:
    """
    Análisis completo de la viga:
      unidades base -> validación -> reacciones -> eventos -> V(x) -> M(x) -> extremos
      -> unidades del usuario.

    Nunca lanza: cualquier error se devuelve como resultado inválido (is_valid=False).
    """
    try:
        if not float(beam.length) > 0.0:
            raise InvalidBeamError("La longitud de la viga debe ser mayor que 0.")

        if not validate_supports(support, beam.length):
            raise InvalidSupportError(_support_error_message(support, beam.length))

        case = normalize_inputs(beam, support, loads, settings)

        reactions = solve_reactions(case, settings)
        events = generate_events(case, settings)
        logger.debug("Eventos: %s", events)

        V_segments = build_shear_segments(case, reactions, events, settings)
        M_segments = build_moment_segments(V_segments, case, reactions, settings)
        extrema = find_extrema(V_segments, M_segments, case, reactions, settings)

        base = AnalysisResult(
            reactions=reactions,
            events=events,
            shear_segments=V_segments,
            moment_segments=M_segments,
            extrema=extrema,
            notes=list(case.notes),
        )
        result = result_to_display(base, beam.units)

    except AnalysisError as exc:
        logger.warning("Análisis inválido (%s): %s", exc.kind, exc)
        return AnalysisResult.invalid(str(exc), exc.kind)
    except Exception as exc:
        logger.exception("Error inesperado en el análisis")
        return AnalysisResult.invalid(f"Calculation error: {exc}", "computation")

    logger.info(
        "Análisis OK: %d tramos, Mmax=%g en x=%g %s",
        len(result.moment_segments), result.extrema.Mmax, result.extrema.Mmax_pos, beam.units.length,
    )
    return result
