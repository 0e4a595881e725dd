from __future__ import annotations

import logging
from typing import List, Tuple

from simple_beam.domain.cases import NormalizedCase
from simple_beam.domain.results import (
    HorizontalReaction, MomentReaction, Reaction, VerticalReaction,
)
from simple_beam.domain.supports import Fixed, PinRoller
from simple_beam.engine.resultants import span_resultant
from simple_beam.engine.settings import DEFAULT_SETTINGS, AnalysisSettings

logger = logging.getLogger(__name__)


def _sum_load_contributions(case: NormalizedCase, about: float) -> Tuple[float, float, float]:
    """
    Devuelve (Fy, M, Fx) de las cargas aplicadas:
      Fy: suma de fuerzas verticales (positivo hacia abajo)
      M:  momento respecto a 'about' (fuerzas hacia abajo a la derecha => positivo),
          incluye los momentos puntuales aplicados con el signo del diagrama
      Fx: suma de componentes horizontales (inclinadas)
    """
    Fy = 0.0
    M = 0.0
    Fx = 0.0

    for pl in case.point:
        Fy += float(pl.P)
        M += float(pl.P) * (float(pl.x) - about)

    for al in case.angled:
        Px, Py = al.components()
        Fy += Py
        M += Py * (float(al.x) - about)
        Fx += Px

    for dl in list(case.udl) + list(case.uvl):
        R, M_about = span_resultant(dl, about)
        Fy += R
        M += M_about

    for ml in case.moment:
        M += float(ml.M)

    return Fy, M, Fx


def solve_reactions(
    case: NormalizedCase,
    settings: AnalysisSettings = DEFAULT_SETTINGS,
) -> List[Reaction]:
    """
    Equilibrio estático (viga isostática):

    Pin + roller:
      ΣM_pin = 0  =>  R_roller = M_cargas / (x_roller - x_pin)
      ΣFy = 0     =>  R_pin = Fy_cargas - R_roller

    Empotramiento (x_f = 0 ó L):
      R_f = Fy_cargas  (hacia arriba)
      M_f = -M_cargas  (respecto a x_f)

    Horizontal: H = -ΣPx (sólo si |H| > zero_tol).
    Reacciones: R positivo hacia arriba.
    """
    reactions: List[Reaction] = []
    support = case.support

    if isinstance(support, PinRoller):
        pin_x = float(support.pin_x)
        roller_x = float(support.roller_x)
        Fy, M_pin, Fx = _sum_load_contributions(case, pin_x)

        span = roller_x - pin_x
        if span == 0.0:
            raise ValueError("Pin y roller coinciden: no se puede resolver ΣM.")

        R_roller = M_pin / span
        R_pin = Fy - R_roller
        reactions.append(VerticalReaction(at="pin", x=pin_x, R=R_pin))
        reactions.append(VerticalReaction(at="roller", x=roller_x, R=R_roller))
        at_h = "pin"

    elif isinstance(support, Fixed):
        x_f = support.fixed_x(case.length)
        Fy, M_f, Fx = _sum_load_contributions(case, x_f)
        reactions.append(VerticalReaction(at="fixed", x=x_f, R=Fy))
        reactions.append(MomentReaction(at="fixed", x=x_f, M=-M_f))
        at_h = "fixed"

    else:
        raise TypeError(f"Tipo de apoyo no soportado: {type(support).__name__}")

    if abs(Fx) > settings.zero_tol:
        reactions.append(HorizontalReaction(at=at_h, H=-Fx))

    logger.debug("Reacciones: %s", reactions)
    return reactions
