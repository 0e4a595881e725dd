from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class AnalysisSettings:
    # resultantes ~0 y reacción horizontal despreciable
    zero_tol: float = 1e-10
    # posiciones coincidentes (eventos, "a la izquierda o en x")
    position_tol: float = 1e-9

    # divisiones por tramo para muestreo (se generan divisiones+1 puntos)
    shear_divisions: Mapping[str, int] = field(
        default_factory=lambda: {"const": 2, "linear": 10, "quadratic": 20}
    )
    moment_divisions: Mapping[str, int] = field(
        default_factory=lambda: {"linear": 10, "quadratic": 20, "cubic": 30}
    )
    # x consecutivos más cercanos que dedupe_rel_tol * luz se colapsan
    dedupe_rel_tol: float = 1e-6

    def __post_init__(self):
        # copias de sólo lectura: DEFAULT_SETTINGS se comparte entre llamadas
        object.__setattr__(self, "shear_divisions", MappingProxyType(dict(self.shear_divisions)))
        object.__setattr__(self, "moment_divisions", MappingProxyType(dict(self.moment_divisions)))


DEFAULT_SETTINGS = AnalysisSettings()
