from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from simple_beam.domain.loads import AngledLoad, MomentLoad, PointLoad, UDLLoad, UVLLoad
from simple_beam.domain.supports import SupportSpec


@dataclass(frozen=True)
class NormalizedCase:
    """
    Caso listo para el motor, en unidades base (m, N):
      - cargas agrupadas por tipo, tramos ordenados (a < b) y recortados a [0, L]
      - notas de normalización (recortes, reordenamientos, cargas ignoradas)
    """
    length: float
    support: SupportSpec

    point: List[PointLoad] = field(default_factory=list)
    angled: List[AngledLoad] = field(default_factory=list)
    udl: List[UDLLoad] = field(default_factory=list)
    uvl: List[UVLLoad] = field(default_factory=list)
    moment: List[MomentLoad] = field(default_factory=list)

    notes: List[str] = field(default_factory=list)
