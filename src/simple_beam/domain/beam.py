from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class Units:
    """Par de unidades de entrada/salida (longitud, fuerza)."""
    length: str = "m"
    force: str = "kN"

    @property
    def label(self) -> str:
        return f"{self.length}, {self.force}"


# Combinaciones ofrecidas al usuario
UNIT_SYSTEMS: Dict[str, Units] = {
    "m, kN": Units("m", "kN"),
    "mm, kN": Units("mm", "kN"),
    "m, N": Units("m", "N"),
    "mm, N": Units("mm", "N"),
    "ft, kips": Units("ft", "kips"),
}

BASE_UNITS = Units("m", "N")


@dataclass(frozen=True)
class BeamSpec:
    length: float
    units: Units = field(default_factory=Units)
