from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple, Union

# Convención de entrada:
#   - P, w, w1, w2 positivos => hacia abajo
#   - M positivo => antihorario (CCW)


@dataclass(frozen=True)
class PointLoad:
    label: str
    x: float
    P: float


@dataclass(frozen=True)
class AngledLoad:
    """Fuerza P con ángulo theta_deg medido antihorario desde +x."""
    label: str
    x: float
    P: float
    theta_deg: float

    def components(self) -> Tuple[float, float]:
        """(Px, Py). Py entra con la misma convención que PointLoad.P."""
        th = math.radians(float(self.theta_deg))
        return float(self.P) * math.cos(th), float(self.P) * math.sin(th)

    @property
    def Py(self) -> float:
        return self.components()[1]


@dataclass(frozen=True)
class UDLLoad:
    label: str
    a: float
    b: float
    w: float

    def resultant(self) -> float:
        return float(self.w) * (float(self.b) - float(self.a))


@dataclass(frozen=True)
class UVLLoad:
    """Intensidad lineal de w1 (en a) a w2 (en b)."""
    label: str
    a: float
    b: float
    w1: float
    w2: float

    def intensity_at(self, x: float) -> float:
        span = float(self.b) - float(self.a)
        if span == 0.0:
            return float(self.w1)
        return float(self.w1) + (float(self.w2) - float(self.w1)) * (float(x) - float(self.a)) / span

    def resultant(self) -> float:
        return (float(self.w1) + float(self.w2)) * (float(self.b) - float(self.a)) / 2.0

    def centroid(self, zero_tol: float = 1e-10) -> Optional[float]:
        """
        Posición de la resultante (centroide del trapecio).
        None si w1 + w2 ≈ 0 (resultante nula, centroide indefinido).
        """
        s = float(self.w1) + float(self.w2)
        if abs(s) < zero_tol:
            return None
        span = float(self.b) - float(self.a)
        return float(self.a) + span * (float(self.w1) + 2.0 * float(self.w2)) / (3.0 * s)


@dataclass(frozen=True)
class MomentLoad:
    label: str
    x: float
    M: float


Load = Union[PointLoad, AngledLoad, UDLLoad, UVLLoad, MomentLoad]
