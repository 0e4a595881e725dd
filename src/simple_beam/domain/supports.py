from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class PinRoller:
    """
    Apoyo fijo (pin) + móvil (roller).
    El pin puede quedar a la derecha del roller (voladizo): es válido.
    """
    pin_x: float
    roller_x: float

    def positions(self, length: float) -> Tuple[float, ...]:
        """length no interviene; se recibe para compartir la firma con Fixed.positions."""
        return (float(self.pin_x), float(self.roller_x))


@dataclass(frozen=True)
class Fixed:
    """Empotramiento en un extremo: side = "left" (x=0) o "right" (x=L)."""
    side: str = "left"

    def fixed_x(self, length: float) -> float:
        return float(length) if self.side == "right" else 0.0

    def positions(self, length: float) -> Tuple[float, ...]:
        return (self.fixed_x(length),)


SupportSpec = Union[PinRoller, Fixed]
