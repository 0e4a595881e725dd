from __future__ import annotations

from simple_beam.domain.supports import Fixed, PinRoller, SupportSpec


def validate_supports(support: SupportSpec, length: float) -> bool:
    """
    Pin+roller: 0 <= pin_x <= L, 0 <= roller_x <= L y pin_x != roller_x
    (pin a la derecha del roller es un voladizo válido).
    Empotramiento: siempre válido, la posición queda dada por el lado.
    """
    if isinstance(support, PinRoller):
        pin_x = float(support.pin_x)
        roller_x = float(support.roller_x)
        L = float(length)
        return 0.0 <= pin_x <= L and 0.0 <= roller_x <= L and pin_x != roller_x
    if isinstance(support, Fixed):
        return support.side in ("left", "right")
    return False
