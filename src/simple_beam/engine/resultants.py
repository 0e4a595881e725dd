from __future__ import annotations

from typing import Optional, Tuple, Union

from simple_beam.domain.loads import UDLLoad, UVLLoad


def trapezoid_resultant(w_start: float, w_end: float, length: float) -> Tuple[float, float]:
    """
    Trapecio de intensidad lineal w_start -> w_end sobre 'length'.
    Devuelve (R, S0):
      R  = (w_start + w_end) * length / 2
      S0 = momento estático respecto al inicio = length^2 * (w_start + 2*w_end) / 6
    El centroide es S0 / R (mismo valor que a + L*(w1+2w2)/(3(w1+w2))).
    """
    R = (w_start + w_end) * length / 2.0
    S0 = length * length * (w_start + 2.0 * w_end) / 6.0
    return R, S0


def span_resultant(
    load: Union[UDLLoad, UVLLoad],
    about: float,
    upto: Optional[float] = None,
) -> Tuple[float, float]:
    """
    Resultante de la porción [a, min(upto, b)] de una distribuida (positivo hacia abajo)
    y su momento respecto a 'about':  R * (x_resultante - about).
    Si la porción es vacía devuelve (0, 0).
    """
    a = float(load.a)
    b = float(load.b) if upto is None else min(float(load.b), float(upto))
    t = b - a
    if t <= 0.0:
        return 0.0, 0.0

    if isinstance(load, UDLLoad):
        w1 = we = float(load.w)
    else:
        w1 = float(load.w1)
        we = load.intensity_at(b)

    R, S0 = trapezoid_resultant(w1, we, t)
    return R, R * (a - float(about)) + S0
