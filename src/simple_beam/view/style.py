from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class RenderStyle:
    curve_lw: float = 1.6
    axis_lw: float = 1.0
    fill_alpha: float = 0.15

    marker_size: float = 18.0
    font_size: int = 8

    # margen vertical relativo al |valor| máximo
    y_pad: float = 1.15
    # margen de etiquetas dentro del recuadro (fracción del rango)
    label_margin: float = 0.03
