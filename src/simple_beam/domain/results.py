from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

import numpy as np


@dataclass(frozen=True)
class VerticalReaction:
    at: str      # "pin" | "roller" | "fixed"
    x: float
    R: float     # + arriba


@dataclass(frozen=True)
class MomentReaction:
    at: str
    x: float
    M: float


@dataclass(frozen=True)
class HorizontalReaction:
    at: str
    H: float


Reaction = Union[VerticalReaction, MomentReaction, HorizontalReaction]


SEGMENT_DEGREE = {"const": 0, "linear": 1, "quadratic": 2, "cubic": 3}


@dataclass(frozen=True)
class DiagramSegment:
    """
    Tramo [a, b] de V(x) o M(x).

    coeffs en variable local dx = x - a:
        f(x) = c0 + c1*dx + c2*dx^2 + c3*dx^3
    (tantos términos como indique kind).
    """
    a: float
    b: float
    kind: str
    coeffs: Tuple[float, ...]
    value_a: float
    value_b: float

    @property
    def degree(self) -> int:
        return SEGMENT_DEGREE[self.kind]

    def evaluate(self, x):
        dx = np.asarray(x, dtype=float) - float(self.a)
        out = np.polynomial.polynomial.polyval(dx, self.coeffs)
        if np.ndim(out) == 0:
            return float(out)
        return out


@dataclass(frozen=True)
class Extrema:
    Vmax: float = 0.0
    Vmax_pos: float = 0.0
    Vmin: float = 0.0
    Vmin_pos: float = 0.0
    Mmax: float = 0.0
    Mmax_pos: float = 0.0
    Mmin: float = 0.0
    Mmin_pos: float = 0.0


@dataclass(frozen=True)
class AnalysisResult:
    reactions: List[Reaction]
    events: List[float]
    shear_segments: List[DiagramSegment]
    moment_segments: List[DiagramSegment]
    extrema: Extrema
    is_valid: bool = True
    error: Optional[str] = None
    error_kind: Optional[str] = None
    notes: List[str] = field(default_factory=list)

    @classmethod
    def invalid(cls, message: str, kind: str = "computation") -> "AnalysisResult":
        return cls(
            reactions=[],
            events=[],
            shear_segments=[],
            moment_segments=[],
            extrema=Extrema(),
            is_valid=False,
            error=message,
            error_kind=kind,
        )

    def vertical_reaction(self, at: str) -> Optional[VerticalReaction]:
        for r in self.reactions:
            if isinstance(r, VerticalReaction) and r.at == at:
                return r
        return None

    def moment_reaction(self, at: str) -> Optional[MomentReaction]:
        for r in self.reactions:
            if isinstance(r, MomentReaction) and r.at == at:
                return r
        return None

    def horizontal_reaction(self) -> Optional[HorizontalReaction]:
        for r in self.reactions:
            if isinstance(r, HorizontalReaction):
                return r
        return None
