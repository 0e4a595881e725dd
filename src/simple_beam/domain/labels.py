from __future__ import annotations

import re
from typing import Dict, Optional

from simple_beam.domain.loads import AngledLoad, Load, MomentLoad, PointLoad, UDLLoad, UVLLoad

# Prefijo de etiqueta automática por tipo de carga
LABEL_PREFIX: Dict[type, str] = {
    PointLoad: "P",
    AngledLoad: "A",
    UDLLoad: "W",
    UVLLoad: "V",
    MomentLoad: "M",
}

INDEXED_RE = re.compile(r"^([A-Z])(\d+)$", re.IGNORECASE)


def label_index(label: str, prefix: str) -> Optional[int]:
    """P3 -> 3 (si el prefijo coincide), si no None."""
    m = INDEXED_RE.match((label or "").strip())
    if not m or m.group(1).upper() != prefix.upper():
        return None
    return int(m.group(2))


def next_free_index(used: set[int]) -> int:
    k = 1
    while k in used:
        k += 1
    return k


def prefix_for(load: Load) -> str:
    return LABEL_PREFIX.get(type(load), "L")
