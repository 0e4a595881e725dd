from __future__ import annotations


class AnalysisError(ValueError):
    """Error de datos de entrada que invalida el análisis."""
    kind = "computation"


class InvalidBeamError(AnalysisError):
    kind = "invalid_beam"


class InvalidSupportError(AnalysisError):
    kind = "invalid_support"
