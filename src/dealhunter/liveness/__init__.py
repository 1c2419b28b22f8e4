"""
Chequeo de salud de links de deals admitidos.
"""

from dealhunter.liveness.checker import (
    LinkCheckResult,
    LivenessChecker,
    LivenessReport,
    is_generic_redirect,
)

__all__ = [
    "LinkCheckResult",
    "LivenessChecker",
    "LivenessReport",
    "is_generic_redirect",
]
