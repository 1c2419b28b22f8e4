"""
Admisión de deals.

Reglas de negocio (geografía, presupuesto, deep link) y el pipeline
que las aplica sobre un batch de candidatos.
"""

from dealhunter.admission.budget import (
    BUDGET_LIMITS,
    UnknownCategoryError,
    budget_ceiling,
    exceeds_budget,
    submission_price_error,
)
from dealhunter.admission.deep_link import is_valid_deep_link
from dealhunter.admission.pipeline import admit

__all__ = [
    "BUDGET_LIMITS",
    "UnknownCategoryError",
    "budget_ceiling",
    "exceeds_budget",
    "submission_price_error",
    "is_valid_deep_link",
    "admit",
]
