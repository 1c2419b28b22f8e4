"""
Modelos de datos del sistema.

- Entrada: RawListing (candidatos sin validar)
- Salida: Listing + RejectionRecord (resultado de la admisión)
- Deals de usuarios: DealSubmission, StoredDeal
"""

from dealhunter.models.raw_listing import Category, RawListing, parse_amount
from dealhunter.models.listing import (
    AdmissionResult,
    Listing,
    RejectionRecord,
    RejectionType,
)
from dealhunter.models.deal import DealSubmission, StoredDeal

__all__ = [
    # Entrada
    "Category",
    "RawListing",
    "parse_amount",
    # Salida
    "Listing",
    "RejectionRecord",
    "RejectionType",
    "AdmissionResult",
    # Deals de usuarios
    "DealSubmission",
    "StoredDeal",
]
