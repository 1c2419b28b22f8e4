"""
Deals publicados y catálogo semilla.
"""

from dealhunter.deals.catalog import load_seed_deals
from dealhunter.deals.validation import SubmissionError, validate_submission
from dealhunter.deals.service import Catalog, DealNotFoundError, DealService

__all__ = [
    "load_seed_deals",
    "SubmissionError",
    "validate_submission",
    "Catalog",
    "DealNotFoundError",
    "DealService",
]
