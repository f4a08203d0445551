"""
Domain models and value objects.

Contains scan candidates, tolerance bands and validation outcomes.
"""

from src.core.domain.candidate import Candidate, Encoding, ScanResult
from src.core.domain.price_band import (
    Accepted,
    ProductVariant,
    Rejected,
    ToleranceBand,
    ValidationOutcome,
)

__all__ = [
    # Scan models
    "Candidate",
    "Encoding",
    "ScanResult",
    # Price gate models
    "ToleranceBand",
    "Accepted",
    "Rejected",
    "ValidationOutcome",
    "ProductVariant",
]
