"""Exhibit A domain - commercial terms normalization."""

from .router import router
from .schemas import (
    CompensationModel,
    TransactionType,
    ExhibitAInput,
    ExhibitAResult,
    ExhibitARequest,
    CompensationSummary,
)
from .service import (
    build_exhibit_a,
    validate_terms,
    describe_compensation,
    REQUIRED_FIELDS,
    AMOUNT_FIELDS,
    COMPENSATION_LABELS,
)

__all__ = [
    # Router
    "router",
    # Schemas
    "CompensationModel",
    "TransactionType",
    "ExhibitAInput",
    "ExhibitAResult",
    "ExhibitARequest",
    "CompensationSummary",
    # Service functions
    "build_exhibit_a",
    "validate_terms",
    "describe_compensation",
    # Constants
    "REQUIRED_FIELDS",
    "AMOUNT_FIELDS",
    "COMPENSATION_LABELS",
]
