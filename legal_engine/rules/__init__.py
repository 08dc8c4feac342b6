"""Rules domain - legal rule evaluation and overlay resolution."""

from .router import router, get_pack
from .constants import (
    PHILADELPHIA_OVERLAY,
    ATTORNEY_REVIEW_STATE,
    CLAUSE_CATEGORIES,
    STANDARD_CLAUSES,
    NET_POLICY_CLAUSES,
    OVERLAY_CLAUSES,
)
from .overlay import resolve_overlay
from .schemas import (
    EvaluationInput,
    EvaluationResult,
    OverlayResponse,
    PackInfoResponse,
)
from .service import (
    evaluate_rules,
    check_hard_blocks,
    select_deep_dive_modules,
    select_clauses,
    attorney_review_deadline,
)

__all__ = [
    # Router
    "router",
    "get_pack",
    # Constants
    "PHILADELPHIA_OVERLAY",
    "ATTORNEY_REVIEW_STATE",
    "CLAUSE_CATEGORIES",
    "STANDARD_CLAUSES",
    "NET_POLICY_CLAUSES",
    "OVERLAY_CLAUSES",
    # Overlay
    "resolve_overlay",
    # Schemas
    "EvaluationInput",
    "EvaluationResult",
    "OverlayResponse",
    "PackInfoResponse",
    # Service functions
    "evaluate_rules",
    "check_hard_blocks",
    "select_deep_dive_modules",
    "select_clauses",
    "attorney_review_deadline",
]
