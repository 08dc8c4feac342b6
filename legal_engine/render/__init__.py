"""Render domain - end-to-end contract package generation."""

from .router import router
from .schemas import (
    ErrorKind,
    DealFacts,
    InvestorFacts,
    AgentFacts,
    RenderInput,
    RenderResult,
)
from .service import (
    DOCUMENT_SEPARATOR,
    render_package,
    compute_render_input_hash,
    format_agreement_date,
)

__all__ = [
    # Router
    "router",
    # Schemas
    "ErrorKind",
    "DealFacts",
    "InvestorFacts",
    "AgentFacts",
    "RenderInput",
    "RenderResult",
    # Service functions
    "DOCUMENT_SEPARATOR",
    "render_package",
    "compute_render_input_hash",
    "format_agreement_date",
]
