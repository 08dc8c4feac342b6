"""Pydantic models for legal package rendering."""

from datetime import date
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from legal_engine.exhibit import ExhibitAInput, TransactionType
from legal_engine.legal_pack import InvestorStatus
from legal_engine.rules import EvaluationResult


class ErrorKind(str, Enum):
    """Failure classes reported by the renderer."""
    VALIDATION = "validation"
    HARD_BLOCK = "hard_block"
    EXHIBIT = "exhibit"
    INTERNAL = "internal"


class DealFacts(BaseModel):
    """Resolved property facts for the deal."""

    property_address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    property_type: str | None = None


class InvestorFacts(BaseModel):
    """Investor identity and licensing facts."""

    name: str
    email: str | None = None
    status: InvestorStatus = InvestorStatus.UNLICENSED
    deal_count_last_365: int = Field(0, ge=0)


class AgentFacts(BaseModel):
    """Agent identity and license facts."""

    name: str | None = None
    email: str | None = None
    license_number: str | None = None


class RenderInput(BaseModel):
    """Everything needed to render a contract package."""

    deal: DealFacts
    investor: InvestorFacts
    agent: AgentFacts = Field(default_factory=AgentFacts)
    transaction_type: TransactionType = TransactionType.ASSIGNMENT
    exhibit_a: ExhibitAInput
    agreement_date: date | None = Field(None, description="Effective date; defaults to today")
    reject_banned_net: bool = False


class RenderResult(BaseModel):
    """Rendered package, or the reason no package was produced."""

    success: bool
    error: str | None = None
    error_kind: ErrorKind | None = None
    validation_errors: list[str] = Field(default_factory=list)

    full_md: str | None = None
    master_md: str | None = None
    addendum_md: str | None = None
    evaluation: EvaluationResult | None = None
    exhibit_a_terms: dict[str, Any] | None = None

    # Audit
    pack_version: str | None = None
    render_input_hash: str | None = None
    attorney_review_deadline: date | None = None
