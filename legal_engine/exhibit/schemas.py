"""Exhibit A commercial terms schemas."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from legal_engine.rules import EvaluationResult


class CompensationModel(str, Enum):
    """How the agent is compensated."""
    FLAT_FEE = "FLAT_FEE"
    COMMISSION_PCT = "COMMISSION_PCT"
    NET_SPREAD = "NET_SPREAD"


class TransactionType(str, Enum):
    """Supported investor transaction structures."""
    ASSIGNMENT = "ASSIGNMENT"
    DOUBLE_CLOSE = "DOUBLE_CLOSE"


class ExhibitAInput(BaseModel):
    """Commercial terms as requested by the parties."""

    compensation_model: CompensationModel | None = None
    flat_fee_amount: float | None = Field(None, ge=0)
    commission_percentage: float | None = Field(None, ge=0, le=100)
    net_target: float | None = Field(None, ge=0)
    transaction_type: TransactionType | None = None
    buyer_commission_type: str | None = None
    buyer_commission_amount: float | None = None
    seller_commission_type: str | None = None
    seller_commission_amount: float | None = None
    agreement_length_days: int | None = Field(None, ge=1)
    termination_notice_days: int | None = Field(None, ge=1)


class ExhibitAResult(BaseModel):
    """Normalized Exhibit A terms.

    Callers must check ``error``; a result with an error still carries the
    partial terms.
    """

    terms: dict[str, Any] = Field(default_factory=dict)
    converted: bool = False
    error: str | None = None


class CompensationSummary(BaseModel):
    """Human-readable compensation lines for the addendum."""

    seller_comp_type: str
    seller_comp_value: str
    buyer_comp_type: str
    buyer_comp_value: str
    converted_from_net: bool = False


class ExhibitARequest(BaseModel):
    """Request to build Exhibit A against an existing evaluation."""

    exhibit_a: ExhibitAInput
    evaluation: EvaluationResult
    reject_banned_net: bool = False
