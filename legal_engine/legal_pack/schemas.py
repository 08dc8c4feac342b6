"""Pydantic models for the versioned legal pack."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class NetPolicy(str, Enum):
    """Per-state policy on net-listing compensation."""
    BANNED = "BANNED"
    RESTRICTED = "RESTRICTED"
    ALLOWED = "ALLOWED"


class InvestorStatus(str, Enum):
    """Investor real estate licensing status."""
    LICENSED = "LICENSED"
    UNLICENSED = "UNLICENSED"


class HardBlock(BaseModel):
    """A regulatory prohibition that stops agreement generation outright."""

    state: str
    investor_status: InvestorStatus
    deal_count_threshold: int = Field(..., ge=0)
    message: str

    model_config = {"frozen": True}


class ClauseDependency(BaseModel):
    """Condition under which a clause is selected, e.g. net_policy BANNED.

    Documents the clause bank; selection itself is driven by the tables in
    legal_engine.rules.constants, which must agree with it.
    """

    type: str
    value: str

    model_config = {"frozen": True}


class Clause(BaseModel):
    """A clause in the clause bank."""

    id: str
    category: str
    title: str
    text: str
    dependencies: list[ClauseDependency] = Field(default_factory=list)

    model_config = {"frozen": True}


class ModuleTrigger(BaseModel):
    """Condition under which a deep-dive module applies."""

    type: str = "state"
    value: str

    model_config = {"frozen": True}


class Injection(BaseModel):
    """Content a deep-dive module injects into an addendum section."""

    target: str = Field(..., description="Section name, e.g. section_5")
    title: str | None = None
    content: str

    model_config = {"frozen": True}


class DeepDiveModule(BaseModel):
    """State-specific sections injected into the addendum."""

    id: str
    name: str | None = None
    trigger: ModuleTrigger
    injections: list[Injection] = Field(default_factory=list)

    model_config = {"frozen": True}


class Templates(BaseModel):
    """Document chassis strings with {{placeholder}} markers."""

    master_template: str = Field(..., min_length=1)
    addendum_chassis: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class AttorneyReviewConfig(BaseModel):
    """New Jersey attorney review window."""

    enabled: bool = False
    business_days: int = Field(3, ge=0)
    day_zero_is_delivery: bool = True

    model_config = {"frozen": True}


class RulePack(BaseModel):
    """The complete, immutable legal pack.

    Governing law is always the property's state; it is recorded here for
    audit but is not configurable per call.
    """

    version: str
    governing_law: str = "PROPERTY_STATE"
    net_policy_by_state: dict[str, NetPolicy]
    hard_blocks: dict[str, HardBlock]
    city_overlay_mapping: dict[str, str]
    clauses: dict[str, Clause]
    modules: dict[str, DeepDiveModule]
    templates: Templates
    terms_schema: dict[str, Any]
    transaction_types: list[str] = Field(default_factory=list)
    nj_attorney_review: AttorneyReviewConfig = Field(default_factory=AttorneyReviewConfig)

    model_config = {"frozen": True}

    def net_policy_for(self, state: str) -> NetPolicy:
        """Net policy for a state; states absent from the table are ALLOWED."""
        return self.net_policy_by_state.get(state, NetPolicy.ALLOWED)
