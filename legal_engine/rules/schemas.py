"""Pydantic models for rule evaluation."""

from pydantic import BaseModel, Field

from legal_engine.legal_pack import InvestorStatus, NetPolicy


class EvaluationInput(BaseModel):
    """Deal, investor, and jurisdiction facts supplied by the caller."""

    governing_state: str | None = Field(None, description="Two-letter property state")
    property_zip: str | None = None
    transaction_type: str = "ASSIGNMENT"
    property_type: str | None = None
    investor_status: InvestorStatus = InvestorStatus.UNLICENSED
    deal_count_last_365: int = Field(0, ge=0, description="Investor deals in trailing 365 days")


class EvaluationResult(BaseModel):
    """Outcome of rule evaluation for a single deal."""

    success: bool
    error: str | None = None
    validation_errors: list[str] = Field(default_factory=list)
    hard_block_id: str | None = None
    selected_rule_id: str = ""
    selected_clause_ids: dict[str, list[str]] = Field(
        default_factory=dict,
        description="Clause category letter -> ordered clause IDs",
    )
    deep_dive_module_ids: list[str] = Field(default_factory=list)
    city_overlay: str | None = None
    net_policy: NetPolicy | None = None

    @property
    def governing_state(self) -> str:
        """State portion of the selected rule ID."""
        return self.selected_rule_id.split("_", 1)[0]


class OverlayResponse(BaseModel):
    """Overlay lookup for a ZIP code."""

    zip_code: str
    city_overlay: str | None


class PackInfoResponse(BaseModel):
    """Summary of the active legal pack."""

    version: str
    governing_law: str
    net_policy_by_state: dict[str, NetPolicy]
    hard_blocks: list[str]
    deep_dive_modules: dict[str, str]
    transaction_types: list[str]
    clause_count: int
