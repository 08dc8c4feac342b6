"""Legal pack domain - versioned rule data for agreement generation."""

from .loader import (
    PACK_FILES,
    LegalPackError,
    load_pack,
    clear_pack_cache,
    parse_pack,
)
from .schemas import (
    NetPolicy,
    InvestorStatus,
    HardBlock,
    ClauseDependency,
    Clause,
    ModuleTrigger,
    Injection,
    DeepDiveModule,
    Templates,
    AttorneyReviewConfig,
    RulePack,
)

__all__ = [
    # Loader
    "PACK_FILES",
    "LegalPackError",
    "load_pack",
    "clear_pack_cache",
    "parse_pack",
    # Schemas
    "NetPolicy",
    "InvestorStatus",
    "HardBlock",
    "ClauseDependency",
    "Clause",
    "ModuleTrigger",
    "Injection",
    "DeepDiveModule",
    "Templates",
    "AttorneyReviewConfig",
    "RulePack",
]
