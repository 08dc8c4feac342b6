"""Legal rule evaluation API endpoints."""

from fastapi import APIRouter, Depends

from legal_engine.legal_pack import RulePack, load_pack
from . import service
from .overlay import resolve_overlay
from .schemas import EvaluationInput, EvaluationResult, OverlayResponse, PackInfoResponse

router = APIRouter(prefix="/legal", tags=["legal"])


def get_pack() -> RulePack:
    """Active legal pack (overridable in tests)."""
    return load_pack()


@router.get("/pack", response_model=PackInfoResponse)
async def get_pack_info(pack: RulePack = Depends(get_pack)) -> PackInfoResponse:
    """Summarize the active legal pack."""
    return PackInfoResponse(
        version=pack.version,
        governing_law=pack.governing_law,
        net_policy_by_state=dict(pack.net_policy_by_state),
        hard_blocks=list(pack.hard_blocks),
        deep_dive_modules={
            module_id: module.trigger.value for module_id, module in pack.modules.items()
        },
        transaction_types=list(pack.transaction_types),
        clause_count=len(pack.clauses),
    )


@router.get("/overlay/{zip_code}", response_model=OverlayResponse)
async def get_overlay(zip_code: str, pack: RulePack = Depends(get_pack)) -> OverlayResponse:
    """Resolve the local overlay for a property ZIP code."""
    return OverlayResponse(zip_code=zip_code, city_overlay=resolve_overlay(zip_code, pack))


@router.post("/evaluate", response_model=EvaluationResult)
async def evaluate(
    request: EvaluationInput,
    pack: RulePack = Depends(get_pack),
) -> EvaluationResult:
    """
    Evaluate legal rules for a deal.

    Validation failures and hard blocks are reported in the body with
    success=false rather than as HTTP errors.
    """
    return service.evaluate_rules(request, pack)
