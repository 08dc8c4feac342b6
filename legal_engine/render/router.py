"""Legal package rendering API endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from legal_engine.legal_pack import RulePack
from legal_engine.rules import get_pack
from . import service
from .schemas import ErrorKind, RenderInput, RenderResult

router = APIRouter(prefix="/legal", tags=["legal"])

ERROR_STATUS = {
    ErrorKind.VALIDATION: 422,
    ErrorKind.EXHIBIT: 422,
    ErrorKind.HARD_BLOCK: 403,
}


@router.post("/render", response_model=RenderResult)
async def render(
    request: RenderInput,
    pack: RulePack = Depends(get_pack),
) -> RenderResult:
    """
    Render the Master Agreement, State Addendum and Exhibit A for a deal.

    Hard blocks return 403, missing facts or terms return 422. Internal
    failures return 500 without the underlying error text.
    """
    result = service.render_package(request, pack)
    if result.success:
        return result

    if result.error_kind == ErrorKind.INTERNAL:
        raise HTTPException(status_code=500, detail="Internal error while rendering the legal package")

    raise HTTPException(
        status_code=ERROR_STATUS[result.error_kind],
        detail={
            "error": result.error,
            "error_kind": result.error_kind.value,
            "validation_errors": result.validation_errors,
        },
    )
