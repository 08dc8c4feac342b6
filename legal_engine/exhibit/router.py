"""Exhibit A API endpoints."""

from fastapi import APIRouter

from . import service
from .schemas import ExhibitARequest, ExhibitAResult

router = APIRouter(prefix="/legal", tags=["legal"])


@router.post("/exhibit-a", response_model=ExhibitAResult)
async def build_exhibit(request: ExhibitARequest) -> ExhibitAResult:
    """
    Normalize Exhibit A terms against an evaluation's net policy.

    NET_SPREAD terms in a banned state are converted to a flat fee unless
    reject_banned_net is set.
    """
    return service.build_exhibit_a(
        request.exhibit_a,
        request.evaluation,
        reject_banned_net=request.reject_banned_net,
    )
