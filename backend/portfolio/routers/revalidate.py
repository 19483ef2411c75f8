"""Revalidation API router: operator-triggered invalidation of cached pages and endpoints."""

from fastapi import APIRouter, Depends

from portfolio.middleware.auth_middleware import get_current_admin
from portfolio.schemas.revalidate import RevalidateRequest, RevalidateResponse
from portfolio.services.cache_service import RevalidationDispatcher, get_dispatcher
from portfolio.services.token_service import TokenClaims

router = APIRouter(prefix="/api/revalidate", tags=["revalidate"])


@router.post("", response_model=RevalidateResponse)
def revalidate(
    request: RevalidateRequest,
    dispatcher: RevalidationDispatcher = Depends(get_dispatcher),
    _admin: TokenClaims = Depends(get_current_admin),
):
    if request.type == "path":
        targets = dispatcher.invalidate_path(request.path, force=request.force)
        message = f"Revalidated path: {request.path}"
    elif request.type == "tag":
        targets = dispatcher.invalidate(request.tag)
        message = f"Revalidated tag: {request.tag}"
    else:
        targets = dispatcher.invalidate_all()
        message = "Revalidated all paths"
    return RevalidateResponse(message=message, invalidated_targets=targets)
