"""
Identity endpoint.

Lets the web client ask which identity the API resolved for its token.
"""

from fastapi import APIRouter, Depends

from shared.models import Identity
from ..middleware.auth import get_current_identity
from ..models.identity import IdentityResponse

router = APIRouter()


@router.get("/me", response_model=IdentityResponse)
async def get_identity(identity: Identity = Depends(get_current_identity)) -> IdentityResponse:
    """
    Get the identity bound to this request.

    Missing or invalid tokens resolve to the anonymous identity.
    """
    return IdentityResponse(
        authenticated=identity.authenticated,
        role=identity.role,
        user_id=identity.user_id,
    )
