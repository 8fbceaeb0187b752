"""
Information endpoint for API v1.

Returns the service name and version together with the principal the
request is attributed to.  Clients use it to check which identity
their bearer token resolves to before calling the ``/owner`` routes.
"""

from typing import Dict

from fastapi import APIRouter, Depends

from pet_adoption_api.app.core.config import settings
from pet_adoption_api.app.core.security import Identity, get_caller_identity

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
async def get_info(caller: Identity = Depends(get_caller_identity)) -> Dict[str, str]:
    return {
        "project": settings.project_name,
        "version": settings.api_version,
        "principal": caller.principal,
    }
