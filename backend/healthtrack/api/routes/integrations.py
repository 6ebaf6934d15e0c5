"""
Credentials for the nutrition APIs the client calls directly.
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from healthtrack.core.config import Settings
from healthtrack.core.security import Identity
from healthtrack.schemas.integration import ApiCredentials
from healthtrack.api.dependencies import get_current_identity

router = APIRouter(prefix="/integrations", tags=["integrations"])


def _credentials(api_id: str, api_key: str, name: str) -> ApiCredentials:
    if not api_id or not api_key:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{name} API is not configured"
        )
    return ApiCredentials(api_id=api_id, api_key=api_key)


@router.get("/recipe", response_model=ApiCredentials)
async def get_recipe_api(request: Request, identity: Identity = Depends(get_current_identity)):
    settings: Settings = request.app.state.settings
    return _credentials(settings.RECIPE_API_ID, settings.RECIPE_API_KEY, "Recipe")


@router.get("/macro", response_model=ApiCredentials)
async def get_macro_api(request: Request, identity: Identity = Depends(get_current_identity)):
    settings: Settings = request.app.state.settings
    return _credentials(settings.MACRO_API_ID, settings.MACRO_API_KEY, "Macro calculator")
