from typing import Any

from fastapi import APIRouter, Body, Depends

from storefront.api.deps import get_config_service, get_optional_user
from storefront.domain.entities import User
from storefront.services.config import ConfigService

router = APIRouter()


@router.get("")
def get_config(service: ConfigService = Depends(get_config_service)) -> dict[str, Any]:
    """The configuration document; created with defaults on first read."""
    return service.get().model_dump(by_alias=True, mode="json")


@router.post("")
def save_config(
    updates: dict[str, Any] = Body(...),
    user: User | None = Depends(get_optional_user),
    service: ConfigService = Depends(get_config_service),
) -> dict[str, Any]:
    """Merge the posted keys into the document and return the saved document."""
    return service.save(user, updates).model_dump(by_alias=True, mode="json")
