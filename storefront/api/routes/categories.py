from typing import Any

from fastapi import APIRouter, Depends, status

from storefront.api.deps import get_catalog_service, get_optional_user
from storefront.domain.entities import Category, User
from storefront.services.catalog import CatalogService

router = APIRouter()


@router.get("")
def list_categories(service: CatalogService = Depends(get_catalog_service)) -> list[dict[str, Any]]:
    return [c.to_wire() for c in service.list_categories()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_category(
    category: Category,
    user: User | None = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    return service.create_category(user, category).to_wire()


@router.put("/{category_id}")
def update_category(
    category_id: str,
    category: Category,
    user: User | None = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    return service.update_category(user, category_id, category).to_wire()


@router.delete("/{category_id}")
def delete_category(
    category_id: str,
    user: User | None = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, str]:
    service.delete_category(user, category_id)
    return {"message": "Deleted"}
