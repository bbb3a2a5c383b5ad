from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from storefront.api.deps import get_catalog_service, get_optional_user
from storefront.domain.entities import Product, User
from storefront.services.catalog import CatalogService

router = APIRouter()


class LikeRequest(BaseModel):
    increment: bool = True


@router.get("")
def list_products(service: CatalogService = Depends(get_catalog_service)) -> list[dict[str, Any]]:
    return [p.to_wire() for p in service.list_products()]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_product(
    product: Product,
    user: User | None = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    return service.create_product(user, product).to_wire()


@router.put("/{product_id}")
def update_product(
    product_id: str,
    product: Product,
    user: User | None = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    return service.update_product(user, product_id, product).to_wire()


@router.delete("/{product_id}")
def delete_product(
    product_id: str,
    user: User | None = Depends(get_optional_user),
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, str]:
    service.delete_product(user, product_id)
    return {"message": "Deleted"}


@router.post("/{product_id}/like")
def like_product(
    product_id: str,
    req: LikeRequest,
    service: CatalogService = Depends(get_catalog_service),
) -> dict[str, Any]:
    """Move the like counter; public, the counter never drops below zero."""
    return service.like(product_id, req.increment).to_wire()
