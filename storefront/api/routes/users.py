from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from storefront.api.deps import get_optional_user, get_user_service
from storefront.domain.entities import RoleType, User
from storefront.services.users import UserService

router = APIRouter()


class UserCreateRequest(BaseModel):
    username: str
    password: str
    role: RoleType = "staff"
    permissions: list[str] = Field(default_factory=list)


class PasswordChangeRequest(BaseModel):
    password: str


@router.get("")
def list_users(
    user: User | None = Depends(get_optional_user),
    service: UserService = Depends(get_user_service),
) -> list[dict[str, Any]]:
    return [u.to_wire() for u in service.list_users(user)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_user(
    req: UserCreateRequest,
    user: User | None = Depends(get_optional_user),
    service: UserService = Depends(get_user_service),
) -> dict[str, Any]:
    created = service.create_user(user, req.username, req.password, req.role, req.permissions)
    return created.to_wire()


@router.delete("/{user_id}")
def delete_user(
    user_id: str,
    user: User | None = Depends(get_optional_user),
    service: UserService = Depends(get_user_service),
) -> dict[str, str]:
    service.delete_user(user, user_id)
    return {"message": "Deleted"}


@router.put("/{user_id}/password")
def change_password(
    user_id: str,
    req: PasswordChangeRequest,
    user: User | None = Depends(get_optional_user),
    service: UserService = Depends(get_user_service),
) -> dict[str, str]:
    service.change_password(user, user_id, req.password)
    return {"message": "Password updated"}
