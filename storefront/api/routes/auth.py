from datetime import timedelta
from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from storefront.api.auth_utils import issue_token
from storefront.api.deps import get_rules, get_user_service
from storefront.domain.entities import Session
from storefront.rules.models import StoreRules
from storefront.services.users import UserService

router = APIRouter()


class LoginRequest(BaseModel):
    username: str
    password: str


@router.post("/login")
def login(
    req: LoginRequest,
    service: UserService = Depends(get_user_service),
    rules: StoreRules = Depends(get_rules),
) -> dict[str, Any]:
    """Authenticate and return the user record with a bearer token."""
    user = service.authenticate(req.username, req.password)
    token = issue_token(user, timedelta(minutes=rules.auth.token_ttl_minutes))
    return Session(user=user, access_token=token).to_wire()
