import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from storefront.adapters.auth.crypto import Argon2PasswordHasher
from storefront.adapters.clock import SystemClock
from storefront.adapters.sqlite.migrator import SQLiteMigrator
from storefront.adapters.sqlite.repos import (
    SQLiteCategoryRepo,
    SQLiteConfigRepo,
    SQLiteOrderRepo,
    SQLiteProductRepo,
    SQLiteUserRepo,
)
from storefront.api.auth_utils import token_subject
from storefront.domain.entities import User
from storefront.domain.policy import PolicyEngine
from storefront.rules.loader import load_rules
from storefront.rules.models import StoreRules
from storefront.services.catalog import CatalogService
from storefront.services.config import ConfigService
from storefront.services.orders import OrderService
from storefront.services.users import UserService


# --- Settings ---
class Settings:
    def __init__(self, data_dir: str | Path | None = None, rules_path: str | Path | None = None) -> None:
        self.base_dir = Path(os.getcwd())
        self.rules_path = Path(
            rules_path or os.environ.get("STOREFRONT_RULES_PATH", self.base_dir / "storefront_rules.yaml")
        )
        self.rules = load_rules(self.rules_path)
        self.data_dir = Path(
            data_dir or os.environ.get("STOREFRONT_DATA_DIR", self.rules.storage.data_dir)
        )
        self.db_path = str(self.data_dir / self.rules.storage.db_filename)


@lru_cache
def get_settings() -> Settings:
    return Settings()


def init_storage(settings: Settings) -> None:
    """Create the data directory, apply migrations and make sure the default admin exists."""
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    SQLiteMigrator(settings.db_path).run_migrations()
    build_user_service(settings).bootstrap_admin()


# --- Rules ---
def get_rules(settings: Settings = Depends(get_settings)) -> StoreRules:
    return settings.rules


def get_policy(rules: StoreRules = Depends(get_rules)) -> PolicyEngine:
    return PolicyEngine(rules.access)


# --- Repos ---
def get_config_repo(settings: Settings = Depends(get_settings)) -> SQLiteConfigRepo:
    return SQLiteConfigRepo(settings.db_path)


def get_product_repo(settings: Settings = Depends(get_settings)) -> SQLiteProductRepo:
    return SQLiteProductRepo(settings.db_path)


def get_category_repo(settings: Settings = Depends(get_settings)) -> SQLiteCategoryRepo:
    return SQLiteCategoryRepo(settings.db_path)


def get_order_repo(settings: Settings = Depends(get_settings)) -> SQLiteOrderRepo:
    return SQLiteOrderRepo(settings.db_path)


def get_user_repo(settings: Settings = Depends(get_settings)) -> SQLiteUserRepo:
    return SQLiteUserRepo(settings.db_path)


# Clock singleton for deterministic time operations
_clock_instance: SystemClock | None = None


def get_clock() -> SystemClock:
    global _clock_instance
    if _clock_instance is None:
        _clock_instance = SystemClock()
    return _clock_instance


# --- Services ---
def get_config_service(
    repo: SQLiteConfigRepo = Depends(get_config_repo),
    policy: PolicyEngine = Depends(get_policy),
) -> ConfigService:
    return ConfigService(repo, policy)


def get_catalog_service(
    product_repo: SQLiteProductRepo = Depends(get_product_repo),
    category_repo: SQLiteCategoryRepo = Depends(get_category_repo),
    policy: PolicyEngine = Depends(get_policy),
) -> CatalogService:
    return CatalogService(product_repo, category_repo, policy)


def get_order_service(
    repo: SQLiteOrderRepo = Depends(get_order_repo),
    policy: PolicyEngine = Depends(get_policy),
    clock: SystemClock = Depends(get_clock),
) -> OrderService:
    return OrderService(repo, policy, clock)


def build_user_service(settings: Settings) -> UserService:
    return UserService(
        SQLiteUserRepo(settings.db_path),
        Argon2PasswordHasher(),
        PolicyEngine(settings.rules.access),
        settings.rules.bootstrap_admin,
    )


def get_user_service(settings: Settings = Depends(get_settings)) -> UserService:
    return build_user_service(settings)


# --- Auth ---
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_optional_user(
    token: Annotated[str | None, Depends(oauth2_scheme)],
    user_repo: SQLiteUserRepo = Depends(get_user_repo),
) -> User | None:
    """
    The user behind the bearer token, or None when no token was sent.

    A token that is present but invalid is rejected outright.
    """
    if not token:
        return None

    user_id = token_subject(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = user_repo.get_by_id(user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user
