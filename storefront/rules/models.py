from pydantic import BaseModel, Field, field_validator


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class ApiRules(BaseModel):
    base_url: str
    timeout_seconds: float = 10.0


class StorageRules(BaseModel):
    data_dir: str
    db_filename: str
    wishlist_filename: str


class AccessRules(BaseModel):
    capabilities: list[str]
    admin_role: str = "admin"

    @field_validator("capabilities")
    @classmethod
    def capabilities_not_empty(cls, v: list[str]) -> list[str]:
        if not v:
            raise ValueError("At least one capability must be declared")
        return v


class AuthRules(BaseModel):
    token_ttl_minutes: int = Field(gt=0)


class AdminBootstrapRules(BaseModel):
    enabled: bool
    username: str
    password_env: str
    default_password: str | None = None


class ThemeRules(BaseModel):
    deep_offset: int = Field(default=-20, ge=-255, le=255)
    light_offset: int = Field(default=20, ge=-255, le=255)


class StoreRules(BaseModel):
    project: ProjectRules
    api: ApiRules
    storage: StorageRules
    access: AccessRules
    auth: AuthRules
    bootstrap_admin: AdminBootstrapRules
    theme: ThemeRules = Field(default_factory=ThemeRules)
