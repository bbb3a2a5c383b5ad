"""
Accounts: login, administration and the default admin bootstrap.

The bootstrap admin holds every capability and cannot be deleted.
"""

from __future__ import annotations

import logging
import os
from uuid import uuid4

from storefront.domain.entities import RoleType, User
from storefront.domain.errors import AuthenticationError, NotFoundError
from storefront.domain.policy import PolicyEngine
from storefront.ports.repo import PasswordHasherPort, UserRepoPort
from storefront.rules.models import AdminBootstrapRules

logger = logging.getLogger(__name__)


class UserService:
    def __init__(
        self,
        user_repo: UserRepoPort,
        hasher: PasswordHasherPort,
        policy: PolicyEngine,
        bootstrap: AdminBootstrapRules,
    ):
        self.user_repo = user_repo
        self.hasher = hasher
        self.policy = policy
        self.bootstrap = bootstrap

    def authenticate(self, username: str, password: str) -> User:
        creds = self.user_repo.get_credentials(username)
        if creds is None or not self.hasher.verify_password(password, creds[1]):
            raise AuthenticationError("Invalid credentials")
        return creds[0]

    def list_users(self, actor: User | None) -> list[User]:
        self.policy.require(actor, "users")
        return self.user_repo.list_all()

    def create_user(
        self,
        actor: User | None,
        username: str,
        password: str,
        role: RoleType = "staff",
        permissions: list[str] | None = None,
    ) -> User:
        self.policy.require(actor, "users")
        username = username.strip()
        if not username or not password:
            raise ValueError("Username and password are required")
        if self.user_repo.get_by_username(username) is not None:
            raise ValueError(f"Username '{username}' is already taken")

        user = User(
            id=uuid4().hex,
            username=username,
            role=role,
            permissions=self.policy.normalize_permissions(role, permissions or []),
        )
        return self.user_repo.save(user, self.hasher.hash_password(password))

    def delete_user(self, actor: User | None, user_id: str) -> None:
        self.policy.require(actor, "users")
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        if user.username == self.bootstrap.username:
            raise ValueError("The default admin account cannot be deleted")
        self.user_repo.delete(user_id)

    def change_password(self, actor: User | None, user_id: str, new_password: str) -> None:
        """Users may change their own password; changing anyone else's needs the users capability."""
        if actor is None or actor.id != user_id:
            self.policy.require(actor, "users")
        if not new_password:
            raise ValueError("Password must not be empty")
        if not self.user_repo.update_password_hash(user_id, self.hasher.hash_password(new_password)):
            raise NotFoundError(f"User {user_id} not found")

    def bootstrap_admin(self) -> User | None:
        """
        Create the default admin if it does not exist yet.

        The password comes from the configured environment variable, falling
        back to the rules' default password. Returns the created user, or
        None when nothing was done.
        """
        if not self.bootstrap.enabled:
            return None
        if self.user_repo.get_by_username(self.bootstrap.username) is not None:
            return None

        password = os.environ.get(self.bootstrap.password_env) or self.bootstrap.default_password
        if not password:
            logger.warning(
                "Default admin missing but %s is not set; skipping bootstrap",
                self.bootstrap.password_env,
            )
            return None

        admin = User(
            id=uuid4().hex,
            username=self.bootstrap.username,
            role="admin",
            permissions=list(self.policy.capabilities),
        )
        self.user_repo.save(admin, self.hasher.hash_password(password))
        logger.info("Created default admin account '%s'", admin.username)
        return admin
