from collections.abc import Sequence

from storefront.domain.entities import User
from storefront.domain.errors import LoginRequiredError, PermissionDeniedError
from storefront.rules.models import AccessRules

DEFAULT_CAPABILITIES: tuple[str, ...] = ("products", "orders", "categories", "settings", "users")


def has_permission(user: User, capability: str, admin_role: str = "admin") -> bool:
    """Admins hold every capability; everyone else only what they were granted."""
    if user.role == admin_role:
        return True
    return capability in user.permissions


class PolicyEngine:
    def __init__(self, rules: AccessRules | None = None):
        self.rules = rules or AccessRules(capabilities=list(DEFAULT_CAPABILITIES))

    @property
    def capabilities(self) -> Sequence[str]:
        return self.rules.capabilities

    def check_permission(self, user: User | None, capability: str) -> bool:
        """
        Check whether the session user may perform an administrative action.

        No session never passes; admins pass for every capability; staff
        pass only for capabilities in their permission set.
        """
        if not user:
            return False
        return has_permission(user, capability, self.rules.admin_role)

    def require(self, user: User | None, capability: str) -> User:
        """
        Gate an administrative action.

        Raises:
            LoginRequiredError: If there is no session.
            PermissionDeniedError: If the user lacks the capability.
        """
        if user is None:
            raise LoginRequiredError("Login required")
        if not has_permission(user, capability, self.rules.admin_role):
            raise PermissionDeniedError(capability)
        return user

    def visible_actions(self, user: User | None) -> list[str]:
        """Administrative capabilities to show for this session, in declared order."""
        return [c for c in self.capabilities if self.check_permission(user, c)]

    def normalize_permissions(self, role: str, permissions: Sequence[str]) -> list[str]:
        """
        Permission set to store for a new account.

        Admin accounts are stored with the full capability list; unknown
        capability names are rejected.
        """
        if role == self.rules.admin_role:
            return list(self.capabilities)
        unknown = [p for p in permissions if p not in self.capabilities]
        if unknown:
            raise ValueError(f"Unknown permissions: {', '.join(unknown)}")
        # Keep declared order and drop duplicates
        return [c for c in self.capabilities if c in permissions]
