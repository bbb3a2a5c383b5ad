"""
Storefront error taxonomy.

Load and save failures of the configuration document, single-entity action
failures from the remote store, and session/permission failures all derive
from StorefrontError so shells can catch one base type.
"""

from __future__ import annotations


class StorefrontError(Exception):
    """Base class for storefront errors."""


class RemoteStoreError(StorefrontError):
    """The remote store answered with an error status or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ConfigLoadError(StorefrontError):
    """The configuration document could not be loaded."""


class ConfigSaveError(StorefrontError):
    """The configuration document could not be saved."""


class UnknownSectionTypeError(StorefrontError):
    """No payload schema is registered for a section type."""


class SectionNotFoundError(StorefrontError):
    """No section with the requested id exists in the layout."""


class SectionFieldError(StorefrontError):
    """A payload key is not part of the section type's schema, or its value is invalid."""


class OrderPlacementError(StorefrontError):
    """An order could not be submitted; the cart is left intact."""


class LoginRequiredError(StorefrontError):
    """An administrative action was attempted without a session."""


class PermissionDeniedError(StorefrontError):
    """The session user lacks the capability required for an action."""

    def __init__(self, capability: str) -> None:
        super().__init__(f"Missing permission: {capability}")
        self.capability = capability


class NotFoundError(StorefrontError):
    """A requested record does not exist."""


class AuthenticationError(StorefrontError):
    """Credentials did not match an account."""
