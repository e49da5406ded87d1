"""
Errors raised by the session registry.

Routes translate these into HTTP statuses; nothing here knows about HTTP.
"""


class RegistryError(Exception):
    """Base class for registry failures."""


class ValidationError(RegistryError):
    """A username failed the length / character rule."""


class NotFound(RegistryError):
    """Session is absent, expired, or points at a user that no longer exists."""


class IdentifierCollision(RegistryError):
    """The id generator returned an identifier that is already in use."""
