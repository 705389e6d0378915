"""
Tag governance exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class GovernanceError(Exception):
    """Base class for every error raised by the governance services."""


class NotFoundError(GovernanceError):
    """A staff record or tag change request id does not exist."""


class InvalidTagSetError(GovernanceError):
    """A proposed tag set breaks the cardinality or uniqueness rules."""


class InvalidArgumentError(GovernanceError):
    """An empty or no-op tag name, or an unknown bulk action."""


class AlreadyExistsError(GovernanceError):
    """A tag name is already in the catalog or in use."""
