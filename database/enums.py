"""
Database enums and types.

This module contains all enum types used across database models and the
governance services. Centralizing enums here makes them easy to reuse.
"""

from enum import Enum as PyEnum


class ProfilePrivacy(PyEnum):
    """
    Staff profile visibility.

    Private profiles are only visible to league admins.
    """
    PUBLIC = "Public"
    PRIVATE = "Private"


class RequestStatus(PyEnum):
    """
    Lifecycle status of a club tag change request.

    A request starts as PENDING and moves exactly once to
    APPROVED or REJECTED.
    """
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class ActorRole(PyEnum):
    """Who is acting on the roster."""
    LEAGUE_ADMIN = "league_admin"
    CLUB = "club"


class BulkAction(PyEnum):
    """Tag delta applied by a bulk edit."""
    ADD = "add"
    REMOVE = "remove"
