"""
Database package.

This package contains all database-related code:
- models: SQLAlchemy ORM models
- database: Connection management and sessions
- services: The staff store used by the governance services
"""

# Import and expose key components
from database.base import Base
from database.models import StaffMember, Tag, TagChangeRequest
from database.enums import ActorRole, BulkAction, ProfilePrivacy, RequestStatus
from database.database import (
    DatabaseManager,
    db_manager
)
from database.services import StaffStore

__all__ = [
    'Base',
    'StaffMember',
    'Tag',
    'TagChangeRequest',
    'ActorRole',
    'BulkAction',
    'ProfilePrivacy',
    'RequestStatus',
    'StaffStore',
    'DatabaseManager',
    'db_manager',
]
