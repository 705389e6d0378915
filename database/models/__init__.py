"""
Database models package.

This module imports and exposes all database models.
Importing this package ensures all models are registered with the Base metadata.
"""

from database.base import Base
from database.models.staff import StaffMember
from database.models.tag import Tag
from database.models.tag_change_request import TagChangeRequest
from database.enums import ProfilePrivacy, RequestStatus

# Export Base, all models, and enums
__all__ = ['Base', 'StaffMember', 'Tag', 'TagChangeRequest', 'ProfilePrivacy', 'RequestStatus']
