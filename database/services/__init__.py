"""
Database services for business logic around database operations.
"""

from database.services.staff_store import StaffStore

__all__ = [
    "StaffStore",
]
