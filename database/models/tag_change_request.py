"""
Tag change request database model.

A club cannot change tags directly. Its edits are stored here as requests
that a league admin approves or rejects. The league approval queue and the
club's sent ledger are both views over this one table.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, JSON, Text, Index, Enum as SQLEnum
from database.base import Base
from database.enums import RequestStatus


class TagChangeRequest(Base):
    """
    Tag change request submitted by a club.

    Attributes:
        id: Request identifier (uuid string)
        sequence: Submission order, tie-breaker for equal timestamps
        staff_id: Staff member the change targets (looked up by id)
        staff_name: Staff member's name when the request was made
        requesting_actor: Display name of the submitting club
        old_tags: Staff member's tags when the request was made
        new_tags: Proposed replacement tags
        status: PENDING, APPROVED or REJECTED
        response_note: Optional note left by the reviewer
        created_at: When the request was submitted
        resolved_at: When the request was approved or rejected
    """

    __tablename__ = 'tag_change_requests'

    # Primary key
    id = Column(String(36), primary_key=True)
    sequence = Column(Integer, nullable=False)

    # Request information
    staff_id = Column(String(64), nullable=False)
    staff_name = Column(String(200), nullable=True)
    requesting_actor = Column(String(200), nullable=False)
    old_tags = Column(JSON, nullable=False, default=list)
    new_tags = Column(JSON, nullable=False, default=list)

    # Resolution
    status = Column(
        SQLEnum(RequestStatus),
        nullable=False,
        default=RequestStatus.PENDING,
        index=True  # The approval queue filters on status
    )
    response_note = Column(Text, nullable=True)

    # Tracking timestamps
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    resolved_at = Column(DateTime, nullable=True)

    # Indexes for faster queries
    __table_args__ = (
        Index('idx_request_staff_id', 'staff_id'),
        Index('idx_request_requesting_actor', 'requesting_actor'),
        Index('idx_request_created_at', 'created_at', 'sequence'),
    )

    @property
    def is_pending(self) -> bool:
        return self.status == RequestStatus.PENDING

    def __repr__(self):
        """String representation of TagChangeRequest."""
        return (f"<TagChangeRequest(id='{self.id}', staff_id='{self.staff_id}', "
                f"actor='{self.requesting_actor}', status={self.status.value})>")

    def to_dict(self):
        """
        Convert request to dictionary format.

        Returns:
            dict: Request data as dictionary
        """
        return {
            'id': self.id,
            'staff_id': self.staff_id,
            'staff_name': self.staff_name,
            'requesting_actor': self.requesting_actor,
            'old_tags': list(self.old_tags or []),
            'new_tags': list(self.new_tags or []),
            'status': self.status.value,
            'response_note': self.response_note,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'resolved_at': self.resolved_at.isoformat() if self.resolved_at else None,
        }
