"""
Staff database model for the league talent roster.

Each row is one staff member (coach, executive, technical staff) that clubs
and the league track. Only the tag list is mutated by tag governance; the
remaining descriptive attributes are carried as an inert JSON payload.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime, JSON, Index, Enum as SQLEnum
from database.base import Base
from database.enums import ProfilePrivacy


class StaffMember(Base):
    """
    Staff model for tracking league staff talent.

    Attributes:
        id: Stable string identifier (primary key, immutable)
        sequence: Insertion order, used for stable listing
        name: Staff member's full name
        role: Current job title (e.g., "Head Coach")
        club: Current employer, if any
        profile_privacy: Public profiles are visible to clubs, Private only to the league
        tags: Ordered list of tag names (at most max_tags, no duplicates)
        details: Other descriptive attributes from the data source
        created_at: When this record was created
        updated_at: When this record was last updated
    """

    __tablename__ = 'staff'

    # Primary key
    id = Column(String(64), primary_key=True)
    sequence = Column(Integer, nullable=False)

    # Staff information
    name = Column(String(200), nullable=False)
    role = Column(String(200), nullable=True)
    club = Column(String(200), nullable=True)
    profile_privacy = Column(
        SQLEnum(ProfilePrivacy),
        nullable=False,
        default=ProfilePrivacy.PUBLIC
    )

    # Always assign a new list; in-place mutation is not tracked
    tags = Column(JSON, nullable=False, default=list)
    details = Column(JSON, nullable=False, default=dict)

    # Tracking timestamps
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))
    updated_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # Indexes for faster queries
    __table_args__ = (
        Index('idx_staff_sequence', 'sequence'),
        Index('idx_staff_profile_privacy', 'profile_privacy'),
        Index('idx_staff_club', 'club'),
    )

    @property
    def is_private(self) -> bool:
        return self.profile_privacy == ProfilePrivacy.PRIVATE

    def __repr__(self):
        """String representation of StaffMember."""
        return (f"<StaffMember(id='{self.id}', name='{self.name}', "
                f"tags={self.tags}, privacy={self.profile_privacy.value})>")

    def to_dict(self):
        """
        Convert staff member to dictionary format.

        Returns:
            dict: Staff data as dictionary
        """
        return {
            'id': self.id,
            'name': self.name,
            'role': self.role,
            'club': self.club,
            'profile_privacy': self.profile_privacy.value if self.profile_privacy else None,
            'tags': list(self.tags or []),
            'details': dict(self.details or {}),
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
