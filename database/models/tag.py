"""
Tag catalog model.

Holds tag names that can be assigned even when no staff member carries them
yet. Tags in use are derived from staff records; this table only tracks
names the league has declared.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, DateTime
from database.base import Base


class Tag(Base):
    """
    Catalog entry for an assignable tag.

    Attributes:
        id: Primary key
        name: Tag name (unique)
        created_at: When the tag was declared
    """

    __tablename__ = 'tags'

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False, unique=True)
    created_at = Column(DateTime, nullable=False, default=lambda: datetime.now(timezone.utc))

    def __repr__(self):
        return f"<Tag(id={self.id}, name='{self.name}')>"

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
