"""
Pydantic data models shared by the governance services.

These models provide type validation, serialization, and clear contracts
between the services and the presentation layer.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from database.enums import ActorRole, ProfilePrivacy


class Actor(BaseModel):
    """
    Who is performing an action.

    Decided once when a session starts and passed into every
    role-dependent call.
    """
    role: ActorRole = Field(..., description="League admin or club")
    name: str = Field(..., min_length=1, description="Display name, e.g. 'League Office' or 'Austin FC'")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "role": "club",
                "name": "Austin FC"
            }
        }
    )

    @classmethod
    def league_admin(cls, name: str = "League Office") -> "Actor":
        return cls(role=ActorRole.LEAGUE_ADMIN, name=name)

    @classmethod
    def club(cls, name: str) -> "Actor":
        return cls(role=ActorRole.CLUB, name=name)

    @property
    def is_league_admin(self) -> bool:
        return self.role == ActorRole.LEAGUE_ADMIN


class StaffRecordData(BaseModel):
    """
    One staff record as it appears in the roster data file.

    Keys other than the ones below are kept as inert payload.
    """
    id: str = Field(..., min_length=1, description="Stable staff identifier")
    name: str = Field(..., description="Full name")
    role: Optional[str] = Field(None, description="Current job title")
    club: Optional[str] = Field(None, description="Current employer")
    tags: List[str] = Field(default_factory=list, description="Ordered tag names")
    profile_privacy: ProfilePrivacy = Field(
        ProfilePrivacy.PUBLIC,
        alias="profilePrivacy",
        description="Public or Private"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        extra="allow",
        json_schema_extra={
            "example": {
                "id": "staff-001",
                "name": "Alex Ramos",
                "role": "Head Coach",
                "club": "Austin FC",
                "tags": ["Proven"],
                "profilePrivacy": "Public",
                "coachingLicenses": ["USSF A"]
            }
        }
    )

    @property
    def details(self) -> Dict[str, Any]:
        """Descriptive attributes not used by tag governance."""
        return dict(self.model_extra or {})


class TagRegistryEntry(BaseModel):
    """A tag and the staff members currently holding it."""
    name: str = Field(..., description="Tag name")
    usage_count: int = Field(0, ge=0, description="Staff members holding this tag")
    staff_ids: List[str] = Field(default_factory=list, description="Holders, in roster order")
    in_catalog: bool = Field(False, description="Declared in the tag catalog")


class TagSummary(BaseModel):
    """Roster-wide tag statistics for the tag management panel."""
    total_tags: int = Field(0, ge=0, description="Distinct tags in use or in the catalog")
    tagged_staff: int = Field(0, ge=0, description="Staff members with at least one tag")
    total_staff: int = Field(0, ge=0, description="Staff members on the roster")
