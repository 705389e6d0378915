"""
Role-based staff visibility.

League admins see the whole roster. Clubs only see staff whose profile is
not Private, and can only target for tag edits what they can see.
"""

from typing import Iterable, List, Union

from database.enums import ActorRole, ProfilePrivacy
from database.models.staff import StaffMember
from src.models import Actor


def _role_of(actor_or_role: Union[Actor, ActorRole]) -> ActorRole:
    if isinstance(actor_or_role, Actor):
        return actor_or_role.role
    return ActorRole(actor_or_role)


def can_view(member: StaffMember, actor_or_role: Union[Actor, ActorRole]) -> bool:
    """Whether the given role may see (and so target) this staff member."""
    if _role_of(actor_or_role) == ActorRole.LEAGUE_ADMIN:
        return True
    # Records built outside the store may carry the raw "Public"/"Private" string
    privacy = ProfilePrivacy(member.profile_privacy or ProfilePrivacy.PUBLIC)
    return privacy != ProfilePrivacy.PRIVATE


def visible_records(
    records: Iterable[StaffMember],
    actor_or_role: Union[Actor, ActorRole]
) -> List[StaffMember]:
    """
    Filter staff records down to what a role may see.

    Args:
        records: Staff records in display order
        actor_or_role: Actor (or bare role) viewing the roster

    Returns:
        List of visible records, input order preserved
    """
    return [member for member in records if can_view(member, actor_or_role)]
