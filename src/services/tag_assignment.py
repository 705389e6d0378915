"""
Tag Assignment Service

The single entry point for changing one staff member's tags. What happens
depends on who is asking:
- League admins change the tags immediately
- Clubs never change tags directly; their edit becomes a pending request
  that a league admin resolves in the approval queue
"""

from dataclasses import dataclass, field
from typing import List, Optional

from database.models.staff import StaffMember
from database.services.staff_store import StaffStore
from src.exceptions import NotFoundError
from src.logging import get_logger
from src.models import Actor
from src.services.events import EventBus, TagChangeQueued, TagsApplied
from src.services.visibility import can_view
from src.utils.tag_rules import MAX_TAGS, validate_tag_set


@dataclass
class ProposalOutcome:
    """
    Result of a tag change proposal.

    Attributes:
        staff_id: Staff member the change targeted
        applied: True if the tags were changed immediately
        request_id: Id of the pending request when the change was queued
        old_tags: Tags before the call
        new_tags: Tags that were applied or requested
    """
    staff_id: str
    applied: bool
    request_id: Optional[str] = None
    old_tags: List[str] = field(default_factory=list)
    new_tags: List[str] = field(default_factory=list)

    @property
    def queued(self) -> bool:
        return not self.applied

    def __str__(self) -> str:
        if self.applied:
            return f"✅ {self.staff_id}: tags set to {self.new_tags}"
        return f"📨 {self.staff_id}: change to {self.new_tags} queued ({self.request_id})"


class TagAssignmentService:
    """
    Service that enforces the tag rules and the league/club split.

    Usage:
        service = TagAssignmentService(store)

        # League admin - applied immediately
        service.propose_tag_change("1", ["Proven"], Actor.league_admin())

        # Club - queued for approval
        outcome = service.propose_tag_change("1", ["Proven", "Emerging"], Actor.club("Austin FC"))
        print(outcome.request_id)
    """

    def __init__(
        self,
        store: StaffStore,
        events: Optional[EventBus] = None,
        max_tags: int = MAX_TAGS
    ):
        self.store = store
        self.events = events or EventBus()
        self.max_tags = max_tags
        self.logger = get_logger()

    def get_visible_staff(self, staff_id: str, actor: Actor) -> StaffMember:
        """
        Look up a staff member the actor is allowed to target.

        Raises:
            NotFoundError: If the id is unknown or the record is hidden from the actor
        """
        member = self.store.get_staff(staff_id)
        if member is None or not can_view(member, actor):
            raise NotFoundError(f"Staff member '{staff_id}' not found")
        return member

    def propose_tag_change(self, staff_id: str, new_tags: List[str], actor: Actor) -> ProposalOutcome:
        """
        Propose a full replacement of one staff member's tags.

        Args:
            staff_id: Staff member to change
            new_tags: Complete new tag list, in display order
            actor: Who is proposing the change

        Returns:
            ProposalOutcome describing whether the change was applied or queued

        Raises:
            InvalidTagSetError: If new_tags has blanks, duplicates or too many names
            NotFoundError: If the staff member does not exist or is not visible to the actor
        """
        new_tags = validate_tag_set(new_tags, self.max_tags)
        member = self.get_visible_staff(staff_id, actor)
        old_tags = list(member.tags)

        if actor.is_league_admin:
            updated = self.store.set_staff_tags(staff_id, new_tags)
            if updated is None:
                raise NotFoundError(f"Staff member '{staff_id}' not found")

            self.logger.tags_applied(staff_id, old_tags, new_tags)
            self.events.publish(TagsApplied(
                staff_id=staff_id,
                old_tags=old_tags,
                new_tags=new_tags
            ))
            return ProposalOutcome(
                staff_id=staff_id,
                applied=True,
                old_tags=old_tags,
                new_tags=new_tags
            )

        request = self.store.add_request(
            staff_id=staff_id,
            staff_name=member.name,
            requesting_actor=actor.name,
            old_tags=old_tags,
            new_tags=new_tags
        )

        self.logger.tag_change_queued(request)
        self.events.publish(TagChangeQueued(
            request_id=request.id,
            staff_id=staff_id,
            requesting_actor=request.requesting_actor,
            old_tags=old_tags,
            new_tags=new_tags
        ))
        return ProposalOutcome(
            staff_id=staff_id,
            applied=False,
            request_id=request.id,
            old_tags=old_tags,
            new_tags=new_tags
        )
