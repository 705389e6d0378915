"""
Bulk Tag Service

Applies the same add/remove delta to a selection of staff members. Every
record still goes through the tag assignment rules, so a league admin's
bulk edit applies directly and a club's bulk edit queues one request per
staff member.
"""

from dataclasses import dataclass, field
from typing import List, Union

from database.enums import BulkAction
from src.exceptions import InvalidArgumentError, InvalidTagSetError, NotFoundError
from src.logging import get_logger
from src.models import Actor
from src.services.tag_assignment import TagAssignmentService
from src.utils.tag_rules import add_to_list, dedupe_tags, normalize_tag_name, remove_from_list


@dataclass
class BulkOutcome:
    """
    Result of a bulk tag edit.

    Attributes:
        action: Delta that was applied
        applied_count: Staff members changed immediately
        queued_count: Requests created for approval
        skipped_ids: Staff ids that were not found (or not visible)
        request_ids: Ids of the queued requests
        truncated_ids: Staff ids where the tag limit dropped some added tags
    """
    action: BulkAction
    applied_count: int = 0
    queued_count: int = 0
    skipped_ids: List[str] = field(default_factory=list)
    request_ids: List[str] = field(default_factory=list)
    truncated_ids: List[str] = field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped_ids)

    def __str__(self) -> str:
        return (
            f"Bulk {self.action.value}: {self.applied_count} applied, "
            f"{self.queued_count} queued, {self.skipped_count} skipped"
        )


class BulkTagService:
    """
    Service for bulk tag edits from the roster grid.

    Usage:
        bulk = BulkTagService(assignment_service)
        outcome = bulk.bulk_apply_tags(["1", "2"], "add", ["Homegrown"], Actor.league_admin())
        print(outcome)
    """

    def __init__(self, assignment: TagAssignmentService):
        self.assignment = assignment
        self.logger = get_logger()

    def bulk_apply_tags(
        self,
        staff_ids: List[str],
        action: Union[BulkAction, str],
        tag_values: List[str],
        actor: Actor
    ) -> BulkOutcome:
        """
        Add or remove tags on a batch of staff members.

        For add, new values are appended after the existing tags and
        anything past the tag limit is dropped. For remove, the values are
        taken out and the remaining order is kept. Unknown ids are skipped
        and reported; the rest of the batch carries on.

        Args:
            staff_ids: Selected staff ids (repeats are processed once)
            action: "add" or "remove"
            tag_values: Tags to add or remove
            actor: Who is making the edit

        Returns:
            BulkOutcome with applied, queued and skipped tallies

        Raises:
            InvalidArgumentError: If the action is unknown or no tags were given
            InvalidTagSetError: If a tag value is blank
        """
        try:
            action = BulkAction(action)
        except ValueError:
            raise InvalidArgumentError(f"Unknown bulk action '{action}'") from None

        if isinstance(tag_values, str):
            raise InvalidArgumentError("Tag values must be a list of names, not a single string")
        if not tag_values:
            raise InvalidArgumentError("Select at least one tag")

        values = [normalize_tag_name(tag) for tag in tag_values]
        if not all(values):
            raise InvalidTagSetError("Tag names cannot be blank")
        values = dedupe_tags(values)

        limit = self.assignment.max_tags
        outcome = BulkOutcome(action=action)

        for staff_id in dict.fromkeys(staff_ids):
            try:
                member = self.assignment.get_visible_staff(staff_id, actor)
            except NotFoundError:
                outcome.skipped_ids.append(staff_id)
                continue

            if action == BulkAction.ADD:
                new_tags, truncated = add_to_list(member.tags, values, limit)
                if truncated:
                    outcome.truncated_ids.append(staff_id)
            else:
                new_tags = remove_from_list(member.tags, values)

            try:
                result = self.assignment.propose_tag_change(staff_id, new_tags, actor)
            except NotFoundError:
                outcome.skipped_ids.append(staff_id)
                continue

            if result.applied:
                outcome.applied_count += 1
            else:
                outcome.queued_count += 1
                outcome.request_ids.append(result.request_id)

        self.logger.bulk_summary(outcome)
        return outcome
