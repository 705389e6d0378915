"""
Approval Queue Service

League-side view of club tag change requests. Only pending requests are
listed; approving or rejecting one resolves it for good. Resolved requests
stay in the store, which is where the club's sent ledger reads them from.
"""

from typing import List, Optional

from database.enums import RequestStatus
from database.models.tag_change_request import TagChangeRequest
from database.services.staff_store import StaffStore
from src.exceptions import NotFoundError
from src.logging import get_logger
from src.services.events import EventBus, TagChangeApproved, TagChangeRejected


class ApprovalQueueService:
    """
    Service for reviewing pending tag change requests.

    Usage:
        queue = ApprovalQueueService(store)

        for request in queue.list_pending():
            print(request.staff_name, request.old_tags, "→", request.new_tags)

        queue.approve(request_id, note="looks good")
        queue.reject(other_id, note="needs more detail")
    """

    def __init__(self, store: StaffStore, events: Optional[EventBus] = None):
        self.store = store
        self.events = events or EventBus()
        self.logger = get_logger()

    def list_pending(self) -> List[TagChangeRequest]:
        """
        Get pending requests, oldest first.

        Returns:
            List of TagChangeRequest with status PENDING
        """
        return self.store.list_requests(status=RequestStatus.PENDING)

    def approve(self, request_id: str, note: str = "") -> TagChangeRequest:
        """
        Approve a request and apply its tags.

        The staff member's tags are replaced by the request's new_tags
        (not merged), and the request is marked approved, in one
        transaction.

        Args:
            request_id: Pending request to approve
            note: Optional note for the requesting club

        Returns:
            The resolved request

        Raises:
            NotFoundError: If no pending request has this id, or its staff
                member no longer exists
        """
        request = self._resolve(request_id, RequestStatus.APPROVED, note)
        self.events.publish(TagChangeApproved(
            request_id=request.id,
            staff_id=request.staff_id,
            requesting_actor=request.requesting_actor,
            old_tags=request.old_tags,
            new_tags=request.new_tags,
            note=request.response_note
        ))
        return request

    def reject(self, request_id: str, note: str = "") -> TagChangeRequest:
        """
        Reject a request. The staff member is not touched.

        Args:
            request_id: Pending request to reject
            note: Optional note for the requesting club

        Returns:
            The resolved request

        Raises:
            NotFoundError: If no pending request has this id
        """
        request = self._resolve(request_id, RequestStatus.REJECTED, note)
        self.events.publish(TagChangeRejected(
            request_id=request.id,
            staff_id=request.staff_id,
            requesting_actor=request.requesting_actor,
            old_tags=request.old_tags,
            new_tags=request.new_tags,
            note=request.response_note
        ))
        return request

    def _resolve(self, request_id: str, status: RequestStatus, note: str) -> TagChangeRequest:
        request = self.store.resolve_request(request_id, status, note=(note or "").strip())
        if request is None:
            raise NotFoundError(f"No pending request with id '{request_id}'")

        self.logger.request_resolved(request)
        return request
