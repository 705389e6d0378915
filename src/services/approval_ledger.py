"""
Sent-Approval Ledger

Club-side, read-only history of submitted tag change requests. It reads
the same request rows the approval queue resolves, so an approval or
rejection shows up here without any copying.
"""

from typing import Dict, List

from database.enums import RequestStatus
from database.models.tag_change_request import TagChangeRequest
from database.services.staff_store import StaffStore


class ApprovalLedgerService:
    """
    Read-only view of a club's submitted requests.

    Usage:
        ledger = ApprovalLedgerService(store)
        for request in ledger.list_for_actor("Austin FC"):
            print(request.status.value, request.response_note)
    """

    def __init__(self, store: StaffStore):
        self.store = store

    def list_for_actor(self, actor_id: str) -> List[TagChangeRequest]:
        """
        Get every request submitted by a club, in submission order.

        Args:
            actor_id: Club display name used when submitting

        Returns:
            List of TagChangeRequest of any status
        """
        return self.store.list_requests(requesting_actor=actor_id)

    def status_counts(self, actor_id: str) -> Dict[str, int]:
        """Count a club's requests per status (pending, approved, rejected)."""
        counts = {status.value: 0 for status in RequestStatus}
        for request in self.list_for_actor(actor_id):
            counts[request.status.value] += 1
        return counts
