"""
Services package - Business logic layer.

Contains service classes that implement:
- Tag registry (list, rename, delete, create)
- Tag assignment rules for league admins and clubs
- Approval queue and the clubs' sent ledger
- Bulk tag edits
- Staff import
- The governance facade used by the dashboard
"""

from src.services.approval_ledger import ApprovalLedgerService
from src.services.approval_queue import ApprovalQueueService
from src.services.bulk_tags import BulkOutcome, BulkTagService
from src.services.events import EventBus
from src.services.governance import TagGovernanceService
from src.services.staff_import import StaffImportService
from src.services.tag_assignment import ProposalOutcome, TagAssignmentService
from src.services.tag_registry import TagRegistryService
from src.services.visibility import can_view, visible_records

__all__ = [
    'ApprovalLedgerService',
    'ApprovalQueueService',
    'BulkOutcome',
    'BulkTagService',
    'EventBus',
    'ProposalOutcome',
    'StaffImportService',
    'TagAssignmentService',
    'TagGovernanceService',
    'TagRegistryService',
    'can_view',
    'visible_records',
]
