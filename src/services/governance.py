"""
Tag Governance Service

The object the dashboard talks to. It wires the registry, assignment
rules, approval queue, sent ledger and bulk edits to one store and one
event bus, and runs every operation under a single write lock so that one
user action finishes before the next one starts.
"""

import threading
from functools import wraps
from typing import Callable, Dict, List, Optional, Type, Union

from config.governance_config import GovernanceConfig
from database.database import DatabaseManager
from database.enums import ActorRole, BulkAction
from database.models.staff import StaffMember
from database.models.tag_change_request import TagChangeRequest
from database.services.staff_store import StaffStore
from src.exceptions import NotFoundError
from src.models import Actor, TagRegistryEntry, TagSummary
from src.services.approval_ledger import ApprovalLedgerService
from src.services.approval_queue import ApprovalQueueService
from src.services.bulk_tags import BulkOutcome, BulkTagService
from src.services.events import EventBus, GovernanceEvent
from src.services.staff_import import StaffImportService
from src.services.tag_assignment import ProposalOutcome, TagAssignmentService
from src.services.tag_registry import TagRegistryService
from src.services.visibility import visible_records


def _serialized(method):
    """Run the method while holding the service's write lock."""
    @wraps(method)
    def wrapper(self, *args, **kwargs):
        with self._lock:
            return method(self, *args, **kwargs)
    return wrapper


class TagGovernanceService:
    """
    Facade over the tag governance services.

    Usage:
        governance = TagGovernanceService.from_config()

        club = Actor.club("Austin FC")
        outcome = governance.propose_tag_change("1", ["Proven", "Emerging"], club)

        league = Actor.league_admin()
        governance.approve(outcome.request_id, note="looks good")

        governance.list_for_actor("Austin FC")
    """

    def __init__(
        self,
        store: Optional[StaffStore] = None,
        config: Optional[GovernanceConfig] = None,
        events: Optional[EventBus] = None
    ):
        self.config = config or GovernanceConfig()
        self.store = store or StaffStore()
        self.events = events or EventBus()
        self._lock = threading.RLock()

        self.registry = TagRegistryService(self.store, self.events)
        self.assignment = TagAssignmentService(self.store, self.events, self.config.max_tags)
        self.queue = ApprovalQueueService(self.store, self.events)
        self.ledger = ApprovalLedgerService(self.store)
        self.bulk = BulkTagService(self.assignment)
        self.importer = StaffImportService(self.store, self.config.max_tags)

        if self.config.default_tags:
            self.store.add_catalog_tags(self.config.default_tags)

    @classmethod
    def from_config(
        cls,
        config: Optional[GovernanceConfig] = None,
        database_url: Optional[str] = None,
        load_staff: bool = True
    ) -> "TagGovernanceService":
        """
        Build a service on its own database and load the configured roster.

        Args:
            config: Governance config (read from file if omitted)
            database_url: Database to use (DATABASE_URL / in-memory if omitted)
            load_staff: Load config.staff_data_path when the store is empty
        """
        config = config or GovernanceConfig.from_file()
        store = StaffStore(DatabaseManager(database_url))
        service = cls(store=store, config=config)

        if load_staff and config.staff_data_path and not store.list_staff():
            service.importer.load_file(config.staff_data_path)

        return service

    # ─── Events ────────────────────────────────────────────────────

    def subscribe(
        self,
        listener: Callable[[GovernanceEvent], None],
        event_type: Optional[Type[GovernanceEvent]] = None
    ) -> Callable[[], None]:
        """Register a listener for governance events. Returns an unsubscribe callable."""
        return self.events.subscribe(listener, event_type)

    # ─── Staff ─────────────────────────────────────────────────────

    @_serialized
    def load_staff(self, records: List[dict]) -> int:
        """Add staff records (e.g. from an invite/import flow)."""
        return self.importer.bulk_add_staff(records)

    @_serialized
    def get_staff(self, staff_id: str, actor: Optional[Actor] = None) -> StaffMember:
        """
        Get one staff member, as seen by an actor.

        Raises:
            NotFoundError: If unknown or hidden from the actor
        """
        if actor is not None:
            return self.assignment.get_visible_staff(staff_id, actor)
        member = self.store.get_staff(staff_id)
        if member is None:
            raise NotFoundError(f"Staff member '{staff_id}' not found")
        return member

    def visible_records(
        self,
        records: List[StaffMember],
        actor_or_role: Union[Actor, ActorRole]
    ) -> List[StaffMember]:
        """Filter records to what a role may see (pure)."""
        return visible_records(records, actor_or_role)

    @_serialized
    def visible_staff(self, actor: Actor) -> List[StaffMember]:
        """The roster as the actor is allowed to see it."""
        return visible_records(self.store.list_staff(), actor)

    # ─── Tag assignment ────────────────────────────────────────────

    @_serialized
    def propose_tag_change(self, staff_id: str, new_tags: List[str], actor: Actor) -> ProposalOutcome:
        return self.assignment.propose_tag_change(staff_id, new_tags, actor)

    @_serialized
    def bulk_apply_tags(
        self,
        staff_ids: List[str],
        action: Union[BulkAction, str],
        tag_values: List[str],
        actor: Actor
    ) -> BulkOutcome:
        return self.bulk.bulk_apply_tags(staff_ids, action, tag_values, actor)

    # ─── Approvals ─────────────────────────────────────────────────

    @_serialized
    def list_pending(self) -> List[TagChangeRequest]:
        return self.queue.list_pending()

    @_serialized
    def approve(self, request_id: str, note: str = "") -> TagChangeRequest:
        return self.queue.approve(request_id, note)

    @_serialized
    def reject(self, request_id: str, note: str = "") -> TagChangeRequest:
        return self.queue.reject(request_id, note)

    @_serialized
    def list_for_actor(self, actor_id: str) -> List[TagChangeRequest]:
        return self.ledger.list_for_actor(actor_id)

    @_serialized
    def status_counts(self, actor_id: str) -> Dict[str, int]:
        return self.ledger.status_counts(actor_id)

    # ─── Tag registry ──────────────────────────────────────────────

    @_serialized
    def list_tags(self) -> List[TagRegistryEntry]:
        return self.registry.list_tags()

    @_serialized
    def tag_summary(self) -> TagSummary:
        return self.registry.tag_summary()

    @_serialized
    def rename_tag(self, old_name: str, new_name: str) -> int:
        return self.registry.rename_tag(old_name, new_name)

    @_serialized
    def delete_tag(self, name: str) -> int:
        return self.registry.delete_tag(name)

    @_serialized
    def create_tag(self, name: str) -> str:
        return self.registry.create_tag(name)
