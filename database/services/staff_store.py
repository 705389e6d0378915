"""
Staff Store for tag governance.

The only place that reads and writes staff records, tag change requests and
the tag catalog. Services above it never open a session themselves, so the
backend can be swapped by pointing the DatabaseManager at another database.

Every public method runs in its own transaction and returns detached copies
that are safe to use after the session closes.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import func

from database.database import DatabaseManager, db_manager
from database.enums import ProfilePrivacy, RequestStatus
from database.models.staff import StaffMember
from database.models.tag import Tag
from database.models.tag_change_request import TagChangeRequest
from src.exceptions import AlreadyExistsError, NotFoundError


class StaffStore:
    """
    Store for staff records, tag change requests and the tag catalog.

    Usage:
        store = StaffStore()

        store.add_staff([{"id": "1", "name": "Alex Ramos", "tags": ["Proven"]}])
        member = store.get_staff("1")

        request = store.add_request(
            staff_id="1",
            staff_name="Alex Ramos",
            requesting_actor="Austin FC",
            old_tags=["Proven"],
            new_tags=["Proven", "Emerging"],
        )
        store.resolve_request(request.id, RequestStatus.APPROVED, note="ok")
    """

    def __init__(self, db: Optional[DatabaseManager] = None):
        self.db = db or db_manager
        self.db.create_tables()

    # ─── Staff ─────────────────────────────────────────────────────

    def add_staff(self, records: List[dict]) -> int:
        """
        Add staff records.

        Args:
            records: Dicts with id, name and optionally role, club,
                     profile_privacy, tags and details

        Returns:
            int: Number of records added

        Raises:
            AlreadyExistsError: If an id is already stored or repeats in records
        """
        if not records:
            return 0

        with self.db.session_scope() as session:
            ids = [r['id'] for r in records]
            if len(set(ids)) != len(ids):
                raise AlreadyExistsError("Duplicate staff ids in import batch")

            existing = session.query(StaffMember.id).filter(
                StaffMember.id.in_(ids)
            ).all()
            if existing:
                taken = ", ".join(sorted(row[0] for row in existing))
                raise AlreadyExistsError(f"Staff ids already exist: {taken}")

            next_sequence = self._next_sequence(session, StaffMember)
            for offset, record in enumerate(records):
                session.add(StaffMember(
                    id=record['id'],
                    sequence=next_sequence + offset,
                    name=record['name'],
                    role=record.get('role'),
                    club=record.get('club'),
                    profile_privacy=record.get('profile_privacy') or ProfilePrivacy.PUBLIC,
                    tags=list(record.get('tags') or []),
                    details=dict(record.get('details') or {}),
                ))

        return len(records)

    def get_staff(self, staff_id: str) -> Optional[StaffMember]:
        """Get one staff member by id, or None."""
        with self.db.session_scope() as session:
            member = session.get(StaffMember, staff_id)
            return self._detach_staff(member) if member else None

    def list_staff(self) -> List[StaffMember]:
        """Get every staff member in insertion order."""
        with self.db.session_scope() as session:
            members = session.query(StaffMember).order_by(StaffMember.sequence).all()
            return [self._detach_staff(m) for m in members]

    def set_staff_tags(self, staff_id: str, tags: List[str]) -> Optional[StaffMember]:
        """
        Replace one staff member's tags.

        Returns:
            The updated staff member, or None if the id is unknown
        """
        with self.db.session_scope() as session:
            member = session.get(StaffMember, staff_id)
            if member is None:
                return None
            member.tags = list(tags)
            session.flush()
            return self._detach_staff(member)

    def commit_tag_changes(
        self,
        changes: Dict[str, List[str]],
        catalog_remove: Optional[str] = None,
        catalog_add: Optional[str] = None
    ) -> int:
        """
        Replace tags on several staff members and adjust the catalog together.

        Args:
            changes: Mapping of staff id to its new tag list
            catalog_remove: Catalog name to drop, if present
            catalog_add: Catalog name to add, if not present

        Returns:
            int: Number of staff members updated
        """
        with self.db.session_scope() as session:
            updated = 0
            if changes:
                members = session.query(StaffMember).filter(
                    StaffMember.id.in_(list(changes))
                ).all()
                for member in members:
                    member.tags = list(changes[member.id])
                    updated += 1

            if catalog_remove:
                session.query(Tag).filter(Tag.name == catalog_remove).delete()
            if catalog_add:
                session.flush()
                exists = session.query(Tag).filter(Tag.name == catalog_add).first()
                if exists is None:
                    session.add(Tag(name=catalog_add))

            return updated

    # ─── Catalog ───────────────────────────────────────────────────

    def list_catalog(self) -> List[str]:
        """Get catalog tag names in the order they were declared."""
        with self.db.session_scope() as session:
            rows = session.query(Tag.name).order_by(Tag.id).all()
            return [row[0] for row in rows]

    def add_catalog_tags(self, names: List[str]) -> int:
        """
        Add names to the catalog, skipping ones already present.

        Returns:
            int: Number of names added
        """
        with self.db.session_scope() as session:
            existing = {row[0] for row in session.query(Tag.name).all()}
            added = 0
            for name in names:
                if name in existing:
                    continue
                session.add(Tag(name=name))
                existing.add(name)
                added += 1
            return added

    # ─── Tag change requests ───────────────────────────────────────

    def add_request(
        self,
        staff_id: str,
        staff_name: Optional[str],
        requesting_actor: str,
        old_tags: List[str],
        new_tags: List[str]
    ) -> TagChangeRequest:
        """Store a new pending tag change request."""
        with self.db.session_scope() as session:
            request = TagChangeRequest(
                id=str(uuid.uuid4()),
                sequence=self._next_sequence(session, TagChangeRequest),
                staff_id=staff_id,
                staff_name=staff_name,
                requesting_actor=requesting_actor,
                old_tags=list(old_tags),
                new_tags=list(new_tags),
                status=RequestStatus.PENDING,
                created_at=datetime.now(timezone.utc),
            )
            session.add(request)
            session.flush()
            return self._detach_request(request)

    def get_request(self, request_id: str) -> Optional[TagChangeRequest]:
        """Get one request by id, or None."""
        with self.db.session_scope() as session:
            request = session.get(TagChangeRequest, request_id)
            return self._detach_request(request) if request else None

    def list_requests(
        self,
        status: Optional[RequestStatus] = None,
        requesting_actor: Optional[str] = None
    ) -> List[TagChangeRequest]:
        """
        Get requests oldest-first, optionally filtered.

        Args:
            status: Only requests with this status
            requesting_actor: Only requests from this club
        """
        with self.db.session_scope() as session:
            query = session.query(TagChangeRequest)

            if status is not None:
                query = query.filter(TagChangeRequest.status == status)
            if requesting_actor is not None:
                query = query.filter(TagChangeRequest.requesting_actor == requesting_actor)

            requests = query.order_by(
                TagChangeRequest.created_at,
                TagChangeRequest.sequence
            ).all()
            return [self._detach_request(r) for r in requests]

    def resolve_request(
        self,
        request_id: str,
        status: RequestStatus,
        note: str = ""
    ) -> Optional[TagChangeRequest]:
        """
        Resolve a pending request.

        Approving replaces the staff member's tags with the request's
        new_tags in the same transaction. Rejecting leaves the staff member
        untouched.

        Returns:
            The resolved request, or None if no pending request has this id

        Raises:
            NotFoundError: If approving and the staff member no longer exists
        """
        if status == RequestStatus.PENDING:
            raise ValueError("A request can only be resolved to approved or rejected")

        with self.db.session_scope() as session:
            request = session.get(TagChangeRequest, request_id)
            if request is None or not request.is_pending:
                return None

            if status == RequestStatus.APPROVED:
                member = session.get(StaffMember, request.staff_id)
                if member is None:
                    raise NotFoundError(
                        f"Staff member '{request.staff_id}' for request '{request_id}' not found"
                    )
                member.tags = list(request.new_tags)

            request.status = status
            request.response_note = note or None
            request.resolved_at = datetime.now(timezone.utc)
            session.flush()
            return self._detach_request(request)

    # ─── Helpers ───────────────────────────────────────────────────

    def _next_sequence(self, session, model) -> int:
        current = session.query(func.max(model.sequence)).scalar()
        return (current or 0) + 1

    def _detach_staff(self, member: StaffMember) -> StaffMember:
        """
        Create a detached copy of a staff member to use outside the session.

        Args:
            member: StaffMember object from session

        Returns:
            Detached StaffMember object
        """
        return StaffMember(
            id=member.id,
            sequence=member.sequence,
            name=member.name,
            role=member.role,
            club=member.club,
            profile_privacy=member.profile_privacy,
            tags=list(member.tags or []),
            details=dict(member.details or {}),
            created_at=member.created_at,
            updated_at=member.updated_at
        )

    def _detach_request(self, request: TagChangeRequest) -> TagChangeRequest:
        """Create a detached copy of a request to use outside the session."""
        return TagChangeRequest(
            id=request.id,
            sequence=request.sequence,
            staff_id=request.staff_id,
            staff_name=request.staff_name,
            requesting_actor=request.requesting_actor,
            old_tags=list(request.old_tags or []),
            new_tags=list(request.new_tags or []),
            status=request.status,
            response_note=request.response_note,
            created_at=request.created_at,
            resolved_at=request.resolved_at
        )
