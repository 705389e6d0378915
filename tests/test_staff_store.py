"""Tests for the SQLAlchemy-backed staff store."""

import pytest

from database import DatabaseManager, StaffStore
from database.enums import ProfilePrivacy, RequestStatus
from src.exceptions import AlreadyExistsError, NotFoundError


@pytest.fixture
def seeded_store(store):
    store.add_staff([
        {"id": "a", "name": "First", "tags": ["Proven"]},
        {"id": "b", "name": "Second", "tags": [], "profile_privacy": ProfilePrivacy.PRIVATE},
    ])
    return store


class TestStaff:
    def test_list_keeps_insertion_order(self, seeded_store):
        seeded_store.add_staff([{"id": "0", "name": "Third"}])
        assert [m.id for m in seeded_store.list_staff()] == ["a", "b", "0"]

    def test_defaults(self, seeded_store):
        member = seeded_store.get_staff("a")
        assert member.profile_privacy == ProfilePrivacy.PUBLIC
        assert member.details == {}
        assert seeded_store.get_staff("b").is_private

    def test_get_unknown_returns_none(self, seeded_store):
        assert seeded_store.get_staff("missing") is None

    def test_duplicate_id_rejected(self, seeded_store):
        with pytest.raises(AlreadyExistsError):
            seeded_store.add_staff([{"id": "a", "name": "Again"}])

    def test_duplicate_id_within_batch_rejected(self, store):
        with pytest.raises(AlreadyExistsError):
            store.add_staff([{"id": "x", "name": "One"}, {"id": "x", "name": "Two"}])
        assert store.list_staff() == []

    def test_set_tags(self, seeded_store):
        updated = seeded_store.set_staff_tags("a", ["Elite", "Proven"])
        assert updated.tags == ["Elite", "Proven"]
        assert seeded_store.get_staff("a").tags == ["Elite", "Proven"]

    def test_set_tags_unknown(self, seeded_store):
        assert seeded_store.set_staff_tags("missing", ["Elite"]) is None

    def test_detached_copy_is_independent(self, seeded_store):
        member = seeded_store.get_staff("a")
        member.tags.append("Mutated")
        assert seeded_store.get_staff("a").tags == ["Proven"]

    def test_separate_databases_are_isolated(self, seeded_store):
        other = StaffStore(DatabaseManager("sqlite://"))
        assert other.list_staff() == []


class TestCatalog:
    def test_add_skips_existing(self, store):
        assert store.add_catalog_tags(["Proven", "Emerging"]) == 2
        assert store.add_catalog_tags(["Proven", "Elite"]) == 1
        assert store.list_catalog() == ["Proven", "Emerging", "Elite"]

    def test_commit_changes_with_catalog_rename(self, seeded_store):
        seeded_store.add_catalog_tags(["Proven"])
        count = seeded_store.commit_tag_changes(
            {"a": ["Elite"]}, catalog_remove="Proven", catalog_add="Elite"
        )
        assert count == 1
        assert seeded_store.get_staff("a").tags == ["Elite"]
        assert seeded_store.list_catalog() == ["Elite"]


class TestRequests:
    def _add(self, store, actor="Austin FC"):
        return store.add_request(
            staff_id="a",
            staff_name="First",
            requesting_actor=actor,
            old_tags=["Proven"],
            new_tags=["Proven", "Emerging"],
        )

    def test_add_request_is_pending(self, seeded_store):
        request = self._add(seeded_store)
        assert request.id
        assert request.status == RequestStatus.PENDING
        assert request.created_at is not None

    def test_list_oldest_first(self, seeded_store):
        first = self._add(seeded_store)
        second = self._add(seeded_store, actor="LAFC")
        assert [r.id for r in seeded_store.list_requests()] == [first.id, second.id]

    def test_list_filters(self, seeded_store):
        first = self._add(seeded_store)
        self._add(seeded_store, actor="LAFC")
        assert [r.id for r in seeded_store.list_requests(requesting_actor="Austin FC")] == [first.id]

    def test_resolve_approved_applies_tags(self, seeded_store):
        request = self._add(seeded_store)
        resolved = seeded_store.resolve_request(request.id, RequestStatus.APPROVED, note="ok")
        assert resolved.status == RequestStatus.APPROVED
        assert resolved.response_note == "ok"
        assert resolved.resolved_at is not None
        assert seeded_store.get_staff("a").tags == ["Proven", "Emerging"]

    def test_resolve_twice_returns_none(self, seeded_store):
        request = self._add(seeded_store)
        seeded_store.resolve_request(request.id, RequestStatus.REJECTED)
        assert seeded_store.resolve_request(request.id, RequestStatus.APPROVED) is None
        assert seeded_store.get_staff("a").tags == ["Proven"]

    def test_resolve_to_pending_not_allowed(self, seeded_store):
        request = self._add(seeded_store)
        with pytest.raises(ValueError):
            seeded_store.resolve_request(request.id, RequestStatus.PENDING)

    def test_approve_for_missing_staff_rolls_back(self, seeded_store):
        request = seeded_store.add_request(
            staff_id="gone", staff_name=None, requesting_actor="Austin FC",
            old_tags=[], new_tags=["Elite"],
        )
        with pytest.raises(NotFoundError):
            seeded_store.resolve_request(request.id, RequestStatus.APPROVED)
        assert seeded_store.get_request(request.id).status == RequestStatus.PENDING
