"""Tests for tag registry listing and curation."""

import pytest

from src.exceptions import AlreadyExistsError, InvalidArgumentError
from src.services.events import TagCreated, TagDeleted, TagRenamed


def holders(governance, tag):
    return [m.id for m in governance.store.list_staff() if tag in m.tags]


class TestListTags:
    def test_counts_and_order(self, governance):
        entries = governance.list_tags()
        assert [(e.name, e.usage_count) for e in entries] == [
            ("Proven", 3),
            ("Emerging", 2),
            ("Elite", 2),
            ("High Potential", 1),
            ("Homegrown", 1),
            ("Unproven", 1),
        ]

    def test_ties_keep_first_seen_order(self, governance):
        names = [e.name for e in governance.list_tags() if e.usage_count == 1]
        assert names == ["High Potential", "Homegrown", "Unproven"]

    def test_staff_ids_listed(self, governance):
        proven = next(e for e in governance.list_tags() if e.name == "Proven")
        assert proven.staff_ids == ["1", "2", "3"]

    def test_catalog_only_tags_come_last(self, governance):
        governance.create_tag("Academy Graduate")
        last = governance.list_tags()[-1]
        assert last.name == "Academy Graduate"
        assert last.usage_count == 0
        assert last.in_catalog is True

    def test_counts_recomputed_after_change(self, governance, league):
        governance.propose_tag_change("1", [], league)
        proven = next(e for e in governance.list_tags() if e.name == "Proven")
        assert proven.usage_count == 2

    def test_summary(self, governance):
        summary = governance.tag_summary()
        assert summary.total_tags == 6
        assert summary.tagged_staff == 4
        assert summary.total_staff == 5


class TestRenameTag:
    def test_rename_moves_every_holder(self, governance):
        count = governance.rename_tag("Proven", "Top Tier")
        assert count == 3
        assert holders(governance, "Proven") == []
        assert holders(governance, "Top Tier") == ["1", "2", "3"]

    def test_rename_keeps_position(self, governance):
        governance.rename_tag("Proven", "Top Tier")
        assert governance.get_staff("2").tags == ["Emerging", "Top Tier"]

    def test_rename_collapses_duplicates(self, governance):
        count = governance.rename_tag("Proven", "Elite")
        assert count == 3
        assert holders(governance, "Proven") == []
        assert holders(governance, "Elite") == ["1", "2", "3", "4"]
        assert governance.get_staff("3").tags == ["Elite"]
        for member in governance.store.list_staff():
            assert len(member.tags) == len(set(member.tags))

    def test_rename_updates_catalog(self, governance):
        governance.create_tag("Academy")
        governance.rename_tag("Academy", "Academy Graduate")
        assert governance.store.list_catalog() == ["Academy Graduate"]

    def test_rename_unused_tag_reports_zero(self, governance, recorded_events):
        assert governance.rename_tag("Nobody", "Somebody") == 0
        assert recorded_events == []

    def test_rename_catalog_only_tag_publishes(self, governance, recorded_events):
        governance.create_tag("Academy")
        governance.rename_tag("Academy", "Academy Graduate")
        assert isinstance(recorded_events[-1], TagRenamed)
        assert recorded_events[-1].staff_ids == []

    @pytest.mark.parametrize("old, new", [("Proven", ""), ("", "Elite"), ("Proven", "Proven"), ("Proven", "  ")])
    def test_rename_invalid(self, governance, old, new):
        with pytest.raises(InvalidArgumentError):
            governance.rename_tag(old, new)
        assert holders(governance, "Proven") == ["1", "2", "3"]

    def test_rename_event(self, governance, recorded_events):
        governance.rename_tag("Proven", "Top Tier")
        event = recorded_events[-1]
        assert isinstance(event, TagRenamed)
        assert (event.old_name, event.new_name) == ("Proven", "Top Tier")
        assert event.staff_ids == ["1", "2", "3"]


class TestDeleteTag:
    def test_delete_removes_from_all(self, governance):
        count = governance.delete_tag("Emerging")
        assert count == 2
        assert holders(governance, "Emerging") == []
        assert governance.get_staff("4").tags == ["High Potential", "Homegrown", "Unproven", "Elite"]

    def test_delete_removes_catalog_entry(self, governance):
        governance.create_tag("Academy")
        assert governance.delete_tag("Academy") == 0
        assert "Academy" not in governance.store.list_catalog()

    def test_delete_unknown_tag_is_silent(self, governance, recorded_events):
        assert governance.delete_tag("Nobody") == 0
        assert recorded_events == []

    def test_delete_catalog_only_tag_publishes(self, governance, recorded_events):
        governance.create_tag("Academy")
        governance.delete_tag("Academy")
        assert isinstance(recorded_events[-1], TagDeleted)

    def test_delete_blank(self, governance):
        with pytest.raises(InvalidArgumentError):
            governance.delete_tag(" ")

    def test_delete_event(self, governance, recorded_events):
        governance.delete_tag("Elite")
        event = recorded_events[-1]
        assert isinstance(event, TagDeleted)
        assert event.staff_ids == ["3", "4"]


class TestCreateTag:
    def test_create_adds_to_catalog(self, governance, recorded_events):
        assert governance.create_tag("  Academy  Graduate ") == "Academy Graduate"
        assert governance.store.list_catalog() == ["Academy Graduate"]
        assert isinstance(recorded_events[-1], TagCreated)

    def test_create_existing_catalog_name(self, governance):
        governance.create_tag("Academy")
        with pytest.raises(AlreadyExistsError):
            governance.create_tag("Academy")

    def test_create_name_in_use(self, governance):
        with pytest.raises(AlreadyExistsError):
            governance.create_tag("Proven")

    def test_create_blank(self, governance):
        with pytest.raises(InvalidArgumentError):
            governance.create_tag("")

    def test_default_catalog_seeded(self, store, events):
        from config.governance_config import GovernanceConfig
        from src.services.governance import TagGovernanceService

        service = TagGovernanceService(store=store, config=GovernanceConfig(), events=events)
        assert store.list_catalog() == ["Proven", "Emerging", "High Potential", "Homegrown"]
        with pytest.raises(AlreadyExistsError):
            service.create_tag("Homegrown")
