"""Tests for role-based roster visibility."""

import pytest

from database.enums import ActorRole, ProfilePrivacy
from database.models.staff import StaffMember
from src.exceptions import NotFoundError
from src.models import Actor
from src.services.visibility import can_view, visible_records


def member(staff_id, privacy):
    return StaffMember(id=staff_id, name=staff_id, tags=[], profile_privacy=privacy)


RECORDS = [
    member("a", ProfilePrivacy.PUBLIC),
    member("b", ProfilePrivacy.PRIVATE),
    member("c", ProfilePrivacy.PUBLIC),
    member("d", ProfilePrivacy.PRIVATE),
]


def test_club_sees_only_public_in_order():
    assert [m.id for m in visible_records(RECORDS, ActorRole.CLUB)] == ["a", "c"]


def test_league_sees_everything():
    assert visible_records(RECORDS, ActorRole.LEAGUE_ADMIN) == RECORDS


def test_accepts_actor():
    assert [m.id for m in visible_records(RECORDS, Actor.club("LAFC"))] == ["a", "c"]


def test_can_view():
    assert can_view(RECORDS[0], Actor.club("LAFC"))
    assert not can_view(RECORDS[1], Actor.club("LAFC"))
    assert can_view(RECORDS[1], Actor.league_admin())


def test_empty_input():
    assert visible_records([], ActorRole.CLUB) == []


def test_visible_staff_from_service(governance, club, league):
    assert [m.id for m in governance.visible_staff(club)] == ["1", "2", "4"]
    assert [m.id for m in governance.visible_staff(league)] == ["1", "2", "3", "4", "5"]


def test_get_staff_hidden_from_club(governance, club):
    with pytest.raises(NotFoundError):
        governance.get_staff("3", club)
    assert governance.get_staff("3").name == "Samuel Okafor"


def test_raw_privacy_strings():
    records = [
        StaffMember(id="a", name="a", tags=[], profile_privacy="Private"),
        StaffMember(id="b", name="b", tags=[], profile_privacy="Public"),
        StaffMember(id="c", name="c", tags=[]),
    ]
    assert [m.id for m in visible_records(records, ActorRole.CLUB)] == ["b", "c"]
    assert [m.id for m in visible_records(records, ActorRole.LEAGUE_ADMIN)] == ["a", "b", "c"]
