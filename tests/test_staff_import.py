"""Tests for loading the staff roster."""

import json
from pathlib import Path

import pytest

from database.enums import ProfilePrivacy
from src.exceptions import AlreadyExistsError, InvalidArgumentError, InvalidTagSetError
from src.services.staff_import import StaffImportService


@pytest.fixture
def importer(store):
    return StaffImportService(store, max_tags=5)


def test_load_file(importer, store, tmp_path):
    path = tmp_path / "staff.json"
    path.write_text(json.dumps([
        {"id": "10", "name": "Ana Lima", "tags": ["Proven"], "profilePrivacy": "Private",
         "coachingLicenses": ["USSF A"]},
        {"id": "11", "name": "Ben Cole"},
    ]))

    assert importer.load_file(path) == 2

    first = store.get_staff("10")
    assert first.profile_privacy == ProfilePrivacy.PRIVATE
    assert first.details == {"coachingLicenses": ["USSF A"]}
    second = store.get_staff("11")
    assert second.tags == []
    assert second.profile_privacy == ProfilePrivacy.PUBLIC


def test_field_name_accepted(importer, store):
    importer.bulk_add_staff([{"id": "1", "name": "Ana", "profile_privacy": "Private"}])
    assert store.get_staff("1").is_private


def test_tags_normalized(importer, store):
    importer.bulk_add_staff([{"id": "1", "name": "Ana", "tags": [" High  Potential"]}])
    assert store.get_staff("1").tags == ["High Potential"]


def test_too_many_tags_rejected(importer, store):
    with pytest.raises(InvalidTagSetError, match="'1'"):
        importer.bulk_add_staff([
            {"id": "2", "name": "Ok"},
            {"id": "1", "name": "Ana", "tags": ["A", "B", "C", "D", "E", "F"]},
        ])
    assert store.list_staff() == []


def test_missing_name_rejected(importer):
    with pytest.raises(InvalidArgumentError):
        importer.bulk_add_staff([{"id": "1"}])


def test_bad_privacy_rejected(importer):
    with pytest.raises(InvalidArgumentError):
        importer.bulk_add_staff([{"id": "1", "name": "Ana", "profilePrivacy": "Secret"}])


def test_duplicate_ids_rejected(importer):
    importer.bulk_add_staff([{"id": "1", "name": "Ana"}])
    with pytest.raises(AlreadyExistsError):
        importer.bulk_add_staff([{"id": "1", "name": "Ana"}])


def test_file_must_hold_a_list(importer, tmp_path):
    path = tmp_path / "staff.json"
    path.write_text(json.dumps({"id": "1"}))
    with pytest.raises(InvalidArgumentError):
        importer.load_file(path)


def test_bundled_roster_loads(importer, store):
    path = Path(__file__).resolve().parent.parent / "data" / "staff_talent.json"
    assert importer.load_file(path) == 8
    assert [m.id for m in store.list_staff() if m.is_private] == ["3", "7"]
