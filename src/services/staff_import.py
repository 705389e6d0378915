"""
Staff Import Service

Loads the roster the governance services work on. The roster comes from a
static JSON data file (a list of staff objects) at process start; every
record is checked against the tag rules before anything is stored.
"""

import json
from pathlib import Path
from typing import Iterable, List, Union

from pydantic import ValidationError

from database.services.staff_store import StaffStore
from src.exceptions import InvalidArgumentError, InvalidTagSetError
from src.logging import get_logger
from src.models import StaffRecordData
from src.utils.tag_rules import MAX_TAGS, validate_tag_set


class StaffImportService:
    """
    Service for loading staff records into the store.

    Usage:
        importer = StaffImportService(store)
        count = importer.load_file("data/staff_talent.json")
    """

    def __init__(self, store: StaffStore, max_tags: int = MAX_TAGS):
        self.store = store
        self.max_tags = max_tags
        self.logger = get_logger()

    def parse_records(self, raw_records: Iterable[dict]) -> List[StaffRecordData]:
        """
        Validate raw staff dicts.

        Raises:
            InvalidArgumentError: If a record is missing required fields
            InvalidTagSetError: If a record's tags break the tag rules
        """
        records = []
        for index, raw in enumerate(raw_records):
            try:
                record = StaffRecordData.model_validate(raw)
            except ValidationError as e:
                raise InvalidArgumentError(f"Staff record #{index} is invalid: {e}") from e

            try:
                record.tags = validate_tag_set(record.tags, self.max_tags)
            except InvalidTagSetError as e:
                raise InvalidTagSetError(f"Staff '{record.id}': {e}") from e

            records.append(record)
        return records

    def bulk_add_staff(self, raw_records: Iterable[dict]) -> int:
        """
        Validate and store staff records.

        Nothing is stored if any record fails validation.

        Returns:
            int: Number of staff records added
        """
        records = self.parse_records(raw_records)
        return self.store.add_staff([
            {
                'id': record.id,
                'name': record.name,
                'role': record.role,
                'club': record.club,
                'profile_privacy': record.profile_privacy,
                'tags': record.tags,
                'details': record.details,
            }
            for record in records
        ])

    def load_file(self, path: Union[str, Path]) -> int:
        """
        Load staff records from a JSON file.

        Args:
            path: File containing a JSON array of staff objects

        Returns:
            int: Number of staff records added
        """
        path = Path(path)
        with open(path) as f:
            data = json.load(f)

        if not isinstance(data, list):
            raise InvalidArgumentError(f"{path} must contain a JSON array of staff records")

        count = self.bulk_add_staff(data)
        self.logger.staff_loaded(count, str(path))
        return count
