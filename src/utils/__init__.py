"""
Utils package - Shared utilities.

Contains:
- Tag list rules (normalization, validation, rename/add/remove)
- Session id for log file naming
"""

from src.utils.session_id import get_session_id
from src.utils.tag_rules import (
    MAX_TAGS,
    add_to_list,
    dedupe_tags,
    normalize_tag_name,
    remove_from_list,
    rename_in_list,
    validate_tag_set,
)

__all__ = [
    "MAX_TAGS",
    "add_to_list",
    "dedupe_tags",
    "get_session_id",
    "normalize_tag_name",
    "remove_from_list",
    "rename_in_list",
    "validate_tag_set",
]
