"""
Tag list rules.

Pure helpers shared by every service that touches a staff member's tags:
- Name normalization (surrounding and repeated whitespace)
- Tag set validation (cardinality and uniqueness)
- Rename/remove of one tag inside an ordered list
- Add/remove deltas used by bulk edits

Tag names are compared case-sensitively, so "Proven" and "proven" are
different tags.
"""

from typing import Iterable, List, Tuple

from src.exceptions import InvalidTagSetError

MAX_TAGS = 5


def normalize_tag_name(name: str) -> str:
    """
    Normalize a tag name for storage and comparison.

    Strips surrounding whitespace and collapses inner runs of whitespace.

    Args:
        name: Raw tag name

    Returns:
        str: Normalized name ("" for blank input)
    """
    if not name:
        return ""
    return " ".join(str(name).split())


def validate_tag_set(tags: Iterable[str], max_tags: int = MAX_TAGS) -> List[str]:
    """
    Normalize and validate a full tag set for one staff member.

    Args:
        tags: Proposed tags, in display order
        max_tags: Maximum number of tags a staff member may hold

    Returns:
        List[str]: Normalized tags in the given order

    Raises:
        InvalidTagSetError: If a name is blank, a name repeats, or there
            are more than max_tags names
    """
    if isinstance(tags, str):
        raise InvalidTagSetError("Tags must be a list of names, not a single string")
    if not isinstance(tags, Iterable):
        raise InvalidTagSetError(f"Tags must be a list of names, got {type(tags).__name__}")

    normalized = []
    for tag in tags:
        name = normalize_tag_name(tag)
        if not name:
            raise InvalidTagSetError("Tag names cannot be blank")
        if name in normalized:
            raise InvalidTagSetError(f"Duplicate tag '{name}'")
        normalized.append(name)

    if len(normalized) > max_tags:
        raise InvalidTagSetError(
            f"A staff member can hold at most {max_tags} tags, got {len(normalized)}"
        )

    return normalized


def dedupe_tags(tags: Iterable[str]) -> List[str]:
    """Drop repeated names, keeping the first occurrence."""
    seen = []
    for tag in tags:
        if tag not in seen:
            seen.append(tag)
    return seen


def rename_in_list(tags: List[str], old_name: str, new_name: str) -> List[str]:
    """
    Replace old_name with new_name in place.

    If the list already holds new_name, the rename would create a duplicate;
    only the first occurrence is kept.
    """
    return dedupe_tags(new_name if tag == old_name else tag for tag in tags)


def remove_from_list(tags: List[str], names: Iterable[str]) -> List[str]:
    """Remove every name in names, preserving the order of what remains."""
    names = set(names)
    return [tag for tag in tags if tag not in names]


def add_to_list(tags: List[str], names: Iterable[str], max_tags: int = MAX_TAGS) -> Tuple[List[str], bool]:
    """
    Append names not already held, capped at max_tags.

    Names beyond the cap are dropped, not rejected.

    Returns:
        Tuple of (new tag list, whether any name was dropped by the cap)
    """
    combined = dedupe_tags(list(tags) + [name for name in names if name not in tags])
    return combined[:max_tags], len(combined) > max_tags
