"""
Tag Registry Service

Tags have no standalone rows on staff records; the set of tags in use is
derived by scanning the roster every time it is asked for. Alongside that,
the league keeps a catalog of assignable names so a tag can exist before
anyone holds it.

Rename and delete are applied to every holder in one transaction.
"""

from typing import Dict, List, Optional

from database.services.staff_store import StaffStore
from src.exceptions import AlreadyExistsError, InvalidArgumentError
from src.logging import get_logger
from src.models import TagRegistryEntry, TagSummary
from src.services.events import EventBus, TagCreated, TagDeleted, TagRenamed
from src.utils.tag_rules import normalize_tag_name, remove_from_list, rename_in_list


class TagRegistryService:
    """
    Service for listing and curating tags across the roster.

    Usage:
        registry = TagRegistryService(store)

        for entry in registry.list_tags():
            print(entry.name, entry.usage_count)

        registry.rename_tag("Proven", "Elite")
        registry.delete_tag("Unproven")
        registry.create_tag("Academy Graduate")
    """

    def __init__(self, store: StaffStore, events: Optional[EventBus] = None):
        self.store = store
        self.events = events or EventBus()
        self.logger = get_logger()

    def list_tags(self, include_catalog: bool = True) -> List[TagRegistryEntry]:
        """
        List distinct tags with their usage counts.

        Ordered by descending usage; ties keep the order in which the tag
        was first seen while scanning the roster. Catalog names nobody holds
        come last with a count of zero.

        Args:
            include_catalog: Also list catalog names that are not in use

        Returns:
            List of TagRegistryEntry
        """
        catalog = self.store.list_catalog()
        entries: Dict[str, TagRegistryEntry] = {}

        for member in self.store.list_staff():
            for tag in member.tags:
                entry = entries.get(tag)
                if entry is None:
                    entry = entries[tag] = TagRegistryEntry(name=tag, in_catalog=tag in catalog)
                entry.usage_count += 1
                entry.staff_ids.append(member.id)

        if include_catalog:
            for name in catalog:
                if name not in entries:
                    entries[name] = TagRegistryEntry(name=name, in_catalog=True)

        # sorted() is stable, so ties stay in first-seen order
        return sorted(entries.values(), key=lambda e: -e.usage_count)

    def tag_summary(self) -> TagSummary:
        """Counts shown at the top of the tag management panel."""
        staff = self.store.list_staff()
        return TagSummary(
            total_tags=len(self.list_tags()),
            tagged_staff=sum(1 for member in staff if member.tags),
            total_staff=len(staff),
        )

    def rename_tag(self, old_name: str, new_name: str) -> int:
        """
        Rename a tag on every staff member that holds it.

        The new name takes the old name's position. A staff member that
        already held the new name keeps a single copy and still counts as
        updated.

        Args:
            old_name: Tag to rename
            new_name: Replacement name

        Returns:
            int: Number of staff members whose tags changed

        Raises:
            InvalidArgumentError: If either name is blank or they are equal
        """
        old_name = normalize_tag_name(old_name)
        new_name = normalize_tag_name(new_name)
        if not old_name or not new_name:
            raise InvalidArgumentError("Tag names cannot be blank")
        if old_name == new_name:
            raise InvalidArgumentError(f"Tag '{old_name}' already has that name")

        changes = {}
        for member in self.store.list_staff():
            if old_name in member.tags:
                changes[member.id] = rename_in_list(member.tags, old_name, new_name)

        in_catalog = old_name in self.store.list_catalog()
        if not changes and not in_catalog:
            return 0

        count = self.store.commit_tag_changes(
            changes,
            catalog_remove=old_name if in_catalog else None,
            catalog_add=new_name if in_catalog else None,
        )

        self.logger.tag_renamed(old_name, new_name, count)
        self.events.publish(TagRenamed(
            old_name=old_name,
            new_name=new_name,
            staff_ids=list(changes)
        ))
        return count

    def delete_tag(self, name: str) -> int:
        """
        Remove a tag from every staff member and from the catalog.

        Args:
            name: Tag to delete

        Returns:
            int: Number of staff members whose tags changed

        Raises:
            InvalidArgumentError: If the name is blank
        """
        name = normalize_tag_name(name)
        if not name:
            raise InvalidArgumentError("Tag name cannot be blank")

        changes = {}
        for member in self.store.list_staff():
            if name in member.tags:
                changes[member.id] = remove_from_list(member.tags, [name])

        in_catalog = name in self.store.list_catalog()
        if not changes and not in_catalog:
            return 0

        count = self.store.commit_tag_changes(changes, catalog_remove=name)

        self.logger.tag_deleted(name, count)
        self.events.publish(TagDeleted(name=name, staff_ids=list(changes)))
        return count

    def create_tag(self, name: str) -> str:
        """
        Add a tag to the catalog so it can be assigned.

        Args:
            name: Tag name

        Returns:
            str: The normalized name that was added

        Raises:
            InvalidArgumentError: If the name is blank
            AlreadyExistsError: If the name is in the catalog or already in use
        """
        name = normalize_tag_name(name)
        if not name:
            raise InvalidArgumentError("Tag name cannot be blank")

        if any(entry.name == name for entry in self.list_tags()):
            raise AlreadyExistsError(f"Tag '{name}' already exists")

        self.store.add_catalog_tags([name])

        self.logger.tag_created(name)
        self.events.publish(TagCreated(name=name))
        return name
