"""
Governance events.

Services publish one event per successful mutation so the presentation
layer can render toasts and notifications. Events are published after the
change has been committed.
"""

from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Type
from pydantic import BaseModel, Field

from src.logging import get_logger


class GovernanceEvent(BaseModel):
    """Base class for all governance events."""
    occurred_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="When the change was committed"
    )


class TagsApplied(GovernanceEvent):
    """A league admin changed a staff member's tags directly."""
    staff_id: str
    old_tags: List[str] = Field(default_factory=list)
    new_tags: List[str] = Field(default_factory=list)


class TagChangeQueued(GovernanceEvent):
    """A club submitted a tag change for approval."""
    request_id: str
    staff_id: str
    requesting_actor: str
    old_tags: List[str] = Field(default_factory=list)
    new_tags: List[str] = Field(default_factory=list)


class TagChangeApproved(GovernanceEvent):
    """A league admin approved a club's tag change."""
    request_id: str
    staff_id: str
    requesting_actor: str
    old_tags: List[str] = Field(default_factory=list)
    new_tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None


class TagChangeRejected(GovernanceEvent):
    """A league admin rejected a club's tag change."""
    request_id: str
    staff_id: str
    requesting_actor: str
    old_tags: List[str] = Field(default_factory=list)
    new_tags: List[str] = Field(default_factory=list)
    note: Optional[str] = None


class TagRenamed(GovernanceEvent):
    """A tag was renamed across the roster."""
    old_name: str
    new_name: str
    staff_ids: List[str] = Field(default_factory=list)


class TagDeleted(GovernanceEvent):
    """A tag was removed from the roster."""
    name: str
    staff_ids: List[str] = Field(default_factory=list)


class TagCreated(GovernanceEvent):
    """A tag was added to the catalog."""
    name: str


Listener = Callable[[GovernanceEvent], None]


class EventBus:
    """
    In-process publish/subscribe for governance events.

    Usage:
        bus = EventBus()
        unsubscribe = bus.subscribe(show_toast, TagChangeQueued)
        bus.publish(TagChangeQueued(...))
        unsubscribe()
    """

    def __init__(self):
        self._listeners: Dict[Optional[Type[GovernanceEvent]], List[Listener]] = {}

    def subscribe(
        self,
        listener: Listener,
        event_type: Optional[Type[GovernanceEvent]] = None
    ) -> Callable[[], None]:
        """
        Register a listener.

        Args:
            listener: Called with each matching event
            event_type: Only deliver events of this type (None for all)

        Returns:
            Callable that removes the listener
        """
        self._listeners.setdefault(event_type, []).append(listener)

        def unsubscribe():
            listeners = self._listeners.get(event_type, [])
            if listener in listeners:
                listeners.remove(listener)

        return unsubscribe

    def publish(self, event: GovernanceEvent) -> int:
        """
        Deliver an event to matching listeners.

        The change behind the event is already committed, so a failing
        listener is logged and the remaining listeners still run.

        Returns:
            int: Number of listeners that handled the event
        """
        delivered = 0
        targets = list(self._listeners.get(None, []))
        for event_type, listeners in self._listeners.items():
            if event_type is not None and isinstance(event, event_type):
                targets.extend(listeners)

        for listener in targets:
            try:
                listener(event)
                delivered += 1
            except Exception as e:
                get_logger().error(f"Event listener failed for {type(event).__name__}: {e}")

        return delivered
