"""
Event Bus Implementation (Infrastructure Layer).

Keeps an in-process log of published events and notifies subscribers.
"""
import asyncio
import logging
from typing import Callable, Dict, List, Optional

from fry_core.domain.event_bus import EventBus
from fry_core.domain.events.base import DomainEvent


logger = logging.getLogger(__name__)

EventHandler = Callable[[DomainEvent], object]

# Subscription key for handlers that want every event
ALL_EVENTS = "*"


class InMemoryEventBus(EventBus):
    """
    In-Memory Event Bus Implementation.

    Features:
    - Records every published event (inspectable by tests)
    - Notifies subscribers registered for the event type or for all events
    - Supports sync and async handlers

    A failing handler is logged and does not stop delivery to the
    remaining handlers.
    """

    def __init__(self):
        """Initialize event bus with subscribers."""
        self._subscribers: Dict[str, List[EventHandler]] = {}
        self._published: List[DomainEvent] = []

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single domain event.

        Args:
            event: Domain event to publish
        """
        logger.info(f"Publishing event: {event.event_type} (aggregate: {event.aggregate_id})")
        self._published.append(event)
        await self._notify_subscribers(event)

    async def publish_all(self, events: List[DomainEvent]) -> None:
        """
        Publish multiple domain events in order.

        Args:
            events: List of domain events to publish
        """
        if not events:
            return

        logger.debug(f"Publishing {len(events)} events")
        for event in events:
            await self.publish(event)

    def subscribe(self, handler: EventHandler, event_type: Optional[str] = None) -> None:
        """
        Subscribe to domain events.

        Args:
            handler: Callback that receives events (sync or async)
            event_type: Event class name to listen for, None for all events
        """
        key = event_type or ALL_EVENTS
        self._subscribers.setdefault(key, []).append(handler)
        logger.info(f"Registered event subscriber: {_handler_name(handler)} ({key})")

    def unsubscribe(self, handler: EventHandler, event_type: Optional[str] = None) -> None:
        """
        Unsubscribe from domain events.

        Args:
            handler: Callback to remove
            event_type: Key it was registered under
        """
        handlers = self._subscribers.get(event_type or ALL_EVENTS, [])
        if handler in handlers:
            handlers.remove(handler)
            logger.info(f"Unregistered event subscriber: {_handler_name(handler)}")

    def get_published_events(self) -> List[DomainEvent]:
        """All events published so far (for testing)."""
        return list(self._published)

    def clear(self) -> None:
        """Forget published events (for testing)."""
        self._published.clear()

    async def _notify_subscribers(self, event: DomainEvent) -> None:
        """Notify all subscribers about an event."""
        handlers = self._subscribers.get(event.event_type, []) + self._subscribers.get(ALL_EVENTS, [])
        if not handlers:
            return

        logger.debug(f"Notifying {len(handlers)} subscribers about {event.event_type}")

        for handler in handlers:
            try:
                result = handler(event)
                if asyncio.iscoroutine(result):
                    await result
            except Exception as e:
                logger.error(f"Subscriber {_handler_name(handler)} failed: {e}", exc_info=True)


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", None) or repr(handler)
