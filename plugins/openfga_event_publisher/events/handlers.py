"""
OpenFGA Event Publisher Event Handlers

Entry points the host platform calls for each admin event. Relationship
changes are forwarded to the publisher; publish errors reach the host.
"""

import logging
from typing import Any, Callable, Dict

from .parser import parse_admin_event

logger = logging.getLogger(__name__)

ADMIN_EVENT = "admin.event"


class OpenFgaEventHandlers:
    """Event handlers for the OpenFGA event publisher"""

    def __init__(self, publisher):
        """
        Initialize event handlers

        Args:
            publisher: Instance of OpenFgaEventPublisher
        """
        self.publisher = publisher

    def get_event_handler_map(self) -> Dict[str, Callable]:
        """
        Get mapping of event types to handler functions

        Returns:
            Dictionary mapping event types to handler functions
        """
        return {
            ADMIN_EVENT: self.handle_admin_event,
        }

    async def handle_admin_event(self, event_data: Dict[str, Any]) -> bool:
        """
        Handle an admin event

        Event data expected:
        {
            "id": "evt-1",
            "realmId": "master",
            "resourceType": "GROUP_MEMBERSHIP",
            "operationType": "CREATE",
            "resourcePath": "users/u-1/groups/g-1",
            "representation": "{\"id\": \"g-1\", \"name\": \"engineering\"}"
        }

        Returns:
            True if the event was handed to the publisher, False if skipped
        """
        event = parse_admin_event(event_data)
        if event is None:
            logger.debug(f"Skipping admin event {event_data.get('id')}: no relationship change")
            return False

        logger.debug(f"Handling admin event {event.event_id}: {event}")
        await self.publisher.publish(event.event_id, event)
        return True


__all__ = ["OpenFgaEventHandlers", "ADMIN_EVENT"]
