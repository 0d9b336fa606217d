"""
OpenFGA Event Publisher Events

Structured identity events, the admin event parser and host-facing handlers.
"""

from .handlers import ADMIN_EVENT, OpenFgaEventHandlers
from .models import EventResourceType, IdentityEvent, OperationType, SubjectType
from .parser import parse_admin_event

__all__ = [
    "ADMIN_EVENT",
    "OpenFgaEventHandlers",
    "EventResourceType",
    "IdentityEvent",
    "OperationType",
    "SubjectType",
    "parse_admin_event",
]
