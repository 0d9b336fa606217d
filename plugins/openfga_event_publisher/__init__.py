"""
OpenFGA Event Publisher

Propagates identity platform admin events into OpenFGA as relationship
tuple writes, discovering the target store and authorization model on first
use when they are not configured.
"""

from .events import OpenFgaEventHandlers, IdentityEvent, parse_admin_event
from .factory import create_openfga_event_publisher
from .models import DiscoveryResult, DiscoveryStatus, TargetCoordinates, TupleKey, WriteRequest
from .protocols import (
    InvalidParameterError,
    OpenFgaApiError,
    OpenFgaException,
    RejectedRequestError,
    TransportError,
)
from .publisher import OpenFgaEventPublisher

__all__ = [
    "OpenFgaEventHandlers",
    "IdentityEvent",
    "parse_admin_event",
    "create_openfga_event_publisher",
    "DiscoveryResult",
    "DiscoveryStatus",
    "TargetCoordinates",
    "TupleKey",
    "WriteRequest",
    "InvalidParameterError",
    "OpenFgaApiError",
    "OpenFgaException",
    "RejectedRequestError",
    "TransportError",
    "OpenFgaEventPublisher",
]
