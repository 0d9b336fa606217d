"""
OpenFGA Event Publisher Protocols (Interfaces)

These interfaces define contracts for dependency injection.
NO import-time I/O dependencies - safe to import anywhere.
"""
from typing import List, Optional, Protocol, runtime_checkable

from .events.models import IdentityEvent
from .models import AuthorizationModel, Store, WriteOptions, WriteRequest, WriteResponse


# Custom exceptions - defined here so callers never import the HTTP client

class OpenFgaException(Exception):
    """Base OpenFGA exception"""
    pass


class TransportError(OpenFgaException):
    """The authorization service could not be reached or did not answer in time"""
    pass


class InvalidParameterError(OpenFgaException):
    """Client-side parameter missing, e.g. no store id bound"""
    pass


class OpenFgaApiError(OpenFgaException):
    """The authorization service answered with an error status"""

    def __init__(self, message: str, status_code: int = 0, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class RejectedRequestError(OpenFgaApiError):
    """The authorization service rejected the request as invalid"""
    pass


@runtime_checkable
class OpenFgaClientProtocol(Protocol):
    """
    Interface for the remote OpenFGA client.

    Store-scoped calls use whichever store / model id is currently bound.
    """

    async def list_stores(self) -> List[Store]:
        """List stores in service-defined order"""
        ...

    async def read_authorization_models(self) -> List[AuthorizationModel]:
        """List authorization models of the bound store"""
        ...

    def set_store_id(self, store_id: str) -> None:
        """Bind the store id used by subsequent calls"""
        ...

    def set_authorization_model_id(self, authorization_model_id: str) -> None:
        """Bind the authorization model id used by subsequent writes"""
        ...

    async def write(
        self, request: WriteRequest, options: Optional[WriteOptions] = None
    ) -> WriteResponse:
        """Write and delete tuples"""
        ...

    async def close(self) -> None:
        """Release the underlying HTTP client"""
        ...


@runtime_checkable
class EventTranslatorProtocol(Protocol):
    """Interface for translating identity events into tuple writes"""

    def to_write_request(self, event: IdentityEvent) -> WriteRequest:
        """Translate an event into a write request"""
        ...

    def is_available(self, request: WriteRequest) -> bool:
        """True if the request carries at least one tuple operation"""
        ...

    def load_model(self, model: AuthorizationModel) -> None:
        """Cache schema details of the target authorization model"""
        ...
