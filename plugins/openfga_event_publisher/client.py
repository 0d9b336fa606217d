"""
OpenFGA Client

Thin async HTTP client for the OpenFGA API, bound to one service URL.
Store and authorization model ids can be bound after construction.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .models import AuthorizationModel, Store, WriteOptions, WriteRequest, WriteResponse
from .protocols import (
    InvalidParameterError,
    OpenFgaApiError,
    RejectedRequestError,
    TransportError,
)

logger = logging.getLogger(__name__)

# Status codes OpenFGA uses for requests it considers invalid
REJECTED_STATUS_CODES = (400, 409, 422)


class OpenFgaClient:
    """OpenFGA HTTP client"""

    def __init__(
        self,
        api_url: str,
        store_id: Optional[str] = None,
        authorization_model_id: Optional[str] = None,
        connect_timeout: float = 5.0,
        read_timeout: float = 5.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize OpenFGA client

        Args:
            api_url: OpenFGA API base URL
            store_id: Store id to bind (optional, may be set later)
            authorization_model_id: Authorization model id to bind (optional)
            connect_timeout: Connect timeout in seconds
            read_timeout: Read timeout in seconds
            http_client: Pre-built HTTP client (tests inject a mock here)
        """
        self.api_url = api_url.rstrip('/')
        self.store_id = store_id or None
        self.authorization_model_id = authorization_model_id or None

        self.client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
            headers={"Content-Type": "application/json"},
        )

        logger.debug(
            f"Initialized OpenFGA client: {self.api_url} "
            f"(store={self.store_id}, model={self.authorization_model_id})"
        )

    async def close(self):
        """Close HTTP client"""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    # =============================================================================
    # Target Coordinates
    # =============================================================================

    def set_store_id(self, store_id: str) -> None:
        self.store_id = store_id

    def set_authorization_model_id(self, authorization_model_id: str) -> None:
        self.authorization_model_id = authorization_model_id

    def _require_store_id(self) -> str:
        if not self.store_id:
            raise InvalidParameterError("store_id is required but not configured")
        return self.store_id

    # =============================================================================
    # Stores and Authorization Models
    # =============================================================================

    async def list_stores(self) -> List[Store]:
        """
        List stores

        Returns:
            Stores in the order the service returns them

        Raises:
            TransportError: Service unreachable or timed out
            OpenFgaApiError: Service answered with an error status
        """
        data = await self._request("GET", "/stores")
        return [Store.model_validate(s) for s in data.get("stores") or []]

    async def read_authorization_models(self) -> List[AuthorizationModel]:
        """
        List authorization models of the bound store

        Returns:
            Authorization models in the order the service returns them
            (OpenFGA returns the most recent first)
        """
        store_id = self._require_store_id()
        data = await self._request("GET", f"/stores/{store_id}/authorization-models")
        return [
            AuthorizationModel.model_validate(m)
            for m in data.get("authorization_models") or []
        ]

    # =============================================================================
    # Relationship Tuples
    # =============================================================================

    async def write(
        self, request: WriteRequest, options: Optional[WriteOptions] = None
    ) -> WriteResponse:
        """
        Write and delete relationship tuples

        Args:
            request: Tuples to write and delete
            options: Optional per-call overrides

        Returns:
            WriteResponse summarising what was sent

        Raises:
            TransportError: Service unreachable or timed out
            RejectedRequestError: Service rejected the tuples
            OpenFgaApiError: Any other error status
        """
        store_id = self._require_store_id()
        model_id = (options.authorization_model_id if options else None) or self.authorization_model_id

        response = await self._send("POST", f"/stores/{store_id}/write", json=request.to_body(model_id))

        return WriteResponse(
            status_code=response.status_code,
            writes=len(request.writes),
            deletes=len(request.deletes),
        )

    # =============================================================================
    # Internal
    # =============================================================================

    async def _request(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        response = await self._send(method, path, json)
        return self._json_body(method, path, response)

    async def _send(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> httpx.Response:
        url = f"{self.api_url}{path}"
        try:
            if method == "GET":
                response = await self.client.get(url)
            else:
                response = await self.client.post(url, json=json)
        except httpx.TransportError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if response.status_code >= 400:
            raise self._error_from_response(method, url, response)
        return response

    def _json_body(self, method: str, path: str, response: httpx.Response) -> Dict[str, Any]:
        if not response.content:
            return {}
        try:
            payload = response.json()
        except ValueError as e:
            raise OpenFgaApiError(
                f"{method} {self.api_url}{path} returned a body that is not JSON: {response.text[:200]}",
                status_code=response.status_code,
            ) from e
        if not isinstance(payload, dict):
            raise OpenFgaApiError(
                f"{method} {self.api_url}{path} returned unexpected JSON: {payload!r}",
                status_code=response.status_code,
            )
        return payload

    @staticmethod
    def _error_from_response(method: str, url: str, response) -> OpenFgaApiError:
        code = None
        message = response.text
        try:
            payload = response.json()
            if isinstance(payload, dict):
                code = payload.get("code")
                message = payload.get("message") or message
        except ValueError:
            pass

        error_message = f"{method} {url} returned {response.status_code}: {message}"
        if response.status_code in REJECTED_STATUS_CODES:
            return RejectedRequestError(error_message, status_code=response.status_code, code=code)
        return OpenFgaApiError(error_message, status_code=response.status_code, code=code)


__all__ = ["OpenFgaClient"]
