"""
OpenFGA Event Publisher

Publishes identity events to OpenFGA as tuple writes. When the store or the
authorization model is not configured, both are discovered on first use:
the first store the service lists and that store's first authorization
model are used for the rest of the process lifetime.

Events that arrive while discovery keeps failing (no store, or no model in
the store) are discarded with an error log; discovery is retried on the next
event. Transport and validation errors are raised to the caller.
"""

import asyncio
import logging
from typing import Optional

from .events.models import IdentityEvent
from .models import DiscoveryResult, DiscoveryStatus, TargetCoordinates, WriteOptions
from .protocols import EventTranslatorProtocol, OpenFgaClientProtocol

logger = logging.getLogger(__name__)


class PublisherState:
    """
    Target coordinates and readiness of one publisher

    ready goes False -> True once and never back. Coordinates are replaced
    only on that transition. The lock serializes discovery runs.
    """

    def __init__(self, coordinates: TargetCoordinates):
        self._coordinates = coordinates
        self._ready = coordinates.is_resolved
        self.lock = asyncio.Lock()

    @property
    def is_ready(self) -> bool:
        return self._ready

    @property
    def coordinates(self) -> TargetCoordinates:
        return self._coordinates

    def mark_ready(self, coordinates: TargetCoordinates) -> bool:
        """
        Transition to ready with fully resolved coordinates

        Returns:
            True if this call made the transition, False if already ready
        """
        if self._ready:
            return False
        if not coordinates.is_resolved:
            raise ValueError("Cannot mark publisher ready with unresolved coordinates")
        self._coordinates = coordinates
        self._ready = True
        return True


class OpenFgaEventPublisher:
    """Publishes identity events to OpenFGA"""

    def __init__(
        self,
        client: OpenFgaClientProtocol,
        translator: EventTranslatorProtocol,
        coordinates: TargetCoordinates,
        write_options: Optional[WriteOptions] = None,
    ):
        """
        Initialize publisher

        Args:
            client: OpenFGA client bound to coordinates.api_url
            translator: Event to tuple translator
            coordinates: Starting coordinates; ready immediately when both
                         store and authorization model ids are set
            write_options: Options passed to every write
        """
        self.client = client
        self.translator = translator
        self.write_options = write_options or WriteOptions()
        self.state = PublisherState(coordinates)

        if self.state.is_ready:
            self.client.set_store_id(coordinates.store_id)
            self.client.set_authorization_model_id(coordinates.authorization_model_id)

    @property
    def is_ready(self) -> bool:
        return self.state.is_ready

    async def close(self):
        await self.client.close()

    async def publish(self, event_id: str, event: IdentityEvent) -> None:
        """
        Publish one identity event

        Args:
            event_id: Event identifier for logging / correlation
            event: Structured identity event

        Raises:
            TransportError: OpenFGA unreachable, during discovery or write
            RejectedRequestError: OpenFGA rejected the tuples
        """
        if not self.state.is_ready:
            result = await self.discover()
            if not result.is_ready:
                logger.error(
                    f"Unable to initialize OpenFGA client ({result.status.value}). "
                    f"Discarding event {event_id}, {event}"
                )
                return

        request = self.translator.to_write_request(event)
        if not self.translator.is_available(request):
            logger.debug(f"Event {event_id} carries no tuple changes, nothing to publish")
            return

        logger.debug(f"Publishing event id {event_id}")
        response = await self.client.write(request, self.write_options)
        logger.debug(f"Successfully sent tuple keys to OpenFGA, response: {response}")

    async def discover(self) -> DiscoveryResult:
        """
        Discover the store and authorization model to write to

        Runs at most one discovery at a time; callers waiting on the lock
        return the already-ready result without calling the service again.

        Returns:
            DiscoveryResult tagged READY, NO_STORE or NO_MODEL

        Raises:
            TransportError: OpenFGA unreachable
        """
        async with self.state.lock:
            if self.state.is_ready:
                return DiscoveryResult(
                    status=DiscoveryStatus.READY, coordinates=self.state.coordinates
                )

            api_url = self.state.coordinates.api_url
            logger.info("Discover store and authorization model")

            stores = await self.client.list_stores()
            if not stores:
                logger.info(f"No store found at {api_url}")
                return DiscoveryResult(
                    status=DiscoveryStatus.NO_STORE, coordinates=self.state.coordinates
                )

            store = stores[0]
            logger.info(f"Found store id: {store.id}")
            self.client.set_store_id(store.id)

            models = await self.client.read_authorization_models()
            if not models:
                logger.info(f"No authorization model found in store {store.id}")
                return DiscoveryResult(
                    status=DiscoveryStatus.NO_MODEL,
                    coordinates=TargetCoordinates(api_url=api_url, store_id=store.id),
                )

            model = models[0]
            logger.info(f"Found authorization model id: {model.id}")
            self.client.set_authorization_model_id(model.id)
            self.translator.load_model(model)

            coordinates = TargetCoordinates(
                api_url=api_url, store_id=store.id, authorization_model_id=model.id
            )
            self.state.mark_ready(coordinates)
            return DiscoveryResult(
                status=DiscoveryStatus.READY, coordinates=coordinates, model=model
            )


__all__ = ["OpenFgaEventPublisher", "PublisherState"]
