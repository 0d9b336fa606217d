"""
OpenFGA Event Publisher Factory

Factory functions for creating publisher instances with real dependencies.
This is the ONLY place that constructs I/O-dependent objects.

Usage:
    from .factory import create_openfga_event_publisher
    publisher = create_openfga_event_publisher(OpenFgaConfig.from_scope(scope))
"""
from typing import Optional

from core.config import get_settings
from core.config.openfga_config import OpenFgaConfig

from .models import TargetCoordinates
from .publisher import OpenFgaEventPublisher


def create_openfga_event_publisher(
    config: Optional[OpenFgaConfig] = None,
) -> OpenFgaEventPublisher:
    """
    Create OpenFgaEventPublisher with real dependencies.

    Args:
        config: Resolved OpenFGA configuration (defaults to global settings)

    Returns:
        Configured OpenFgaEventPublisher instance
    """
    # Import the HTTP client here (not at module level)
    from .client import OpenFgaClient
    from .translator import OpenFgaTupleTranslator

    config = config or get_settings()
    coordinates = TargetCoordinates.from_config(config)

    client = OpenFgaClient(
        api_url=coordinates.api_url,
        connect_timeout=config.connect_timeout,
        read_timeout=config.read_timeout,
    )

    return OpenFgaEventPublisher(
        client=client,
        translator=OpenFgaTupleTranslator(),
        coordinates=coordinates,
    )
