"""
Component Test Mocks

Shared mock implementations for component testing.
These mocks replace real I/O dependencies (HTTP).
"""

from .http_mock import MockHttpClient, MockHttpResponse

# Plugin-specific mocks should be in tests/component/golden/{plugin}/mocks.py

__all__ = [
    'MockHttpClient',
    'MockHttpResponse',
]
