#!/usr/bin/env python3
"""OpenFGA target configuration

Resolves the authorization service endpoint and the optional store /
authorization model coordinates. Absent values always resolve to a default:
a blank store or model id means "unresolved" and is left for discovery.
"""
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

DEFAULT_API_URL = "http://openfga:8080"
DEFAULT_TIMEOUT_SECONDS = 5.0

# Keys used by the host platform's plugin configuration scope
OPENFGA_API_URL = "openfgaApiUrl"
OPENFGA_STORE_ID = "openfgaStoreId"
OPENFGA_AUTHORIZATION_MODEL_ID = "openfgaAuthorizationModelId"


def _float(val: Optional[str], default: float) -> float:
    try:
        return float(val) if val else default
    except ValueError:
        return default


def _str(val: Any, default: str) -> str:
    return default if val is None else str(val)


def _is_blank(val: Optional[str]) -> bool:
    return val is None or not val.strip()


@dataclass
class OpenFgaConfig:
    """OpenFGA endpoint and target coordinates"""

    api_url: str = DEFAULT_API_URL
    store_id: str = ""
    authorization_model_id: str = ""

    # Per-call timeouts (seconds)
    connect_timeout: float = DEFAULT_TIMEOUT_SECONDS
    read_timeout: float = DEFAULT_TIMEOUT_SECONDS

    @property
    def has_coordinates(self) -> bool:
        """True when both store id and authorization model id are set"""
        return not _is_blank(self.store_id) and not _is_blank(self.authorization_model_id)

    @classmethod
    def from_scope(cls, scope: Mapping[str, Any]) -> 'OpenFgaConfig':
        """
        Resolve configuration from the host's plugin configuration scope.

        Args:
            scope: Mapping of plugin configuration keys to values; missing
                   keys and None values fall back to defaults

        Returns:
            Fully populated OpenFgaConfig
        """
        return cls(
            api_url=_str(scope.get(OPENFGA_API_URL), DEFAULT_API_URL),
            store_id=_str(scope.get(OPENFGA_STORE_ID), ""),
            authorization_model_id=_str(scope.get(OPENFGA_AUTHORIZATION_MODEL_ID), ""),
        )

    @classmethod
    def from_env(cls) -> 'OpenFgaConfig':
        """Load OpenFGA configuration from environment variables"""
        return cls(
            api_url=os.getenv("OPENFGA_API_URL", DEFAULT_API_URL),
            store_id=os.getenv("OPENFGA_STORE_ID", ""),
            authorization_model_id=os.getenv("OPENFGA_AUTHORIZATION_MODEL_ID", ""),
            connect_timeout=_float(os.getenv("OPENFGA_CONNECT_TIMEOUT"), DEFAULT_TIMEOUT_SECONDS),
            read_timeout=_float(os.getenv("OPENFGA_READ_TIMEOUT"), DEFAULT_TIMEOUT_SECONDS),
        )
