"""
Unit Golden Tests: OpenFGA Configuration

Tests configuration resolution from the host scope and the environment.
"""
import importlib
import os

import pytest

import core.config
from core.config.openfga_config import (
    DEFAULT_API_URL,
    OPENFGA_API_URL,
    OPENFGA_AUTHORIZATION_MODEL_ID,
    OPENFGA_STORE_ID,
    OpenFgaConfig,
)
from plugins.openfga_event_publisher.models import TargetCoordinates


class TestFromScope:
    """Test resolution from the host configuration scope"""

    def test_empty_scope_uses_defaults(self):
        config = OpenFgaConfig.from_scope({})

        assert config.api_url == DEFAULT_API_URL == "http://openfga:8080"
        assert config.store_id == ""
        assert config.authorization_model_id == ""
        assert config.connect_timeout == 5.0
        assert config.read_timeout == 5.0
        assert config.has_coordinates is False

    def test_none_values_use_defaults(self):
        config = OpenFgaConfig.from_scope({
            OPENFGA_API_URL: None,
            OPENFGA_STORE_ID: None,
            OPENFGA_AUTHORIZATION_MODEL_ID: None,
        })

        assert config.api_url == DEFAULT_API_URL
        assert config.store_id == ""
        assert config.authorization_model_id == ""

    def test_explicit_values(self):
        config = OpenFgaConfig.from_scope({
            "openfgaApiUrl": "http://fga.internal:8080",
            "openfgaStoreId": "01STORE",
            "openfgaAuthorizationModelId": "01MODEL",
        })

        assert config.api_url == "http://fga.internal:8080"
        assert config.store_id == "01STORE"
        assert config.authorization_model_id == "01MODEL"
        assert config.has_coordinates is True

    @pytest.mark.parametrize("store_id,model_id", [
        ("01STORE", ""),
        ("", "01MODEL"),
        ("   ", "01MODEL"),
        ("01STORE", "  "),
    ])
    def test_partial_coordinates_are_not_complete(self, store_id, model_id):
        config = OpenFgaConfig.from_scope({
            OPENFGA_STORE_ID: store_id,
            OPENFGA_AUTHORIZATION_MODEL_ID: model_id,
        })

        assert config.has_coordinates is False


class TestFromEnv:
    """Test resolution from environment variables"""

    def test_defaults(self, monkeypatch):
        for name in (
            "OPENFGA_API_URL",
            "OPENFGA_STORE_ID",
            "OPENFGA_AUTHORIZATION_MODEL_ID",
            "OPENFGA_CONNECT_TIMEOUT",
            "OPENFGA_READ_TIMEOUT",
        ):
            monkeypatch.delenv(name, raising=False)

        config = OpenFgaConfig.from_env()

        assert config.api_url == DEFAULT_API_URL
        assert config.has_coordinates is False
        assert config.connect_timeout == 5.0

    def test_values(self, monkeypatch):
        monkeypatch.setenv("OPENFGA_API_URL", "http://localhost:8080")
        monkeypatch.setenv("OPENFGA_STORE_ID", "01STORE")
        monkeypatch.setenv("OPENFGA_AUTHORIZATION_MODEL_ID", "01MODEL")
        monkeypatch.setenv("OPENFGA_READ_TIMEOUT", "2.5")

        config = OpenFgaConfig.from_env()

        assert config.api_url == "http://localhost:8080"
        assert config.has_coordinates is True
        assert config.read_timeout == 2.5

    def test_invalid_timeout_falls_back(self, monkeypatch):
        monkeypatch.setenv("OPENFGA_CONNECT_TIMEOUT", "soon")

        config = OpenFgaConfig.from_env()

        assert config.connect_timeout == 5.0


class TestEnvFile:
    """Test loading settings from an env file"""

    def test_env_file_fills_unset_variables(self, monkeypatch, tmp_path):
        env_file = tmp_path / "openfga.env"
        env_file.write_text("OPENFGA_STORE_ID=01FILESTORE\nOPENFGA_API_URL=http://from-file:8080\n")
        monkeypatch.setenv("ENV_FILE", str(env_file))
        monkeypatch.setenv("OPENFGA_API_URL", "http://from-env:8080")
        monkeypatch.delenv("OPENFGA_STORE_ID", raising=False)

        try:
            settings = importlib.reload(core.config).get_settings()

            assert settings.store_id == "01FILESTORE"
            assert settings.api_url == "http://from-env:8080"
        finally:
            os.environ.pop("OPENFGA_STORE_ID", None)
            monkeypatch.delenv("ENV_FILE")
            importlib.reload(core.config)


class TestTargetCoordinates:
    """Test turning configuration into starting coordinates"""

    def test_blank_ids_are_unresolved(self):
        coordinates = TargetCoordinates.from_config(OpenFgaConfig(store_id=" "))

        assert coordinates.api_url == DEFAULT_API_URL
        assert coordinates.store_id is None
        assert coordinates.authorization_model_id is None
        assert coordinates.is_resolved is False

    def test_configured_ids_are_resolved(self):
        coordinates = TargetCoordinates.from_config(
            OpenFgaConfig(store_id="01STORE", authorization_model_id="01MODEL")
        )

        assert coordinates.store_id == "01STORE"
        assert coordinates.authorization_model_id == "01MODEL"
        assert coordinates.is_resolved is True
