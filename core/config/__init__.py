#!/usr/bin/env python3
"""Configuration for the OpenFGA event publisher

Configuration hierarchy:
- openfga_config: OpenFGA endpoint, store and authorization model
- logging_config: Logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .openfga_config import OpenFgaConfig

# Variables already set in the environment win over the env file
load_dotenv(os.getenv("ENV_FILE", ".env"), override=False)

# Create global settings instance
settings = OpenFgaConfig.from_env()

def get_settings() -> OpenFgaConfig:
    """Get global settings instance"""
    return settings

def reload_settings() -> OpenFgaConfig:
    """Reload settings from environment"""
    global settings
    settings = OpenFgaConfig.from_env()
    return settings

__all__ = [
    'OpenFgaConfig',
    'LoggingConfig',
    'get_settings',
    'reload_settings',
    'settings',
]
