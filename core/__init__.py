#!/usr/bin/env python3
"""
Core Module

Shared infrastructure for the OpenFGA event publisher plugin.

COMPONENTS:
    - config/: OpenFGA target and logging configuration
    - logger.py: Service logger setup

USAGE:
    from core.config import OpenFgaConfig
    from core.logger import setup_service_logger

    config = OpenFgaConfig.from_env()
    logger = setup_service_logger("openfga_event_publisher")
"""

__version__ = "1.0.0"
