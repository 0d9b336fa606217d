"""
Shared Test Fixtures

Centralized factories used across all test layers.

Structure:
    - admin_event_fixtures.py: Raw admin event factories
"""

# Admin event fixtures
from .admin_event_fixtures import (
    make_admin_event,
    make_role_mapping_event,
    make_group_membership_event,
)

__all__ = [
    "make_admin_event",
    "make_role_mapping_event",
    "make_group_membership_event",
]
