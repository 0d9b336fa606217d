"""
Root conftest.py - Global fixtures and configuration for all test layers.

Test Layers:
    - component/  : Component tests (mocked HTTP and collaborators)
    - unit/       : Unit tests (pure functions, no I/O)
"""
import os
import sys
from typing import Any, Dict

import pytest

# Set testing environment BEFORE any project imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root to path
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, PROJECT_ROOT)

# Import shared fixtures from tests/fixtures
from tests.fixtures import (
    make_role_mapping_event,
    make_group_membership_event,
)


# =============================================================================
# Sample Data Fixtures
# =============================================================================

@pytest.fixture
def role_mapping_event() -> Dict[str, Any]:
    """Raw event assigning realm role 'admin' to usr_test_123"""
    return make_role_mapping_event()


@pytest.fixture
def group_membership_event() -> Dict[str, Any]:
    """Raw event adding usr_test_123 to group grp_001"""
    return make_group_membership_event()
