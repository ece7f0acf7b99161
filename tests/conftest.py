"""
Pytest configuration and shared fixtures.
This file ensures the project root is in sys.path for imports.
"""

import sys
from pathlib import Path

import pytest

# Add project root to sys.path so we can import adapters, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_mongo_adapter():
    """Every test starts and ends without a cached connection."""
    from adapters import mongo_adapter

    mongo_adapter.close()
    yield
    mongo_adapter.close()
