"""
Katas Test Configuration and Fixtures

This module provides pytest fixtures shared across the test suite.
Collaborators are mocks so every interaction can be asserted on.

Fixture Categories:
- Mock Collaborators: OrderService and DataStorage doubles
- Sample Payloads: CSV and JSON inputs with their transformed forms
- Configuration: Isolated environment for config loading
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from katas.guardrails import OrderService
from katas.models.base import StorageResult
from katas.templatemethod import DataStorage

# Variables that would leak host configuration into tests
_KATAS_ENV_VARS = [
    "KATAS_CONFIG",
    "KATAS_LOG_LEVEL",
    "KATAS_LOG_FILE",
    "KATAS_FAILURE_MARKER",
    "KATAS_DEBUG",
]


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# =============================================================================
# Mock Collaborator Fixtures
# =============================================================================


@pytest.fixture
def order_service_mock() -> MagicMock:
    """
    Create an OrderService mock whose checks all pass.

    Usage:
        def test_something(order_service_mock):
            order_service_mock.are_items_in_stock.return_value = False
    """
    service = MagicMock(spec=OrderService)
    service.is_payment_method_valid.return_value = True
    service.are_items_in_stock.return_value = True
    service.is_shipping_address_valid.return_value = True
    return service


@pytest.fixture
def storage_mock() -> MagicMock:
    """Create a DataStorage mock with no configured result."""
    return MagicMock(spec=DataStorage)


@pytest.fixture
def succeeding_storage(storage_mock: MagicMock) -> MagicMock:
    """DataStorage mock that stores every payload successfully."""
    storage_mock.store_data.return_value = StorageResult.SUCCESS
    return storage_mock


@pytest.fixture
def failing_storage(storage_mock: MagicMock) -> MagicMock:
    """DataStorage mock that fails every store."""
    storage_mock.store_data.return_value = StorageResult.FAILURE
    return storage_mock


# =============================================================================
# Sample Payload Fixtures
# =============================================================================


@pytest.fixture
def sample_csv() -> str:
    """CSV header row."""
    return "name,age,location"


@pytest.fixture
def sample_csv_transformed() -> str:
    """sample_csv after transformation."""
    return "name;age;location"


@pytest.fixture
def sample_json() -> str:
    """Small JSON object."""
    return '{"name":"John","age":30}'


@pytest.fixture
def sample_json_transformed() -> str:
    """sample_json after transformation."""
    return "{'name':'John','age':30}"


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture
def isolated_env(monkeypatch, tmp_path: Path) -> Path:
    """Run in an empty directory with no KATAS_* variables or .env loading.

    Returns:
        The temporary working directory
    """
    import katas.config.environment as env_module

    for var in _KATAS_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    # Tests set their own env vars; never read a developer's .env
    monkeypatch.setattr(env_module, "_dotenv_loaded", True)

    return tmp_path
