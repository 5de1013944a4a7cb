"""Pytest configuration and shared fixtures."""

import sys
from typing import Dict, Any

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from redshiftlib.config import config_dir
from redshiftlib.models import ConnectionSettings, ManagedSecret


def _load_test_config() -> Dict[str, Any]:
    """
    Load integration test configuration from config_dir()/test_config.toml.

    Returns:
        The [test] section, or an empty dict when the file is absent
    """
    test_config_path = config_dir() / "test_config.toml"

    if not test_config_path.exists():
        return {}

    with open(test_config_path, "rb") as f:
        config = tomllib.load(f)

    return config.get("test", {})


@pytest.fixture(scope="session")
def test_config() -> Dict[str, Any]:
    return _load_test_config()


@pytest.fixture(scope="session")
def test_profile(test_config) -> str:
    """Connection profile to use for integration tests."""
    profile = test_config.get("profile")
    if not profile:
        pytest.skip(
            f"No integration profile configured in {config_dir() / 'test_config.toml'}. "
            "Add 'profile = \"your_profile_name\"' to the [test] section."
        )
    return profile


@pytest.fixture(scope="session")
def test_schema(test_config) -> str:
    """Schema to use for integration tests."""
    return test_config.get("schema", "public")


@pytest.fixture(scope="session")
def test_table(test_config) -> str:
    """Existing table for column listing tests."""
    table = test_config.get("table")
    if not table:
        pytest.skip("Integration table not configured; add 'table = \"...\"' to the [test] section.")
    return table


@pytest.fixture
def user_settings() -> ConnectionSettings:
    """Settings using a database user."""
    return ConnectionSettings.create(
        cluster_identifier="test-cluster",
        database="dev",
        use_managed_secret=False,
        db_user="awsuser",
    )


@pytest.fixture
def secret_settings() -> ConnectionSettings:
    """Settings using a managed secret."""
    return ConnectionSettings.create(
        cluster_identifier="test-cluster",
        database="dev",
        use_managed_secret=True,
        managed_secret=ManagedSecret(arn="arn:aws:secretsmanager:us-east-1:1:secret:rs", name="rs"),
    )


@pytest.fixture
def mock_client() -> MagicMock:
    """Stand-in for a boto3 client."""
    return MagicMock()


@pytest.fixture
def client_error():
    """Factory for botocore ClientErrors like the ones boto3 raises."""

    def make(operation: str, code: str = "ValidationException", message: str = "boom") -> ClientError:
        return ClientError({"Error": {"Code": code, "Message": message}}, operation)

    return make
