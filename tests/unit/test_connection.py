"""Unit tests for redshiftlib connection module."""

import pytest
from unittest.mock import MagicMock, patch

from redshiftlib.connection import AWSConnector, USER_AGENT_EXTRA, client_config


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary TOML config file for testing."""
    config_content = """
[default]
cluster_identifier = "test-cluster"
database = "dev"
db_user = "awsuser"
region = "us-east-1"
aws_profile = "analytics"

[keys]
cluster_identifier = "test-cluster"
database = "dev"
db_user = "awsuser"
aws_access_key_id = "AKIAEXAMPLE"
aws_secret_access_key_env = "TEST_REDSHIFTLIB_SECRET"

[keyring]
cluster_identifier = "test-cluster"
database = "dev"
db_user = "awsuser"
aws_access_key_id = "AKIAEXAMPLE"
use_keyring = true

[timeouts]
cluster_identifier = "test-cluster"
database = "dev"
db_user = "awsuser"
connect_timeout = 5
read_timeout = 30
"""
    config_path = tmp_path / "connections.toml"
    config_path.write_text(config_content)
    return config_path


class TestAWSConnector:
    """Tests for AWSConnector class."""

    def test_init_loads_profile(self, temp_config_file):
        connector = AWSConnector(profile="default", path=temp_config_file)

        assert connector.settings.cluster_identifier == "test-cluster"
        assert connector.settings.db_user == "awsuser"
        assert connector._cfg["aws_profile"] == "analytics"

    def test_runtime_overrides(self, temp_config_file):
        """Test that kwargs override config values."""
        connector = AWSConnector(profile="default", path=temp_config_file, database="prod", region="eu-west-1")

        assert connector.settings.database == "prod"
        assert connector.settings.region == "eu-west-1"

    def test_session_lazy_initialization(self, temp_config_file):
        connector = AWSConnector(profile="default", path=temp_config_file)

        assert connector._session is None
        assert "inactive" in repr(connector)

    @patch("boto3.session.Session")
    def test_session_uses_aws_profile(self, mock_session_cls, temp_config_file):
        connector = AWSConnector(profile="default", path=temp_config_file)

        session = connector.session()

        mock_session_cls.assert_called_once_with(region_name="us-east-1", profile_name="analytics")
        assert session is mock_session_cls.return_value

    @patch("boto3.session.Session")
    def test_session_reused(self, mock_session_cls, temp_config_file):
        connector = AWSConnector(profile="default", path=temp_config_file)

        assert connector.session() is connector.session()
        assert mock_session_cls.call_count == 1

    @patch("boto3.session.Session")
    def test_secret_key_from_environment(self, mock_session_cls, temp_config_file, monkeypatch):
        monkeypatch.setenv("TEST_REDSHIFTLIB_SECRET", "env-secret")

        connector = AWSConnector(profile="keys", path=temp_config_file)
        connector.session()

        kwargs = mock_session_cls.call_args.kwargs
        assert kwargs["aws_access_key_id"] == "AKIAEXAMPLE"
        assert kwargs["aws_secret_access_key"] == "env-secret"
        assert "env-secret" not in repr(connector.secret_access_key)

    @patch("redshiftlib.connection.connector.keyring")
    def test_secret_key_from_keyring(self, mock_keyring, temp_config_file):
        mock_keyring.get_password.return_value = "keyring-secret"

        connector = AWSConnector(profile="keyring", path=temp_config_file)

        mock_keyring.get_password.assert_called_once_with("redshiftlib.keyring", "AKIAEXAMPLE")
        assert connector.secret_access_key.get_secret_value() == "keyring-secret"

    @patch("redshiftlib.connection.connector.keyring")
    def test_missing_secret_key_raises(self, mock_keyring, temp_config_file):
        mock_keyring.get_password.return_value = None

        with pytest.raises(ValueError, match="no secret access key"):
            AWSConnector(profile="keyring", path=temp_config_file)

    def test_client_config_timeouts(self, temp_config_file):
        config = AWSConnector(profile="timeouts", path=temp_config_file).client_config()

        assert config.connect_timeout == 5
        assert config.read_timeout == 30
        assert config.user_agent_extra == USER_AGENT_EXTRA


class TestClientConfig:
    """Tests for the shared botocore config."""

    def test_user_agent_marker(self):
        config = client_config()

        assert config.user_agent_extra == USER_AGENT_EXTRA
        assert USER_AGENT_EXTRA.startswith("redshiftlib/")
        assert USER_AGENT_EXTRA.endswith("Redshift")
