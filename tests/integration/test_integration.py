"""Integration tests against a real cluster.

These run only when the config directory's test_config.toml names a profile:

    [test]
    profile = "dev"
    schema = "public"
    table = "my_table"

All tests in the module share one RedshiftAPI, so the boto3 session is built
once.
"""

import time
from typing import Iterator

import pytest

from redshiftlib import CallContext, RedshiftAPI, StatementFailedError

pytestmark = pytest.mark.integration


@pytest.fixture(scope="module")
def api(test_profile) -> Iterator[RedshiftAPI]:
    yield RedshiftAPI.from_profile(test_profile)


def _wait(api: RedshiftAPI, handle, timeout: float = 120):
    """Poll until the statement finishes; raises StatementFailedError on failure."""
    ctx = CallContext(timeout=timeout)
    while True:
        status = api.status(handle, ctx=ctx)
        if status.finished:
            return status
        time.sleep(1)


class TestStatements:
    """Submit, poll and cancel statements."""

    def test_select_one_finishes(self, api):
        handle = api.execute("SELECT 1")

        status = _wait(api, handle)

        assert status.id == handle.id
        assert status.state == "FINISHED"
        assert status.error is None

    def test_syntax_error_fails(self, api):
        handle = api.execute("SELEC 1")

        with pytest.raises(StatementFailedError) as exc_info:
            _wait(api, handle)

        assert exc_info.value.status.finished is True
        assert str(exc_info.value)


class TestCatalog:
    """Schema, table and column listings."""

    def test_schemas_include_public(self, api):
        assert "public" in api.schemas()

    def test_tables_in_schema(self, api, test_schema, test_table):
        assert test_table in api.tables({"schema": test_schema})

    def test_columns_of_table(self, api, test_schema, test_table):
        columns = api.columns({"schema": test_schema, "table": test_table})

        assert columns
        assert all(isinstance(c, str) for c in columns)


class TestSecrets:
    """Secrets tagged for Redshift use."""

    def test_list_secrets(self, api):
        secrets = api.secrets()

        assert all(s.arn and s.name for s in secrets)
