"""Catalog metadata from the Redshift Data API.

Functions for listing schemas, tables and columns. Each one follows the
pagination cursor to the last page and returns names only. A failure on any
page propagates the botocore error unchanged; no partial list is returned.
"""

import logging
from typing import Any, Optional

from redshiftlib.context import CallContext
from redshiftlib.models import AuthParameters

from .pagination import collect, names

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = "public"


class MetadataExplorer:
    """List schemas, tables and columns visible to the connection"""

    def __init__(self, client: Any):
        """Initialize with a ``redshift-data`` client"""
        self.client = client

    def schemas(self, auth: AuthParameters, ctx: Optional[CallContext] = None) -> list[str]:
        """List every schema in the database.

        Example:
            >>> explorer.schemas(settings.auth_parameters())
            ['public', 'analytics']
        """
        return collect(
            self.client.list_schemas,
            auth.as_request(),
            lambda page: page.get("Schemas") or [],
            ctx=ctx,
        )

    def tables(
        self,
        auth: AuthParameters,
        schema: Optional[str] = None,
        ctx: Optional[CallContext] = None,
    ) -> list[str]:
        """List tables whose schema matches ``schema``.

        Args:
            auth: Common request fields
            schema: Schema name pattern; ``"public"`` when empty
            ctx: Optional call context

        Returns:
            Table names in the order the service returned them
        """
        request = auth.as_request()
        request["SchemaPattern"] = schema or DEFAULT_SCHEMA
        return collect(self.client.list_tables, request, names("Tables"), ctx=ctx)

    def columns(
        self,
        auth: AuthParameters,
        schema: str,
        table: str,
        ctx: Optional[CallContext] = None,
    ) -> list[str]:
        """List column names of ``schema.table`` (names only, no types).

        Both ``schema`` and ``table`` are sent as given; neither is defaulted.
        """
        request = auth.as_request()
        request["Schema"] = schema
        request["Table"] = table
        return collect(self.client.describe_table, request, names("ColumnList"), ctx=ctx)

    def databases(self, ctx: Optional[CallContext] = None) -> list[str]:
        """Not implemented; always an empty list"""
        logger.debug("Database listing is not supported; returning no databases")
        return []

    def regions(self, ctx: Optional[CallContext] = None) -> list[str]:
        """Not implemented; always an empty list"""
        logger.debug("Region listing is not supported; returning no regions")
        return []
