"""Primitive operations wrapping direct Data API and Secrets Manager calls"""

from redshiftlib.primitives.pagination import (
    iter_pages,
    iter_items,
    collect,
)

from redshiftlib.primitives.execution import StatementExecutor

from redshiftlib.primitives.metadata import (
    MetadataExplorer,
    DEFAULT_SCHEMA,
)

from redshiftlib.primitives.secrets import (
    SecretsResolver,
    OWNER_TAG_KEY,
)

__all__ = [
    # Pagination
    "iter_pages",
    "iter_items",
    "collect",
    # Execution
    "StatementExecutor",
    # Metadata
    "MetadataExplorer",
    "DEFAULT_SCHEMA",
    # Secrets
    "SecretsResolver",
    "OWNER_TAG_KEY",
]
