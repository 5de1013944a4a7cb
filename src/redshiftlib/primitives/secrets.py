"""Secrets Manager lookups for Redshift credentials"""

import logging
from typing import Any, Iterator, Optional

from pydantic import ValidationError

from redshiftlib.context import CallContext, check
from redshiftlib.errors import MissingSecretContentError, SecretDecodeError
from redshiftlib.models import ManagedSecret, ResolvedSecret

from .pagination import Page, collect

logger = logging.getLogger(__name__)

# Only secrets carrying this tag may be used by the Redshift query editor
# https://docs.aws.amazon.com/redshift/latest/mgmt/query-editor.html#query-cluster-configure
OWNER_TAG_KEY = "RedshiftQueryOwner"

SECRET_FILTERS = [{"Key": "tag-key", "Values": [OWNER_TAG_KEY]}]


def _managed_secrets(page: Page) -> Iterator[Optional[ManagedSecret]]:
    for entry in page.get("SecretList") or []:
        arn, name = entry.get("ARN"), entry.get("Name")
        if arn is None or name is None:
            continue
        yield ManagedSecret(arn=arn, name=name)


class SecretsResolver:
    """Find and read Redshift credentials stored in Secrets Manager"""

    def __init__(self, client: Any):
        """Initialize with a ``secretsmanager`` client"""
        self.client = client

    def secrets(self, ctx: Optional[CallContext] = None) -> list[ManagedSecret]:
        """List secrets tagged for Redshift use.

        Entries without an ARN or a name are skipped.
        """
        return collect(
            self.client.list_secrets,
            {"Filters": SECRET_FILTERS},
            _managed_secrets,
            ctx=ctx,
        )

    def secret(self, arn: str, ctx: Optional[CallContext] = None) -> ResolvedSecret:
        """Fetch one secret and decode its JSON content.

        Args:
            arn: Secret ARN
            ctx: Optional call context

        Returns:
            ResolvedSecret. Do not log or cache it.

        Raises:
            MissingSecretContentError: If the secret has no string value
            SecretDecodeError: If the value is not a JSON credential object
            botocore.exceptions.ClientError: If the lookup fails
        """
        check(ctx)
        response = self.client.get_secret_value(SecretId=arn)
        content = (response or {}).get("SecretString")
        if content is None:
            raise MissingSecretContentError(arn)
        try:
            return ResolvedSecret.model_validate_json(content)
        except ValidationError as err:
            # The validation error echoes its input, which is the secret itself
            reasons = [
                f"{'.'.join(str(part) for part in e['loc']) or 'content'}: {e['msg']}"
                for e in err.errors(include_input=False)
            ]
        raise SecretDecodeError(arn, reasons)
