"""Secrets Manager references and resolved credential payloads"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


@dataclass(frozen=True)
class ManagedSecret:
    """Reference to a vault entry; never carries the secret value"""

    arn: str
    name: str


class ResolvedSecret(BaseModel):
    """Credential document stored in a Redshift secret.

    Only the cluster identifier and user name are interpreted. Every other
    field the vault stores (``engine``, ``host``, ``port``, ``dbname``, ...)
    is kept as-is in ``model_extra`` whatever its JSON type. The password is
    held as a ``SecretStr`` so it never shows up in ``repr`` or log output.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow", frozen=True)

    db_cluster_identifier: Optional[str] = Field(default=None, alias="dbClusterIdentifier")
    username: Optional[str] = None
    password: Optional[SecretStr] = None

    @field_validator("password", mode="before")
    @classmethod
    def _password_as_text(cls, value: Any) -> Any:
        # Numeric or structured passwords are valid JSON; keep their text form
        if value is None or isinstance(value, str):
            return value
        return json.dumps(value)
