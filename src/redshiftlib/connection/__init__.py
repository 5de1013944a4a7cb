"""Connection module exports."""

from .connector import AWSConnector, client_config, USER_AGENT_EXTRA

__all__ = [
    "AWSConnector",
    "client_config",
    "USER_AGENT_EXTRA",
]
