"""
srp_token_client.credentials

Credential source boundary.

Responsibilities:
- Define the `CredentialSource` protocol and the `PoolIdentity` it yields.
- Ship simple sources (static, settings/env-backed).
"""

from srp_token_client.credentials.base import CredentialSource, PoolIdentity
from srp_token_client.credentials.sources import SettingsCredentialSource, StaticCredentialSource

__all__ = [
    "CredentialSource",
    "PoolIdentity",
    "SettingsCredentialSource",
    "StaticCredentialSource",
]
