"""
srp_token_client.credentials.sources

Built-in `CredentialSource` implementations.

Responsibilities:
- `StaticCredentialSource`: a fixed identity (tests, embedding).
- `SettingsCredentialSource`: identity read from env-driven `Settings`.
"""

from __future__ import annotations

from srp_token_client.credentials.base import PoolIdentity
from srp_token_client.errors import CredentialFetchFailed
from srp_token_client.settings import Settings


class StaticCredentialSource:
    def __init__(self, identity: PoolIdentity) -> None:
        self._identity = identity

    async def fetch(self) -> PoolIdentity:
        return self._identity


class SettingsCredentialSource:
    """
    Reads `user_pool_id`, `client_id` and `client_secret` from settings on every fetch.
    """

    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings

    async def fetch(self) -> PoolIdentity:
        s = self._settings
        missing = [name for name in ("user_pool_id", "client_id") if not getattr(s, name)]
        if missing:
            raise CredentialFetchFailed(
                "settings missing " + ", ".join(f"SRP_CLIENT_{m.upper()}" for m in missing)
            )
        return PoolIdentity(
            shared_secret=s.client_secret or None,
            client_id=s.client_id,  # type: ignore[arg-type]
            user_pool_id=s.user_pool_id,  # type: ignore[arg-type]
        )


# --- Module Notes -----------------------------------------------------------
# A secret-manager backed source only needs the same one-method shape; see
# `credentials.base.CredentialSource`.
