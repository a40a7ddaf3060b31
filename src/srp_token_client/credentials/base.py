"""
srp_token_client.credentials.base

Credential source contract.

Responsibilities:
- Describe the identifiers needed to address one user pool app client.
- Define the single-method async capability injected into `TokenClient`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class PoolIdentity:
    """
    Pool/app-client identifiers for one authentication attempt.
    `shared_secret` is the app client secret; None for public clients.
    """

    shared_secret: str | None = field(repr=False)
    client_id: str
    user_pool_id: str


@runtime_checkable
class CredentialSource(Protocol):
    """
    Anything with `async fetch() -> PoolIdentity`.
    Called once per attempt; implementations may hit a secret store or the network.
    """

    async def fetch(self) -> PoolIdentity: ...


# --- Module Notes -----------------------------------------------------------
# Structural typing keeps fakes trivial in tests: no base class to inherit from.
