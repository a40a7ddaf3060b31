"""
srp_token_client.models

Result types handed back to callers.

Responsibilities:
- Define the all-or-nothing token triple returned by `TokenClient.authenticate`.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TokenTriple:
    """
    Tokens issued by the identity provider.
    Unpacks as `(id_token, access_token, refresh_token)`.
    """

    id_token: str = field(repr=False)
    access_token: str = field(repr=False)
    refresh_token: str = field(repr=False)

    def __iter__(self) -> Iterator[str]:
        return iter((self.id_token, self.access_token, self.refresh_token))


# --- Module Notes -----------------------------------------------------------
# Token values are excluded from repr so an accidental log line doesn't leak them.
