"""
srp_token_client.client

`TokenClient` façade: username/password in, token triple out.

Responsibilities:
- Compose credential source + SRP authenticator + provider client.
- Run one attempt as a strictly sequential flow; abort on the first failure.
- Provide a builder whose `build()` reports misconfiguration as a typed error.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx

from srp_token_client.credentials.base import CredentialSource, PoolIdentity
from srp_token_client.errors import (
    CredentialFetchFailed,
    MissingCredentialSource,
    TokenClientError,
)
from srp_token_client.models import TokenTriple
from srp_token_client.observability.logging import attempt_context, get_logger
from srp_token_client.provider.client import IdentityProviderClient
from srp_token_client.settings import Settings, get_settings
from srp_token_client.srp.authenticator import SrpAuthenticator

log = get_logger(__name__)


class TokenClient:
    """
    Safe to share across concurrent `authenticate` calls: every attempt fetches its
    own `PoolIdentity` and owns its own `SrpSession`; nothing mutable is shared.
    """

    def __init__(
        self,
        *,
        credential_source: CredentialSource | None,
        provider: IdentityProviderClient | None = None,
        settings: Settings | None = None,
        authenticator: SrpAuthenticator | None = None,
    ) -> None:
        if credential_source is None:
            raise MissingCredentialSource()
        self._source = credential_source
        self._provider = provider
        self._settings = settings
        self._srp = authenticator or SrpAuthenticator()

    @staticmethod
    def builder() -> TokenClientBuilder:
        return TokenClientBuilder()

    async def authenticate(self, username: str, password: str) -> TokenTriple:
        with attempt_context(username=username):
            log.info("auth.started")
            try:
                identity = await self._fetch_identity()
                session = self._srp.begin(
                    username,
                    password,
                    identity.user_pool_id,
                    identity.client_id,
                    identity.shared_secret,
                )
                async with self._provider_for_attempt() as provider:
                    challenge = await provider.initiate(
                        username, identity.client_id, self._srp.auth_params(session)
                    )
                    log.info("auth.challenge_received")
                    responses = self._srp.process_challenge(session, challenge.parameters)
                    tokens = await provider.respond(
                        identity.client_id, responses, session=challenge.session
                    )
            except TokenClientError as e:
                log.warning("auth.failed", error=type(e).__name__)
                raise

            log.info("auth.succeeded")
            return tokens

    async def _fetch_identity(self) -> PoolIdentity:
        try:
            return await self._source.fetch()
        except TokenClientError:
            raise
        except Exception as e:
            raise CredentialFetchFailed(f"credential source failed: {e}") from e

    @asynccontextmanager
    async def _provider_for_attempt(self) -> AsyncIterator[IdentityProviderClient]:
        if self._provider is not None:
            yield self._provider
            return

        # No injected provider: one short-lived HTTP client per attempt, closed afterwards.
        settings = self._settings or get_settings()
        async with httpx.AsyncClient(
            base_url=settings.provider_base_url,
            timeout=settings.http_timeout_seconds,
        ) as http:
            yield IdentityProviderClient(http=http)


class TokenClientBuilder:
    def __init__(self) -> None:
        self._source: CredentialSource | None = None
        self._provider: IdentityProviderClient | None = None
        self._settings: Settings | None = None
        self._authenticator: SrpAuthenticator | None = None

    def credential_source(self, source: CredentialSource | None) -> TokenClientBuilder:
        self._source = source
        return self

    def provider(self, provider: IdentityProviderClient) -> TokenClientBuilder:
        self._provider = provider
        return self

    def settings(self, settings: Settings) -> TokenClientBuilder:
        self._settings = settings
        return self

    def authenticator(self, authenticator: SrpAuthenticator) -> TokenClientBuilder:
        self._authenticator = authenticator
        return self

    def build(self) -> TokenClient:
        if self._source is None:
            raise MissingCredentialSource()
        return TokenClient(
            credential_source=self._source,
            provider=self._provider,
            settings=self._settings,
            authenticator=self._authenticator,
        )


# --- Module Notes -----------------------------------------------------------
# Timeouts and cancellation are composed by the caller around `authenticate`
# (e.g. `asyncio.timeout`); the client adds none of its own.
