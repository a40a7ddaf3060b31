"""
srp_token_client.provider.client

HTTP client boundary for the identity provider (Cognito User Pools JSON API).

Responsibilities:
- Issue InitiateAuth (USER_SRP_AUTH) and RespondToAuthChallenge (PASSWORD_VERIFIER).
- Validate response shape and surface provider/transport errors as `ProviderError`.
- Never retry; retry policy belongs to the caller.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from srp_token_client.errors import IncompleteTokens, NoAuthResult, NoChallenge, ProviderError
from srp_token_client.models import TokenTriple
from srp_token_client.observability.logging import get_logger
from srp_token_client.provider.models import (
    CHALLENGE_PASSWORD_VERIFIER,
    InitiateAuthRequest,
    InitiateAuthResponse,
    RespondToAuthChallengeRequest,
    RespondToAuthChallengeResponse,
    to_wire,
)

log = get_logger(__name__)

_TARGET_PREFIX = "AWSCognitoIdentityProviderService."
_CONTENT_TYPE = "application/x-amz-json-1.1"

_M = TypeVar("_M", bound=BaseModel)


@dataclass(frozen=True, slots=True)
class Challenge:
    """Challenge parameters plus the provider session token (if any) to echo back."""

    parameters: dict[str, str]
    session: str | None = None


class IdentityProviderClient:
    """
    Thin adapter over an injected `httpx.AsyncClient` whose base_url points at the
    provider endpoint. The caller owns the HTTP client's lifetime.
    """

    def __init__(self, *, http: httpx.AsyncClient) -> None:
        self._http = http

    async def initiate(
        self, username: str, client_id: str, auth_params: Mapping[str, str]
    ) -> Challenge:
        body = InitiateAuthRequest(
            client_id=client_id,
            auth_parameters={"USERNAME": username, **auth_params},
        )
        resp = await self._call("InitiateAuth", to_wire(body), InitiateAuthResponse)

        if resp.challenge_name and resp.challenge_name != CHALLENGE_PASSWORD_VERIFIER:
            # MFA / NEW_PASSWORD_REQUIRED and friends are out of scope for this flow.
            raise NoChallenge(resp.challenge_name)
        if not resp.challenge_parameters:
            raise NoChallenge()

        log.debug(
            "provider.challenge",
            challenge=resp.challenge_name or CHALLENGE_PASSWORD_VERIFIER,
        )
        return Challenge(parameters=resp.challenge_parameters, session=resp.session)

    async def respond(
        self,
        client_id: str,
        challenge_response: Mapping[str, str],
        *,
        session: str | None = None,
    ) -> TokenTriple:
        body = RespondToAuthChallengeRequest(
            client_id=client_id,
            challenge_responses=dict(challenge_response),
            session=session,
        )
        resp = await self._call(
            "RespondToAuthChallenge", to_wire(body), RespondToAuthChallengeResponse
        )

        result = resp.authentication_result
        if result is None:
            raise NoAuthResult()

        tokens = {
            "IdToken": result.id_token,
            "AccessToken": result.access_token,
            "RefreshToken": result.refresh_token,
        }
        missing = tuple(name for name, value in tokens.items() if not value)
        if missing:
            raise IncompleteTokens(missing)

        return TokenTriple(
            id_token=result.id_token,  # type: ignore[arg-type]
            access_token=result.access_token,  # type: ignore[arg-type]
            refresh_token=result.refresh_token,  # type: ignore[arg-type]
        )

    async def _call(self, operation: str, payload: dict[str, Any], model: type[_M]) -> _M:
        try:
            r = await self._http.post(
                "/",
                json=payload,
                headers={
                    "Content-Type": _CONTENT_TYPE,
                    "X-Amz-Target": _TARGET_PREFIX + operation,
                },
            )
        except httpx.HTTPError as e:
            raise ProviderError("TransportError", str(e) or type(e).__name__) from e

        if r.is_error:
            code, message = _error_details(r)
            log.info("provider.error", operation=operation, status=r.status_code, code=code)
            raise ProviderError(code, message)

        try:
            return model.model_validate_json(r.content)
        except ValidationError as e:
            raise ProviderError(
                "InvalidResponse", f"{operation}: {e.error_count()} validation error(s)"
            ) from e


def _error_details(r: httpx.Response) -> tuple[str, str]:
    try:
        data = r.json()
    except ValueError:
        data = {}
    if not isinstance(data, dict):
        data = {}

    raw_type = str(data.get("__type") or r.headers.get("x-amzn-ErrorType") or "")
    # "com.amazonaws...#NotAuthorizedException" or "NotAuthorizedException:http://..."
    code = raw_type.rsplit("#", 1)[-1].split(":", 1)[0] or f"HTTP{r.status_code}"
    message = str(data.get("message") or data.get("Message") or r.reason_phrase or "")
    return code, message


# --- Module Notes -----------------------------------------------------------
# InitiateAuth and RespondToAuthChallenge are unsigned public-client operations,
# so plain HTTPS with the X-Amz-Target header is enough; no SigV4.
