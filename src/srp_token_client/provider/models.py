"""
srp_token_client.provider.models

Wire models for the provider's JSON 1.1 API (InitiateAuth / RespondToAuthChallenge).

Responsibilities:
- Parse PascalCase provider payloads into typed models.
- Build request bodies with the exact field names the provider expects.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

AUTH_FLOW_USER_SRP = "USER_SRP_AUTH"
CHALLENGE_PASSWORD_VERIFIER = "PASSWORD_VERIFIER"


class _WireModel(BaseModel):
    # Provider responses grow new keys over time; unknown keys are ignored.
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class InitiateAuthRequest(_WireModel):
    auth_flow: str = Field(default=AUTH_FLOW_USER_SRP, alias="AuthFlow")
    client_id: str = Field(alias="ClientId")
    auth_parameters: dict[str, str] = Field(alias="AuthParameters")


class RespondToAuthChallengeRequest(_WireModel):
    challenge_name: str = Field(default=CHALLENGE_PASSWORD_VERIFIER, alias="ChallengeName")
    client_id: str = Field(alias="ClientId")
    challenge_responses: dict[str, str] = Field(alias="ChallengeResponses")
    session: str | None = Field(default=None, alias="Session")


class AuthenticationResult(_WireModel):
    id_token: str | None = Field(default=None, alias="IdToken")
    access_token: str | None = Field(default=None, alias="AccessToken")
    refresh_token: str | None = Field(default=None, alias="RefreshToken")
    expires_in: int | None = Field(default=None, alias="ExpiresIn")
    token_type: str | None = Field(default=None, alias="TokenType")


class InitiateAuthResponse(_WireModel):
    challenge_name: str | None = Field(default=None, alias="ChallengeName")
    challenge_parameters: dict[str, str] | None = Field(default=None, alias="ChallengeParameters")
    session: str | None = Field(default=None, alias="Session")
    authentication_result: AuthenticationResult | None = Field(
        default=None, alias="AuthenticationResult"
    )


class RespondToAuthChallengeResponse(_WireModel):
    challenge_name: str | None = Field(default=None, alias="ChallengeName")
    session: str | None = Field(default=None, alias="Session")
    authentication_result: AuthenticationResult | None = Field(
        default=None, alias="AuthenticationResult"
    )


def to_wire(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(by_alias=True, exclude_none=True)


# --- Module Notes -----------------------------------------------------------
# Everything optional on the response side: presence checks happen in
# `provider.client`, each with its own error type.
