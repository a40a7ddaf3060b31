"""
tests.support

Provider test double shared by the test modules.

Responsibilities:
- `FakeCognito`: an `httpx.MockTransport` handler that plays the server side of
  USER_SRP_AUTH with real SRP verification against a stored salt/verifier.
"""

from __future__ import annotations

import base64
import hashlib
import hmac
import json
import secrets
from dataclasses import dataclass, field
from typing import Any

import httpx

from srp_token_client.srp import group
from srp_token_client.srp.authenticator import secret_hash

POOL_ID = "us-east-1_ABC123"
CLIENT_ID = "client123"
SHARED_SECRET = "s3cr3t"
BASE_URL = "http://cognito.test"

PRESET_TOKENS = {
    "IdToken": "id-token-alice",
    "AccessToken": "access-token-alice",
    "RefreshToken": "refresh-token-alice",
}


@dataclass
class _Pending:
    username: str
    big_a: int
    small_b: int
    big_b: int


@dataclass
class FakeCognito:
    pool_id: str = POOL_ID
    client_id: str = CLIENT_ID
    client_secret: str | None = SHARED_SECRET
    salt_hex: str = "8f1e2d3c4b5a69788796a5b4c3d2e1f0"
    users: dict[str, int] = field(default_factory=dict)  # username -> verifier
    auth_result: dict[str, Any] | None = field(default_factory=lambda: dict(PRESET_TOKENS))
    initiate_override: dict[str, Any] | None = None
    requests: list[tuple[str, dict[str, Any]]] = field(default_factory=list)
    _pending: dict[str, _Pending] = field(default_factory=dict)

    @property
    def pool_suffix(self) -> str:
        return self.pool_id.split("_", 1)[1]

    def add_user(self, username: str, password: str) -> None:
        x = group.compute_x(
            pool_suffix=self.pool_suffix,
            user_id=username,
            password=password,
            salt_hex=self.salt_hex,
        )
        self.users[username] = pow(group.G, x, group.N)

    def http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler), base_url=BASE_URL)

    def handler(self, request: httpx.Request) -> httpx.Response:
        target = request.headers["X-Amz-Target"].rsplit(".", 1)[-1]
        body = json.loads(request.content)
        self.requests.append((target, body))
        if target == "InitiateAuth":
            return self._initiate(body)
        if target == "RespondToAuthChallenge":
            return self._respond(body)
        return _error(400, "UnknownOperationException", target)

    def _check_secret_hash(self, username: str, given: str | None) -> bool:
        if self.client_secret is None:
            return True
        expected = secret_hash(
            username=username, client_id=self.client_id, shared_secret=self.client_secret
        )
        return given == expected

    def _initiate(self, body: dict[str, Any]) -> httpx.Response:
        if self.initiate_override is not None:
            return httpx.Response(200, json=self.initiate_override)
        if body.get("AuthFlow") != "USER_SRP_AUTH" or body.get("ClientId") != self.client_id:
            return _error(400, "InvalidParameterException", "bad flow or client")

        params = body["AuthParameters"]
        username = params["USERNAME"]
        if not self._check_secret_hash(username, params.get("SECRET_HASH")):
            return _error(400, "NotAuthorizedException", "Unable to verify secret hash for client")
        verifier = self.users.get(username)
        if verifier is None:
            return _error(400, "UserNotFoundException", "User does not exist.")

        small_b = int.from_bytes(secrets.token_bytes(128), "big") % group.N
        big_b = (group.K * verifier + pow(group.G, small_b, group.N)) % group.N
        secret_block = base64.standard_b64encode(secrets.token_bytes(64)).decode()
        self._pending[secret_block] = _Pending(
            username=username, big_a=int(params["SRP_A"], 16), small_b=small_b, big_b=big_b
        )
        return httpx.Response(
            200,
            json={
                "ChallengeName": "PASSWORD_VERIFIER",
                "ChallengeParameters": {
                    "SALT": self.salt_hex,
                    "SRP_B": group.to_hex(big_b),
                    "SECRET_BLOCK": secret_block,
                    "USER_ID_FOR_SRP": username,
                    "USERNAME": username,
                },
            },
        )

    def _respond(self, body: dict[str, Any]) -> httpx.Response:
        if body.get("ChallengeName") != "PASSWORD_VERIFIER":
            return _error(400, "InvalidParameterException", "unexpected challenge")
        resp = body["ChallengeResponses"]
        pending = self._pending.pop(resp["PASSWORD_CLAIM_SECRET_BLOCK"], None)
        if pending is None or resp["USERNAME"] != pending.username:
            return _error(400, "NotAuthorizedException", "Invalid session for the user.")
        if not self._check_secret_hash(pending.username, resp.get("SECRET_HASH")):
            return _error(400, "NotAuthorizedException", "Unable to verify secret hash for client")

        verifier = self.users[pending.username]
        u = group.compute_u(pending.big_a, pending.big_b)
        premaster = pow(pending.big_a * pow(verifier, u, group.N), pending.small_b, group.N)
        key = group.derive_session_key(premaster, u)
        message = (
            self.pool_suffix.encode()
            + pending.username.encode()
            + base64.standard_b64decode(resp["PASSWORD_CLAIM_SECRET_BLOCK"])
            + resp["TIMESTAMP"].encode()
        )
        expected = base64.standard_b64encode(
            hmac.new(key, message, hashlib.sha256).digest()
        ).decode()
        if not hmac.compare_digest(expected, resp["PASSWORD_CLAIM_SIGNATURE"]):
            return _error(400, "NotAuthorizedException", "Incorrect username or password.")

        payload: dict[str, Any] = {"ChallengeParameters": {}}
        if self.auth_result is not None:
            payload["AuthenticationResult"] = {
                **self.auth_result,
                "ExpiresIn": 3600,
                "TokenType": "Bearer",
            }
        return httpx.Response(200, json=payload)


def _error(status: int, code: str, message: str) -> httpx.Response:
    return httpx.Response(status, json={"__type": code, "message": message})


# --- Module Notes -----------------------------------------------------------
# The fake verifies proofs with the server-side SRP equation S = (A * v^u)^b, so a
# passing end-to-end test means the client math agrees with an honest server.
