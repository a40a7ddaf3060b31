"""
srp_token_client.srp.authenticator

Client side of the USER_SRP_AUTH / PASSWORD_VERIFIER exchange.

Responsibilities:
- Start a per-attempt `SrpSession` (fresh private exponent `a`, public value `A`).
- Build the initiate-auth parameters (USERNAME, SRP_A, SECRET_HASH).
- Turn the provider's challenge into the PASSWORD_VERIFIER responses.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import re
import secrets
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime

from srp_token_client.errors import InvalidServerValue, MissingChallengeField, ProviderError
from srp_token_client.srp import group

# Checked in this order; the first absent key is reported.
REQUIRED_CHALLENGE_KEYS = ("SALT", "SRP_B", "SECRET_BLOCK", "USER_ID_FOR_SRP")

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# Plain hex digits only; int(v, 16) would also take "0x", "_" and whitespace.
_HEX_RE = re.compile(r"[0-9a-fA-F]+")


def secret_hash(*, username: str, client_id: str, shared_secret: str) -> str:
    """Base64(HMAC-SHA256(key=shared_secret, msg=username + client_id))."""
    digest = hmac.new(
        shared_secret.encode(), (username + client_id).encode(), hashlib.sha256
    ).digest()
    return base64.standard_b64encode(digest).decode()


def format_timestamp(now: datetime) -> str:
    # e.g. "Tue Oct 7 09:05:03 UTC 2026": unpadded day, English names regardless of locale.
    now = now.astimezone(UTC)
    return (
        f"{_WEEKDAYS[now.weekday()]} {_MONTHS[now.month - 1]} {now.day} "
        f"{now:%H:%M:%S} UTC {now.year}"
    )


@dataclass(slots=True)
class SrpSession:
    """
    Ephemeral state of one authentication attempt. Never reused or persisted.
    """

    username: str
    password: str = field(repr=False)
    pool_id: str
    client_id: str
    shared_secret: str | None = field(repr=False)
    small_a: int = field(repr=False)
    large_a: int = field(repr=False)
    session_key: bytes | None = field(default=None, repr=False)

    @property
    def pool_suffix(self) -> str:
        return self.pool_id.split("_", 1)[1] if "_" in self.pool_id else self.pool_id

    @property
    def srp_a(self) -> str:
        return group.to_hex(self.large_a)


class SrpAuthenticator:
    """
    Stateless; all per-attempt state lives in the returned `SrpSession`,
    so one instance can serve concurrent attempts.
    """

    def __init__(
        self,
        *,
        randbytes: Callable[[int], bytes] = secrets.token_bytes,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._randbytes = randbytes
        self._clock = clock or (lambda: datetime.now(tz=UTC))

    def _generate_private(self) -> tuple[int, int]:
        while True:
            small_a = int.from_bytes(self._randbytes(128), "big") % group.N
            if small_a == 0:
                continue
            large_a = pow(group.G, small_a, group.N)
            if large_a % group.N != 0:
                return small_a, large_a

    def begin(
        self,
        username: str,
        password: str,
        pool_id: str,
        client_id: str,
        shared_secret: str | None,
    ) -> SrpSession:
        small_a, large_a = self._generate_private()
        return SrpSession(
            username=username,
            password=password,
            pool_id=pool_id,
            client_id=client_id,
            shared_secret=shared_secret or None,
            small_a=small_a,
            large_a=large_a,
        )

    def auth_params(self, session: SrpSession) -> dict[str, str]:
        params = {"USERNAME": session.username, "SRP_A": session.srp_a}
        if session.shared_secret:
            params["SECRET_HASH"] = secret_hash(
                username=session.username,
                client_id=session.client_id,
                shared_secret=session.shared_secret,
            )
        return params

    def process_challenge(
        self, session: SrpSession, challenge_params: Mapping[str, str]
    ) -> dict[str, str]:
        """
        Compute the PASSWORD_VERIFIER responses for `challenge_params`.

        Raises:
            MissingChallengeField: a required key is absent (nothing is computed).
            InvalidServerValue: B % N == 0 or u == 0.
            ProviderError: SALT/SRP_B not hex or SECRET_BLOCK not Base64.
        """
        for key in REQUIRED_CHALLENGE_KEYS:
            if not challenge_params.get(key):
                raise MissingChallengeField(key)

        salt_hex = challenge_params["SALT"]
        secret_block_b64 = challenge_params["SECRET_BLOCK"]
        user_id = challenge_params["USER_ID_FOR_SRP"]
        # The server echoes the canonical username; fall back to the SRP user id.
        username = challenge_params.get("USERNAME") or user_id

        for key in ("SALT", "SRP_B"):
            if not _HEX_RE.fullmatch(challenge_params[key]):
                raise ProviderError("InvalidChallenge", f"{key} is not a hex string")
        big_b = int(challenge_params["SRP_B"], 16)
        try:
            secret_block = base64.b64decode(secret_block_b64, validate=True)
        except binascii.Error as e:
            raise ProviderError("InvalidChallenge", f"SECRET_BLOCK is not Base64: {e}") from e

        if big_b % group.N == 0:
            raise InvalidServerValue()
        u = group.compute_u(session.large_a, big_b)
        if u == 0:
            raise InvalidServerValue("scrambling parameter u is 0")

        x = group.compute_x(
            pool_suffix=session.pool_suffix,
            user_id=user_id,
            password=session.password,
            salt_hex=salt_hex,
        )
        base = (big_b - group.K * pow(group.G, x, group.N)) % group.N
        premaster = pow(base, session.small_a + u * x, group.N)
        session.session_key = group.derive_session_key(premaster, u)

        timestamp = format_timestamp(self._clock())
        message = (
            session.pool_suffix.encode()
            + user_id.encode()
            + secret_block
            + timestamp.encode()
        )
        signature = hmac.new(session.session_key, message, hashlib.sha256).digest()

        responses = {
            "TIMESTAMP": timestamp,
            "USERNAME": username,
            "PASSWORD_CLAIM_SECRET_BLOCK": secret_block_b64,
            "PASSWORD_CLAIM_SIGNATURE": base64.standard_b64encode(signature).decode(),
        }
        if session.shared_secret:
            responses["SECRET_HASH"] = secret_hash(
                username=username,
                client_id=session.client_id,
                shared_secret=session.shared_secret,
            )
        return responses


# --- Module Notes -----------------------------------------------------------
# Group constants and hash/KDF primitives live in `srp.group`; this module only
# sequences them into the two protocol steps.
