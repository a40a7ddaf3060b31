"""
srp_token_client.errors

Error taxonomy for the authentication flow.

Responsibilities:
- Give every failure mode of an attempt a distinct, typed exception.
- Carry structured attributes (missing key, provider code) for callers.
"""

from __future__ import annotations


class TokenClientError(Exception):
    """Base class for every error raised by this package."""


class MissingCredentialSource(TokenClientError):
    def __init__(self) -> None:
        super().__init__(
            "TokenClient requires a credential source; call credential_source() before build()"
        )


class CredentialFetchFailed(TokenClientError):
    """
    The credential source could not produce a pool identity.
    The underlying exception (if any) is chained as `__cause__`.
    """


class MissingChallengeField(TokenClientError):
    def __init__(self, key: str) -> None:
        super().__init__(f"challenge parameters missing required field {key!r}")
        self.key = key


class InvalidServerValue(TokenClientError):
    """Server SRP values failed the safety check (B % N == 0 or u == 0)."""

    def __init__(self, detail: str = "server public value B is 0 mod N") -> None:
        super().__init__(detail)


class NoChallenge(TokenClientError):
    def __init__(self, challenge_name: str | None = None) -> None:
        if challenge_name:
            msg = f"expected PASSWORD_VERIFIER challenge, provider returned {challenge_name}"
        else:
            msg = "provider returned no challenge parameters"
        super().__init__(msg)
        self.challenge_name = challenge_name


class NoAuthResult(TokenClientError):
    def __init__(self) -> None:
        super().__init__("provider response carried no AuthenticationResult")


class IncompleteTokens(TokenClientError):
    def __init__(self, missing: tuple[str, ...]) -> None:
        super().__init__(f"authentication result missing tokens: {', '.join(missing)}")
        self.missing = missing


class ProviderError(TokenClientError):
    """
    Provider-reported or transport-level failure.
    Never retried here; retry policy belongs to the caller.
    """

    def __init__(self, code: str, message: str) -> None:
        super().__init__(f"{code}: {message}" if message else code)
        self.code = code
        self.message = message


# --- Module Notes -----------------------------------------------------------
# Every step of `TokenClient.authenticate` raises one of these; nothing is swallowed
# and no partial token triple ever escapes.
