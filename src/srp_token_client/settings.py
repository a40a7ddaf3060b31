"""
srp_token_client.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the client and CLI.
- Hide secrets from repr/logging (e.g., app client secret).
- Offer a cached settings instance for process wiring.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `SRP_CLIENT_`).
    Defaults target the public Cognito endpoint for `region`.
    """

    model_config = SettingsConfigDict(env_prefix="SRP_CLIENT_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "srp-token-client"
    log_level: str = "INFO"

    # Provider endpoint
    region: str = "us-east-1"
    endpoint_url: str | None = None
    # None leaves timeouts to the caller (no timeout imposed by the client).
    http_timeout_seconds: float | None = None

    # Pool identity (consumed by `SettingsCredentialSource`)
    user_pool_id: str | None = None
    client_id: str | None = None
    client_secret: str | None = Field(default=None, repr=False)

    @property
    def provider_base_url(self) -> str:
        if self.endpoint_url:
            return self.endpoint_url.rstrip("/")
        return f"https://cognito-idp.{self.region}.amazonaws.com"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars on every CLI/client construction.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Pool identifiers live here only for the env-backed credential source; embedders
# usually inject their own `CredentialSource` and leave these unset.
