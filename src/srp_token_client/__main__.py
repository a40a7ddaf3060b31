"""
srp_token_client.__main__

Entrypoint for `python -m srp_token_client` / `srp-token-client`.

Responsibilities:
- Load settings and configure logging.
- Authenticate one user via the env-backed credential source.
- Print the token triple as JSON on stdout.
"""

from __future__ import annotations

import argparse
import asyncio
import getpass
import json
import sys
from collections.abc import Sequence

from srp_token_client.client import TokenClient
from srp_token_client.credentials.sources import SettingsCredentialSource
from srp_token_client.errors import TokenClientError
from srp_token_client.observability.logging import configure_logging
from srp_token_client.settings import get_settings


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="srp-token-client",
        description="Authenticate with USER_SRP_AUTH and print id/access/refresh tokens.",
    )
    parser.add_argument("--username", "-u", required=True)
    parser.add_argument(
        "--password",
        "-p",
        help="password (prompted for when omitted)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    password = args.password if args.password is not None else getpass.getpass()
    client = (
        TokenClient.builder()
        .credential_source(SettingsCredentialSource(settings=settings))
        .settings(settings)
        .build()
    )
    try:
        tokens = asyncio.run(client.authenticate(args.username, password))
    except TokenClientError as e:
        print(f"error: {type(e).__name__}: {e}", file=sys.stderr)
        return 1

    json.dump(
        {
            "id_token": tokens.id_token,
            "access_token": tokens.access_token,
            "refresh_token": tokens.refresh_token,
        },
        sys.stdout,
        indent=2,
    )
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
