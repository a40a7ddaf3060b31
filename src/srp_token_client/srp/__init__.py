"""
srp_token_client.srp

Client side of the provider's SRP-6a variant.

Responsibilities:
- Fixed group parameters and hash/KDF helpers (`srp.group`).
- Session state, auth parameters and challenge processing (`srp.authenticator`).
"""

from srp_token_client.srp.authenticator import SrpAuthenticator, SrpSession, secret_hash

__all__ = ["SrpAuthenticator", "SrpSession", "secret_hash"]
