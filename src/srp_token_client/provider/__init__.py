"""
srp_token_client.provider

Identity provider transport boundary.

Responsibilities:
- Typed wire models for the two provider operations.
- `IdentityProviderClient`: issue the calls and map failures to the error taxonomy.
"""

from srp_token_client.provider.client import IdentityProviderClient

__all__ = ["IdentityProviderClient"]
