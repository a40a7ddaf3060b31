"""
srp_token_client

Top-level package for the SRP token client.

Responsibilities:
- Expose package version metadata.
- Re-export the public façade (`TokenClient`) and its result type.
"""

from srp_token_client.client import TokenClient, TokenClientBuilder
from srp_token_client.models import TokenTriple

__all__ = ["TokenClient", "TokenClientBuilder", "TokenTriple", "__version__"]

__version__ = "0.1.0"


# --- Module Notes -----------------------------------------------------------
# Keep this file minimal to avoid import-time side effects across the codebase.
