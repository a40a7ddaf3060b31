"""
srp_token_client.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Attempt-scoped context propagation for consistent log enrichment.
"""

# Package marker.
