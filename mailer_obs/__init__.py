"""
Mailer Observability Package.

Provides:
- Structured logging (structlog)
- Metrics (Prometheus)
- Request observers for the tool session layer
"""

__all__ = ["logging", "metrics", "observer"]
