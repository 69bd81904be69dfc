"""
Mailer Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from mailer_config.settings import Settings

__all__ = ["Settings"]
