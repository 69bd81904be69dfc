"""
Application Settings (Pydantic Settings).

Loads configuration from environment variables (.env file or system env).

Secrets:
- Local: .env file (gitignored)
- Production: inject SENDGRID_API_KEY from the secret store at deploy time
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    SENDGRID_API_KEY is the only value without a usable default; the
    server refuses to start without it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars
    )

    # ========================================================================
    # SENDGRID
    # ========================================================================
    SENDGRID_API_KEY: str = Field(default="", description="SendGrid API key (Bearer token)")
    SENDGRID_API_BASE_URL: str = Field(default="https://api.sendgrid.com")
    SENDGRID_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0, description="HTTP timeout for SendGrid calls")

    # ========================================================================
    # MCP SERVER
    # ========================================================================
    SERVER_NAME: str = Field(default="sendgrid-mcp-server")
    SERVER_VERSION: str = Field(default="0.2.0")
    MCP_SSE_PATH: str = Field(default="/mcp/sse", description="GET endpoint opening the event stream")
    MCP_MESSAGE_PATH: str = Field(default="/mcp/message/", description="POST endpoint for client messages")

    # ========================================================================
    # API SERVER
    # ========================================================================
    API_HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)

    # ========================================================================
    # LOGGING
    # ========================================================================
    LOG_LEVEL: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    LOG_FORMAT: str = Field(default="json", pattern="^(json|text)$")

    # ========================================================================
    # DEPLOYMENT
    # ========================================================================
    ENVIRONMENT: str = Field(
        default="development", pattern="^(development|staging|production)$"
    )
