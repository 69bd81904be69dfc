"""SendGrid adapter exceptions.

Custom exception hierarchy for SendGrid API errors. Every exception carries
the HTTP status and the ``errors`` list from the response body, if any.
"""

from mailer_tools.errors import ServiceError


class SendGridAPIError(ServiceError):
    """Base exception for SendGrid adapter."""

    pass


class SendGridAuthError(SendGridAPIError):
    """Invalid API key or insufficient scopes (401/403 response)."""

    pass


class SendGridNotFoundError(SendGridAPIError):
    """Resource not found (404 response)."""

    pass


class SendGridRateLimitError(SendGridAPIError):
    """Rate limit exceeded (429 response)."""

    pass


class SendGridValidationError(SendGridAPIError):
    """Invalid input parameters detected before calling SendGrid."""

    pass
