"""SendGrid API client wrapper.

Centralized SendGrid v3 client with error handling and authentication.
One ``httpx.AsyncClient`` is shared for the lifetime of the wrapper; call
:meth:`SendGridClientWrapper.close` on shutdown.
"""

from typing import Any

import httpx

from .exceptions import (
    SendGridAPIError,
    SendGridAuthError,
    SendGridNotFoundError,
    SendGridRateLimitError,
)


class SendGridClientWrapper:
    """SendGrid v3 API client.

    Provides:
    - Bearer authentication
    - Error handling and exception mapping
    - Mail send, templates, marketing contacts/lists, single sends,
      validation, stats, senders and suppression groups

    No retries happen here; a failed call raises immediately.
    """

    DEFAULT_BASE_URL = "https://api.sendgrid.com"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize SendGrid client.

        Args:
            api_key: SendGrid API key
            base_url: API root (without the /v3 prefix)
            timeout_seconds: Request timeout
            transport: Optional httpx transport (tests)
        """
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/v3",
            headers=self._get_headers(api_key),
            timeout=timeout_seconds,
            transport=transport,
        )

    def _get_headers(self, api_key: str) -> dict[str, str]:
        """Get request headers with authentication."""
        return {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    def _handle_error(self, response: httpx.Response) -> None:
        """Map SendGrid API errors to custom exceptions."""
        status = response.status_code

        errors: list[dict[str, Any]] = []
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and isinstance(body.get("errors"), list):
            errors = [e if isinstance(e, dict) else {"message": str(e)} for e in body["errors"]]

        if errors:
            detail = ", ".join(str(e.get("message", "")) for e in errors)
        else:
            detail = response.text or response.reason_phrase

        if status in (401, 403):
            raise SendGridAuthError(f"Authentication failed: {detail}", status, errors)
        elif status == 404:
            raise SendGridNotFoundError(f"Resource not found: {detail}", status, errors)
        elif status == 429:
            raise SendGridRateLimitError(f"Rate limit exceeded: {detail}", status, errors)
        else:
            raise SendGridAPIError(f"SendGrid API error ({status}): {detail}", status, errors)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """Send a request and return the decoded JSON body ({} when empty)."""
        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            response = await self._client.request(method, path, params=params or None, json=json)
        except httpx.HTTPError as e:
            raise SendGridAPIError(f"SendGrid request failed: {e}") from e

        if response.status_code >= 400:
            self._handle_error(response)

        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    async def close(self) -> None:
        await self._client.aclose()

    # ========================================================================
    # MAIL SEND
    # ========================================================================

    async def send_mail(self, message: dict[str, Any]) -> dict[str, Any]:
        """Send a message through /mail/send.

        Args:
            message: Mail send payload (personalizations, from, subject, content)

        Returns:
            Accepted status and the X-Message-Id header, if present
        """
        try:
            response = await self._client.post("/mail/send", json=message)
        except httpx.HTTPError as e:
            raise SendGridAPIError(f"SendGrid request failed: {e}") from e

        if response.status_code >= 400:
            self._handle_error(response)

        return {
            "status_code": response.status_code,
            "message_id": response.headers.get("X-Message-Id"),
        }

    # ========================================================================
    # TEMPLATES
    # ========================================================================

    async def list_templates(self, page_size: int = 20, generations: str = "dynamic") -> dict[str, Any]:
        return await self._request(
            "GET", "/templates", params={"generations": generations, "page_size": page_size}
        )

    async def get_template(self, template_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/templates/{template_id}")

    async def create_template(self, name: str, generation: str = "dynamic") -> dict[str, Any]:
        return await self._request("POST", "/templates", json={"name": name, "generation": generation})

    async def create_template_version(self, template_id: str, version: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", f"/templates/{template_id}/versions", json=version)

    async def delete_template(self, template_id: str) -> dict[str, Any]:
        return await self._request("DELETE", f"/templates/{template_id}")

    # ========================================================================
    # MARKETING CONTACTS & LISTS
    # ========================================================================

    async def list_contacts(self) -> dict[str, Any]:
        """Return a sample of up to 50 of the most recent contacts."""
        return await self._request("GET", "/marketing/contacts")

    async def search_contacts(self, query: str) -> dict[str, Any]:
        """Search contacts with an SGQL query."""
        return await self._request("POST", "/marketing/contacts/search", json={"query": query})

    async def upsert_contacts(
        self, contacts: list[dict[str, Any]], list_ids: list[str] | None = None
    ) -> dict[str, Any]:
        """Add or update contacts, optionally adding them to lists (async job)."""
        payload: dict[str, Any] = {"contacts": contacts}
        if list_ids:
            payload["list_ids"] = list_ids
        return await self._request("PUT", "/marketing/contacts", json=payload)

    async def delete_contacts(self, contact_ids: list[str]) -> dict[str, Any]:
        return await self._request("DELETE", "/marketing/contacts", params={"ids": ",".join(contact_ids)})

    async def list_contact_lists(self, page_size: int = 100) -> dict[str, Any]:
        return await self._request("GET", "/marketing/lists", params={"page_size": page_size})

    async def create_contact_list(self, name: str) -> dict[str, Any]:
        return await self._request("POST", "/marketing/lists", json={"name": name})

    async def delete_contact_list(self, list_id: str, delete_contacts: bool = False) -> dict[str, Any]:
        return await self._request(
            "DELETE",
            f"/marketing/lists/{list_id}",
            params={"delete_contacts": "true" if delete_contacts else "false"},
        )

    async def remove_contacts_from_list(self, list_id: str, contact_ids: list[str]) -> dict[str, Any]:
        return await self._request(
            "DELETE",
            f"/marketing/lists/{list_id}/contacts",
            params={"contact_ids": ",".join(contact_ids)},
        )

    # ========================================================================
    # SINGLE SENDS
    # ========================================================================

    async def create_single_send(self, single_send: dict[str, Any]) -> dict[str, Any]:
        return await self._request("POST", "/marketing/singlesends", json=single_send)

    async def schedule_single_send(self, single_send_id: str, send_at: str = "now") -> dict[str, Any]:
        return await self._request(
            "PUT", f"/marketing/singlesends/{single_send_id}/schedule", json={"send_at": send_at}
        )

    async def get_single_send(self, single_send_id: str) -> dict[str, Any]:
        return await self._request("GET", f"/marketing/singlesends/{single_send_id}")

    async def list_single_sends(self, page_size: int = 50) -> dict[str, Any]:
        return await self._request("GET", "/marketing/singlesends", params={"page_size": page_size})

    # ========================================================================
    # VALIDATION, STATS, SENDERS, SUPPRESSIONS
    # ========================================================================

    async def validate_email(self, email: str, source: str | None = None) -> dict[str, Any]:
        payload = {"email": email}
        if source:
            payload["source"] = source
        return await self._request("POST", "/validations/email", json=payload)

    async def get_stats(
        self, start_date: str, end_date: str | None = None, aggregated_by: str | None = None
    ) -> Any:
        return await self._request(
            "GET",
            "/stats",
            params={"start_date": start_date, "end_date": end_date, "aggregated_by": aggregated_by},
        )

    async def list_verified_senders(self) -> dict[str, Any]:
        return await self._request("GET", "/verified_senders")

    async def list_suppression_groups(self) -> Any:
        return await self._request("GET", "/asm/groups")
