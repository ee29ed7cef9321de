"""
provider/porkbun_client.py

Responsibility: Implements the DNSProvider protocol using the Porkbun JSON API (v3).
All Porkbun HTTP calls are concentrated here; no other file may call the
Porkbun API directly.
Does NOT: read configuration, decide which records to change, or print reports.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from exceptions import ProviderStatusError, ProviderTransportError, WireDecodeError
from provider import wire_codec
from provider.dns_provider import Record

logger = logging.getLogger(__name__)

PORKBUN_API_BASE = "https://api.porkbun.com/api/json/v3"


class PorkbunClient:
    """
    Implements DNSProvider for the Porkbun DNS API.

    Every endpoint is a POST whose JSON body carries the API credentials next
    to the payload. All requests go through the injected httpx.Client, so the
    class is fully testable without real network calls (use respx.mock).

    Collaborators:
        - httpx.Client: injected HTTP transport; opened and closed by the caller
        - wire_codec: builds request bodies and decodes responses
    """

    def __init__(
        self,
        http_client: httpx.Client,
        api_key: str,
        secret_api_key: str,
        base_url: str = PORKBUN_API_BASE,
    ) -> None:
        """
        Initialises the client with an HTTP client and a Porkbun key pair.

        Args:
            http_client: A long-lived httpx.Client instance.
            api_key: Porkbun API key (``pk1_...``).
            secret_api_key: Porkbun secret API key (``sk1_...``).
            base_url: API root; overridable for tests or a staging endpoint.
        """
        self._client = http_client
        self._api_key = api_key
        self._secret_api_key = secret_api_key
        self._base_url = base_url.rstrip("/")

    # ---------------------------------------------------------------------------
    # DNSProvider implementation
    # ---------------------------------------------------------------------------

    def authenticate(self) -> str:
        """
        Checks the credentials against /ping.

        Returns:
            The caller's public IP address as seen by Porkbun.

        Raises:
            DnsProviderError: If the request fails or the response is malformed.
        """
        payload = self._request("/ping")
        ip_address = wire_codec.decode_ping(payload)
        logger.debug("Porkbun reports public IP %s", ip_address)
        return ip_address

    def list_records(self, domain: str) -> list[Record]:
        """
        Returns all records of ``domain`` in the order Porkbun lists them.

        Raises:
            DnsProviderError: If the request fails or a record cannot be decoded.
        """
        payload = self._request(f"/dns/retrieve/{domain}")
        records = wire_codec.decode_records(payload)
        logger.debug("Retrieved %d record(s) for %s", len(records), domain)
        return records

    def update_record(self, domain: str, record: Record, new_content: str) -> None:
        """
        Rewrites ``record`` with ``new_content``; name, type, ttl and priority
        are sent back unchanged.

        Raises:
            DnsProviderError: If the request fails.
        """
        updated = record.with_content(new_content)
        self._request(f"/dns/edit/{domain}/{record.id}", wire_codec.encode_record(updated))

    def create_record(self, domain: str, record: Record) -> None:
        """
        Creates ``record`` in ``domain``. The id Porkbun assigns is not returned.

        Raises:
            DnsProviderError: If the request fails.
        """
        self._request(f"/dns/create/{domain}", wire_codec.encode_record(record))

    # ---------------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------------

    def _request(self, path: str, payload: dict[str, Any] | None = None) -> dict[str, Any]:
        """
        Sends an authenticated POST to the Porkbun API.

        Args:
            path: Endpoint path below the API root, e.g. "/ping".
            payload: Optional endpoint-specific fields.

        Returns:
            The response payload with the status/message envelope removed.

        Raises:
            ProviderTransportError: If no response was received.
            ProviderStatusError: If Porkbun answered with an HTTP error status.
            WireDecodeError: If the body is not a JSON object or carries a
                non-string message.
        """
        url = f"{self._base_url}{path}"
        body = wire_codec.build_request_body(self._api_key, self._secret_api_key, payload)

        # Credentials stay out of the log
        logger.debug("POST %s payload=%s", url, payload)
        try:
            response = self._client.post(url, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise self._status_error(exc.response) from exc
        except httpx.RequestError as exc:
            raise ProviderTransportError(f"Network error calling Porkbun API (POST {url}): {exc}") from exc

        logger.debug("Response from %s (%d)", url, response.status_code)
        try:
            decoded = response.json()
        except ValueError as exc:
            raise WireDecodeError(f"Failed to deserialize body from {url}: {exc}") from exc

        _, result = wire_codec.split_response_body(decoded)
        return result

    @staticmethod
    def _status_error(response: httpx.Response) -> ProviderStatusError:
        """
        Builds the error for an HTTP error status, preferring Porkbun's own
        message over a generic one.
        """
        message = None
        try:
            message, _ = wire_codec.split_response_body(response.json())
        except (ValueError, WireDecodeError):
            logger.debug("Error body from %s is not a JSON object", response.request.url)

        if message is None:
            message = f"No message provided (status code: {response.status_code})"
        return ProviderStatusError(message, response.status_code)
