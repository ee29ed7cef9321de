"""
exceptions.py

Responsibility: Defines all custom exception classes used across the application.
Does NOT: contain business logic, logging, or HTTP handling.
"""

from __future__ import annotations


class DnsProviderError(Exception):
    """
    Raised by any DNSProvider implementation when a DNS API call fails.

    Includes a human-readable message describing the failure. The sync
    service only distinguishes success from failure, so callers catch this
    base class rather than the concrete subclasses below.
    """


class ProviderTransportError(DnsProviderError):
    """
    Raised when the HTTP request never produced a response (DNS lookup,
    connection, TLS or read failure in the transport).
    """


class ProviderStatusError(DnsProviderError):
    """
    Raised when the provider answers with an HTTP error status.

    The message is the provider's own ``message`` field when the error body
    carries one, so it can be shown to the user verbatim.
    """

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class WireDecodeError(DnsProviderError):
    """
    Raised by the wire codec when a response body cannot be decoded into the
    expected shape. ``field`` names the offending JSON field, if any.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ConfigLoadError(Exception):
    """
    Raised by load_config when the configuration file is missing, unreadable,
    or does not match the expected schema.
    """


class SyncError(Exception):
    """
    Raised by SyncService when any step of a sync run fails.

    The message names the operation and target (domain, record); the
    underlying DnsProviderError is always attached as ``__cause__``.
    """
