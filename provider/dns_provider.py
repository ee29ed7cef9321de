"""
provider/dns_provider.py

Responsibility: Defines the DNSProvider Protocol, the Record value object and
the closed RecordType enumeration.
Does NOT: make HTTP calls, encode JSON, or implement any provider logic.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Protocol, runtime_checkable


class RecordType(str, Enum):
    """Record types understood by the Porkbun API. Only A is ever written."""

    A = "A"
    MX = "MX"
    CNAME = "CNAME"
    ALIAS = "ALIAS"
    TXT = "TXT"
    NS = "NS"
    AAAA = "AAAA"
    SRV = "SRV"
    TLSA = "TLSA"
    CAA = "CAA"


# ---------------------------------------------------------------------------
# Value object — stable shape returned by all DNSProvider implementations
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Record:
    """
    Represents a single DNS resource record as known to the provider.

    Instances are rebuilt from every API response and never cached between
    runs. A record that has not been created yet carries id=0.
    """

    # Provider-assigned identifier; 0 until the provider creates the record
    id: int

    # Host label; "" is the zone apex ("@" in configuration)
    name: str

    type: RecordType

    # Record value, e.g. "1.2.3.4" for an A-record
    content: str

    # TTL in seconds
    ttl: int = 300

    # Only meaningful for MX/SRV; 0 otherwise
    priority: int = 0

    def same_slot(self, other: Record) -> bool:
        """True when both records target the same name and type, ignoring id."""
        return self.name == other.name and self.type == other.type

    def with_content(self, content: str) -> Record:
        """Returns a copy of this record with only ``content`` replaced."""
        return replace(self, content=content)


# ---------------------------------------------------------------------------
# Abstract interface — the sync service depends on this, not on PorkbunClient
# ---------------------------------------------------------------------------


@runtime_checkable
class DNSProvider(Protocol):
    """
    Abstract protocol for the four DNS operations a sync run needs.

    Every method is a single blocking request/response exchange and raises
    DnsProviderError on any failure.
    """

    def authenticate(self) -> str:
        """
        Verifies the credentials and returns the caller's public IP address
        as observed by the provider.

        Raises:
            DnsProviderError: If the API call fails.
        """
        ...

    def list_records(self, domain: str) -> list[Record]:
        """
        Returns every record of the zone, in the order the provider sent them.

        Raises:
            DnsProviderError: If the API call fails.
        """
        ...

    def update_record(self, domain: str, record: Record, new_content: str) -> None:
        """
        Rewrites an existing record with new content; other fields are kept.

        Raises:
            DnsProviderError: If the API call fails.
        """
        ...

    def create_record(self, domain: str, record: Record) -> None:
        """
        Creates a new record in the zone. ``record.id`` is ignored.

        Raises:
            DnsProviderError: If the API call fails.
        """
        ...
