"""
services/sync_service.py

Responsibility: Orchestrates a DDNS sync run. Fetches the public IP once,
compares it against each configured A-record and creates or updates records
that do not match.
Does NOT: make HTTP calls directly or load configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from enum import Enum

from exceptions import DnsProviderError, SyncError
from provider.dns_provider import DNSProvider, Record, RecordType
from services.log_service import LogService

logger = logging.getLogger(__name__)

APEX_LABEL = "@"


class SyncStatus(str, Enum):
    """Terminal state of one (domain, label) pair after a successful run."""

    UP_TO_DATE = "up_to_date"
    UPDATED = "updated"
    CREATED = "created"


@dataclass(frozen=True)
class RecordResult:
    """Outcome for one configured (domain, label) pair."""

    domain: str
    label: str
    status: SyncStatus

    # Id of the matched record; 0 for records created in this run
    record_id: int = 0


def match_target(domain: str, label: str) -> str:
    """
    Returns the record name to look for among the zone's existing records.

    Porkbun lists apex records under the domain's own name, so "@" is
    compared against ``domain``; any other label is compared as written.
    """
    return domain if label == APEX_LABEL else label


def record_name(label: str) -> str:
    """Returns the name to submit when creating a record ("" for the apex)."""
    return "" if label == APEX_LABEL else label


def find_record(records: Iterable[Record], name: str) -> Record | None:
    """Returns the first A-record called ``name``, in provider order."""
    wanted = Record(id=0, name=name, type=RecordType.A, content="")
    for record in records:
        if record.same_slot(wanted):
            return record
    return None


class SyncService:
    """
    Drives the configured A-records towards the caller's current public IP.

    Runs are strictly sequential: authenticate once, then one list call per
    domain followed by at most one write per label. The first failure stops
    the run and is raised as SyncError with the failed operation in its
    message.

    Collaborators:
        - DNSProvider: abstract interface satisfied by PorkbunClient
        - LogService: prints one report line per record and a summary
    """

    def __init__(self, dns_provider: DNSProvider, log_service: LogService) -> None:
        """
        Initialises the service with its collaborators.

        Args:
            dns_provider: Any DNSProvider implementation (e.g. PorkbunClient).
            log_service: Console activity report for the run.
        """
        self._provider = dns_provider
        self._log = log_service

    # ---------------------------------------------------------------------------
    # Public API
    # ---------------------------------------------------------------------------

    def run(self, domains: Mapping[str, list[str]], ttl: int) -> list[RecordResult]:
        """
        Runs a single sync over every configured domain and label.

        Args:
            domains: Mapping of domain to labels, e.g. {"example.com": ["@", "www"]}.
            ttl: TTL in seconds for records created by this run.

        Returns:
            One RecordResult per (domain, label), in configuration order.

        Raises:
            SyncError: On the first failed provider call. Nothing after the
                failing call is attempted.
        """
        try:
            ip_address = self._provider.authenticate()
        except DnsProviderError as exc:
            raise SyncError("Failed to authenticate with Porkbun") from exc

        logger.info("Sync started — current IP: %s", ip_address)

        results: list[RecordResult] = []
        for domain, labels in domains.items():
            results.extend(self._sync_domain(domain, labels, ip_address, ttl))

        self._log_summary(results)
        return results

    # ---------------------------------------------------------------------------
    # Internal helpers
    # ---------------------------------------------------------------------------

    def _sync_domain(
        self,
        domain: str,
        labels: list[str],
        ip_address: str,
        ttl: int,
    ) -> list[RecordResult]:
        """Fetches the zone once and reconciles every label against it."""
        try:
            current = self._provider.list_records(domain)
        except DnsProviderError as exc:
            raise SyncError(f"Failed to get current records for {domain}") from exc

        return [self._sync_label(domain, label, current, ip_address, ttl) for label in labels]

    def _sync_label(
        self,
        domain: str,
        label: str,
        current: list[Record],
        ip_address: str,
        ttl: int,
    ) -> RecordResult:
        existing = find_record(current, match_target(domain, label))

        if existing is not None:
            self._log.log(f"Existing record found for {label} on {domain}: {existing.id}")

            if existing.content == ip_address:
                self._log.log(f"{label} on {domain} is already up to date ({ip_address}).")
                return RecordResult(domain, label, SyncStatus.UP_TO_DATE, existing.id)

            self._log.log(
                f"{label} on {domain} needs updating — {existing.content} → {ip_address}.",
            )
            try:
                self._provider.update_record(domain, existing, ip_address)
            except DnsProviderError as exc:
                raise SyncError(f"Failed to update record {existing.id} on domain {domain}") from exc
            return RecordResult(domain, label, SyncStatus.UPDATED, existing.id)

        self._log.log(f"Creating new record for {label} on {domain} → {ip_address}.")
        new_record = Record(
            id=0,
            name=record_name(label),
            type=RecordType.A,
            content=ip_address,
            ttl=ttl,
            priority=0,
        )
        try:
            self._provider.create_record(domain, new_record)
        except DnsProviderError as exc:
            raise SyncError(f"Failed to create record for {label} on {domain}") from exc
        return RecordResult(domain, label, SyncStatus.CREATED)

    def _log_summary(self, results: list[RecordResult]) -> None:
        """Logs a compact count of outcomes for the whole run."""
        counts = {status: 0 for status in SyncStatus}
        for result in results:
            counts[result.status] += 1

        summary_parts = [f"{len(results)} record(s) checked"]
        if counts[SyncStatus.UPDATED]:
            summary_parts.append(f"{counts[SyncStatus.UPDATED]} updated")
        if counts[SyncStatus.CREATED]:
            summary_parts.append(f"{counts[SyncStatus.CREATED]} created")
        self._log.log("Sync finished: " + ", ".join(summary_parts) + ".")
