"""
tests/unit/test_dns_provider.py

Unit tests for the Record value object and the DNSProvider protocol.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx

from provider.dns_provider import DNSProvider, Record, RecordType
from provider.porkbun_client import PorkbunClient


def test_same_slot_ignores_id_and_content():
    existing = Record(id=5, name="www", type=RecordType.A, content="1.1.1.1")
    desired = Record(id=0, name="www", type=RecordType.A, content="2.2.2.2", ttl=60)

    assert existing.same_slot(desired)


def test_same_slot_requires_matching_type():
    a = Record(id=5, name="www", type=RecordType.A, content="1.1.1.1")
    aaaa = Record(id=6, name="www", type=RecordType.AAAA, content="::1")

    assert not a.same_slot(aaaa)


def test_with_content_replaces_only_content():
    record = Record(id=9, name="www", type=RecordType.A, content="1.1.1.1", ttl=600, priority=0)

    updated = record.with_content("1.1.1.2")

    assert updated == Record(id=9, name="www", type=RecordType.A, content="1.1.1.2", ttl=600, priority=0)
    assert record.content == "1.1.1.1"


def test_record_type_values_are_exact_names():
    assert [t.value for t in RecordType] == [t.name for t in RecordType]


def test_porkbun_client_satisfies_protocol():
    client = PorkbunClient(MagicMock(spec=httpx.Client), "pk", "sk")
    assert isinstance(client, DNSProvider)
