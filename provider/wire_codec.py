"""
provider/wire_codec.py

Responsibility: Maps Record objects and request/response envelopes to and
from the Porkbun JSON wire format.
Does NOT: send HTTP requests or decide how errors are reported to the user.

Porkbun transmits every integer (id, ttl, prio) as a decimal string and
flattens the credentials into the request payload and the status/message
pair into the response payload.
"""

from __future__ import annotations

import re
from typing import Any

from exceptions import WireDecodeError
from provider.dns_provider import Record, RecordType

_DIGITS = re.compile(r"[0-9]+")
_U32_MAX = 2**32 - 1

# Top-level keys owned by the envelope rather than the endpoint payload
_CREDENTIAL_KEYS = ("apikey", "secretapikey")
_ENVELOPE_KEYS = ("status", "message")


# ---------------------------------------------------------------------------
# String-encoded integers
# ---------------------------------------------------------------------------


def int_to_wire(value: int) -> str:
    """Renders an unsigned integer as the decimal string Porkbun expects."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"expected an unsigned integer, got {value!r}")
    return str(value)


def int_from_wire(value: Any, field: str) -> int:
    """
    Parses a decimal string sent by Porkbun into an unsigned integer.

    Args:
        value: The raw JSON value.
        field: JSON field name, used in the error message.

    Returns:
        The parsed integer.

    Raises:
        WireDecodeError: If ``value`` is not a string of ASCII digits that
            fits in 32 bits.
    """
    if not isinstance(value, str) or not _DIGITS.fullmatch(value):
        raise WireDecodeError(
            f"invalid value for field `{field}`: expected a decimal string, got {value!r}",
            field=field,
        )
    number = int(value)
    if number > _U32_MAX:
        raise WireDecodeError(f"invalid value for field `{field}`: {value} is out of range", field=field)
    return number


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


def encode_record(record: Record) -> dict[str, str]:
    """
    Serialises a Record into a create/edit payload.

    The id is never part of the payload: it travels in the URL path for
    edits and is assigned by the provider for creates.
    """
    return {
        "name": record.name,
        "type": record.type.value,
        "content": record.content,
        "ttl": int_to_wire(record.ttl),
        "prio": int_to_wire(record.priority),
    }


def decode_record(raw: Any) -> Record:
    """
    Parses one record object from a /dns/retrieve response.

    Unknown keys such as ``notes`` are ignored. ``prio`` may be absent or
    null for types that have no priority, in which case it decodes to 0.

    Raises:
        WireDecodeError: If a required field is missing or malformed.
    """
    if not isinstance(raw, dict):
        raise WireDecodeError(f"expected a record object, got {type(raw).__name__}", field="records")

    record_type = _require(raw, "type")
    try:
        typ = RecordType(record_type)
    except ValueError:
        raise WireDecodeError(f"unknown record type {record_type!r}", field="type") from None

    prio = raw.get("prio")
    return Record(
        id=int_from_wire(_require(raw, "id"), "id"),
        name=_require_str(raw, "name"),
        type=typ,
        content=_require_str(raw, "content"),
        ttl=int_from_wire(_require(raw, "ttl"), "ttl"),
        priority=0 if prio is None else int_from_wire(prio, "prio"),
    )


def decode_records(payload: dict[str, Any]) -> list[Record]:
    """Extracts the ``records`` list of a /dns/retrieve payload, keeping order."""
    records = _require(payload, "records")
    if not isinstance(records, list):
        raise WireDecodeError("field `records` must be a list", field="records")
    return [decode_record(r) for r in records]


def decode_ping(payload: dict[str, Any]) -> str:
    """Extracts the caller's IP address from a /ping payload."""
    return _require_str(payload, "yourIp")


# ---------------------------------------------------------------------------
# Envelopes
# ---------------------------------------------------------------------------


def build_request_body(
    api_key: str,
    secret_api_key: str,
    payload: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Merges the credentials and an optional payload into one flat JSON object.

    Args:
        api_key: Porkbun API key.
        secret_api_key: Porkbun secret API key.
        payload: Endpoint-specific fields, or None for body-less calls.

    Returns:
        A dict with ``apikey``, ``secretapikey`` and the payload fields side
        by side.
    """
    body: dict[str, Any] = {}
    if payload:
        clashing = [k for k in _CREDENTIAL_KEYS if k in payload]
        if clashing:
            raise ValueError(f"payload may not contain credential fields: {clashing}")
        body.update(payload)
    body["apikey"] = api_key
    body["secretapikey"] = secret_api_key
    return body


def split_response_body(body: Any) -> tuple[str | None, dict[str, Any]]:
    """
    Separates the envelope of a decoded response from its payload.

    Returns:
        ``(message, payload)`` where ``message`` is the provider's
        human-readable text (None when absent) and ``payload`` holds every
        field except ``status`` and ``message``.

    Raises:
        WireDecodeError: If the body is not a JSON object or ``message`` is
            present but not a string.
    """
    if not isinstance(body, dict):
        raise WireDecodeError(f"expected a JSON object, got {type(body).__name__}")

    message = body.get("message")
    if message is not None and not isinstance(message, str):
        raise WireDecodeError(f"field `message` must be a string, got {message!r}", field="message")
    payload = {k: v for k, v in body.items() if k not in _ENVELOPE_KEYS}
    return message, payload


def _require(obj: dict[str, Any], field: str) -> Any:
    if field not in obj:
        raise WireDecodeError(f"missing field `{field}`", field=field)
    return obj[field]


def _require_str(obj: dict[str, Any], field: str) -> str:
    value = _require(obj, field)
    if not isinstance(value, str):
        raise WireDecodeError(f"field `{field}` must be a string, got {value!r}", field=field)
    return value
