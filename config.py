"""
config.py

Responsibility: Loads and validates the JSON configuration file.
Does NOT: talk to the DNS provider or decide which records to change.

Example config.json:

    {
      "api_key": "pk1_...",
      "secret_api_key": "sk1_...",
      "ttl": 300,
      "domains": {"example.com": ["@", "www"]}
    }
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, ValidationError

from exceptions import ConfigLoadError

logger = logging.getLogger(__name__)

DEFAULT_TTL = 300


class SyncConfig(BaseModel):
    """Validated contents of config.json."""

    # Porkbun key pair with API access enabled for every listed domain
    api_key: str
    secret_api_key: str

    # TTL in seconds for newly created records
    ttl: int = Field(default=DEFAULT_TTL, ge=0, le=2**32 - 1)

    # Domain -> labels to keep pointed at our IP; "@" is the zone apex
    domains: dict[str, list[str]]


def load_config(path: str) -> SyncConfig:
    """
    Reads and validates the configuration file at ``path``.

    Args:
        path: Filesystem path to a JSON config file.

    Returns:
        The validated SyncConfig.

    Raises:
        ConfigLoadError: If the file cannot be read or does not match the schema.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigLoadError(f"Failed to read config from {path}") from exc

    try:
        config = SyncConfig.model_validate_json(content)
    except ValidationError as exc:
        raise ConfigLoadError(f"Failed to parse config {path}") from exc

    logger.debug("Loaded config from %s (%d domain(s), ttl=%d)", path, len(config.domains), config.ttl)
    return config
