"""
tests/unit/test_config.py

Unit tests for config.py.
Config files are written to pytest's tmp_path.
"""

from __future__ import annotations

import json

import pytest

from config import DEFAULT_TTL, load_config
from exceptions import ConfigLoadError


def _write(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(data if isinstance(data, str) else json.dumps(data), encoding="utf-8")
    return str(path)


def test_load_config_reads_all_fields(tmp_path):
    path = _write(
        tmp_path,
        {
            "api_key": "pk1_abc",
            "secret_api_key": "sk1_def",
            "ttl": 600,
            "domains": {"example.com": ["@", "www"], "example.org": ["@"]},
        },
    )

    config = load_config(path)

    assert config.api_key == "pk1_abc"
    assert config.secret_api_key == "sk1_def"
    assert config.ttl == 600
    assert list(config.domains) == ["example.com", "example.org"]
    assert config.domains["example.com"] == ["@", "www"]


def test_load_config_defaults_ttl(tmp_path):
    path = _write(tmp_path, {"api_key": "pk", "secret_api_key": "sk", "domains": {}})

    assert load_config(path).ttl == DEFAULT_TTL == 300


def test_load_config_missing_file_names_path(tmp_path):
    missing = str(tmp_path / "nope.json")

    with pytest.raises(ConfigLoadError) as exc_info:
        load_config(missing)

    assert f"Failed to read config from {missing}" in str(exc_info.value)


def test_load_config_rejects_invalid_json(tmp_path):
    path = _write(tmp_path, "{not json")

    with pytest.raises(ConfigLoadError, match="Failed to parse config"):
        load_config(path)


def test_load_config_requires_credentials(tmp_path):
    path = _write(tmp_path, {"domains": {"example.com": ["@"]}})

    with pytest.raises(ConfigLoadError) as exc_info:
        load_config(path)

    assert "api_key" in str(exc_info.value.__cause__)


def test_load_config_rejects_negative_ttl(tmp_path):
    path = _write(tmp_path, {"api_key": "pk", "secret_api_key": "sk", "ttl": -1, "domains": {}})

    with pytest.raises(ConfigLoadError):
        load_config(path)
