"""
main.py

Responsibility: Command-line entry point — wires configuration, the HTTP
client, PorkbunClient and SyncService together for a single run.
Does NOT: contain sync logic or talk to the Porkbun API itself.
"""

from __future__ import annotations

import logging
import sys
from importlib.metadata import PackageNotFoundError, version

import httpx

from config import load_config
from exceptions import ConfigLoadError, SyncError
from logger import setup_logging
from provider.porkbun_client import PorkbunClient
from services.log_service import LogService
from services.sync_service import SyncService

DIST_NAME = "porkbun-ddns"

logger = logging.getLogger(__name__)


def package_version() -> str:
    """Returns the installed distribution's version, or a placeholder when running from a checkout."""
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = package_version()


def main(argv: list[str] | None = None) -> int:
    """
    Runs one sync using the config file named on the command line.

    Args:
        argv: Full argument vector including the program name. Defaults to
            sys.argv.

    Returns:
        The process exit status: 0 on success or usage error, 1 on failure.
    """
    argv = sys.argv if argv is None else argv
    if len(argv) != 2:
        prog = argv[0] if argv else "porkbun-ddns"
        print(f"usage: {prog} <path/to/config.json>", file=sys.stderr)
        return 0

    setup_logging()

    try:
        config = load_config(argv[1])
        with httpx.Client(headers={"User-Agent": f"{DIST_NAME}/{__version__}"}) as http_client:
            provider = PorkbunClient(http_client, config.api_key, config.secret_api_key)
            SyncService(provider, LogService()).run(config.domains, config.ttl)
    except (ConfigLoadError, SyncError) as exc:
        cause = f": {exc.__cause__}" if exc.__cause__ is not None else ""
        logger.error("%s%s", exc, cause)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
