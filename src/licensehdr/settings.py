"""Application-wide settings and environment loading."""

import logging
import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv

from .errors import ConfigInvalidError

logger = logging.getLogger(__name__)

load_dotenv()
logger.debug("Environment variables loaded from .env if present")

DEFAULT_REMOTE = "origin"
DEFAULT_BRANCH = "master"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8000


@lru_cache(maxsize=1)
def get_baseline() -> tuple[str, str]:
    """Return the baseline remote and branch from environment variables."""
    remote = os.getenv("LICENSEHDR_REMOTE") or DEFAULT_REMOTE
    branch = os.getenv("LICENSEHDR_BRANCH") or DEFAULT_BRANCH
    logger.debug("Baseline resolved", extra={"remote": remote, "branch": branch})
    return remote, branch


@lru_cache(maxsize=1)
def get_header_file() -> Optional[str]:
    """Return the header template path from environment variables."""
    header_file = os.getenv("LICENSEHDR_HEADER_FILE")
    if header_file:
        logger.debug("Header file configured", extra={"header_file": header_file})
        return header_file

    logger.debug("Header file not configured")
    return None


@lru_cache(maxsize=1)
def get_log_level() -> str:
    """Return the log level name, ``LICENSEHDR_LOG_LEVEL`` taking precedence."""
    return os.getenv("LICENSEHDR_LOG_LEVEL") or os.getenv("LOG_LEVEL") or DEFAULT_LOG_LEVEL


@lru_cache(maxsize=1)
def get_api_address() -> tuple[str, int]:
    """Return the host and port the HTTP API binds to."""
    host = os.getenv("LICENSEHDR_API_HOST") or DEFAULT_API_HOST
    raw_port = os.getenv("LICENSEHDR_API_PORT") or str(DEFAULT_API_PORT)
    if not raw_port.isdigit() or not 0 < int(raw_port) < 65536:
        raise ConfigInvalidError(f"LICENSEHDR_API_PORT is not a valid port: {raw_port!r}")
    logger.debug("API address resolved", extra={"host": host, "port": raw_port})
    return host, int(raw_port)
