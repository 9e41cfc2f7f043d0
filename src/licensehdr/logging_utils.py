"""Logging setup shared by the licensehdr CLI and API."""

import logging
import sys
from typing import Optional

from .errors import ConfigInvalidError
from .settings import get_log_level

PACKAGE_LOGGER = "licensehdr"

_LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def resolve_log_level(level: Optional[str] = None) -> int:
    """Numeric level for ``level``, falling back to the configured one."""
    name = (level or get_log_level()).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        raise ConfigInvalidError(f"unknown log level {name!r}")
    return value


def configure_logging(level: Optional[str] = None) -> None:
    """Send licensehdr logs to stderr, leaving stdout to the JSON envelope.

    A handler is only installed when the root logger has none; repeated calls
    just adjust the package level.
    """
    log_level = resolve_log_level(level)

    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(log_level)
