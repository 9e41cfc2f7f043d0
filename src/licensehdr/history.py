"""Creation and last edition years of a file from its commit history."""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List

from .clock import Clock
from .errors import ParseError
from .vcs import Vcs

logger = logging.getLogger(__name__)

LOG_FORMAT_ARG = "--format=%at"


@dataclass(frozen=True)
class FileHistory:
    """Years a file was first created and last edited."""

    creation_year: int
    last_edition_year: int


def utc_year(moment: datetime) -> int:
    """Calendar year of ``moment`` in UTC; naive datetimes are taken as UTC."""
    if moment.tzinfo is None:
        return moment.year
    return moment.astimezone(timezone.utc).year


def parse_log_years(log_text: str) -> List[int]:
    """Convert one Unix timestamp per line into UTC years, keeping order."""
    years = []
    for line in log_text.splitlines():
        token = line.strip()
        if not token:
            continue
        if not (token.isascii() and token.isdigit()):
            raise ParseError("log", line, "expected a decimal Unix timestamp")
        years.append(datetime.fromtimestamp(int(token), tz=timezone.utc).year)
    return years


def resolve_history(vcs: Vcs, path: str, clock: Clock) -> FileHistory:
    """Resolve the creation and last edition years of ``path``.

    A file without commits is dated entirely by the clock. A file with a single
    commit was created then and, being part of the change set, is edited now.
    Otherwise the oldest and newest commits give the range.
    """
    years = parse_log_years(vcs.log([LOG_FORMAT_ARG, "--", path]))
    current_year = utc_year(clock.now())

    if not years:
        history = FileHistory(current_year, current_year)
    elif len(years) == 1:
        history = FileHistory(years[0], max(years[0], current_year))
    else:
        history = FileHistory(min(years), max(years))

    logger.debug(
        "Resolved file history",
        extra={
            "path": path,
            "commits": len(years),
            "creation_year": history.creation_year,
            "last_edition_year": history.last_edition_year,
        },
    )
    return history
