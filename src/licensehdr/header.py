"""Insertion of license headers into matched files."""

import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from .clock import Clock, SystemClock
from .history import utc_year
from .versioning import FileChange, format_year_range

logger = logging.getLogger(__name__)

YEAR_PLACEHOLDER = "{year}"


class HeaderWriter:
    """Prepends a rendered header template to files lacking it."""

    def __init__(
        self,
        template: str,
        includes: Sequence[str],
        root: Union[str, Path] = ".",
        clock: Optional[Clock] = None,
    ):
        """Initialize with the header template and include glob patterns."""
        self.template = template
        self.includes = list(includes)
        self.root = Path(root)
        self.clock = clock or SystemClock()

    def expand_includes(self) -> List[str]:
        """Root-relative POSIX paths of the files matched by the include patterns."""
        matches = set()
        for pattern in self.includes:
            for match in self.root.glob(pattern):
                if match.is_file():
                    matches.add(match.relative_to(self.root).as_posix())
        return sorted(matches)

    def render(self, change: Optional[FileChange] = None) -> str:
        """Header text for ``change``, or dated with the current year."""
        if change is None:
            year = utc_year(self.clock.now())
            years = format_year_range(year, year)
        else:
            years = change.year_range
        return self.template.replace(YEAR_PLACEHOLDER, years)

    def insert(self, changes: Optional[Iterable[FileChange]] = None) -> List[str]:
        """Insert the header where missing, returning the rewritten paths.

        When ``changes`` is given only the matched files it names are
        considered, and each is dated with its own year range.
        """
        by_path: Optional[Dict[str, FileChange]] = None
        if changes is not None:
            by_path = {change.path: change for change in changes}

        updated = []
        for path in self.expand_includes():
            if by_path is not None and path not in by_path:
                continue

            header = self.render(by_path[path] if by_path is not None else None)
            file_path = self.root / path
            contents = file_path.read_bytes()
            if contents.startswith(header.encode("utf-8")):
                logger.debug("Header already present", extra={"path": path})
                continue

            file_path.write_bytes(header.encode("utf-8") + b"\n" + contents)
            updated.append(path)
            logger.info("Inserted header", extra={"path": path})

        return updated
