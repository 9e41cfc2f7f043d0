"""Discovery of changed files and of their copyright years."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from .changes import (
    parse_committed_changes,
    parse_status_entries,
    parse_uncommitted_changes,
)
from .clock import Clock, SystemClock
from .history import resolve_history
from .vcs import Vcs

logger = logging.getLogger(__name__)


def format_year_range(creation_year: int, last_edition_year: int) -> str:
    """Render ``2017`` or ``2017-2018``."""
    if creation_year == last_edition_year:
        return str(creation_year)
    return f"{creation_year}-{last_edition_year}"


@dataclass(frozen=True)
class FileChange:
    """A file whose license header needs checking."""

    path: str
    creation_year: int
    last_edition_year: int

    @property
    def year_range(self) -> str:
        return format_year_range(self.creation_year, self.last_edition_year)

    def to_dict(self) -> Dict[str, Any]:
        result = asdict(self)
        result["year_range"] = self.year_range
        return result


def get_committed_changes(vcs: Vcs, remote: str, branch: str) -> List[str]:
    """Paths changed by commits ahead of ``remote/branch``."""
    return parse_committed_changes(vcs.diff(["--name-status", f"{remote}/{branch}..HEAD"]))


def get_uncommitted_changes(vcs: Vcs) -> List[str]:
    """Paths changed or untracked in the working tree."""
    return parse_uncommitted_changes(vcs.status(["--porcelain"]))


def merge_paths(*path_lists: Iterable[str]) -> List[str]:
    """Union of the given path lists, in first-seen order."""
    seen = set()
    merged = []
    for paths in path_lists:
        for path in paths:
            if path not in seen:
                seen.add(path)
                merged.append(path)
    return merged


def get_vcs_changes(
    vcs: Vcs,
    remote: str,
    branch: str,
    committed_only: bool = False,
    clock: Optional[Clock] = None,
) -> List[FileChange]:
    """List the files changed since ``remote/branch`` with their year ranges.

    Commits ahead of the baseline come first, then working tree changes unless
    ``committed_only`` is set. A path deleted or renamed away in the working
    tree is dropped even when commits added or modified it. Any version control
    failure is propagated and no partial result is returned.
    """
    clock = clock or SystemClock()

    committed = get_committed_changes(vcs, remote, branch)
    uncommitted: List[str] = []
    if not committed_only:
        status_entries = parse_status_entries(vcs.status(["--porcelain"]))
        deleted = {entry.path for entry in status_entries if entry.is_deletion}
        deleted.update(entry.path_old for entry in status_entries if entry.is_rename)
        committed = [path for path in committed if path not in deleted]
        uncommitted = [
            entry.path
            for entry in status_entries
            if not entry.is_deletion and not entry.is_ignored
        ]

    paths = merge_paths(committed, uncommitted)
    logger.info(
        "Discovered changed files",
        extra={
            "baseline": f"{remote}/{branch}",
            "committed": len(committed),
            "uncommitted": len(uncommitted),
            "unique": len(paths),
        },
    )

    changes = []
    for path in paths:
        history = resolve_history(vcs, path, clock)
        changes.append(
            FileChange(
                path=path,
                creation_year=history.creation_year,
                last_edition_year=history.last_edition_year,
            )
        )
    return changes
