"""Parsers for git ``diff --name-status`` and ``status --porcelain`` output."""

import re
from dataclasses import dataclass
from typing import List, Optional

from .errors import ParseError

_DIFF_SINGLE_PATH = {"M", "A", "D", "T"}
_DIFF_TWO_PATHS = re.compile(r"^[RC]\d{1,3}$")

_STATUS_CODES = set(" MTADRCU?!")
_RENAME_SEPARATOR = " -> "

_ESCAPES = {"\\": "\\", '"': '"', "t": "\t", "n": "\n", "a": "\a", "b": "\b",
            "f": "\f", "r": "\r", "v": "\v"}


@dataclass(frozen=True)
class RawChangeEntry:
    """A single parsed line of diff or status output."""

    status: str  # M, A, D, T, R<score>, C<score> or a porcelain XY pair
    path: str
    path_old: Optional[str] = None

    @property
    def is_deletion(self) -> bool:
        return "D" in self.status[:2]

    @property
    def is_ignored(self) -> bool:
        return self.status == "!!"

    @property
    def is_rename(self) -> bool:
        return "R" in self.status[:2]


def unquote_path(token: str) -> str:
    """Undo git's C-style quoting of unusual path names."""
    if len(token) < 2 or not (token.startswith('"') and token.endswith('"')):
        return token

    inner = token[1:-1]
    raw = bytearray()
    i = 0
    while i < len(inner):
        ch = inner[i]
        if ch != "\\":
            raw.extend(ch.encode("utf-8"))
            i += 1
            continue
        escape = inner[i + 1:i + 4]
        if re.match(r"^[0-7]{3}$", escape):
            raw.append(int(escape, 8))
            i += 4
        elif escape[:1] in _ESCAPES:
            raw.extend(_ESCAPES[escape[0]].encode("utf-8"))
            i += 2
        else:
            raise ValueError(f"invalid escape in quoted path {token!r}")
    return raw.decode("utf-8", errors="surrogateescape")


def parse_diff_line(line: str) -> RawChangeEntry:
    """Parse a single line from ``git diff --name-status`` output."""
    parts = line.split("\t")
    code = parts[0]

    if code in _DIFF_SINGLE_PATH:
        expected = 2
    elif _DIFF_TWO_PATHS.match(code):
        expected = 3
    else:
        raise ParseError("diff", line, f"unknown status code {code!r}")

    if len(parts) != expected or not all(parts[1:]):
        raise ParseError(
            "diff", line, f"status {code!r} expects {expected - 1} path(s)"
        )

    try:
        paths = [unquote_path(part) for part in parts[1:]]
    except ValueError as e:
        raise ParseError("diff", line, str(e)) from e

    if expected == 3:
        return RawChangeEntry(status=code, path=paths[1], path_old=paths[0])
    return RawChangeEntry(status=code, path=paths[0])


def parse_status_line(line: str) -> RawChangeEntry:
    """Parse a single line from ``git status --porcelain`` output."""
    if len(line) < 4 or line[2] != " ":
        raise ParseError("status", line, "expected 'XY <path>'")

    code = line[:2]
    if not all(ch in _STATUS_CODES for ch in code):
        raise ParseError("status", line, f"unknown status code {code!r}")

    remainder = line[3:]
    path_old = None
    if ("R" in code or "C" in code) and _RENAME_SEPARATOR in remainder:
        path_old, remainder = remainder.split(_RENAME_SEPARATOR, 1)

    try:
        path = unquote_path(remainder)
        if path_old is not None:
            path_old = unquote_path(path_old)
    except ValueError as e:
        raise ParseError("status", line, str(e)) from e

    if not path.strip():
        raise ParseError("status", line, "missing path")
    return RawChangeEntry(status=code, path=path, path_old=path_old)


def parse_diff_entries(diff_text: str) -> List[RawChangeEntry]:
    """Parse every non-blank line of diff output, in order."""
    return [parse_diff_line(line) for line in diff_text.splitlines() if line.strip()]


def parse_status_entries(status_text: str) -> List[RawChangeEntry]:
    """Parse every non-blank line of porcelain status output, in order."""
    return [
        parse_status_line(line) for line in status_text.splitlines() if line.strip()
    ]


def parse_committed_changes(diff_text: str) -> List[str]:
    """Paths of files added, modified or renamed by commits, deletions excluded."""
    return [
        entry.path for entry in parse_diff_entries(diff_text) if not entry.is_deletion
    ]


def parse_uncommitted_changes(status_text: str) -> List[str]:
    """Paths of files changed or untracked in the working tree, deletions excluded."""
    return [
        entry.path
        for entry in parse_status_entries(status_text)
        if not entry.is_deletion and not entry.is_ignored
    ]
