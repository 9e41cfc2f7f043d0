"""Main CLI entry point for licensehdr."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .clock import Clock
from .config import HeaderConfig
from .errors import ConfigInvalidError, LicenseHeaderError
from .header import HeaderWriter
from .logging_utils import configure_logging
from .serialize import ChangeSerializer
from .settings import get_baseline, get_header_file
from .vcs import GitVcs, Vcs
from .versioning import FileChange, get_vcs_changes


def create_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    remote, branch = get_baseline()
    parser = argparse.ArgumentParser(
        prog="licensehdr",
        description="Find changed files and their copyright years, "
        "optionally inserting license headers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  licensehdr
  licensehdr --repo /path/to/repo --remote upstream --branch main --json changes.json
  licensehdr --header-file license-header.txt --include '**/*.py' --include '*.sh'
  licensehdr --committed-only
        """,
    )

    parser.add_argument(
        "--repo",
        default=".",
        help="Top level directory of the git working tree (default: .)",
    )
    parser.add_argument(
        "--remote",
        default=remote,
        help=f"Baseline remote name (default: {remote})",
    )
    parser.add_argument(
        "--branch",
        default=branch,
        help=f"Baseline branch name (default: {branch})",
    )
    parser.add_argument(
        "--committed-only",
        action="store_true",
        help="Ignore the working tree, report only commits ahead of the baseline",
    )
    parser.add_argument(
        "--header-file",
        default=get_header_file(),
        help="Header template; '{year}' is replaced by the year range",
    )
    parser.add_argument(
        "--include",
        action="append",
        default=[],
        help="Glob of files that must carry the header (repeatable)",
    )
    parser.add_argument(
        "--json",
        help="Output JSON to file instead of stdout",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        help="Timeout in seconds for each git command (default: none)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: LICENSEHDR_LOG_LEVEL or LOG_LEVEL env, else INFO)",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command line arguments."""
    if args.timeout is not None and args.timeout <= 0:
        raise ValueError("--timeout must be positive")
    if args.include and not args.header_file:
        raise ValueError("--include requires --header-file")


def create_config(args: argparse.Namespace) -> HeaderConfig:
    """Create configuration from command line arguments."""
    return HeaderConfig(
        repo_path=args.repo,
        remote=args.remote,
        branch=args.branch,
        committed_only=args.committed_only,
        header_file=args.header_file,
        includes=tuple(args.include),
        json_output_path=args.json,
        git_timeout=args.timeout,
    )


def load_template(header_file: str) -> str:
    """Read a header template, without its trailing newlines."""
    try:
        return Path(header_file).read_text(encoding="utf-8").rstrip("\n")
    except OSError as e:
        raise ConfigInvalidError(f"cannot read header file {header_file}: {e}") from e


def collect_notes(
    config: HeaderConfig,
    changes: List[FileChange],
    updated: Optional[List[str]],
) -> List[str]:
    """Collect notes about the processing."""
    notes = []

    if not changes:
        notes.append(f"No changed files since {config.baseline}")

    if config.committed_only:
        notes.append("Working tree changes ignored")

    if updated is not None and len(updated) < len(changes):
        notes.append(
            f"{len(changes) - len(updated)} changed files not updated "
            "(header present or not included)"
        )

    return notes


def process_changes(
    config: HeaderConfig,
    vcs: Optional[Vcs] = None,
    clock: Optional[Clock] = None,
) -> dict:
    """Discover changes, insert headers if configured, return result payload."""
    vcs = vcs or GitVcs(config)
    changes = get_vcs_changes(
        vcs, config.remote, config.branch, config.committed_only, clock=clock
    )

    updated = None
    if config.header_file and config.includes:
        writer = HeaderWriter(
            load_template(config.header_file),
            config.includes,
            root=config.repo_path,
            clock=clock,
        )
        updated = writer.insert(changes)

    serializer = ChangeSerializer(config)
    return serializer.serialize_output(
        changes, updated, collect_notes(config, changes, updated)
    )


def output_result(result: dict, output_path: Optional[str]) -> None:
    """Output result to stdout or file."""
    serializer = ChangeSerializer(HeaderConfig())  # Dummy config for formatting
    json_str = serializer.to_json_string(result)

    if output_path:
        Path(output_path).write_text(json_str, encoding="utf-8")
    else:
        print(json_str)


def main() -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    try:
        configure_logging(args.log_level)

        # Validate arguments
        validate_args(args)

        # Create configuration
        config = create_config(args)

        # Discover changes
        payload = process_changes(config)

        # Create success envelope
        serializer = ChangeSerializer(config)
        result = serializer.create_success_envelope(payload)

        # Output result
        output_result(result, args.json)

        return 0

    except LicenseHeaderError as e:
        # Handle known licensehdr errors
        serializer = ChangeSerializer(HeaderConfig())  # Dummy config
        result = serializer.create_error_envelope(e.code, e.message, e.details)
        output_result(result, args.json)
        return 1

    except Exception as e:
        # Handle unexpected errors
        serializer = ChangeSerializer(HeaderConfig())  # Dummy config
        result = serializer.create_error_envelope(
            "INTERNAL_ERROR",
            f"Internal error: {str(e)}",
            {"type": type(e).__name__}
        )
        output_result(result, args.json)
        return 1


if __name__ == "__main__":
    sys.exit(main())
