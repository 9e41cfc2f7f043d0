"""Pytest configuration and fixtures for licensehdr tests."""

import os
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Dict, Generator, List, Optional, Sequence, Tuple, Union

import pytest

# 2017-01-01T00:00:00Z
INITIAL_COMMIT_TIMESTAMP = 1483228800


class FakeVcs:
    """Canned-output ``Vcs`` that fails on any call it was not told about."""

    def __init__(self):
        self.responses: Dict[Tuple[str, Tuple[str, ...]], Union[str, Exception]] = {}
        self.calls: List[Tuple[str, Tuple[str, ...]]] = []

    def on(self, operation: str, args: Sequence[str], output: Union[str, Exception]) -> "FakeVcs":
        """Register the output (or error) of ``operation`` for ``args``."""
        self.responses[(operation, tuple(args))] = output
        return self

    def _answer(self, operation: str, args: Sequence[str]) -> str:
        key = (operation, tuple(args))
        self.calls.append(key)
        if key not in self.responses:
            raise AssertionError(f"Unexpected {operation} call with {list(args)}")
        response = self.responses[key]
        if isinstance(response, Exception):
            raise response
        return response

    def diff(self, args: Sequence[str]) -> str:
        return self._answer("diff", args)

    def status(self, args: Sequence[str]) -> str:
        return self._answer("status", args)

    def log(self, args: Sequence[str]) -> str:
        return self._answer("log", args)

    def count(self, operation: str) -> int:
        """Number of calls made to ``operation``."""
        return sum(1 for op, _ in self.calls if op == operation)


@pytest.fixture
def fake_vcs() -> FakeVcs:
    """Create a canned-output version control fake."""
    return FakeVcs()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    temp_path = Path(tempfile.mkdtemp(prefix="licensehdr_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path, ignore_errors=True)


class GitRepoHelper:
    """Helper class for git repository operations in tests."""

    def __init__(self, repo_path: Path):
        self.repo_path = repo_path
        self.env = os.environ.copy()
        self.env.update({
            "GIT_AUTHOR_NAME": "Test User",
            "GIT_AUTHOR_EMAIL": "test@example.com",
            "GIT_COMMITTER_NAME": "Test User",
            "GIT_COMMITTER_EMAIL": "test@example.com",
        })

    def run_git(self, args: List[str], timestamp: Optional[int] = None) -> subprocess.CompletedProcess:
        """Run git command in the repository, optionally dating the commit."""
        env = dict(self.env)
        if timestamp is not None:
            env["GIT_AUTHOR_DATE"] = f"@{timestamp} +0000"
            env["GIT_COMMITTER_DATE"] = f"@{timestamp} +0000"
        return subprocess.run(
            ["git"] + args,
            cwd=self.repo_path,
            env=env,
            check=True,
            capture_output=True,
            text=True,
        )

    def create_file(self, path: str, content: str) -> None:
        """Create a file with content."""
        file_path = self.repo_path / path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content)

    def modify_file(self, path: str, content: str) -> None:
        """Modify an existing file."""
        self.create_file(path, content)

    def delete_file(self, path: str) -> None:
        """Delete a file."""
        file_path = self.repo_path / path
        if file_path.exists():
            file_path.unlink()

    def add_and_commit(self, message: str, timestamp: int, files: list[str] = None) -> str:
        """Add files and create a commit dated ``timestamp``, return commit SHA."""
        if files:
            for file in files:
                self.run_git(["add", file])
        else:
            self.run_git(["add", "-A"])

        self.run_git(["commit", "-m", message], timestamp=timestamp)
        return self.get_current_sha()

    def mark_baseline(self, remote: str = "origin", branch: str = "master") -> None:
        """Point the remote-tracking branch ``remote/branch`` at HEAD."""
        self.run_git(["update-ref", f"refs/remotes/{remote}/{branch}", "HEAD"])

    def get_current_sha(self) -> str:
        """Get current commit SHA."""
        result = self.run_git(["rev-parse", "HEAD"])
        return result.stdout.strip()


@pytest.fixture
def git_repo(temp_dir: Path) -> Generator[Path, None, None]:
    """Create a temporary git repository with one commit dated 2017."""
    repo_path = temp_dir / "test_repo"
    repo_path.mkdir()

    helper = GitRepoHelper(repo_path)
    helper.run_git(["init"])
    helper.run_git(["config", "user.name", "Test User"])
    helper.run_git(["config", "user.email", "test@example.com"])

    helper.create_file("README.md", "# Test Repository\n")
    helper.add_and_commit("Initial commit", INITIAL_COMMIT_TIMESTAMP, ["README.md"])

    yield repo_path


@pytest.fixture
def git_helper(git_repo: Path) -> GitRepoHelper:
    """Create a git repository helper."""
    return GitRepoHelper(git_repo)
