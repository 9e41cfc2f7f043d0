"""Error definitions and handling for licensehdr."""

from typing import Any, Dict, Optional, Sequence


class LicenseHeaderError(Exception):
    """Base exception for licensehdr errors."""

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ExecutionError(LicenseHeaderError):
    """A version control command could not be run or exited abnormally."""

    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        returncode: Optional[int] = None,
        stderr: Optional[str] = None,
    ):
        super().__init__(
            code="EXECUTION_FAILED",
            message=f"Command '{' '.join(command)}' failed: {reason}",
            details={
                "command": list(command),
                "reason": reason,
                "returncode": returncode,
                "stderr": stderr or "",
            },
        )
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr or ""


class ParseError(LicenseHeaderError):
    """A line of version control output does not have the expected shape."""

    def __init__(self, source: str, line: str, reason: str):
        super().__init__(
            code="PARSE_FAILED",
            message=f"Cannot parse {source} output line {line!r}: {reason}",
            details={"source": source, "line": line, "reason": reason},
        )
        self.source = source
        self.line = line


class ConfigInvalidError(LicenseHeaderError):
    """Invalid configuration."""

    def __init__(self, reason: str):
        super().__init__(
            code="CONFIG_INVALID",
            message=f"Invalid configuration: {reason}",
            details={"reason": reason},
        )
