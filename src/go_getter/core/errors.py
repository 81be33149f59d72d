"""Core exception types for go-getter."""
from typing import Optional


class GoGetterError(Exception):
    """Base exception for all go-getter errors."""
    pass


class ManifestIOError(GoGetterError):
    """Raised when a manifest or directory cannot be read."""
    pass


class ManifestParseError(GoGetterError):
    """Raised when a go.mod file has no module declaration."""
    pass


class ExternalToolError(GoGetterError):
    """Raised when git or the go toolchain exits non-zero or cannot start."""

    def __init__(
        self,
        message: str,
        returncode: Optional[int] = None,
        stdout: str = "",
        stderr: str = "",
    ):
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
