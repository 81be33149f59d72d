"""Runner: subprocess invocation of git and the go toolchain."""
from go_getter.runner.fetch import FetchFailure, FetchOutcome, FetchSuccess, fetch_module
from go_getter.runner.revision import resolve_revision
from go_getter.runner.workspace import workspace
from go_getter.core.errors import ExternalToolError

__all__ = [
    "FetchOutcome",
    "FetchSuccess",
    "FetchFailure",
    "fetch_module",
    "resolve_revision",
    "workspace",
    "ExternalToolError",
]
