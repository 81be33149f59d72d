"""Fetch executor: run `go get <module>@<revision>` inside the workspace."""
import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from go_getter.core.errors import ExternalToolError
from go_getter.modules.manifest import ModuleManifest
from go_getter.runner.process import run_command

logger = logging.getLogger(__name__)

# Exit code reported when the toolchain could not be started at all
SPAWN_FAILURE_EXIT_CODE = 127


class FetchOutcome(BaseModel):
    """Result of fetching one module."""

    module_path: str = Field(..., description="Module that was fetched")
    specifier: str = Field(..., description="module@revision passed to go get")
    stdout: str = Field(default="", description="Captured standard output")
    stderr: str = Field(default="", description="Captured standard error")
    exit_code: int = Field(default=0, description="Process exit status")

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0


class FetchSuccess(FetchOutcome):
    """go get exited with status 0."""


class FetchFailure(FetchOutcome):
    """go get exited non-zero or could not be started."""

    exit_code: int = Field(..., description="Non-zero process exit status")

    @field_validator("exit_code")
    @classmethod
    def validate_nonzero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("a failed fetch cannot have exit code 0")
        return v


async def fetch_module(
    manifest: ModuleManifest,
    revision: str,
    workspace: Path,
    go_binary: str = "go",
    verbose: bool = False,
) -> FetchOutcome:
    """Fetch one module at revision and capture the outcome.
    
    Never raises for toolchain failures so that one module's failure
    does not interrupt its siblings.
    """
    spec = manifest.specifier(revision)
    args = [go_binary, "get"]
    if verbose:
        args.append("-v")
    args.append(spec)
    
    logger.info(f"trying {spec}...")
    try:
        result = await run_command(args, cwd=workspace)
    except ExternalToolError as e:
        return FetchFailure(
            module_path=manifest.module_path,
            specifier=spec,
            stderr=e.stderr or str(e),
            exit_code=SPAWN_FAILURE_EXIT_CODE,
        )
    
    outcome_cls = FetchSuccess if result.returncode == 0 else FetchFailure
    return outcome_cls(
        module_path=manifest.module_path,
        specifier=spec,
        stdout=result.stdout,
        stderr=result.stderr,
        exit_code=result.returncode,
    )
