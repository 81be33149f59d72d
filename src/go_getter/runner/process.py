"""Async subprocess helper with explicit working directory."""
import asyncio
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from go_getter.core.errors import ExternalToolError

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Exit status and fully captured output of one process."""

    model_config = ConfigDict(frozen=True)

    args: List[str]
    returncode: int
    stdout: str
    stderr: str


async def run_command(args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
    """Run a command to completion, capturing stdout and stderr.
    
    The process inherits no stdin. A non-zero exit is reported in the
    result, not raised.
    
    Raises:
        ExternalToolError: If the executable cannot be started
    """
    logger.debug(f"Running {' '.join(args)} (cwd={cwd or '.'})")
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            cwd=str(cwd) if cwd is not None else None,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise ExternalToolError(
            f"Failed to start {args[0]}: {e}",
            stderr=str(e),
        ) from e
    
    stdout, stderr = await process.communicate()
    return CommandResult(
        args=list(args),
        returncode=process.returncode,
        stdout=stdout.decode("utf-8", errors="replace"),
        stderr=stderr.decode("utf-8", errors="replace"),
    )


async def check_command(args: Sequence[str], cwd: Optional[Path] = None) -> CommandResult:
    """Like run_command, but a non-zero exit raises ExternalToolError."""
    result = await run_command(args, cwd=cwd)
    if result.returncode != 0:
        raise ExternalToolError(
            f"{' '.join(args)} failed with code {result.returncode}: {result.stderr.strip()}",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result
