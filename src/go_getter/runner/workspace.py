"""Ephemeral Go module workspace shared by all fetches of one run."""
import asyncio
import logging
import shutil
import tempfile
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

from go_getter.runner.process import check_command

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "go-getter-"
PLACEHOLDER_MODULE = "go-getter-temp"


def release_workspace(path: Path) -> None:
    """Remove a workspace directory; failures are logged, not raised."""
    logger.info(f"cleaning up {path}")
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        logger.warning(f"Failed to remove workspace {path}: {e}")


@asynccontextmanager
async def workspace(go_binary: str = "go") -> AsyncIterator[Path]:
    """Create a temp directory initialised as a throwaway Go module.
    
    The directory is removed on every exit path once created, including
    when `go mod init` itself fails.
    
    Raises:
        ExternalToolError: If `go mod init` fails
    """
    path = Path(tempfile.mkdtemp(prefix=WORKSPACE_PREFIX))
    try:
        await check_command([go_binary, "mod", "init", PLACEHOLDER_MODULE], cwd=path)
        logger.debug(f"Initialised workspace {path}")
        yield path
    finally:
        await asyncio.to_thread(release_workspace, path)
