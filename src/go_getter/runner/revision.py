"""Revision resolver: the commit checked out in the repository."""
import logging
import re
from pathlib import Path

from go_getter.core.errors import ExternalToolError
from go_getter.runner.process import check_command

logger = logging.getLogger(__name__)

# SHA-1 or SHA-256 object name, possibly abbreviated
_REVISION_RE = re.compile(r"^[0-9a-f]{7,64}$")


async def resolve_revision(repo_root: Path, git_binary: str = "git") -> str:
    """Resolve HEAD of repo_root to its commit SHA.
    
    Args:
        repo_root: Repository working tree
        git_binary: git executable to invoke
    
    Returns:
        Commit SHA with surrounding whitespace removed
    
    Raises:
        ExternalToolError: If git fails (message includes its stderr) or
            prints something that is not a commit SHA
    """
    result = await check_command([git_binary, "-C", str(repo_root), "rev-parse", "HEAD"])
    revision = result.stdout.strip()
    
    if not _REVISION_RE.match(revision.lower()):
        raise ExternalToolError(
            f"git rev-parse HEAD returned an invalid commit: '{revision}'",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    
    logger.info(f"Resolved HEAD → {revision[:12]}")
    return revision
