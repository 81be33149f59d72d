"""go-getter CLI - verify every Go module in a repository is fetchable at HEAD."""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Tuple

import click

from go_getter.config import RunConfig
from go_getter.core.errors import GoGetterError
from go_getter.orchestrator import render_report, verify_modules

# Every diagnostic carries the fixed tag
logging.basicConfig(
    level=logging.INFO,
    format="[go-getter] %(message)s",
)
logger = logging.getLogger("go_getter")


@click.command()
@click.argument(
    "module_dirs",
    nargs=-1,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--repo-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=Path("."),
    help="Repository to verify (default: current directory)",
)
@click.option(
    "--go",
    "go_binary",
    default="go",
    help="Go toolchain executable (default: go)",
)
@click.option(
    "--git",
    "git_binary",
    default="git",
    help="git executable (default: git)",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Pass -v to go get and show debug logging",
)
def main(
    module_dirs: Tuple[Path, ...],
    repo_root: Path,
    go_binary: str,
    git_binary: str,
    verbose: bool,
):
    """Fetch every module of the repository at its current commit.
    
    With no MODULE_DIRS the whole tree is scanned for go.mod files.
    Otherwise each MODULE_DIR (relative to --repo-root) must hold a go.mod.
    Every fetch runs in one throwaway module created under the OS temp dir.
    
    Examples:
        go-getter
        go-getter exp/gctuner hash/wyhash
    
    Exit codes:
        0: All modules fetched, or no modules found
        1: A fetch failed, or the run could not be set up
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    
    config = RunConfig(
        repo_root=repo_root,
        module_dirs=list(module_dirs),
        go_binary=go_binary,
        git_binary=git_binary,
        verbose=verbose,
    )
    
    try:
        report = asyncio.run(verify_modules(config))
    except GoGetterError as e:
        logger.error(f"Setup failed: {str(e)}")
        sys.exit(1)
    
    render_report(report)
    sys.exit(1 if report.failed else 0)


if __name__ == "__main__":
    main()
