"""Orchestrator: resolve inputs, fan out fetches, aggregate outcomes."""
import asyncio
import logging
from enum import Enum
from typing import List

import click
from pydantic import BaseModel, Field

from go_getter.config import RunConfig
from go_getter.modules import ModuleManifest, discover_modules, modules_from_dirs
from go_getter.runner import FetchOutcome, fetch_module, resolve_revision, workspace

logger = logging.getLogger(__name__)

TAG = "[go-getter]"


class RunState(str, Enum):
    INIT = "init"
    RESOLVING_INPUTS = "resolving_inputs"
    FETCHING = "fetching"
    AGGREGATING = "aggregating"
    DONE = "done"


class VerificationReport(BaseModel):
    """All fetch outcomes of one run, in module order."""

    revision: str = Field(..., description="Commit every module was fetched at")
    outcomes: List[FetchOutcome] = Field(default_factory=list)

    @property
    def failures(self) -> List[FetchOutcome]:
        return [o for o in self.outcomes if not o.succeeded]

    @property
    def failed(self) -> bool:
        return bool(self.failures)


def _enter(state: RunState) -> None:
    logger.debug(f"state → {state.value}")


async def _resolve_modules(config: RunConfig) -> List[ModuleManifest]:
    if config.scan_mode:
        return await asyncio.to_thread(discover_modules, config.repo_root)
    return await asyncio.to_thread(modules_from_dirs, config.repo_root, config.module_dirs)


async def verify_modules(config: RunConfig) -> VerificationReport:
    """Fetch every module of the repository at its current commit.
    
    Revision and module set are resolved concurrently; both settle before
    any fetch starts and either failure aborts the run. Fetches share one
    workspace and all of them run to completion, failed or not.
    
    Raises:
        GoGetterError: If the revision, the module set or the workspace
            cannot be set up
    """
    _enter(RunState.INIT)
    _enter(RunState.RESOLVING_INPUTS)
    revision, modules = await asyncio.gather(
        resolve_revision(config.repo_root, config.git_binary),
        _resolve_modules(config),
        return_exceptions=True,
    )
    for result in (revision, modules):
        if isinstance(result, BaseException):
            raise result
    
    if not modules:
        logger.debug("No modules to fetch")
        _enter(RunState.DONE)
        return VerificationReport(revision=revision)
    
    _enter(RunState.FETCHING)
    async with workspace(config.go_binary) as path:
        outcomes = await asyncio.gather(
            *(
                fetch_module(m, revision, path, config.go_binary, config.verbose)
                for m in modules
            )
        )
        _enter(RunState.AGGREGATING)
    
    _enter(RunState.DONE)
    return VerificationReport(revision=revision, outcomes=list(outcomes))


def render_report(report: VerificationReport) -> None:
    """Echo captured output per module, then a one-line summary."""
    if not report.outcomes:
        click.echo(f"{TAG} No go.mod files found.")
        return

    for outcome in report.outcomes:
        if outcome.stdout.strip():
            click.echo(outcome.stdout.strip())
        if not outcome.succeeded:
            click.echo(f"{TAG} go get failed for {outcome.module_path}", err=True)
        if outcome.stderr.strip():
            click.echo(outcome.stderr.strip(), err=True)

    if report.failed:
        click.echo(f"{TAG} one or more modules failed")
    else:
        click.echo(f"{TAG} all modules fetched successfully")
