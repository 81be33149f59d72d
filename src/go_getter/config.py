"""Run configuration assembled from CLI options."""
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RunConfig(BaseModel):
    """Settings for one verification run."""

    repo_root: Path = Field(default_factory=Path.cwd, description="Repository to verify")
    module_dirs: List[Path] = Field(
        default_factory=list,
        description="Explicit module directories; empty means scan the whole tree",
    )
    go_binary: str = Field(default="go", description="Go toolchain executable")
    git_binary: str = Field(default="git", description="git executable")
    verbose: bool = Field(default=False, description="Pass -v to go get and log debug output")

    model_config = ConfigDict(frozen=True)

    @field_validator("repo_root")
    @classmethod
    def absolute_repo_root(cls, v: Path) -> Path:
        return Path(v).absolute()

    @field_validator("go_binary", "git_binary")
    @classmethod
    def non_empty_binary(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("executable name must not be empty")
        return v

    @property
    def scan_mode(self) -> bool:
        """True when no module directories were given."""
        return not self.module_dirs
