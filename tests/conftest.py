"""Pytest fixtures for go-getter tests."""
import stat
import subprocess
from pathlib import Path
from typing import Dict, List

import pytest


def _git(repo_path: Path, *args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )


@pytest.fixture
def go_repo_fixture(tmp_path: Path) -> Dict[str, any]:
    """Create a git repository holding three Go modules and decoys.
    
    Returns dict with:
        - path: Path to repo
        - head_sha: SHA of HEAD commit
        - modules: declared module paths, sorted
    """
    repo_path = tmp_path / "go_repo"
    repo_path.mkdir()
    
    _git(repo_path, "init")
    _git(repo_path, "config", "user.email", "test@example.com")
    _git(repo_path, "config", "user.name", "Test User")
    
    (repo_path / "go.mod").write_text("module example.org/root\n\ngo 1.21\n")
    (repo_path / "a").mkdir()
    (repo_path / "a" / "go.mod").write_text("module example.org/a\n\ngo 1.21\n")
    (repo_path / "b" / "inner").mkdir(parents=True)
    (repo_path / "b" / "inner" / "go.mod").write_text(
        "// b is nested one level deeper\nmodule example.org/b\n\ngo 1.21\n"
    )
    
    # Decoys that discovery must never report
    (repo_path / "node_modules" / "dep").mkdir(parents=True)
    (repo_path / "node_modules" / "dep" / "go.mod").write_text("module example.org/decoy-npm\n")
    (repo_path / "vendor" / "x").mkdir(parents=True)
    (repo_path / "vendor" / "x" / "go.mod").write_text("module example.org/decoy-vendor\n")
    
    _git(repo_path, "add", "go.mod", "a", "b")
    _git(repo_path, "commit", "-m", "Add modules")
    
    (repo_path / ".git" / "decoy").mkdir()
    (repo_path / ".git" / "decoy" / "go.mod").write_text("module example.org/decoy-git\n")
    
    head_sha = _git(repo_path, "rev-parse", "HEAD").stdout.strip()
    
    return {
        "path": repo_path,
        "head_sha": head_sha,
        "modules": ["example.org/a", "example.org/b", "example.org/root"],
    }


@pytest.fixture
def empty_repo_fixture(tmp_path: Path) -> Dict[str, any]:
    """Create a git repository with one commit and no go.mod files."""
    repo_path = tmp_path / "empty_repo"
    repo_path.mkdir()
    
    _git(repo_path, "init")
    _git(repo_path, "config", "user.email", "test@example.com")
    _git(repo_path, "config", "user.name", "Test User")
    (repo_path / "README.md").write_text("nothing to fetch\n")
    _git(repo_path, "add", "README.md")
    _git(repo_path, "commit", "-m", "Initial commit")
    
    return {
        "path": repo_path,
        "head_sha": _git(repo_path, "rev-parse", "HEAD").stdout.strip(),
    }


_FAKE_GO = """#!/bin/sh
here="$(pwd -P)"
echo "$here|$*" >> "{log}"
case "$1" in
  mod)
    if [ -f "{init_fail}" ]; then
      echo "go: cannot initialise module" >&2
      exit 1
    fi
    printf 'module %s\\n' "$3" > go.mod
    exit 0
    ;;
  get)
    for arg in "$@"; do spec="$arg"; done
    if grep -qxF "$spec" "{fails}" 2>/dev/null; then
      echo "go: $spec: unknown revision" >&2
      exit 1
    fi
    echo "fetched $spec"
    echo "go: added $spec" >&2
    exit 0
    ;;
esac
echo "unexpected: $*" >&2
exit 2
"""


class FakeGo:
    """A stand-in `go` executable that records every invocation."""

    def __init__(self, root: Path):
        self.root = root
        self.log_path = root / "calls.log"
        self.fails_path = root / "fails.txt"
        self.init_fail_path = root / "init_fail"
        self.path = root / "go"
        self.path.write_text(
            _FAKE_GO.format(
                log=self.log_path,
                fails=self.fails_path,
                init_fail=self.init_fail_path,
            )
        )
        self.path.chmod(self.path.stat().st_mode | stat.S_IEXEC)

    def fail_specifier(self, spec: str) -> None:
        with self.fails_path.open("a") as f:
            f.write(spec + "\n")

    def fail_init(self) -> None:
        self.init_fail_path.write_text("")

    def calls(self) -> List[List[str]]:
        """Return [cwd, args] pairs in invocation order."""
        if not self.log_path.exists():
            return []
        return [line.split("|", 1) for line in self.log_path.read_text().splitlines()]

    def get_specifiers(self) -> List[str]:
        return [args.split()[-1] for _, args in self.calls() if args.startswith("get")]

    def workspaces(self) -> List[Path]:
        return sorted({Path(cwd) for cwd, _ in self.calls()})


@pytest.fixture
def fake_go(tmp_path: Path) -> FakeGo:
    root = tmp_path / "fake_go"
    root.mkdir()
    return FakeGo(root)
