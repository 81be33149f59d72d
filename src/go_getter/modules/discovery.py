"""Manifest discovery: scan a repository tree or read explicit module dirs."""
import logging
import os
from pathlib import Path
from typing import Iterator, List, Sequence

from go_getter.core.errors import ManifestIOError
from go_getter.modules.manifest import MANIFEST_NAME, ModuleManifest, load_manifest

logger = logging.getLogger(__name__)

# Version-control metadata and dependency caches are never descended into
EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "vendor",
}


def find_manifests(root: Path) -> Iterator[Path]:
    """Yield absolute paths of go.mod files under root.
    
    Args:
        root: Repository directory to walk
    
    Yields:
        Manifest paths in traversal order (entries sorted per directory)
    
    Raises:
        ManifestIOError: If root is not a directory or a subdirectory
            cannot be listed
    """
    root = Path(root).absolute()
    if not root.is_dir():
        raise ManifestIOError(f"Repository root is not a directory: {root}")
    
    pending = [root]
    while pending:
        directory = pending.pop()
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            raise ManifestIOError(f"Cannot read directory {directory}: {e}") from e
        
        subdirs = []
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                if entry.name not in EXCLUDED_DIRS:
                    subdirs.append(Path(entry.path))
            elif entry.name == MANIFEST_NAME and entry.is_file():
                yield Path(entry.path)
        
        # Reversed so the stack pops subdirectories in name order
        pending.extend(reversed(subdirs))


def discover_modules(root: Path) -> List[ModuleManifest]:
    """Find and parse every manifest under root, sorted by module path."""
    manifests = [load_manifest(path) for path in find_manifests(root)]
    manifests.sort(key=lambda m: m.module_path)
    logger.debug(f"Discovered {len(manifests)} modules in {root}")
    return manifests


def modules_from_dirs(root: Path, module_dirs: Sequence[Path]) -> List[ModuleManifest]:
    """Read the manifest of each explicitly named module directory.
    
    Relative directories are resolved against root. Argument order is kept.
    """
    manifests = []
    for module_dir in module_dirs:
        manifest_path = Path(root) / module_dir / MANIFEST_NAME
        manifests.append(load_manifest(manifest_path))
    return manifests
