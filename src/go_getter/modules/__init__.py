"""Module discovery: locating go.mod files and reading module paths."""
from go_getter.modules.discovery import discover_modules, find_manifests, modules_from_dirs
from go_getter.modules.manifest import ModuleManifest, load_manifest, parse_module_path
from go_getter.core.errors import ManifestIOError, ManifestParseError

__all__ = [
    "ModuleManifest",
    "discover_modules",
    "find_manifests",
    "load_manifest",
    "modules_from_dirs",
    "parse_module_path",
    "ManifestIOError",
    "ManifestParseError",
]
