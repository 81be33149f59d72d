"""ModuleManifest model and go.mod module-path extraction."""
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from go_getter.core.errors import ManifestIOError, ManifestParseError

MANIFEST_NAME = "go.mod"

# First `module <path>` directive anchored at line start
_MODULE_RE = re.compile(r"^module[ \t]+(\S.*)$", re.MULTILINE)


class ModuleManifest(BaseModel):
    """A located go.mod file and the module path it declares."""

    path: str = Field(..., description="Absolute path to the go.mod file")
    module_path: str = Field(..., description="Declared module path, e.g. example.org/a")

    model_config = ConfigDict(frozen=True)

    @field_validator("module_path")
    @classmethod
    def validate_module_path(cls, v: str) -> str:
        """Module paths are non-empty and contain no whitespace."""
        if not v or any(c.isspace() for c in v):
            raise ValueError(f"invalid module path: '{v}'")
        return v

    def specifier(self, revision: str) -> str:
        """Fetch specifier handed to `go get`."""
        return f"{self.module_path}@{revision}"


def parse_module_path(content: str, source: str = MANIFEST_NAME) -> str:
    """Extract the declared module path from go.mod content.
    
    Args:
        content: Text of a go.mod file
        source: Where the content came from, used in error messages
    
    Returns:
        Module path with whitespace, a trailing // comment and any
        surrounding quotes removed
    
    Raises:
        ManifestParseError: If no module directive is present
    """
    match = _MODULE_RE.search(content)
    if not match:
        raise ManifestParseError(f"module directive not found in {source}")
    
    value = match.group(1).split("//", 1)[0].strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"`":
        value = value[1:-1].strip()
    
    if not value:
        raise ManifestParseError(f"empty module directive in {source}")
    return value


def load_manifest(path: Path) -> ModuleManifest:
    """Read a go.mod file and build its ModuleManifest."""
    path = Path(path).absolute()
    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ManifestIOError(f"Cannot read {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ManifestParseError(f"{path} is not valid UTF-8: {e}") from e
    
    module_path = parse_module_path(content, source=str(path))
    try:
        return ModuleManifest(path=str(path), module_path=module_path)
    except ValidationError as e:
        raise ManifestParseError(f"invalid module path '{module_path}' in {path}") from e
