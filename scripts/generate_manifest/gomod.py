"""Go module resolution.

Finds the Go module that owns a directory the same way `go list -m` does:
the nearest `go.mod` at or above the directory wins.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from scripts.generate_manifest.constants import GO_MOD
from scripts.generate_manifest.errors import ModuleResolutionError

logger = logging.getLogger(__name__)

# Matches `module example.com/foo` and `module "example.com/foo"`.
MODULE_DIRECTIVE_PATTERN = re.compile(r'^\s*module\s+"?([^"\s]+)"?\s*$')


def find_go_mod(directory: Path) -> Optional[Path]:
    """Find the nearest go.mod at or above a directory.

    Args:
        directory: Directory to start searching from.

    Returns:
        Path to the go.mod file, or None if there is none up to the filesystem root.
    """
    directory = Path(directory).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / GO_MOD
        if candidate.is_file():
            return candidate
    return None


def parse_module_path(go_mod: Path) -> Optional[str]:
    """Read the module path from the `module` directive of a go.mod file.

    Args:
        go_mod: Path to the go.mod file.

    Returns:
        The module path, or None if the file has no module directive.
    """
    with open(go_mod, "r", encoding="utf-8") as f:
        for line in f:
            line = line.split("//", 1)[0]
            match = MODULE_DIRECTIVE_PATTERN.match(line)
            if match:
                return match.group(1)
    return None


def current_module(directory: Path) -> str:
    """Return the path of the Go module enclosing a directory.

    Args:
        directory: Directory inside a Go module.

    Returns:
        The module path, e.g. 'cloud.google.com/go/storage'.

    Raises:
        ModuleResolutionError: If no go.mod is found or it declares no module.
    """
    go_mod = find_go_mod(directory)
    if go_mod is None:
        raise ModuleResolutionError(f"no {GO_MOD} found at or above {directory}")

    module = parse_module_path(go_mod)
    if not module:
        raise ModuleResolutionError(f"{go_mod} has no module directive")

    logger.debug(f"Resolved module {module} for {directory}")
    return module
