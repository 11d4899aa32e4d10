"""Docs URL and release level resolution for generated libraries."""

import logging
from itertools import islice
from pathlib import Path

from scripts.generate_manifest.constants import (
    BETA_INDICATOR,
    DOC_FILE,
    DOCS_URL_BASE,
    MAX_SCANNED_LINES,
    RELEASE_LEVEL_ALPHA,
    RELEASE_LEVEL_BETA,
    RELEASE_LEVEL_GA,
)
from scripts.generate_manifest.gomod import current_module

logger = logging.getLogger(__name__)


def library_dir(root_dir: Path, rel_path: str) -> Path:
    """Join a configured relative path under a root directory.

    Configured paths such as '/accessapproval/apiv1' carry a leading slash but
    are still relative to the root.
    """
    return Path(root_dir) / rel_path.lstrip("/")


def resolve_docs_url(root_dir: Path, import_path: str, rel_path: str) -> str:
    """Build the reference documentation URL of a package.

    Args:
        root_dir: Root of the google-cloud-go checkout.
        import_path: Go import path of the package.
        rel_path: Path of the package relative to root_dir.

    Returns:
        str: The docs URL, e.g.
            'https://cloud.google.com/go/docs/reference/cloud.google.com/go/latest/storage'.

    Raises:
        ModuleResolutionError: If no Go module encloses the package directory.
    """
    module = current_module(library_dir(root_dir, rel_path))
    pkg_path = import_path.removeprefix(module).removeprefix("/")
    return f"{DOCS_URL_BASE}{module}/latest/{pkg_path}"


def resolve_release_level(root_dir: Path, import_path: str, rel_path: str) -> str:
    """Determine the release level of a package.

    The last element of the import path is checked for 'alpha' then 'beta'.
    Otherwise the top of the package's doc.go is scanned for the beta disclaimer.

    Args:
        root_dir: Root of the google-cloud-go checkout.
        import_path: Go import path of the package.
        rel_path: Path of the package relative to root_dir.

    Returns:
        str: One of 'alpha', 'beta' or 'ga'.

    Raises:
        OSError: If doc.go has to be read and cannot be opened.
    """
    last_element = import_path.rsplit("/", 1)[-1]
    if RELEASE_LEVEL_ALPHA in last_element:
        return RELEASE_LEVEL_ALPHA
    if RELEASE_LEVEL_BETA in last_element:
        return RELEASE_LEVEL_BETA

    # Lines are matched as bytes, so invalid UTF-8 elsewhere in doc.go is ignored.
    indicator = BETA_INDICATOR.encode("utf-8")
    doc_file = library_dir(root_dir, rel_path) / DOC_FILE
    with open(doc_file, "rb") as f:
        for line in islice(f, MAX_SCANNED_LINES):
            if indicator in line:
                return RELEASE_LEVEL_BETA
    logger.debug(f"No beta disclaimer in the first {MAX_SCANNED_LINES} lines of {doc_file}")
    return RELEASE_LEVEL_GA
