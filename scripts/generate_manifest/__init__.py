"""Generate the repo metadata manifest for google-cloud-go client libraries.

This package reads the post-processor configuration, resolves the title, docs URL
and release level of every generated library and writes internal/.repo-metadata-full.json.
"""

from scripts.generate_manifest.builder import ManifestBuilder
from scripts.generate_manifest.config import PostProcessorConfig, load_config
from scripts.generate_manifest.models import LibraryType, ManifestEntry, ServiceConfigEntry

__all__ = [
    "LibraryType",
    "ManifestBuilder",
    "ManifestEntry",
    "PostProcessorConfig",
    "ServiceConfigEntry",
    "load_config",
]
