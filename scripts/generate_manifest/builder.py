"""Builds the repo metadata manifest for google-cloud-go."""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, Mapping

import yaml

from scripts.generate_manifest.constants import (
    GENERATED_CLIENT_LIBRARY_TYPE,
    GENERATED_LANGUAGE,
    MANIFEST_DIR,
    MANIFEST_FILE,
)
from scripts.generate_manifest.errors import ManifestError
from scripts.generate_manifest.models import LibraryType, ManifestEntry, ServiceConfigEntry
from scripts.generate_manifest.resolvers import resolve_docs_url, resolve_release_level

logger = logging.getLogger(__name__)


class ManifestBuilder:
    """Writes a manifest with info about all manual and generated libraries."""

    def __init__(self, googleapis_dir: Path, cloud_dir: Path):
        """Initialize the manifest builder.

        Args:
            googleapis_dir: Root of the googleapis checkout holding the service configs.
            cloud_dir: Root of the google-cloud-go checkout holding the generated code.
        """
        self.googleapis_dir = Path(googleapis_dir)
        self.cloud_dir = Path(cloud_dir)
        self.manifest_file = self.cloud_dir / MANIFEST_DIR / MANIFEST_FILE

    def _read_title(self, input_dir: str, service_config: str) -> str:
        """Read the title of a service config YAML file.

        Raises:
            OSError: If the service config cannot be opened.
            ManifestError: If the service config is not valid YAML or is not a mapping.
        """
        yaml_path = self.googleapis_dir / input_dir / service_config
        with open(yaml_path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ManifestError(f"decode: {e}") from e
        if data is None:
            raise ManifestError(f"decode: {yaml_path} is empty")
        if not isinstance(data, dict):
            raise ManifestError(f"decode: {yaml_path} is a {type(data).__name__}, not a mapping")
        # Only the title is needed.
        return str(data.get("title") or "")

    def _build_entry(self, input_dir: str, conf: ServiceConfigEntry) -> ManifestEntry:
        """Build the manifest entry of a generated library."""
        title = self._read_title(input_dir, conf.service_config)

        try:
            docs_url = resolve_docs_url(self.cloud_dir, conf.import_path, conf.rel_path)
        except (ManifestError, OSError) as e:
            raise ManifestError(f"unable to build docs URL for {conf.import_path}: {e}") from e

        try:
            release_level = resolve_release_level(self.cloud_dir, conf.import_path, conf.rel_path)
        except OSError as e:
            raise ManifestError(f"unable to calculate release level for {conf.import_path}: {e}") from e

        logger.debug(f"{conf.import_path}: release level {release_level}, docs {docs_url}")
        return ManifestEntry(
            distribution_name=conf.import_path,
            description=title,
            language=GENERATED_LANGUAGE,
            client_library_type=GENERATED_CLIENT_LIBRARY_TYPE,
            docs_url=docs_url,
            release_level=release_level,
            library_type=LibraryType.GAPIC_AUTO,
        )

    def build(
        self,
        manual_entries: Iterable[ManifestEntry],
        service_configs: Mapping[str, ServiceConfigEntry],
    ) -> Dict[str, ManifestEntry]:
        """Build the manifest and write it to internal/.repo-metadata-full.json.

        The output file is truncated before any library is processed. Generated
        entries overwrite manual entries with the same distribution name.

        Args:
            manual_entries: Hand-maintained entries, inserted first.
            service_configs: Generated library configurations keyed by googleapis input directory.

        Returns:
            Mapping of distribution name to entry.

        Raises:
            OSError: If a service config or doc.go cannot be opened, or the manifest cannot be written.
            ManifestError: If a service config cannot be decoded or an entry cannot be resolved.
        """
        logger.info("updating gapic manifest")
        entries: Dict[str, ManifestEntry] = {}  # Key is the package name.

        self.manifest_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.manifest_file, "w", encoding="utf-8") as f:
            for manual in manual_entries:
                entries[manual.distribution_name] = manual

            for input_dir, conf in service_configs.items():
                if not conf.service_config:
                    logger.debug(f"Skipping {input_dir}: no service config")
                    continue
                entries[conf.import_path] = self._build_entry(input_dir, conf)

            # Remove base module entry
            entries.pop("", None)

            payload = {name: entries[name].to_dict() for name in sorted(entries)}
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")

        logger.info(f"Wrote {len(entries)} entries to {self.manifest_file}")
        return entries
