"""Loading of the post-processor configuration file."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml

from scripts.generate_manifest.errors import ConfigError
from scripts.generate_manifest.models import ManifestEntry, ServiceConfigEntry

logger = logging.getLogger(__name__)

SERVICE_CONFIGS_KEY = "service-configs"
MANUAL_CLIENTS_KEY = "manual-clients"
# A service config item must name both of these.
SERVICE_CONFIG_REQUIRED_FIELDS = ["input-directory", "import-path"]


@dataclass
class PostProcessorConfig:
    """Libraries known to the post-processor.

    Attributes:
        manual_clients: Hand-maintained manifest entries.
        service_configs: Generated library configurations keyed by googleapis input directory.
    """

    manual_clients: List[ManifestEntry] = field(default_factory=list)
    service_configs: Dict[str, ServiceConfigEntry] = field(default_factory=dict)


def parse_service_config_entry(item: Any) -> ServiceConfigEntry:
    """Parse one item of the `service-configs` list.

    Args:
        item: The raw YAML item.

    Returns:
        ServiceConfigEntry: The parsed configuration.

    Raises:
        ConfigError: If the item is not a mapping or lacks a required field.
    """
    if not isinstance(item, dict):
        raise ConfigError(f"'{SERVICE_CONFIGS_KEY}' items must be mappings, got {type(item).__name__}: {item!r}")
    for required in SERVICE_CONFIG_REQUIRED_FIELDS:
        if not item.get(required):
            raise ConfigError(f"Missing required field '{required}' in {SERVICE_CONFIGS_KEY} item: {item}.")
    return ServiceConfigEntry(
        input_directory=item["input-directory"],
        service_config=item.get("service-config") or "",
        import_path=item["import-path"],
        rel_path=item.get("rel-path") or "",
    )


def parse_config(data: Any) -> PostProcessorConfig:
    """Build a PostProcessorConfig from a parsed YAML document.

    Missing sections are treated as empty.

    Raises:
        ConfigError: If the document or one of its sections has the wrong shape.
    """
    if data is None:
        return PostProcessorConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}.")

    config = PostProcessorConfig()
    for key in (SERVICE_CONFIGS_KEY, MANUAL_CLIENTS_KEY):
        if not isinstance(data.get(key) or [], list):
            raise ConfigError(f"'{key}' must be a list.")

    for item in data.get(SERVICE_CONFIGS_KEY) or []:
        entry = parse_service_config_entry(item)
        config.service_configs[entry.input_directory] = entry

    for item in data.get(MANUAL_CLIENTS_KEY) or []:
        config.manual_clients.append(ManifestEntry.from_config(item))

    logger.debug(
        f"Loaded {len(config.service_configs)} service configs and {len(config.manual_clients)} manual clients"
    )
    return config


def load_config(filepath: Path) -> PostProcessorConfig:
    """Load the post-processor configuration from a YAML file.

    Args:
        filepath: Path to the configuration file.

    Returns:
        PostProcessorConfig: The parsed configuration.

    Raises:
        OSError: If the file cannot be read.
        ConfigError: If the file is not valid YAML or has the wrong shape.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {filepath}: {e}") from e
    return parse_config(data)
