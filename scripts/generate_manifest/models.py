"""Data types for the repo metadata manifest."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

from scripts.generate_manifest.errors import ConfigError

# YAML keys used by the post-processor configuration, in JSON field order.
ENTRY_CONFIG_KEYS = {
    "distribution-name": "distribution_name",
    "description": "description",
    "language": "language",
    "client-library-type": "client_library_type",
    "docs-url": "docs_url",
    "release-level": "release_level",
    "library-type": "library_type",
}


class LibraryType(str, Enum):
    """Kind of library described by a manifest entry."""

    GAPIC_AUTO = "GAPIC_AUTO"
    GAPIC_MANUAL = "GAPIC_MANUAL"
    CORE = "CORE"
    AGENT = "AGENT"
    OTHER = "OTHER"


@dataclass
class ManifestEntry:
    """One library in the manifest.

    Attributes:
        distribution_name: Package identity, also the manifest key.
        description: Human readable title of the library.
        language: Implementation language.
        client_library_type: Client library classification.
        docs_url: Public reference documentation URL.
        release_level: Maturity of the library.
        library_type: How the library is produced.
    """

    distribution_name: str
    description: str
    language: str
    client_library_type: str
    docs_url: str
    release_level: str
    library_type: Union[LibraryType, str]

    def to_dict(self) -> Dict[str, str]:
        """Return the JSON representation, preserving field order."""
        return {
            "distribution_name": self.distribution_name,
            "description": self.description,
            "language": self.language,
            "client_library_type": self.client_library_type,
            "docs_url": self.docs_url,
            "release_level": self.release_level,
            "library_type": str(getattr(self.library_type, "value", self.library_type)),
        }

    @classmethod
    def from_config(cls, data: Mapping[str, Any]) -> "ManifestEntry":
        """Build an entry from a `manual-clients` item of the configuration file.

        Args:
            data: Mapping using the hyphenated configuration keys.

        Returns:
            ManifestEntry: The parsed entry.

        Raises:
            ConfigError: If the item is not a mapping.
        """
        if not isinstance(data, Mapping):
            raise ConfigError(f"Manual client entry must be a mapping, got {type(data).__name__}: {data!r}")

        fields = {attr: str(data.get(key) or "") for key, attr in ENTRY_CONFIG_KEYS.items()}
        # Known library types become LibraryType members, anything else is kept as written.
        if fields["library_type"] in {t.value for t in LibraryType}:
            fields["library_type"] = LibraryType(fields["library_type"])
        return cls(**fields)


@dataclass
class ServiceConfigEntry:
    """Build configuration of one generated library.

    Attributes:
        input_directory: Directory of the API definition in the googleapis checkout.
        service_config: Service config file name inside input_directory; empty when the
            library is not listed in the manifest.
        import_path: Go import path of the generated package.
        rel_path: Path of the generated package relative to the google-cloud-go checkout.
    """

    input_directory: str
    service_config: str
    import_path: str
    rel_path: str
