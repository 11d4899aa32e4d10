"""Shared pytest fixtures for generate_manifest tests."""

import tempfile
from pathlib import Path

import pytest

from scripts.generate_manifest.models import LibraryType, ManifestEntry, ServiceConfigEntry

RESOURCES_DIR = Path(__file__).parent / "resources"


def create_go_module(module_dir: Path, module_path: str) -> Path:
    """Helper to create a go.mod declaring a module.

    Args:
        module_dir: Directory of the module.
        module_path: Module path for the `module` directive.

    Returns:
        Path to the created go.mod file.
    """
    module_dir.mkdir(parents=True, exist_ok=True)
    go_mod = module_dir / "go.mod"
    go_mod.write_text(f"module {module_path}\n\ngo 1.21\n")
    return go_mod


def create_library_dir(cloud_dir: Path, rel_path: str, doc_content: str = None) -> Path:
    """Helper to create a generated package directory.

    Args:
        cloud_dir: Root of the fake google-cloud-go checkout.
        rel_path: Package path relative to cloud_dir.
        doc_content: Optional content for doc.go.

    Returns:
        Path to the created package directory.
    """
    lib_dir = cloud_dir / rel_path.lstrip("/")
    lib_dir.mkdir(parents=True, exist_ok=True)

    if doc_content is not None:
        (lib_dir / "doc.go").write_text(doc_content)

    return lib_dir


def create_service_config(googleapis_dir: Path, input_dir: str, file_name: str, content: str) -> Path:
    """Helper to create a service config YAML in the fake googleapis checkout.

    Returns:
        Path to the created service config.
    """
    config_dir = googleapis_dir / input_dir
    config_dir.mkdir(parents=True, exist_ok=True)
    config_file = config_dir / file_name
    config_file.write_text(content)
    return config_file


def make_manual_entry(distribution_name: str, description: str = "Manual library") -> ManifestEntry:
    """Helper to build a hand-maintained manifest entry."""
    return ManifestEntry(
        distribution_name=distribution_name,
        description=description,
        language="Go",
        client_library_type="manual",
        docs_url=f"https://cloud.google.com/go/docs/reference/{distribution_name}/latest",
        release_level="stable",
        library_type=LibraryType.GAPIC_MANUAL,
    )


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def googleapis_dir(temp_dir):
    """Empty googleapis checkout."""
    path = temp_dir / "googleapis"
    path.mkdir()
    return path


@pytest.fixture
def cloud_dir(temp_dir):
    """google-cloud-go checkout with a root module."""
    path = temp_dir / "google-cloud-go"
    create_go_module(path, "cloud.google.com/go")
    return path


@pytest.fixture
def ga_doc():
    """doc.go content without the beta disclaimer."""
    return (RESOURCES_DIR / "doc_ga.go").read_text()


@pytest.fixture
def beta_doc():
    """doc.go content with the beta disclaimer."""
    return (RESOURCES_DIR / "doc_beta.go").read_text()


@pytest.fixture
def accessapproval_service_config():
    """Sample service config YAML content."""
    return (RESOURCES_DIR / "accessapproval_v1.yaml").read_text()


@pytest.fixture
def accessapproval(googleapis_dir, cloud_dir, accessapproval_service_config, ga_doc):
    """A generated GA library in its own module with its service config in place.

    Returns the ServiceConfigEntry describing it.
    """
    create_go_module(cloud_dir / "accessapproval", "cloud.google.com/go/accessapproval")
    create_library_dir(cloud_dir, "/accessapproval/apiv1", ga_doc)
    create_service_config(
        googleapis_dir,
        "google/cloud/accessapproval/v1",
        "accessapproval_v1.yaml",
        accessapproval_service_config,
    )
    return ServiceConfigEntry(
        input_directory="google/cloud/accessapproval/v1",
        service_config="accessapproval_v1.yaml",
        import_path="cloud.google.com/go/accessapproval/apiv1",
        rel_path="/accessapproval/apiv1",
    )
