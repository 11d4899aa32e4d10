"""Command-line interface for the generate_manifest package."""

import argparse
import logging
import sys
from pathlib import Path

from scripts.generate_manifest.builder import ManifestBuilder
from scripts.generate_manifest.config import load_config
from scripts.generate_manifest.constants import EXIT_ERROR, EXIT_SUCCESS
from scripts.generate_manifest.errors import ConfigError, ManifestError

logger = logging.getLogger(__name__)


def validate_directory(dir_path: str) -> Path:
    """Validate that a directory exists.

    Args:
        dir_path: String path to the directory.

    Returns:
        Path: Validated Path object to the directory.

    Raises:
        argparse.ArgumentTypeError: If validation fails.
    """
    path = Path(dir_path)

    if not path.exists():
        raise argparse.ArgumentTypeError(f"Directory '{dir_path}' does not exist")

    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"'{dir_path}' is not a directory")

    return path


def validate_config_file(file_path: str) -> Path:
    """Validate that the configuration file exists and is a YAML file.

    Args:
        file_path: String path to the configuration file.

    Returns:
        Path: Validated Path object to the configuration file.

    Raises:
        argparse.ArgumentTypeError: If validation fails.
    """
    path = Path(file_path)

    if not path.exists():
        raise argparse.ArgumentTypeError(f"Config file '{file_path}' does not exist")

    if not path.is_file():
        raise argparse.ArgumentTypeError(f"'{file_path}' is not a file")

    if path.suffix not in (".yaml", ".yml"):
        raise argparse.ArgumentTypeError(f"'{file_path}' is not a YAML file (must have .yaml or .yml extension)")

    return path


def parse_arguments(argv=None):
    """Parse and validate command-line arguments.

    Args:
        argv: Optional argument list, defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed and validated arguments.
    """
    parser = argparse.ArgumentParser(
        description="Generate internal/.repo-metadata-full.json for google-cloud-go client libraries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # From the google-cloud-go checkout, with googleapis checked out alongside:
  python -m scripts.generate_manifest --config internal/postprocessor/config.yaml \\
      --googleapis-dir ../googleapis --cloud-dir .

  # Or with uv:
  uv run python -m scripts.generate_manifest --config config.yaml --googleapis-dir ../googleapis --cloud-dir . -v
        """,
    )

    parser.add_argument(
        "--config",
        type=validate_config_file,
        required=True,
        help="Path to the post-processor config listing service configs and manual clients",
    )

    parser.add_argument(
        "--googleapis-dir",
        type=validate_directory,
        required=True,
        help="Root of the googleapis checkout containing the service config YAML files",
    )

    parser.add_argument(
        "--cloud-dir",
        type=validate_directory,
        required=True,
        help="Root of the google-cloud-go checkout; the manifest is written to internal/ below it",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose output")

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the CLI."""
    args = parse_arguments(argv)

    # Configure logging at application entry point
    log_level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(level=log_level, format="%(levelname)s: %(message)s")

    builder = ManifestBuilder(googleapis_dir=args.googleapis_dir, cloud_dir=args.cloud_dir)
    try:
        config = load_config(args.config)
        entries = builder.build(config.manual_clients, config.service_configs)
    except (ConfigError, ManifestError) as e:
        logger.error(f"Manifest generation failed: {e.message}")
        sys.exit(EXIT_ERROR)
    except OSError as e:
        logger.error(f"Manifest generation failed: {e}")
        sys.exit(EXIT_ERROR)

    logger.info(f"Manifest with {len(entries)} entries generated at {builder.manifest_file}")
    sys.exit(EXIT_SUCCESS)
