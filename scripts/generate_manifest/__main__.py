"""Entry point for running generate_manifest as a module.

Usage:
    python -m scripts.generate_manifest --config config.yaml --googleapis-dir ../googleapis --cloud-dir .
"""

from .cli import main

if __name__ == "__main__":
    main()
