"""Repository tooling scripts."""
