"""Shared constants used across the application."""

# Snapshot Constants
# ------------------

DEFAULT_SNAPSHOT_PATH = "githubql-enums.yaml"
"""Default path of the YAML snapshot written by the export command."""

SNAPSHOT_ROOT_KEY = "enum_types"
"""Top-level key holding the list of enumeration types in a snapshot file."""
