"""Export enum registry snapshots to YAML and compare them with the installed table."""

from pathlib import Path

import structlog
from pydantic import BaseModel, Field, ValidationError
from ruamel.yaml.error import YAMLError

from githubql_enums.registry.exceptions import SnapshotFormatError
from githubql_enums.registry.models import EnumRegistrySnapshot
from githubql_enums.registry.registry import EnumRegistry
from githubql_enums.utils.constants import SNAPSHOT_ROOT_KEY
from githubql_enums.utils.yaml import dump_yaml_to_file, load_yaml_file

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


class SnapshotDiff(BaseModel):
    """Differences between the installed registry and a snapshot.

    "Added" means present in the registry but not in the snapshot; "removed"
    means present in the snapshot but no longer in the registry.
    """

    added_types: list[str] = Field(default_factory=list)
    removed_types: list[str] = Field(default_factory=list)
    added_values: dict[str, list[str]] = Field(default_factory=dict)
    removed_values: dict[str, list[str]] = Field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Whether the registry and the snapshot agree."""
        return not (self.added_types or self.removed_types or self.added_values or self.removed_values)


def export_snapshot(registry: EnumRegistry, path: Path) -> EnumRegistrySnapshot:
    """Write a YAML snapshot of every type in the registry to ``path``."""
    snapshot = registry.snapshot()
    dump_yaml_to_file(snapshot.model_dump(mode="json"), path)
    logger.info("Exported enum registry snapshot", path=str(path), enum_type_count=len(snapshot.enum_types))
    return snapshot


def load_snapshot(path: Path) -> EnumRegistrySnapshot:
    """Load and validate a YAML snapshot.

    Raises:
        FileNotFoundError: If the file does not exist.
        SnapshotFormatError: If the file is not valid YAML or does not have
            the snapshot structure.
    """
    try:
        content = load_yaml_file(path)
    except UnicodeDecodeError as e:
        raise SnapshotFormatError(path, f"file is not UTF-8 text: {e}") from e
    except YAMLError as e:
        raise SnapshotFormatError(path, f"failed to parse YAML: {e}") from e

    if not isinstance(content, dict) or SNAPSHOT_ROOT_KEY not in content:
        raise SnapshotFormatError(path, f"expected a mapping with a top-level '{SNAPSHOT_ROOT_KEY}' key")

    try:
        return EnumRegistrySnapshot.model_validate(content)
    except ValidationError as e:
        raise SnapshotFormatError(path, str(e)) from e


def diff_snapshot(registry: EnumRegistry, snapshot: EnumRegistrySnapshot) -> SnapshotDiff:
    """Compare the registry's types and wire values with those of a snapshot."""
    current = registry.snapshot()
    current_names = [enum_type.name for enum_type in current.enum_types]
    snapshot_names = [enum_type.name for enum_type in snapshot.enum_types]

    diff = SnapshotDiff(
        added_types=[name for name in current_names if name not in snapshot_names],
        removed_types=[name for name in snapshot_names if name not in current_names],
    )
    for current_type in current.enum_types:
        previous_type = snapshot.get(current_type.name)
        if previous_type is None:
            continue
        added = [value for value in current_type.wire_values if value not in previous_type.wire_values]
        removed = [value for value in previous_type.wire_values if value not in current_type.wire_values]
        if added:
            diff.added_values[current_type.name] = added
        if removed:
            diff.removed_values[current_type.name] = removed

    if diff.is_empty:
        logger.info("Enum registry matches snapshot")
    else:
        logger.warning(
            "Enum registry differs from snapshot",
            added_types=diff.added_types,
            removed_types=diff.removed_types,
            changed_types=sorted(set(diff.added_values) | set(diff.removed_values)),
        )
    return diff
