"""Contains exceptions raised when looking up enumeration types and values."""

from pathlib import Path
from typing import Any


class UnknownEnumValueError(ValueError):
    """Raised when a value does not match any member of an enumeration type."""

    def __init__(self, enum_type: str, value: Any) -> None:
        """Initializes the exception with the enumeration type and the rejected value."""
        super().__init__(f"{value!r} is not a known value of enum type {enum_type}")
        self.enum_type = enum_type
        self.value = value


class UnknownEnumTypeError(KeyError):
    """Raised when an enumeration type is not present in the registry."""

    def __init__(self, enum_type: str) -> None:
        """Initializes the exception with the name of the missing type."""
        super().__init__(enum_type)
        self.enum_type = enum_type

    def __str__(self) -> str:
        """Return a readable message instead of the quoted key."""
        return f"Unknown enum type: {self.enum_type}"


class SnapshotFormatError(ValueError):
    """Raised when an enum registry snapshot file cannot be parsed."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initializes the exception with the snapshot path and the reason it was rejected."""
        super().__init__(f"Invalid enum registry snapshot {path}: {reason}")
        self.path = path
        self.reason = reason
