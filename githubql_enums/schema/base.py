"""Base type shared by every GitHub GraphQL enumeration."""

from enum import Enum
from typing import Any

from githubql_enums.registry.exceptions import UnknownEnumValueError


class GitHubEnum(str, Enum):
    """String-backed enumeration whose members carry a description.

    Members are declared as ``SYMBOLIC_NAME = "WIRE_VALUE", "description"``.
    The wire value is the member's ``value`` and is what gets sent to and
    received from the GraphQL API. Lookups by wire value are case-sensitive.
    """

    description: str

    def __new__(cls, value: str, description: str = "") -> "GitHubEnum":
        """Create a member from its wire value and description."""
        member = str.__new__(cls, value)
        member._value_ = value
        member.description = description
        return member

    def __str__(self) -> str:
        """Return the wire value."""
        return str(self.value)

    @classmethod
    def _missing_(cls, value: Any) -> "GitHubEnum":
        raise UnknownEnumValueError(cls.__name__, value)

    @classmethod
    def parse(cls, value: str) -> "GitHubEnum":
        """Return the member whose wire value is ``value``.

        Raises:
            UnknownEnumValueError: If no member has this wire value.
        """
        return cls(value)

    @classmethod
    def from_name(cls, symbolic_name: str) -> "GitHubEnum":
        """Return the member with the given symbolic name.

        Raises:
            UnknownEnumValueError: If no member has this symbolic name.
        """
        try:
            return cls[symbolic_name]
        except (KeyError, TypeError):
            raise UnknownEnumValueError(cls.__name__, symbolic_name) from None

    @classmethod
    def wire_values(cls) -> tuple[str, ...]:
        """Return the wire values in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def symbolic_names(cls) -> tuple[str, ...]:
        """Return the symbolic names in declaration order."""
        return tuple(member.name for member in cls)

    @classmethod
    def type_description(cls) -> str:
        """Return the first line of the type's docstring."""
        doc = cls.__doc__ or ""
        return doc.strip().splitlines()[0] if doc.strip() else ""
