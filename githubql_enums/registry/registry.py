"""Read-only registry of GitHub GraphQL enumeration types.

The registry maps each enumeration type name to its ``GitHubEnum`` class and
answers the lookups needed on both sides of the API boundary: symbolic name to
wire value when building requests, wire value to member when decoding
responses. It is built once and never mutated, so it can be shared between
threads without locking.
"""

import threading
from collections.abc import Iterable, Iterator
from types import MappingProxyType
from typing import Any

import structlog

from githubql_enums.registry.exceptions import UnknownEnumTypeError
from githubql_enums.registry.models import EnumMemberModel, EnumRegistrySnapshot, EnumTypeModel
from githubql_enums.schema.base import GitHubEnum
from githubql_enums.schema.enums import ALL_ENUM_TYPES

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

EnumTypeRef = str | type[GitHubEnum]


class EnumRegistry:
    """Immutable mapping of enumeration type names to enumeration classes."""

    __slots__ = ("_enum_types", "_wire_values")

    def __init__(self, enum_types: Iterable[type[GitHubEnum]]) -> None:
        """Build the registry from a sequence of enumeration classes.

        Args:
            enum_types: The ``GitHubEnum`` subclasses to register.

        Raises:
            ValueError: If two types share a name, or a type declares the same
                wire value twice.
        """
        types_by_name: dict[str, type[GitHubEnum]] = {}
        wire_values_by_name: dict[str, frozenset[str]] = {}
        for enum_type in enum_types:
            name = enum_type.__name__
            if name in types_by_name:
                raise ValueError(f"Enum type {name} is registered more than once")
            # Aliases hide duplicate wire values from iteration, so compare
            # the member map against the distinct members.
            if len(enum_type.__members__) != len(enum_type):
                raise ValueError(f"Enum type {name} declares duplicate wire values")
            types_by_name[name] = enum_type
            wire_values_by_name[name] = frozenset(enum_type.wire_values())

        object.__setattr__(self, "_enum_types", MappingProxyType(types_by_name))
        object.__setattr__(self, "_wire_values", MappingProxyType(wire_values_by_name))
        logger.debug(
            "Built enum registry",
            enum_type_count=len(types_by_name),
            member_count=sum(len(values) for values in wire_values_by_name.values()),
        )

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __len__(self) -> int:
        return len(self._enum_types)

    def __iter__(self) -> Iterator[type[GitHubEnum]]:
        return iter(self._enum_types.values())

    def __contains__(self, enum_type: object) -> bool:
        if isinstance(enum_type, str):
            return enum_type in self._enum_types
        if isinstance(enum_type, type):
            return self._enum_types.get(enum_type.__name__) is enum_type
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self)} enum types)"

    def type_names(self) -> tuple[str, ...]:
        """Return the names of all registered types, in registration order."""
        return tuple(self._enum_types)

    def get_type(self, enum_type: EnumTypeRef) -> type[GitHubEnum]:
        """Return the enumeration class for a type name or class.

        Raises:
            UnknownEnumTypeError: If the type is not registered.
        """
        name = enum_type if isinstance(enum_type, str) else enum_type.__name__
        try:
            registered = self._enum_types[name]
        except KeyError:
            raise UnknownEnumTypeError(name) from None
        if not isinstance(enum_type, str) and registered is not enum_type:
            raise UnknownEnumTypeError(name)
        return registered

    def wire_values(self, enum_type: EnumTypeRef) -> tuple[str, ...]:
        """Return the wire values of a type, in declaration order."""
        return self.get_type(enum_type).wire_values()

    def symbolic_names(self, enum_type: EnumTypeRef) -> tuple[str, ...]:
        """Return the symbolic names of a type, in declaration order."""
        return self.get_type(enum_type).symbolic_names()

    def is_member(self, enum_type: EnumTypeRef, wire_value: str) -> bool:
        """Return whether ``wire_value`` is a valid value of the type.

        The comparison is case-sensitive. Unknown values return False rather
        than raising; an unknown type still raises ``UnknownEnumTypeError``.
        """
        name = self.get_type(enum_type).__name__
        return isinstance(wire_value, str) and wire_value in self._wire_values[name]

    def parse(self, enum_type: EnumTypeRef, wire_value: str) -> GitHubEnum:
        """Return the member of the type whose wire value is ``wire_value``.

        Raises:
            UnknownEnumTypeError: If the type is not registered.
            UnknownEnumValueError: If the value is not a member of the type.
        """
        return self.get_type(enum_type).parse(wire_value)

    def symbolic_name(self, enum_type: EnumTypeRef, wire_value: str) -> str:
        """Return the symbolic name for a wire value of the type."""
        return self.parse(enum_type, wire_value).name

    def wire_value(self, enum_type: EnumTypeRef, symbolic_name: str) -> str:
        """Return the wire value for a symbolic name of the type.

        Raises:
            UnknownEnumTypeError: If the type is not registered.
            UnknownEnumValueError: If the type has no member with this name.
        """
        return str(self.get_type(enum_type).from_name(symbolic_name).value)

    def describe(self, enum_type: EnumTypeRef) -> EnumTypeModel:
        """Return a descriptive model of the type and its members."""
        enum_class = self.get_type(enum_type)
        return EnumTypeModel(
            name=enum_class.__name__,
            description=enum_class.type_description(),
            members=[EnumMemberModel(name=member.name, value=member.value, description=member.description) for member in enum_class],
        )

    def snapshot(self) -> EnumRegistrySnapshot:
        """Return a descriptive model of every registered type."""
        return EnumRegistrySnapshot(enum_types=[self.describe(name) for name in self._enum_types])


_default_registry: EnumRegistry | None = None
_default_registry_lock = threading.Lock()


def get_registry() -> EnumRegistry:
    """Return the process-wide registry of every GitHub GraphQL enumeration type.

    The registry is built on first use and the same instance is returned on
    every later call, from any thread.
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = EnumRegistry(ALL_ENUM_TYPES)
    return _default_registry
