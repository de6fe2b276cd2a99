"""Typed enumerations of the GitHub GraphQL API and a registry to validate them."""

from githubql_enums.graphql.serialization import decode_enum_field, encode_variables, to_graphql_literal
from githubql_enums.registry.exceptions import SnapshotFormatError, UnknownEnumTypeError, UnknownEnumValueError
from githubql_enums.registry.models import EnumMemberModel, EnumRegistrySnapshot, EnumTypeModel
from githubql_enums.registry.registry import EnumRegistry, get_registry
from githubql_enums.schema.base import GitHubEnum
from githubql_enums.schema.enums import *  # noqa: F403
from githubql_enums.schema.enums import ALL_ENUM_TYPES

__all__ = [
    "ALL_ENUM_TYPES",
    "EnumMemberModel",
    "EnumRegistry",
    "EnumRegistrySnapshot",
    "EnumTypeModel",
    "GitHubEnum",
    "SnapshotFormatError",
    "UnknownEnumTypeError",
    "UnknownEnumValueError",
    "decode_enum_field",
    "encode_variables",
    "get_registry",
    "to_graphql_literal",
] + [enum_type.__name__ for enum_type in ALL_ENUM_TYPES]
