"""Helpers for moving enum values across the GraphQL request/response boundary."""

from collections.abc import Mapping
from typing import Any

import structlog

from githubql_enums.registry.exceptions import UnknownEnumValueError
from githubql_enums.registry.registry import EnumRegistry, EnumTypeRef
from githubql_enums.schema.base import GitHubEnum

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)


def to_graphql_literal(member: GitHubEnum) -> str:
    """Return the enum literal as written inside a GraphQL document.

    GraphQL enum literals are bare names, so ``IssueState.OPEN`` becomes
    ``OPEN`` rather than ``"OPEN"``.
    """
    if not isinstance(member, GitHubEnum):
        raise TypeError(f"Expected a GitHubEnum member, got {type(member).__name__}")
    return str(member.value)


def _encode_value(value: Any) -> Any:
    if isinstance(value, GitHubEnum):
        return value.value
    if isinstance(value, Mapping):
        return {key: _encode_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_encode_value(item) for item in value]
    return value


def encode_variables(variables: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of GraphQL variables with enum members replaced by wire values.

    Members nested inside lists, tuples and mappings are replaced too. The
    input mapping is left untouched.

    Example:
        >>> encode_variables({"states": [IssueState.OPEN], "first": 10})
        {'states': ['OPEN'], 'first': 10}
    """
    return {key: _encode_value(value) for key, value in variables.items()}


def decode_enum_field(
    registry: EnumRegistry,
    enum_type: EnumTypeRef,
    value: str | None,
    field: str | None = None,
) -> GitHubEnum | None:
    """Decode an enum-typed field of a GraphQL response.

    Args:
        registry: The registry to resolve ``enum_type`` against.
        enum_type: The enumeration type name or class of the field.
        value: The raw wire value from the response, or None for a null field.
        field: Optional path of the field in the response, used for logging.

    Returns:
        The matching member, or None when ``value`` is None.

    Raises:
        UnknownEnumTypeError: If ``enum_type`` is not registered.
        UnknownEnumValueError: If ``value`` is not a member of the type, for
            example a value added to the schema after this table was generated.
    """
    if value is None:
        return None
    try:
        return registry.parse(enum_type, value)
    except UnknownEnumValueError:
        logger.warning("Unrecognized enum value in GraphQL response", enum_type=registry.get_type(enum_type).__name__, value=value, field=field)
        raise
