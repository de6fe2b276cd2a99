"""Descriptive models of enumeration types and registry snapshots."""

from pydantic import BaseModel, ConfigDict, model_validator


class EnumMemberModel(BaseModel):
    """Pydantic model for one member of an enumeration type."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    description: str = ""


class EnumTypeModel(BaseModel):
    """Pydantic model for an enumeration type and its ordered members."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    members: list[EnumMemberModel]

    @property
    def wire_values(self) -> list[str]:
        """Return the wire values of the members, in order."""
        return [member.value for member in self.members]


class EnumRegistrySnapshot(BaseModel):
    """Pydantic model for a point-in-time copy of a whole enum registry."""

    model_config = ConfigDict(frozen=True)

    enum_types: list[EnumTypeModel]

    @model_validator(mode="after")
    def check_unique_type_names(self) -> "EnumRegistrySnapshot":
        """Reject snapshots that list the same enumeration type twice."""
        seen: set[str] = set()
        for enum_type in self.enum_types:
            if enum_type.name in seen:
                raise ValueError(f"Enum type {enum_type.name} appears more than once")
            seen.add(enum_type.name)
        return self

    def get(self, name: str) -> EnumTypeModel | None:
        """Return the type named ``name``, or None if it is not in the snapshot."""
        for enum_type in self.enum_types:
            if enum_type.name == name:
                return enum_type
        return None
