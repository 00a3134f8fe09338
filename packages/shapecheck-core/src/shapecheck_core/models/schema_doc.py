from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class FieldRec(BaseModel):
    """Object field declaration: a type reference plus optional accessor key."""

    model_config = ConfigDict(extra="ignore")
    type: str
    accessor: str | None = None


class ObjectRec(BaseModel):
    """Object type declaration with ordered fields."""

    model_config = ConfigDict(extra="ignore")
    fields: dict[str, FieldRec] = Field(default_factory=dict)

    @field_validator("fields", mode="before")
    @classmethod
    def _coerce_fields(cls, v):
        if v is None:
            return {}
        # allow the short form `name: String!`
        return {name: {"type": spec} if isinstance(spec, str) else spec for name, spec in v.items()}


class EnumRec(BaseModel):
    """Enum declaration mapping schema names to runtime values."""

    model_config = ConfigDict(extra="ignore")
    values: dict[str, Any]

    @field_validator("values", mode="before")
    @classmethod
    def _coerce_values(cls, v):
        if isinstance(v, list | tuple):
            return {name: name for name in v}
        return v


class SchemaRec(BaseModel):
    """A complete schema document."""

    model_config = ConfigDict(extra="ignore")
    scalars: dict[str, list[str]] = Field(default_factory=dict)
    enums: dict[str, EnumRec] = Field(default_factory=dict)
    types: dict[str, ObjectRec] = Field(default_factory=dict)

    @field_validator("enums", mode="before")
    @classmethod
    def _coerce_enums(cls, v):
        if v is None:
            return {}
        # allow `Role: [ADMIN, REGULAR]` and `Role: {ADMIN: admin}` next to the full form
        return {
            name: spec if isinstance(spec, dict) and "values" in spec else {"values": spec}
            for name, spec in v.items()
        }
