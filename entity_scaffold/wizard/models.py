"""Pydantic v2 models for the entity field specification.

Defines the field descriptor variants collected by the field wizard and the
batch parser: one variant per relation kind plus a scalar variant, each
carrying only the attributes that make sense for it.  Descriptors serialise
to the camelCase dict layout consumed by the entity generator.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------

class RelationKind(str, Enum):
    """Association kinds understood by the entity generator."""
    MANY_TO_MANY = "many_to_many"
    MANY_TO_ONE = "many_to_one"
    ONE_TO_ONE = "one_to_one"
    ONE_TO_MANY = "one_to_many"


# ---------------------------------------------------------------------------
# Join artifacts
# ---------------------------------------------------------------------------

class JoinColumn(BaseModel):
    """Physical join column of a singular owning association."""
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., description="Join column name (may be empty)")
    referenced_column_name: Literal["id"] = Field(
        default="id", alias="referencedColumnName", description="Referenced primary key"
    )


class JoinTable(BaseModel):
    """Join table of an owning many-to-many association."""
    name: str = Field(..., description="Join table name")


# ---------------------------------------------------------------------------
# Field descriptors
# ---------------------------------------------------------------------------

class _Descriptor(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the generator-facing dict.

        Only attributes that were explicitly set are emitted, plus the
        ``type`` tag which relation variants carry as a default.
        """
        return self.model_dump(
            by_alias=True,
            mode="json",
            include=set(self.model_fields_set) | {"type"},
        )


class ScalarField(_Descriptor):
    """A plain mapped column."""
    column_name: Optional[str] = Field(
        default=None, alias="columnName", description="Database column name"
    )
    field_name: str = Field(..., alias="fieldName", description="Entity property name")
    type: str = Field(..., description="DBAL type name, e.g. 'string', 'datetime'")
    length: Optional[int] = Field(
        default=None, ge=1, description="Column length, only meaningful for 'string'"
    )


class _RelationField(_Descriptor):
    column_name: str = Field(..., alias="columnName", description="Column name as entered")
    field_name: str = Field(..., alias="fieldName", description="Entity property name")
    target_entity: str = Field(
        default="", alias="targetEntity", description="Related entity class or shorthand"
    )


class OneToManyField(_RelationField):
    """Inverse side of a many-to-one association. Never owning."""
    type: Literal[RelationKind.ONE_TO_MANY] = RelationKind.ONE_TO_MANY
    mapped_by: Optional[str] = Field(default=None, alias="mappedBy")


class ManyToOneField(_RelationField):
    """Owning side of a one-to-many association."""
    type: Literal[RelationKind.MANY_TO_ONE] = RelationKind.MANY_TO_ONE
    inversed_by: Optional[str] = Field(default=None, alias="inversedBy")
    join_column: Optional[JoinColumn] = Field(default=None, alias="joinColumn")


class _SidedRelationField(_RelationField):
    is_owning_side: bool = Field(default=True, alias="isOwningSide")
    inversed_by: Optional[str] = Field(default=None, alias="inversedBy")
    mapped_by: Optional[str] = Field(default=None, alias="mappedBy")

    owning_only: ClassVar[tuple[str, ...]] = ("inversed_by",)

    @model_validator(mode="after")
    def _check_side_attributes(self):
        if self.is_owning_side and self.mapped_by is not None:
            raise ValueError("mappedBy is only allowed on the inverse side")
        if not self.is_owning_side:
            for attr in self.owning_only:
                if getattr(self, attr) is not None:
                    raise ValueError(f"{attr} is only allowed on the owning side")
        return self


class OneToOneField(_SidedRelationField):
    """One-to-one association, owning or inverse."""
    type: Literal[RelationKind.ONE_TO_ONE] = RelationKind.ONE_TO_ONE
    join_column: Optional[JoinColumn] = Field(default=None, alias="joinColumn")

    owning_only: ClassVar[tuple[str, ...]] = ("inversed_by", "join_column")


class ManyToManyField(_SidedRelationField):
    """Many-to-many association, owning or inverse."""
    type: Literal[RelationKind.MANY_TO_MANY] = RelationKind.MANY_TO_MANY
    join_table: Optional[JoinTable] = Field(default=None, alias="joinTable")

    owning_only: ClassVar[tuple[str, ...]] = ("inversed_by", "join_table")


FieldDescriptor = Union[
    ScalarField, OneToManyField, ManyToOneField, OneToOneField, ManyToManyField
]
