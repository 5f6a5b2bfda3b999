"""Field type vocabulary: DBAL scalar types plus association kinds."""

from __future__ import annotations

from collections.abc import Iterable

from .models import RelationKind


# Mirrors the DBAL type registry, in registration order.
DEFAULT_SCALAR_TYPES: tuple[str, ...] = (
    "array",
    "simple_array",
    "json_array",
    "object",
    "boolean",
    "integer",
    "smallint",
    "bigint",
    "string",
    "text",
    "datetime",
    "datetimetz",
    "date",
    "time",
    "decimal",
    "float",
    "binary",
    "blob",
    "guid",
)

RELATION_TYPES: tuple[str, ...] = tuple(kind.value for kind in RelationKind)

DEFAULT_TYPE = "string"
DEFAULT_STRING_LENGTH = 255


class TypeRegistry:
    """The set of field types a field may be declared with.

    Scalar types come from the DBAL registry and may be extended with
    user-defined types; the four relation kinds are always appended.
    """

    def __init__(self, custom_types: Iterable[str] | None = None) -> None:
        scalars = list(DEFAULT_SCALAR_TYPES)
        for name in custom_types or ():
            if name not in scalars and name not in RELATION_TYPES:
                scalars.append(name)
        self._scalars = tuple(scalars)

    @property
    def scalar_types(self) -> tuple[str, ...]:
        return self._scalars

    @property
    def relation_types(self) -> tuple[str, ...]:
        return RELATION_TYPES

    @property
    def all_types(self) -> list[str]:
        """Scalar types followed by relation kinds; used for completion."""
        return [*self._scalars, *RELATION_TYPES]

    def __contains__(self, name: object) -> bool:
        return name in self._scalars or name in RELATION_TYPES

    def is_relation(self, name: str) -> bool:
        return name in RELATION_TYPES


def guess_field_type(column_name: str) -> str:
    """Guess a sensible default type from naming conventions.

    Examples::

        guess_field_type("created_at")   -> "datetime"
        guess_field_type("author_id")    -> "integer"
        guess_field_type("is_active")    -> "boolean"
        guess_field_type("has_comments") -> "boolean"
        guess_field_type("title")        -> "string"
    """
    if column_name.endswith("_at"):
        return "datetime"
    if column_name.endswith("_id"):
        return "integer"
    if column_name.startswith(("is_", "has_")):
        return "boolean"
    return DEFAULT_TYPE
