"""Pure input validators for the entity scaffolding command.

Every validator returns the (possibly normalised) value on success and raises
:class:`InvalidInputError` with a user-facing message otherwise.  State such as
the names already defined or the reserved-word predicate is passed in
explicitly.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Collection, Container

MAPPING_FORMATS: tuple[str, ...] = ("yml", "xml", "php", "annotation")
RESERVED_FIELD_NAME = "id"

_ENTITY_NAME_PATTERN = re.compile(r"^[a-z0-9_]+:[a-z0-9_\\/]+$", re.IGNORECASE)


class InvalidInputError(ValueError):
    """Raised when a user-supplied answer fails validation."""


def validate_field_name(
    name: str,
    existing: Collection[str],
    is_reserved: Callable[[str], bool],
) -> str:
    """Accept a new column name.

    Rejects names already present in *existing*, the implicit primary key
    ``id`` and anything *is_reserved* flags.  An empty name is returned as-is
    so the caller can treat it as "stop".
    """
    if not name:
        return name
    if name in existing or name == RESERVED_FIELD_NAME:
        raise InvalidInputError(f'Field "{name}" is already defined.')
    if is_reserved(name):
        raise InvalidInputError(f'Name "{name}" is a reserved word.')
    return name


def validate_field_type(field_type: str, vocabulary: Container[str]) -> str:
    """Accept a type that belongs to *vocabulary*."""
    if field_type not in vocabulary:
        raise InvalidInputError(f'Invalid type "{field_type}".')
    return field_type


def validate_length(length: str | int | None) -> int | None:
    """Accept a positive integer length, or nothing.

    Returns the length as an ``int``; empty input yields ``None``.
    """
    if length is None or length == "":
        return None
    if isinstance(length, int) and not isinstance(length, bool):
        value = length
    else:
        text = str(length).strip()
        if not re.fullmatch(r"[+-]?\d+", text):
            raise InvalidInputError(f'Invalid length "{length}".')
        value = int(text)
    if value < 1:
        raise InvalidInputError(f'Invalid length "{length}".')
    return value


def validate_entity_name(entity: str | None) -> str:
    """Accept an entity shorthand such as ``AcmeBlogBundle:Blog/Post``."""
    if not entity or not _ENTITY_NAME_PATTERN.match(entity):
        raise InvalidInputError(
            f"The entity name isn't valid (\"{entity or ''}\" given, "
            "expecting something like AcmeBlogBundle:Blog/Post)"
        )
    return entity


def validate_format(fmt: str | None) -> str:
    """Accept one of the supported mapping formats, lower-cased."""
    if not fmt:
        raise InvalidInputError("Please enter a configuration format.")
    normalised = fmt.lower()
    if normalised not in MAPPING_FORMATS:
        raise InvalidInputError(f'Format "{normalised}" is not supported.')
    return normalised


def parse_shortcut_notation(shortcut: str) -> tuple[str, str]:
    """Split ``Bundle:Path/To/Entity`` into ``("Bundle", "Path\\To\\Entity")``."""
    entity = shortcut.replace("/", "\\")
    bundle, sep, name = entity.partition(":")
    if not sep:
        raise InvalidInputError(
            f'The entity name must contain a : ("{entity}" given, '
            "expecting something like AcmeBlogBundle:Blog/Post)"
        )
    return bundle, name
