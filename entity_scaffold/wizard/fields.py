"""Batch parsing of the compact ``--fields`` syntax.

``"title:string(255) body:text"`` describes two fields.  The batch path does
no name or type validation: unknown types and duplicate or reserved names are
passed through as given (a later duplicate overwrites an earlier one), and a
length that is not a positive integer is dropped.  Only the interactive wizard
enforces those rules.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .models import FieldDescriptor, ScalarField
from .vocabulary import DEFAULT_TYPE

_TYPE_LENGTH_PATTERN = re.compile(r"(.*)\((.*)\)")
_LENGTH_PATTERN = re.compile(r"[0-9]+")


def parse_fields(spec: str | Mapping[str, Any] | None) -> dict[str, Any]:
    """Parse a compact field list into ``{name: descriptor}``.

    Already-structured input (a mapping) is returned unchanged as a dict so
    the command can be re-entered with previously collected fields.
    """
    if spec is None:
        return {}
    if isinstance(spec, Mapping):
        return dict(spec)

    fields: dict[str, FieldDescriptor] = {}
    for token in spec.split(" "):
        elements = token.split(":")
        name = elements[0]
        if not name:
            continue

        field_type = elements[1] if len(elements) > 1 else DEFAULT_TYPE
        length: str | None = None
        match = _TYPE_LENGTH_PATTERN.search(field_type)
        if match:
            field_type, length = match.group(1), match.group(2)

        fields[name] = ScalarField(
            field_name=name, type=field_type, length=_coerce_length(length)
        )
    return fields


def _coerce_length(raw: str | None) -> int | None:
    """Keep positive integer lengths; anything else means no length."""
    text = (raw or "").strip()
    if _LENGTH_PATTERN.fullmatch(text) and int(text) > 0:
        return int(text)
    return None


def fields_to_payload(fields: Mapping[str, Any]) -> list[dict[str, Any]]:
    """Flatten a field mapping into the ordered list the generator expects."""
    payload: list[dict[str, Any]] = []
    for descriptor in fields.values():
        if isinstance(descriptor, Mapping):
            payload.append(dict(descriptor))
        else:
            payload.append(descriptor.to_dict())
    return payload
