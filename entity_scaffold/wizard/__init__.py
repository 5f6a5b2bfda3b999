"""Entity field specification wizard.

Collects the fields and associations of a new entity, either interactively
or from the compact ``--fields`` syntax.

Usage::

    from entity_scaffold.wizard import FieldWizard, TypeRegistry, parse_fields

    fields = parse_fields("title:string(255) body:text")
    wizard = FieldWizard(session, TypeRegistry(), is_reserved=lambda n: False)
    fields = wizard.run(fields)
"""

from .field_wizard import FieldWizard
from .fields import fields_to_payload, parse_fields
from .models import (
    FieldDescriptor,
    JoinColumn,
    JoinTable,
    ManyToManyField,
    ManyToOneField,
    OneToManyField,
    OneToOneField,
    RelationKind,
    ScalarField,
)
from .session import ConsoleSession, InteractiveSession, Question
from .validators import InvalidInputError
from .vocabulary import TypeRegistry, guess_field_type

__all__ = [
    "FieldWizard",
    "parse_fields",
    "fields_to_payload",
    "FieldDescriptor",
    "ScalarField",
    "OneToManyField",
    "ManyToOneField",
    "OneToOneField",
    "ManyToManyField",
    "JoinColumn",
    "JoinTable",
    "RelationKind",
    "ConsoleSession",
    "InteractiveSession",
    "Question",
    "InvalidInputError",
    "TypeRegistry",
    "guess_field_type",
]
