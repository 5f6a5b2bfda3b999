"""Interactive field specification wizard.

Prompts for one field after another until an empty name is entered,
inferring a default type from the column name and asking the follow-up
questions each relation kind needs.  The accumulated mapping is returned in
insertion order and is never modified afterwards.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from functools import partial
from typing import Any

from rich.markup import escape

from ..utils import lower_camelize
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
from .session import InteractiveSession, Question, ask, confirm
from .validators import validate_field_name, validate_field_type, validate_length
from .vocabulary import DEFAULT_STRING_LENGTH, TypeRegistry, guess_field_type

# Available types are wrapped once the running line width passes this.
_LINE_WIDTH = 50


class FieldWizard:
    """Collects field descriptors for a new entity.

    Args:
        session: Source of answers and sink for messages.
        types: Known field types.
        is_reserved: Reserved-word predicate supplied by the generator.
        target_entities: Entity names offered when asking for a relation
            target.
        default_length: Default offered for ``string`` columns.
    """

    def __init__(
        self,
        session: InteractiveSession,
        types: TypeRegistry,
        is_reserved: Callable[[str], bool],
        target_entities: Sequence[str] = (),
        default_length: int = DEFAULT_STRING_LENGTH,
    ) -> None:
        self.session = session
        self.types = types
        self.is_reserved = is_reserved
        self.target_entities = list(target_entities)
        self.default_length = default_length

    # -- Public API --------------------------------------------------------

    def run(self, initial: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Run the prompt loop and return ``{column_name: descriptor}``.

        Args:
            initial: Fields collected beforehand (e.g. from ``--fields``).
                They are kept first and their names count as taken.
        """
        fields: dict[str, Any] = dict(initial or {})
        self._write_intro()

        while True:
            self.session.write()
            column_name = ask(
                self.session,
                Question(
                    "New field name (press <return> to stop adding fields)",
                    validator=partial(
                        validate_field_name,
                        existing=fields.keys(),
                        is_reserved=self.is_reserved,
                    ),
                ),
            )
            if not column_name:
                break
            fields[column_name] = self.ask_field(column_name)

        return fields

    def ask_field(self, column_name: str) -> FieldDescriptor:
        """Ask the type (and follow-ups) of one already-named field."""
        field_type = ask(
            self.session,
            Question(
                "Field type",
                default=guess_field_type(column_name),
                validator=partial(validate_field_type, vocabulary=self.types),
                autocomplete=self.types.all_types,
            ),
        )
        base = {"column_name": column_name, "field_name": lower_camelize(column_name)}

        if self.types.is_relation(field_type):
            branches = {
                RelationKind.ONE_TO_MANY: self._one_to_many,
                RelationKind.MANY_TO_ONE: self._many_to_one,
                RelationKind.ONE_TO_ONE: self._one_to_one,
                RelationKind.MANY_TO_MANY: self._many_to_many,
            }
            return branches[RelationKind(field_type)](base)

        if field_type == "string":
            # A blank answer takes the default, so a length is always recorded.
            length = ask(
                self.session,
                Question("Field length", default=self.default_length, validator=validate_length),
            )
            return ScalarField(**base, type=field_type, length=length)
        return ScalarField(**base, type=field_type)

    # -- Relation branches -------------------------------------------------

    def _one_to_many(self, base: dict[str, str]) -> OneToManyField:
        data: dict[str, Any] = {**base, "target_entity": self._ask_target_entity()}
        _set_if_given(data, "mapped_by", self._ask_optional("Mapped by"))
        return OneToManyField(**data)

    def _many_to_one(self, base: dict[str, str]) -> ManyToOneField:
        data: dict[str, Any] = {**base, "target_entity": self._ask_target_entity()}
        _set_if_given(data, "inversed_by", self._ask_optional("Inversed by"))
        join_column = self._ask_optional("Join Column Name")
        if join_column:
            data["join_column"] = JoinColumn(name=join_column)
        return ManyToOneField(**data)

    def _one_to_one(self, base: dict[str, str]) -> OneToOneField:
        data: dict[str, Any] = {**base, "target_entity": self._ask_target_entity()}
        if confirm(self.session, "Is Owning Side?", default=True):
            _set_if_given(data, "inversed_by", self._ask_optional("Inversed By"))
            # Captured even when empty: the owning side always carries a join column.
            data["join_column"] = JoinColumn(name=self._ask_optional("Join Column Name"))
            data["is_owning_side"] = True
        else:
            _set_if_given(data, "mapped_by", self._ask_optional("Mapped By"))
            data["is_owning_side"] = False
        return OneToOneField(**data)

    def _many_to_many(self, base: dict[str, str]) -> ManyToManyField:
        data: dict[str, Any] = {**base, "target_entity": self._ask_target_entity()}
        if confirm(self.session, "Is Owning Side?", default=True):
            _set_if_given(data, "inversed_by", self._ask_optional("Inversed By"))
            join_table = self._ask_optional("Join Table Name")
            if join_table:
                data["join_table"] = JoinTable(name=join_table)
            data["is_owning_side"] = True
        else:
            _set_if_given(data, "mapped_by", self._ask_optional("Mapped By"))
            data["is_owning_side"] = False
        return ManyToManyField(**data)

    # -- Helpers -----------------------------------------------------------

    def _ask_target_entity(self) -> str:
        return ask(
            self.session,
            Question("Target Entity class", default="", autocomplete=self.target_entities),
        )

    def _ask_optional(self, label: str) -> str:
        return ask(self.session, Question(label, default=""))

    def _write_intro(self) -> None:
        self.session.write()
        self.session.write("Instead of starting with a blank entity, you can add some fields now.")
        self.session.write(
            "Note that the primary key will be added automatically "
            "(named [yellow]id[/yellow])."
        )
        self.session.write()
        self.session.write(
            "[green]Available types:[/green] " + _wrap_names(self.types.scalar_types)
        )
        self.session.write(
            "[green]Available relations:[/green] " + _wrap_names(self.types.relation_types)
        )
        if self.target_entities:
            self.session.write(
                "[green]Known entities:[/green] " + _wrap_names(self.target_entities)
            )


def _set_if_given(data: dict[str, Any], key: str, value: str) -> None:
    if value:
        data[key] = value


def _wrap_names(names: Sequence[str]) -> str:
    """Join *names* as a comma list, breaking lines roughly every 50 chars."""
    parts: list[str] = []
    width = 20
    for i, name in enumerate(names):
        if width > _LINE_WIDTH:
            width = 0
            parts.append("\n")
        width += len(name)
        parts.append(f"[yellow]{escape(name)}[/yellow]")
        parts.append(", " if i + 1 != len(names) else ".")
    return "".join(parts)
