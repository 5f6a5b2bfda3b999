"""Tests for the field descriptor models (entity_scaffold.wizard.models)."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from entity_scaffold.wizard.models import (
    JoinColumn,
    JoinTable,
    ManyToManyField,
    ManyToOneField,
    OneToManyField,
    OneToOneField,
    RelationKind,
    ScalarField,
)


pytestmark = pytest.mark.unit


class TestScalarField:
    def test_only_set_attributes_are_emitted(self):
        field = ScalarField(column_name="body", field_name="body", type="text")
        assert field.to_dict() == {"columnName": "body", "fieldName": "body", "type": "text"}

    def test_explicit_none_length_is_emitted(self):
        field = ScalarField(field_name="body", type="text", length=None)
        assert field.to_dict() == {"fieldName": "body", "type": "text", "length": None}

    def test_accepts_aliases(self):
        field = ScalarField(columnName="created_at", fieldName="createdAt", type="datetime")
        assert field.column_name == "created_at"
        assert field.field_name == "createdAt"

    def test_rejects_non_positive_length(self):
        with pytest.raises(ValidationError):
            ScalarField(field_name="title", type="string", length=0)


class TestRelationFields:
    def test_type_tag_always_emitted(self):
        field = OneToManyField(column_name="comments", field_name="comments", target_entity="Comment")
        assert field.to_dict()["type"] == "one_to_many"
        assert field.type is RelationKind.ONE_TO_MANY

    def test_join_column_serialised_with_referenced_column(self):
        field = ManyToOneField(
            column_name="author",
            field_name="author",
            target_entity="User",
            join_column=JoinColumn(name="author_id"),
        )
        assert field.to_dict()["joinColumn"] == {"name": "author_id", "referencedColumnName": "id"}

    def test_join_table_serialised(self):
        field = ManyToManyField(
            column_name="tags",
            field_name="tags",
            target_entity="Tag",
            is_owning_side=True,
            join_table=JoinTable(name="post_tag"),
        )
        assert field.to_dict()["joinTable"] == {"name": "post_tag"}

    def test_owning_side_cannot_have_mapped_by(self):
        with pytest.raises(ValidationError, match="mappedBy"):
            OneToOneField(
                column_name="profile", field_name="profile", is_owning_side=True, mapped_by="user"
            )

    @pytest.mark.parametrize(
        "model, extra",
        [
            (OneToOneField, {"join_column": JoinColumn(name="x")}),
            (OneToOneField, {"inversed_by": "user"}),
            (ManyToManyField, {"join_table": JoinTable(name="x")}),
            (ManyToManyField, {"inversed_by": "posts"}),
        ],
    )
    def test_inverse_side_cannot_have_owning_attributes(self, model, extra):
        with pytest.raises(ValidationError, match="only allowed on the owning side"):
            model(column_name="rel", field_name="rel", is_owning_side=False, **extra)

    def test_relation_type_is_fixed(self):
        with pytest.raises(ValidationError):
            OneToManyField(column_name="c", field_name="c", type="many_to_one")
