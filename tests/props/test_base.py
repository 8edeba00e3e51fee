from typing import ClassVar, Tuple

import pytest

from auditkit.props.base import BaseProperties
from auditkit.props.fields import FieldSpec, FieldType
from auditkit.props.processors.cassandra import CassandraProperties
from auditkit.props.processors.event_id import EventIdProperties


def test_copy_of_copies_every_named_field():
    original = EventIdProperties(length=12, event_field_name="id", additional_properties={"a": "b"})

    copy = EventIdProperties.copy_of(original)

    assert copy is not original
    assert copy.length == 12
    assert copy.event_field_name == "id"
    assert copy == original


def test_copy_of_allocates_new_additional_properties():
    original = CassandraProperties(additional_properties={"some property": "some value"})

    copy = CassandraProperties.copy_of(original)
    copy.additional_properties["other"] = "value"

    assert copy.additional_properties is not original.additional_properties
    assert original.additional_properties == {"some property": "some value"}


def test_copy_of_keeps_values_set_after_construction():
    """Setters are not validated, and the copy takes whatever is stored."""
    original = EventIdProperties()
    original.length = "not a number"

    assert EventIdProperties.copy_of(original).length == "not a number"


def test_copy_of_rejects_other_properties_types():
    with pytest.raises(TypeError):
        EventIdProperties.copy_of(CassandraProperties())


def test_subclass_must_declare_a_model_field_per_spec():
    with pytest.raises(TypeError, match="no such field"):
        class MissingFieldProperties(BaseProperties):
            field_specs: ClassVar[Tuple[FieldSpec, ...]] = (
                FieldSpec(name="missing", key="test.missing", default="x"),
            )


def test_subclass_defaults_must_match_specs():
    with pytest.raises(TypeError, match="defaults to"):
        class MismatchedDefaultProperties(BaseProperties):
            field_specs: ClassVar[Tuple[FieldSpec, ...]] = (
                FieldSpec(name="name", key="test.name", default="x"),
            )

            name: str = "y"


def test_spec_default_must_be_valid_for_its_type():
    with pytest.raises(TypeError, match="is not a valid integer"):
        class InvalidDefaultProperties(BaseProperties):
            field_specs: ClassVar[Tuple[FieldSpec, ...]] = (
                FieldSpec(name="size", key="test.size", field_type=FieldType.INTEGER, default="10"),
            )

            size: str = "10"


def test_spec_type_must_match_model_annotation():
    with pytest.raises(TypeError, match="is annotated"):
        class MismatchedTypeProperties(BaseProperties):
            field_specs: ClassVar[Tuple[FieldSpec, ...]] = (
                FieldSpec(name="size", key="test.size", field_type=FieldType.INTEGER, default=10),
            )

            size: str = 10
