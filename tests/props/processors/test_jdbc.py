import pytest

from auditkit.props.processors import jdbc
from auditkit.props.processors.jdbc import JdbcProperties


@pytest.mark.parametrize("spec", jdbc.FIELDS, ids=lambda spec: spec.name)
def test_defaults(spec):
    assert getattr(jdbc.build_default(), spec.name) == spec.default


@pytest.mark.parametrize("spec", jdbc.FIELDS, ids=lambda spec: spec.name)
def test_null_value_uses_default(spec):
    assert getattr(jdbc.build({spec.key: None}), spec.name) == spec.default


def test_configured_values():
    raw = {
        jdbc.KEY_INSERT_EVENT_SQL_STMT: "INSERT INTO audit (id, stream, event) VALUES (?, ?, ?)",
        jdbc.KEY_INDEXED_FIELDS: "actor:actor_idx,subject:subject_idx",
        jdbc.KEY_INDEXED_FIELDS_MAX_LENGTH: "64",
        jdbc.KEY_INDEXED_FIELDS_TO_LOWER: "true",
        jdbc.KEY_DATA_SOURCE_NAME: "auditDs",
        "audit.processor.jdbc.pool.size": "4",
    }

    properties = jdbc.build(raw)

    assert properties.insert_event_sql_stmt == "INSERT INTO audit (id, stream, event) VALUES (?, ?, ?)"
    assert properties.indexed_fields == "actor:actor_idx,subject:subject_idx"
    assert properties.indexed_fields_max_length == 64
    assert properties.indexed_fields_to_lower is True
    assert properties.data_source_name == "auditDs"
    assert properties.additional_properties == {"audit.processor.jdbc.pool.size": "4"}


def test_malformed_max_length_uses_default():
    properties = jdbc.build({jdbc.KEY_INDEXED_FIELDS_MAX_LENGTH: "asdf"})
    assert properties.indexed_fields_max_length == jdbc.DEFAULT_INDEXED_FIELDS_MAX_LENGTH


def test_copy_of_copies_all_fields():
    properties = jdbc.build(
        {
            jdbc.KEY_INDEXED_FIELDS_MAX_LENGTH: "42",
            jdbc.KEY_INDEXED_FIELD_SEPARATOR: ";",
            jdbc.KEY_JNDI_CONNECTION_NAME: "java:comp/env/jdbc/audit",
            "other": "value",
        }
    )

    copy = JdbcProperties.copy_of(properties)

    for spec in jdbc.FIELDS:
        assert getattr(copy, spec.name) == getattr(properties, spec.name)
    assert copy.additional_properties == {"other": "value"}
    assert copy.additional_properties is not properties.additional_properties
