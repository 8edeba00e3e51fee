from auditkit.props.processors import cassandra
from auditkit.props.processors.cassandra import CassandraProperties


def test_additional_properties_are_not_the_input_map():
    raw = {"some property": "some value"}

    properties = cassandra.build(raw)

    assert properties.additional_properties == {"some property": "some value"}
    assert properties.additional_properties is not raw


def test_default_insert_statement():
    properties = cassandra.build_default()
    assert properties.insert_event_sql_stmt == cassandra.DEFAULT_INSERT_EVENT_SQL_STMT

    properties.insert_event_sql_stmt = "42"
    assert properties.insert_event_sql_stmt == "42"


def test_insert_statement():
    properties = cassandra.build({cassandra.KEY_INSERT_EVENT_SQL_STMT: None})
    assert properties.insert_event_sql_stmt == cassandra.DEFAULT_INSERT_EVENT_SQL_STMT

    properties = cassandra.build({cassandra.KEY_INSERT_EVENT_SQL_STMT: "42"})
    assert properties.insert_event_sql_stmt == "42"

    copy = CassandraProperties.copy_of(properties)
    assert copy.insert_event_sql_stmt == "42"


def test_string_encoding_and_event_id_field_name():
    properties = cassandra.build(
        {cassandra.KEY_STRING_ENCODING: "ISO-8859-1", cassandra.KEY_EVENT_ID_FIELD_NAME: "eventId"}
    )

    assert properties.string_encoding == "ISO-8859-1"
    assert properties.event_id_field_name == "eventId"
    assert properties.additional_properties == {}


def test_defaults():
    properties = cassandra.build_default()

    assert properties.string_encoding == cassandra.DEFAULT_STRING_ENCODING
    assert properties.event_id_field_name == cassandra.DEFAULT_EVENT_ID_FIELD_NAME
