from typing import ClassVar, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec

DEFAULT_INSERT_EVENT_SQL_STMT = "TODO - CONFIGURE ME!"
DEFAULT_STRING_ENCODING = "UTF-8"
DEFAULT_EVENT_ID_FIELD_NAME = "TODO - CONFIGURE ME!"

KEY_INSERT_EVENT_SQL_STMT = "audit.processor.cassandra.insertEventSqlStmt"
KEY_STRING_ENCODING = "audit.processor.cassandra.stringEncoding"
KEY_EVENT_ID_FIELD_NAME = "audit.processor.cassandra.eventIdFieldName"

FIELDS = (
    FieldSpec(name="insert_event_sql_stmt", key=KEY_INSERT_EVENT_SQL_STMT, default=DEFAULT_INSERT_EVENT_SQL_STMT),
    FieldSpec(name="string_encoding", key=KEY_STRING_ENCODING, default=DEFAULT_STRING_ENCODING),
    FieldSpec(name="event_id_field_name", key=KEY_EVENT_ID_FIELD_NAME, default=DEFAULT_EVENT_ID_FIELD_NAME),
)


class CassandraProperties(BaseProperties):
    """
    Configuration of the processor that persists events to Cassandra.

    `insert_event_sql_stmt` is the CQL statement used to insert an event, and
    `event_id_field_name` names the event field holding the row key.
    """

    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    insert_event_sql_stmt: str = DEFAULT_INSERT_EVENT_SQL_STMT
    string_encoding: str = DEFAULT_STRING_ENCODING
    event_id_field_name: str = DEFAULT_EVENT_ID_FIELD_NAME


builder = MapBasedPropsBuilder(CassandraProperties)
build = builder.build
build_default = builder.build_default
