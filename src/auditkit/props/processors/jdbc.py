from typing import ClassVar, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec, FieldType

DEFAULT_INSERT_EVENT_SQL_STMT = "TODO - CONFIGURE ME!"
DEFAULT_STRING_ENCODING = "UTF-8"
DEFAULT_EVENT_ID_FIELD_NAME = "TODO - CONFIGURE ME!"
DEFAULT_INDEXED_FIELDS = ""
DEFAULT_INDEXED_FIELDS_MAX_LENGTH = 255
DEFAULT_INDEXED_FIELDS_TO_LOWER = False
DEFAULT_INSERT_INDEXED_FIELD_SQL_STMT = "TODO - CONFIGURE ME!"
DEFAULT_INDEXED_FIELD_SEPARATOR = ","
DEFAULT_INDEXED_FIELD_NAME_SEPARATOR = ":"
DEFAULT_JNDI_CONNECTION_NAME = "TODO - CONFIGURE ME!"
DEFAULT_DATA_SOURCE_NAME = "TODO - CONFIGURE ME!"

KEY_INSERT_EVENT_SQL_STMT = "audit.processor.jdbc.insertEventSqlStmt"
KEY_STRING_ENCODING = "audit.processor.jdbc.stringEncoding"
KEY_EVENT_ID_FIELD_NAME = "audit.processor.jdbc.eventIdFieldName"
KEY_INDEXED_FIELDS = "audit.processor.jdbc.indexedFields"
KEY_INDEXED_FIELDS_MAX_LENGTH = "audit.processor.jdbc.indexedFieldsMaxLength"
KEY_INDEXED_FIELDS_TO_LOWER = "audit.processor.jdbc.indexedFieldsToLower"
KEY_INSERT_INDEXED_FIELD_SQL_STMT = "audit.processor.jdbc.insertIndexedFieldSqlStmt"
KEY_INDEXED_FIELD_SEPARATOR = "audit.processor.jdbc.indexedFieldSeparator"
KEY_INDEXED_FIELD_NAME_SEPARATOR = "audit.processor.jdbc.indexedFieldNameSeparator"
KEY_JNDI_CONNECTION_NAME = "audit.processor.jdbc.jndi.connectionName"
KEY_DATA_SOURCE_NAME = "audit.processor.jdbc.dataSource.Name"

FIELDS = (
    FieldSpec(name="insert_event_sql_stmt", key=KEY_INSERT_EVENT_SQL_STMT, default=DEFAULT_INSERT_EVENT_SQL_STMT),
    FieldSpec(name="string_encoding", key=KEY_STRING_ENCODING, default=DEFAULT_STRING_ENCODING),
    FieldSpec(name="event_id_field_name", key=KEY_EVENT_ID_FIELD_NAME, default=DEFAULT_EVENT_ID_FIELD_NAME),
    FieldSpec(name="indexed_fields", key=KEY_INDEXED_FIELDS, default=DEFAULT_INDEXED_FIELDS),
    FieldSpec(
        name="indexed_fields_max_length",
        key=KEY_INDEXED_FIELDS_MAX_LENGTH,
        field_type=FieldType.INTEGER,
        default=DEFAULT_INDEXED_FIELDS_MAX_LENGTH,
    ),
    FieldSpec(
        name="indexed_fields_to_lower",
        key=KEY_INDEXED_FIELDS_TO_LOWER,
        field_type=FieldType.BOOLEAN,
        default=DEFAULT_INDEXED_FIELDS_TO_LOWER,
    ),
    FieldSpec(
        name="insert_indexed_field_sql_stmt",
        key=KEY_INSERT_INDEXED_FIELD_SQL_STMT,
        default=DEFAULT_INSERT_INDEXED_FIELD_SQL_STMT,
    ),
    FieldSpec(name="indexed_field_separator", key=KEY_INDEXED_FIELD_SEPARATOR, default=DEFAULT_INDEXED_FIELD_SEPARATOR),
    FieldSpec(
        name="indexed_field_name_separator",
        key=KEY_INDEXED_FIELD_NAME_SEPARATOR,
        default=DEFAULT_INDEXED_FIELD_NAME_SEPARATOR,
    ),
    FieldSpec(name="jndi_connection_name", key=KEY_JNDI_CONNECTION_NAME, default=DEFAULT_JNDI_CONNECTION_NAME),
    FieldSpec(name="data_source_name", key=KEY_DATA_SOURCE_NAME, default=DEFAULT_DATA_SOURCE_NAME),
)


class JdbcProperties(BaseProperties):
    """
    Configuration of the processors that persist events through a SQL database.

    Besides the event insert statement, the JDBC processors can write selected
    event fields into a separate index table. `indexed_fields` lists those
    fields as `name:alias` pairs separated by `indexed_field_separator`, and
    values longer than `indexed_fields_max_length` are truncated.
    """

    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    insert_event_sql_stmt: str = DEFAULT_INSERT_EVENT_SQL_STMT
    string_encoding: str = DEFAULT_STRING_ENCODING
    event_id_field_name: str = DEFAULT_EVENT_ID_FIELD_NAME
    indexed_fields: str = DEFAULT_INDEXED_FIELDS
    indexed_fields_max_length: int = DEFAULT_INDEXED_FIELDS_MAX_LENGTH
    indexed_fields_to_lower: bool = DEFAULT_INDEXED_FIELDS_TO_LOWER
    insert_indexed_field_sql_stmt: str = DEFAULT_INSERT_INDEXED_FIELD_SQL_STMT
    indexed_field_separator: str = DEFAULT_INDEXED_FIELD_SEPARATOR
    indexed_field_name_separator: str = DEFAULT_INDEXED_FIELD_NAME_SEPARATOR
    jndi_connection_name: str = DEFAULT_JNDI_CONNECTION_NAME
    data_source_name: str = DEFAULT_DATA_SOURCE_NAME


builder = MapBasedPropsBuilder(JdbcProperties)
build = builder.build
build_default = builder.build_default
