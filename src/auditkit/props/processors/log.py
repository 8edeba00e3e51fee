from typing import ClassVar, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec

DEFAULT_MARKER = "[AUDIT] "
DEFAULT_STRING_ENCODING = "UTF-8"
DEFAULT_AUDIT_STREAM_FIELD_NAME = "auditStreamName"
DEFAULT_SERIALIZED_EVENT_FIELD_NAME = "serializedEvent"
DEFAULT_MDC_FIELDS = ""
DEFAULT_MDC_FIELD_SEPARATOR = ","
DEFAULT_MDC_FIELD_NAME_SEPARATOR = ":"

KEY_MARKER = "audit.processor.log.marker"
KEY_STRING_ENCODING = "audit.processor.log.stringEncoding"
KEY_AUDIT_STREAM_FIELD_NAME = "audit.processor.log.auditStreamFieldName"
KEY_SERIALIZED_EVENT_FIELD_NAME = "audit.processor.log.serializedEventFieldName"
KEY_MDC_FIELDS = "audit.processor.log.mdcFields"
KEY_MDC_FIELD_SEPARATOR = "audit.processor.log.mdcFieldSeparator"
KEY_MDC_FIELD_NAME_SEPARATOR = "audit.processor.log.mdcFieldNameSeparator"

FIELDS = (
    FieldSpec(name="marker", key=KEY_MARKER, default=DEFAULT_MARKER),
    FieldSpec(name="string_encoding", key=KEY_STRING_ENCODING, default=DEFAULT_STRING_ENCODING),
    FieldSpec(name="audit_stream_field_name", key=KEY_AUDIT_STREAM_FIELD_NAME, default=DEFAULT_AUDIT_STREAM_FIELD_NAME),
    FieldSpec(
        name="serialized_event_field_name",
        key=KEY_SERIALIZED_EVENT_FIELD_NAME,
        default=DEFAULT_SERIALIZED_EVENT_FIELD_NAME,
    ),
    FieldSpec(name="mdc_fields", key=KEY_MDC_FIELDS, default=DEFAULT_MDC_FIELDS),
    FieldSpec(name="mdc_field_separator", key=KEY_MDC_FIELD_SEPARATOR, default=DEFAULT_MDC_FIELD_SEPARATOR),
    FieldSpec(name="mdc_field_name_separator", key=KEY_MDC_FIELD_NAME_SEPARATOR, default=DEFAULT_MDC_FIELD_NAME_SEPARATOR),
)


class LogProperties(BaseProperties):
    """Configuration of the processor that writes events to the application log."""

    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    marker: str = DEFAULT_MARKER
    string_encoding: str = DEFAULT_STRING_ENCODING
    audit_stream_field_name: str = DEFAULT_AUDIT_STREAM_FIELD_NAME
    serialized_event_field_name: str = DEFAULT_SERIALIZED_EVENT_FIELD_NAME
    # Event fields copied into the logging context, as "field:contextKey" pairs
    mdc_fields: str = DEFAULT_MDC_FIELDS
    mdc_field_separator: str = DEFAULT_MDC_FIELD_SEPARATOR
    mdc_field_name_separator: str = DEFAULT_MDC_FIELD_NAME_SEPARATOR


builder = MapBasedPropsBuilder(LogProperties)
build = builder.build
build_default = builder.build_default
