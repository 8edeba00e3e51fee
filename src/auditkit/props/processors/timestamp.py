from typing import ClassVar, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec

DEFAULT_TIMEZONE = "America/Denver"
DEFAULT_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
DEFAULT_EVENT_FIELD_NAME = "auditkit.processors.timestamp"

KEY_TIMEZONE = "audit.processor.timestamp.timezone"
KEY_FORMAT = "audit.processor.timestamp.format"
KEY_EVENT_FIELD_NAME = "audit.processor.timestamp.eventFieldName"

FIELDS = (
    FieldSpec(name="timezone", key=KEY_TIMEZONE, default=DEFAULT_TIMEZONE),
    FieldSpec(name="format", key=KEY_FORMAT, default=DEFAULT_FORMAT),
    FieldSpec(name="event_field_name", key=KEY_EVENT_FIELD_NAME, default=DEFAULT_EVENT_FIELD_NAME),
)


class TimestampProperties(BaseProperties):
    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    timezone: str = DEFAULT_TIMEZONE
    format: str = DEFAULT_FORMAT
    event_field_name: str = DEFAULT_EVENT_FIELD_NAME


builder = MapBasedPropsBuilder(TimestampProperties)
build = builder.build
build_default = builder.build_default
