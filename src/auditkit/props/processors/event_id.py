from typing import ClassVar, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec, FieldType

DEFAULT_LENGTH = 32
DEFAULT_EVENT_FIELD_NAME = "auditkit.processors.eventid"

KEY_LENGTH = "audit.processor.eventId.length"
KEY_EVENT_FIELD_NAME = "audit.processor.eventId.eventFieldName"

FIELDS = (
    FieldSpec(name="length", key=KEY_LENGTH, field_type=FieldType.INTEGER, default=DEFAULT_LENGTH),
    FieldSpec(name="event_field_name", key=KEY_EVENT_FIELD_NAME, default=DEFAULT_EVENT_FIELD_NAME),
)


class EventIdProperties(BaseProperties):
    """Configuration of the processor that stamps a random ID onto each event."""

    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    length: int = DEFAULT_LENGTH
    event_field_name: str = DEFAULT_EVENT_FIELD_NAME


builder = MapBasedPropsBuilder(EventIdProperties)
build = builder.build
build_default = builder.build_default
