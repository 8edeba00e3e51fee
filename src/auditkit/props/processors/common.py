"""
Properties shared by the audit pipeline and every processor.

Besides the pipeline's own settings, the common properties name the event
fields that carry the standard audit attributes (actor, subject, result...).
Keys that are not recognized here are kept in `additional_properties`, which
is the raw map each processor builds its own properties from.
"""
from typing import ClassVar, List, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec, FieldType

DEFAULT_AUDIT_CLASS_NAME = "SyncAudit"
DEFAULT_AUDIT_STREAM = "Default audit stream - CONFIGURE ME!"
DEFAULT_ENCODING = "UTF-8"
DEFAULT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"
DEFAULT_PROCESSORS = ""
DEFAULT_FAIL_ON_MISSING_PROCESSORS = True
DEFAULT_FIELD_NAME_EVENT_TYPE = "eventType"
DEFAULT_FIELD_NAME_EVENT_GROUP_TYPE = "eventGroupType"
DEFAULT_FIELD_NAME_SUBJECT = "subject"
DEFAULT_FIELD_NAME_SUBJECT_LOCATION = "subjectLocation"
DEFAULT_FIELD_NAME_ACTOR = "actor"
DEFAULT_FIELD_NAME_OBJECT = "object"
DEFAULT_FIELD_NAME_OBJECT_LOCATION = "objectLocation"
DEFAULT_FIELD_NAME_CONTENT_BEFORE_OPERATION = "contentBeforeOperation"
DEFAULT_FIELD_NAME_CONTENT_AFTER_OPERATION = "contentAfterOperation"
DEFAULT_FIELD_NAME_RESULT = "result"
DEFAULT_FIELD_NAME_RESULT_SUMMARY = "resultSummary"
DEFAULT_FIELD_NAME_EVENT_SUMMARY = "eventSummary"

KEY_AUDIT_CLASS_NAME = "audit.auditClassName"
KEY_DEFAULT_AUDIT_STREAM = "audit.defaultAuditStreamName"
KEY_ENCODING = "audit.encoding"
KEY_DATE_FORMAT = "audit.dateFormat"
KEY_PROCESSORS = "audit.processors"
KEY_FAIL_ON_MISSING_PROCESSORS = "audit.failOnMissingProcessors"
KEY_FIELD_NAME_EVENT_TYPE = "audit.fieldName.eventType"
KEY_FIELD_NAME_EVENT_GROUP_TYPE = "audit.fieldName.eventGroupType"
KEY_FIELD_NAME_SUBJECT = "audit.fieldName.subject"
KEY_FIELD_NAME_SUBJECT_LOCATION = "audit.fieldName.subjectLocation"
KEY_FIELD_NAME_ACTOR = "audit.fieldName.actor"
KEY_FIELD_NAME_OBJECT = "audit.fieldName.object"
KEY_FIELD_NAME_OBJECT_LOCATION = "audit.fieldName.objectLocation"
KEY_FIELD_NAME_CONTENT_BEFORE_OPERATION = "audit.fieldName.contentBeforeOperation"
KEY_FIELD_NAME_CONTENT_AFTER_OPERATION = "audit.fieldName.contentAfterOperation"
KEY_FIELD_NAME_RESULT = "audit.fieldName.result"
KEY_FIELD_NAME_RESULT_SUMMARY = "audit.fieldName.resultSummary"
KEY_FIELD_NAME_EVENT_SUMMARY = "audit.fieldName.eventSummary"

FIELDS = (
    FieldSpec(name="audit_class_name", key=KEY_AUDIT_CLASS_NAME, default=DEFAULT_AUDIT_CLASS_NAME),
    FieldSpec(name="default_audit_stream", key=KEY_DEFAULT_AUDIT_STREAM, default=DEFAULT_AUDIT_STREAM),
    FieldSpec(name="encoding", key=KEY_ENCODING, default=DEFAULT_ENCODING),
    FieldSpec(name="date_format", key=KEY_DATE_FORMAT, default=DEFAULT_DATE_FORMAT),
    FieldSpec(name="processors", key=KEY_PROCESSORS, default=DEFAULT_PROCESSORS),
    FieldSpec(
        name="fail_on_missing_processors",
        key=KEY_FAIL_ON_MISSING_PROCESSORS,
        field_type=FieldType.BOOLEAN,
        default=DEFAULT_FAIL_ON_MISSING_PROCESSORS,
    ),
    FieldSpec(name="field_name_event_type", key=KEY_FIELD_NAME_EVENT_TYPE, default=DEFAULT_FIELD_NAME_EVENT_TYPE),
    FieldSpec(
        name="field_name_event_group_type",
        key=KEY_FIELD_NAME_EVENT_GROUP_TYPE,
        default=DEFAULT_FIELD_NAME_EVENT_GROUP_TYPE,
    ),
    FieldSpec(name="field_name_subject", key=KEY_FIELD_NAME_SUBJECT, default=DEFAULT_FIELD_NAME_SUBJECT),
    FieldSpec(
        name="field_name_subject_location",
        key=KEY_FIELD_NAME_SUBJECT_LOCATION,
        default=DEFAULT_FIELD_NAME_SUBJECT_LOCATION,
    ),
    FieldSpec(name="field_name_actor", key=KEY_FIELD_NAME_ACTOR, default=DEFAULT_FIELD_NAME_ACTOR),
    FieldSpec(name="field_name_object", key=KEY_FIELD_NAME_OBJECT, default=DEFAULT_FIELD_NAME_OBJECT),
    FieldSpec(
        name="field_name_object_location",
        key=KEY_FIELD_NAME_OBJECT_LOCATION,
        default=DEFAULT_FIELD_NAME_OBJECT_LOCATION,
    ),
    FieldSpec(
        name="field_name_content_before_operation",
        key=KEY_FIELD_NAME_CONTENT_BEFORE_OPERATION,
        default=DEFAULT_FIELD_NAME_CONTENT_BEFORE_OPERATION,
    ),
    FieldSpec(
        name="field_name_content_after_operation",
        key=KEY_FIELD_NAME_CONTENT_AFTER_OPERATION,
        default=DEFAULT_FIELD_NAME_CONTENT_AFTER_OPERATION,
    ),
    FieldSpec(name="field_name_result", key=KEY_FIELD_NAME_RESULT, default=DEFAULT_FIELD_NAME_RESULT),
    FieldSpec(
        name="field_name_result_summary",
        key=KEY_FIELD_NAME_RESULT_SUMMARY,
        default=DEFAULT_FIELD_NAME_RESULT_SUMMARY,
    ),
    FieldSpec(
        name="field_name_event_summary",
        key=KEY_FIELD_NAME_EVENT_SUMMARY,
        default=DEFAULT_FIELD_NAME_EVENT_SUMMARY,
    ),
)


class CommonProperties(BaseProperties):
    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    audit_class_name: str = DEFAULT_AUDIT_CLASS_NAME
    default_audit_stream: str = DEFAULT_AUDIT_STREAM
    encoding: str = DEFAULT_ENCODING
    date_format: str = DEFAULT_DATE_FORMAT
    # Comma separated processor names, in execution order
    processors: str = DEFAULT_PROCESSORS
    fail_on_missing_processors: bool = DEFAULT_FAIL_ON_MISSING_PROCESSORS
    field_name_event_type: str = DEFAULT_FIELD_NAME_EVENT_TYPE
    field_name_event_group_type: str = DEFAULT_FIELD_NAME_EVENT_GROUP_TYPE
    field_name_subject: str = DEFAULT_FIELD_NAME_SUBJECT
    field_name_subject_location: str = DEFAULT_FIELD_NAME_SUBJECT_LOCATION
    field_name_actor: str = DEFAULT_FIELD_NAME_ACTOR
    field_name_object: str = DEFAULT_FIELD_NAME_OBJECT
    field_name_object_location: str = DEFAULT_FIELD_NAME_OBJECT_LOCATION
    field_name_content_before_operation: str = DEFAULT_FIELD_NAME_CONTENT_BEFORE_OPERATION
    field_name_content_after_operation: str = DEFAULT_FIELD_NAME_CONTENT_AFTER_OPERATION
    field_name_result: str = DEFAULT_FIELD_NAME_RESULT
    field_name_result_summary: str = DEFAULT_FIELD_NAME_RESULT_SUMMARY
    field_name_event_summary: str = DEFAULT_FIELD_NAME_EVENT_SUMMARY

    def processor_names(self) -> List[str]:
        """The configured processor names, in order, without blanks."""
        return [name.strip() for name in self.processors.split(",") if name.strip()]


builder = MapBasedPropsBuilder(CommonProperties)
build = builder.build
build_default = builder.build_default
