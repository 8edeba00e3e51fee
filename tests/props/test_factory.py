import pytest
from structlog.testing import capture_logs

from auditkit.core.logging import configure_logging
from auditkit.props.factory import PropsBuilderFactory
from auditkit.props.processors import common, event_id, jdbc
from auditkit.props.processors.event_id import EventIdProperties
from auditkit.props.processors.jdbc import JdbcProperties


def test_props_builder_factory_is_singleton():
    assert PropsBuilderFactory() is PropsBuilderFactory()


def test_get_builder_returns_registered_builder():
    assert PropsBuilderFactory().get_builder("jdbc") is jdbc.builder


def test_unknown_processor_raises():
    with pytest.raises(ValueError, match="Unknown processor: 'kafka'"):
        PropsBuilderFactory().get_builder("kafka")


def test_build_by_name():
    properties = PropsBuilderFactory().build("jdbc", {jdbc.KEY_INDEXED_FIELDS_MAX_LENGTH: "asdf", "x": "y"})

    assert isinstance(properties, JdbcProperties)
    assert properties.indexed_fields_max_length == jdbc.DEFAULT_INDEXED_FIELDS_MAX_LENGTH
    assert properties.additional_properties == {"x": "y"}


def test_build_without_properties_uses_defaults():
    assert PropsBuilderFactory().build("event_id") == event_id.build_default()


def test_build_for_processor_reads_common_pass_through_keys():
    common_properties = common.build(
        {
            common.KEY_PROCESSORS: "event_id",
            event_id.KEY_LENGTH: "16",
            "unrelated": "value",
        }
    )

    properties = PropsBuilderFactory().build_for_processor("event_id", common_properties)

    assert isinstance(properties, EventIdProperties)
    assert properties.length == 16
    assert properties.additional_properties == {"unrelated": "value"}
    assert properties.additional_properties is not common_properties.additional_properties


def test_every_registered_processor_builds_defaults():
    factory = PropsBuilderFactory()

    for name in factory.processor_names:
        properties = factory.build(name, {})
        assert properties == factory.get_builder(name).build_default()


def test_build_logs_field_names_but_never_values():
    configure_logging()

    with capture_logs() as captured:
        PropsBuilderFactory().build("event_id", {event_id.KEY_LENGTH: "secretvalue", "x": "topsecret"})

    events = {entry["event"]: entry for entry in captured}
    assert events["props.built"]["log_level"] == "info"
    assert events["props.built"]["additional_properties"] == 1
    assert events["props.built"]["defaulted_count"] == 2
    assert events["props.defaulted"]["log_level"] == "debug"
    assert events["props.defaulted"]["fields"] == ["length", "event_field_name"]
    assert events["props.defaulted"]["malformed"] == ["length"]
    assert "secretvalue" not in str(captured)
    assert "topsecret" not in str(captured)
