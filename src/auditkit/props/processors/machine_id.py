from typing import ClassVar, Tuple

from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.fields import FieldSpec, FieldType

DEFAULT_MACHINE_ID = ""
DEFAULT_EVENT_FIELD_NAME = "auditkit.processors.machineid"
DEFAULT_MACHINE_ID_FROM_ENV = False
DEFAULT_MACHINE_ID_ENV_NAME = "MACHINE_ID"
DEFAULT_MACHINE_ID_FROM_HOSTNAME = False

KEY_MACHINE_ID = "audit.processor.machineId.machineId"
KEY_EVENT_FIELD_NAME = "audit.processor.machineId.eventFieldName"
KEY_MACHINE_ID_FROM_ENV = "audit.processor.machineId.fromEnv"
KEY_MACHINE_ID_ENV_NAME = "audit.processor.machineId.envName"
KEY_MACHINE_ID_FROM_HOSTNAME = "audit.processor.machineId.fromHostname"

FIELDS = (
    FieldSpec(name="machine_id", key=KEY_MACHINE_ID, default=DEFAULT_MACHINE_ID),
    FieldSpec(name="event_field_name", key=KEY_EVENT_FIELD_NAME, default=DEFAULT_EVENT_FIELD_NAME),
    FieldSpec(
        name="machine_id_from_env",
        key=KEY_MACHINE_ID_FROM_ENV,
        field_type=FieldType.BOOLEAN,
        default=DEFAULT_MACHINE_ID_FROM_ENV,
    ),
    FieldSpec(name="machine_id_env_name", key=KEY_MACHINE_ID_ENV_NAME, default=DEFAULT_MACHINE_ID_ENV_NAME),
    FieldSpec(
        name="machine_id_from_hostname",
        key=KEY_MACHINE_ID_FROM_HOSTNAME,
        field_type=FieldType.BOOLEAN,
        default=DEFAULT_MACHINE_ID_FROM_HOSTNAME,
    ),
)


class MachineIdProperties(BaseProperties):
    """
    Configuration of the processor that stamps the emitting machine onto each event.

    The ID is taken from `machine_id` when set, otherwise from the environment
    variable `machine_id_env_name` when `machine_id_from_env` is on, otherwise
    from the hostname when `machine_id_from_hostname` is on.
    """

    field_specs: ClassVar[Tuple[FieldSpec, ...]] = FIELDS

    machine_id: str = DEFAULT_MACHINE_ID
    event_field_name: str = DEFAULT_EVENT_FIELD_NAME
    machine_id_from_env: bool = DEFAULT_MACHINE_ID_FROM_ENV
    machine_id_env_name: str = DEFAULT_MACHINE_ID_ENV_NAME
    machine_id_from_hostname: bool = DEFAULT_MACHINE_ID_FROM_HOSTNAME


builder = MapBasedPropsBuilder(MachineIdProperties)
build = builder.build
build_default = builder.build_default
