from typing import Dict, Mapping, Optional

from auditkit.core.logging import LoggerRegistry
from auditkit.props.base import BaseProperties
from auditkit.props.builder import MapBasedPropsBuilder
from auditkit.props.processors import cassandra, common, event_id, jdbc, log, machine_id, timestamp
from auditkit.props.processors.common import CommonProperties


class PropsBuilderFactory:
    """
    Registry of the properties builders, keyed by processor name.

    Singleton; the registry is filled once and only read afterwards. Unlike
    the builders themselves, the factory logs what it built: the number of
    pass-through keys at INFO and the names of fields that fell back to
    defaults at DEBUG. Configured values are never logged.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(PropsBuilderFactory, cls).__new__(cls)
            cls._instance._builder_registry: Dict[str, MapBasedPropsBuilder] = {
                "common": common.builder,
                "cassandra": cassandra.builder,
                "jdbc": jdbc.builder,
                "log": log.builder,
                "timestamp": timestamp.builder,
                "machine_id": machine_id.builder,
                "event_id": event_id.builder,
            }
        return cls._instance

    @property
    def processor_names(self):
        return list(self._builder_registry.keys())

    def get_builder(self, processor_name: str) -> MapBasedPropsBuilder:
        """
        Returns the builder registered for a processor.

        Raises:
            ValueError: If no builder is registered under `processor_name`.
        """
        builder = self._builder_registry.get(processor_name)
        if not builder:
            raise ValueError(
                f"Unknown processor: '{processor_name}'. "
                f"Available processors: {self.processor_names}"
            )
        return builder

    def build(self, processor_name: str, properties: Optional[Mapping[str, Optional[str]]] = None) -> BaseProperties:
        """
        Builds the properties of a processor from a raw map.

        Args:
            processor_name: The registered processor name.
            properties: Raw configuration; None builds the defaults.

        Returns:
            The processor's properties object.
        """
        builder = self.get_builder(processor_name)
        report = builder.build_with_report({} if properties is None else properties)

        logger = LoggerRegistry.get_props_logger(processor_name)
        logger.info(
            "props.built",
            additional_properties=len(report.properties.additional_properties),
            defaulted_count=len(report.defaulted),
        )
        if report.defaulted:
            logger.debug("props.defaulted", fields=report.defaulted, malformed=report.malformed)

        return report.properties

    def build_for_processor(self, processor_name: str, common_properties: CommonProperties) -> BaseProperties:
        """Builds a processor's properties from the keys the common properties did not recognize."""
        return self.build(processor_name, common_properties.additional_properties)
