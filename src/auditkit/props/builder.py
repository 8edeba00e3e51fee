from typing import Dict, Generic, List, Mapping, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, Field

from auditkit.props.base import BaseProperties
from auditkit.props.fields import FieldOutcome, FieldSpec

P = TypeVar("P", bound=BaseProperties)


class BuildReport(BaseModel):
    """The outcome of a build, including which named fields fell back to their defaults."""

    properties: BaseProperties
    defaulted: List[str] = Field([], description="Fields resolved to their default, for any reason.")
    malformed: List[str] = Field([], description="Fields whose configured value could not be coerced.")


class MapBasedPropsBuilder(Generic[P]):
    """
    Builds typed processor properties from an untyped string map.

    The builder is stateless: it only reads the FieldSpecs declared on the
    properties class, so one instance can be shared and called concurrently.
    A build never fails on content. Missing, null, empty or malformed values
    resolve to the field's default without any diagnostic; callers that need
    to know which fields fell back use `build_with_report`.
    """

    def __init__(self, properties_class: Type[P]):
        self.properties_class = properties_class

    @property
    def field_specs(self) -> Tuple[FieldSpec, ...]:
        return self.properties_class.field_specs

    @property
    def keys(self) -> List[str]:
        """The configuration keys recognized by this builder."""
        return [spec.key for spec in self.field_specs]

    def build_default(self) -> P:
        """Builds properties with every named field at its default."""
        return self.build({})

    def build(self, properties: Mapping[str, Optional[str]]) -> P:
        """
        Builds a new properties object from a raw map.

        Args:
            properties: Raw configuration. Neither this map nor any object in
                the result shares storage with the other afterwards.

        Returns:
            A fully populated properties object.

        Raises:
            ValueError: If `properties` is None.
        """
        result, _, _ = self._resolve(properties)
        return result

    def build_with_report(self, properties: Mapping[str, Optional[str]]) -> BuildReport:
        """Same as `build`, but also reports the fields that fell back to defaults."""
        result, defaulted, malformed = self._resolve(properties)
        return BuildReport(properties=result, defaulted=defaulted, malformed=malformed)

    def _resolve(self, properties: Mapping[str, Optional[str]]) -> Tuple[P, List[str], List[str]]:
        if properties is None:
            raise ValueError("The validated object 'properties' is None")

        values: Dict[str, object] = {}
        defaulted: List[str] = []
        malformed: List[str] = []

        for spec in self.field_specs:
            value, outcome = spec.resolve(properties.get(spec.key))
            values[spec.name] = value
            if outcome is not FieldOutcome.CONFIGURED:
                defaulted.append(spec.name)
            if outcome is FieldOutcome.MALFORMED:
                malformed.append(spec.name)

        recognized = set(self.keys)
        additional_properties = {
            key: value
            for key, value in properties.items()
            if key not in recognized and value is not None
        }

        # Values are already resolved to their declared types.
        result = self.properties_class.model_construct(
            additional_properties=additional_properties, **values
        )
        return result, defaulted, malformed
